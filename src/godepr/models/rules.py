"""依存ルール関連のデータモデル。"""

from pydantic import BaseModel, Field

DENIED_LIST = "denied-list"


class Rule(BaseModel):
    """ディレクトリ単位で適用される依存ルール。

    設定ファイル上のキー名（directory / ruletype / rulebody）でも、
    フィールド名（directory / kind / body）でも生成できる。
    """

    model_config = {"populate_by_name": True}

    directory: str
    kind: str = Field(alias="ruletype")
    body: list[str] = Field(default_factory=list, alias="rulebody")


class RuleConfig(BaseModel):
    """ルール設定ファイル全体。"""

    rules: list[Rule] = Field(default_factory=list)
