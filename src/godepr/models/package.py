"""パッケージマニフェスト関連のデータモデル。"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Package(BaseModel):
    """`go list -json` が出力する1パッケージ分のレコード。

    マニフェストには他にも多くのフィールドが含まれるが、検証に必要な
    ものだけを読み込み、残りは無視する。
    """

    model_config = {"populate_by_name": True}

    import_path: str = Field(alias="ImportPath")
    dir: str = Field(alias="Dir")
    imports: list[str] = Field(default_factory=list, alias="Imports")
    # 推移的依存。読み込むだけでルール評価には使用しない
    deps: list[str] = Field(default_factory=list, alias="Deps")

    @field_validator("imports", "deps", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
