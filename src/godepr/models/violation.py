"""違反レポート関連のデータモデル。"""

from pydantic import BaseModel, Field, computed_field


class Violation(BaseModel):
    """ルールに違反したimport 1件。"""

    model_config = {"frozen": True}

    package_path: str
    import_path: str
    rule_kind: str
    message: str


class CheckReport(BaseModel):
    """1回の依存チェックの結果。"""

    package_count: int
    rule_count: int
    violations: list[Violation] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def violation_count(self) -> int:
        return len(self.violations)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return not self.violations
