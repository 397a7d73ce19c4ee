"""Rule / Violationモデルのユニットテスト。"""

import pytest
from pydantic import ValidationError

from godepr.models.rules import DENIED_LIST, Rule, RuleConfig
from godepr.models.violation import CheckReport, Violation


class TestRule:
    def test_from_config_keys(self) -> None:
        rule = Rule.model_validate(
            {"directory": "example/", "ruletype": "denied-list", "rulebody": ["github.com/blocked/*"]}
        )
        assert rule.directory == "example/"
        assert rule.kind == DENIED_LIST
        assert rule.body == ["github.com/blocked/*"]

    def test_from_field_names(self) -> None:
        rule = Rule(directory="api/", kind="denied-list", body=["net/http"])
        assert rule.kind == "denied-list"

    def test_body_defaults_to_empty(self) -> None:
        rule = Rule(directory="api/", kind="denied-list")
        assert rule.body == []

    def test_dump_by_alias_uses_config_keys(self) -> None:
        rule = Rule(directory="api/", kind="denied-list", body=["x"])
        assert rule.model_dump(by_alias=True) == {
            "directory": "api/",
            "ruletype": "denied-list",
            "rulebody": ["x"],
        }

    def test_missing_kind_raises(self) -> None:
        with pytest.raises(ValidationError):
            Rule.model_validate({"directory": "api/"})


class TestRuleConfig:
    def test_empty_config(self) -> None:
        assert RuleConfig().rules == []

    def test_rules_in_order(self) -> None:
        config = RuleConfig.model_validate(
            {
                "rules": [
                    {"directory": "a/", "ruletype": "denied-list", "rulebody": []},
                    {"directory": "b/", "ruletype": "allowed-list", "rulebody": []},
                ]
            }
        )
        assert [r.directory for r in config.rules] == ["a/", "b/"]


class TestViolation:
    def test_violation_is_immutable(self) -> None:
        v = Violation(package_path="p", import_path="i", rule_kind="denied-list", message="m")
        with pytest.raises(ValidationError):
            v.message = "changed"  # type: ignore[misc]


class TestCheckReport:
    def test_passed_without_violations(self) -> None:
        report = CheckReport(package_count=2, rule_count=1)
        assert report.passed is True
        assert report.violation_count == 0

    def test_dump_includes_counts(self) -> None:
        v = Violation(package_path="p", import_path="i", rule_kind="denied-list", message="m")
        data = CheckReport(package_count=1, rule_count=1, violations=[v]).model_dump()
        assert data["violation_count"] == 1
        assert data["passed"] is False
        assert data["violations"][0]["import_path"] == "i"
