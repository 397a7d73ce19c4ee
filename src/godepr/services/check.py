"""マニフェストとルールから依存チェックを実行するサービス。"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from godepr.loaders.manifest import parse_packages
from godepr.loaders.rules import load_rules, parse_rule_config
from godepr.logging import get_logger
from godepr.models.package import Package
from godepr.models.rules import Rule
from godepr.models.violation import CheckReport
from godepr.validators.rules import RuleSetValidator

logger = get_logger(__name__)


class CheckService:
    """ルール設定の読み込みと依存チェックの実行を行う。"""

    def __init__(self, rules_file: Path, validator: RuleSetValidator | None = None) -> None:
        self._rules_file = rules_file
        self._validator = validator or RuleSetValidator()
        self._rules: list[Rule] | None = None

    @property
    def rules_file(self) -> Path:
        return self._rules_file

    def load_rules(self) -> list[Rule]:
        """設定ファイルのルールを読み込む。読み込み結果はキャッシュする。"""
        if self._rules is None:
            self._rules = load_rules(self._rules_file)
        return self._rules

    def check_packages(self, packages: Sequence[Package], rules: Sequence[Rule] | None = None) -> CheckReport:
        """読み込み済みのパッケージを検証する。

        Args:
            packages: 検証対象のパッケージ。
            rules: 適用するルール。Noneの場合は設定ファイルのルールを使用。
        """
        if rules is None:
            rules = self.load_rules()
        violations = self._validator.check(packages, rules)
        logger.info("Checked %d packages against %d rules: %d violations", len(packages), len(rules), len(violations))
        return CheckReport(package_count=len(packages), rule_count=len(rules), violations=violations)

    def check_manifest(self, manifest: str, rules: Sequence[Rule] | None = None) -> CheckReport:
        """マニフェスト文字列を解析して検証する。

        Raises:
            MalformedInputError: マニフェストを解釈できない場合。
            RulesFileNotFoundError: rulesがNoneで設定ファイルが存在しない場合。
            RuleConfigError: 設定ファイルの内容が不正な場合。
        """
        packages = parse_packages(manifest)
        return self.check_packages(packages, rules)

    def rules_from_dicts(self, rules: list[dict[str, Any]]) -> list[Rule]:
        """MCPツール等から渡されたルール定義を検証してRuleに変換する。"""
        return parse_rule_config({"rules": rules}, Path("<input>")).rules


def render_report(report: CheckReport) -> str:
    """チェック結果を人が読むためのテキストに整形する。"""
    if report.passed:
        return "No dependency violations found\n"

    lines = ["Dependency violations found:", ""]
    lines.extend(f"  {v.message}" for v in report.violations)
    lines.append("")
    lines.append(f"Total violations: {report.violation_count}")
    return "\n".join(lines) + "\n"
