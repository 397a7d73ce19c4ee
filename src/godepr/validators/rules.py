"""ルールセット全体の評価と、ルール種別ごとの振り分け。"""

from collections.abc import Iterable, Sequence
from typing import Protocol

from godepr.logging import get_logger
from godepr.models.package import Package
from godepr.models.rules import Rule
from godepr.models.violation import Violation
from godepr.validators.denied_list import DeniedListChecker

logger = get_logger(__name__)


class RuleChecker(Protocol):
    """1種類のルールを評価するチェッカー。"""

    kind: str

    def check(self, packages: Sequence[Package], rule: Rule) -> list[Violation]: ...


def default_checkers() -> list[RuleChecker]:
    return [DeniedListChecker()]


class RuleSetValidator:
    """ルール種別ごとのチェッカーを使ってルールセットを評価する。

    未対応の種別のルールはエラーにせず読み飛ばす。新しい種別が追加された
    設定ファイルでも、古いチェッカーが動作し続けられるようにするため。
    """

    def __init__(self, checkers: Iterable[RuleChecker] | None = None) -> None:
        self._checkers: dict[str, RuleChecker] = {}
        for checker in default_checkers() if checkers is None else checkers:
            self.register(checker)

    def register(self, checker: RuleChecker) -> None:
        """チェッカーを登録する。同じ種別の既存チェッカーは置き換える。"""
        self._checkers[checker.kind] = checker

    @property
    def supported_kinds(self) -> list[str]:
        return list(self._checkers)

    def check(self, packages: Sequence[Package], rules: Iterable[Rule]) -> list[Violation]:
        """全ルールを入力順に評価し、違反を連結して返す。

        Args:
            packages: 検証対象のパッケージ。
            rules: 適用するルール。

        Returns:
            ルール順、パッケージ順、import順に並んだ違反のリスト。
        """
        violations: list[Violation] = []

        for rule in rules:
            checker = self._checkers.get(rule.kind)
            if checker is None:
                logger.debug("Skipping rule for %s: unsupported rule type %r", rule.directory, rule.kind)
                continue

            rule_violations = checker.check(packages, rule)
            logger.debug(
                "Rule %s for %s produced %d violations", rule.kind, rule.directory, len(rule_violations)
            )
            violations.extend(rule_violations)

        return violations


def check_rules(packages: Sequence[Package], rules: Iterable[Rule]) -> list[Violation]:
    """既定のチェッカー構成でルールセットを評価する。"""
    return RuleSetValidator().check(packages, rules)
