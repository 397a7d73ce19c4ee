"""denied-list ルールの評価。"""

from collections.abc import Sequence

from godepr.models.package import Package
from godepr.models.rules import DENIED_LIST, Rule
from godepr.models.violation import Violation
from godepr.validators.patterns import matches_pattern
from godepr.validators.scope import is_in_scope


def format_violation_message(package_path: str, import_path: str) -> str:
    return f"package {package_path} imports denied dependency {import_path}"


class DeniedListChecker:
    """スコープ内のパッケージが拒否パターンに一致するimportを持たないか検証する。"""

    kind = DENIED_LIST

    def check(self, packages: Sequence[Package], rule: Rule) -> list[Violation]:
        """単一のdenied-listルールを適用する。

        1つのimportにつき違反は最大1件で、最初に一致したパターンで確定する。
        違反はパッケージ順、import順に並ぶ。

        Args:
            packages: 検証対象のパッケージ。
            rule: 適用するルール。

        Returns:
            検出された違反のリスト。違反がない場合は空リスト。
        """
        violations: list[Violation] = []

        for package in packages:
            if not is_in_scope(package.dir, rule.directory):
                continue

            for import_path in package.imports:
                if any(matches_pattern(import_path, pattern) for pattern in rule.body):
                    violations.append(
                        Violation(
                            package_path=package.import_path,
                            import_path=import_path,
                            rule_kind=rule.kind,
                            message=format_violation_message(package.import_path, import_path),
                        )
                    )

        return violations


def check_denied_list_rule(packages: Sequence[Package], rule: Rule) -> list[Violation]:
    """DeniedListCheckerで単一のルールを評価する。"""
    return DeniedListChecker().check(packages, rule)
