"""依存チェックのMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from godepr.models.errors import GodeprError
from godepr.services.check import CheckService


def register_check_tools(mcp: FastMCP, check_service: CheckService) -> None:
    """依存チェック関連のMCPツールを登録する。"""

    @mcp.tool()
    async def check_dependencies(
        manifest: str,
        rules: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """パッケージマニフェストを依存ルールに基づいて検証する。

        `go list -json ./...` の出力をそのまま渡してください。
        rulesを省略した場合はサーバーに設定されたルールファイルを使用します。

        Args:
            manifest: `go list -json` 形式のマニフェスト文字列。
            rules: ルールリスト（任意）。各要素は
                {"directory": str, "ruletype": str, "rulebody": list[str]} 形式。
        """
        try:
            rule_list = check_service.rules_from_dicts(rules) if rules is not None else None
            report = check_service.check_manifest(manifest, rule_list)
            return report.model_dump()
        except GodeprError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def get_rules() -> dict[str, Any]:
        """サーバーに設定されている依存ルールを取得する。"""
        try:
            rules = check_service.load_rules()
            return {
                "rules_file": str(check_service.rules_file),
                "rules": [r.model_dump(by_alias=True) for r in rules],
            }
        except GodeprError as e:
            return {"error": type(e).__name__, "message": str(e)}
