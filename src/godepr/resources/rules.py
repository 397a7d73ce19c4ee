"""依存ルールのMCPリソース定義。"""

import yaml
from fastmcp import FastMCP

from godepr.services.check import CheckService


def register_rule_resources(mcp: FastMCP, check_service: CheckService) -> None:
    """ルール関連のMCPリソースを登録する。"""

    @mcp.resource("godepr://rules")
    async def configured_rules() -> str:
        """設定されている依存ルールをYAML形式で取得する。

        各ルールには対象ディレクトリ、ルール種別、拒否パターンが含まれます。
        """
        rules = check_service.load_rules()
        data = {"rules": [r.model_dump(by_alias=True) for r in rules]}
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)
