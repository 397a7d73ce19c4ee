"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from godepr.config import CheckerConfig
from godepr.resources.rules import register_rule_resources
from godepr.services.check import CheckService
from godepr.tools.check import register_check_tools


def create_server(config: CheckerConfig | None = None) -> FastMCP:
    """godepr MCPサーバーを作成し、ツール・リソースを登録する。

    Args:
        config: 設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = CheckerConfig()

    mcp = FastMCP("godepr")

    check_service = CheckService(rules_file=config.rules_file)

    register_check_tools(mcp, check_service)
    register_rule_resources(mcp, check_service)

    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp
