"""依存チェックのMCPプロトコル経由統合テスト。"""

import json
from pathlib import Path

import pytest
import yaml
from fastmcp import Client

from godepr.config import CheckerConfig
from godepr.server import create_server

_MANIFEST = "\n".join(
    json.dumps(r, indent="\t")
    for r in [
        {
            "ImportPath": "proj/example",
            "Dir": "/project/example/",
            "Imports": ["fmt", "github.com/blocked/pkg"],
        },
        {"ImportPath": "proj/api", "Dir": "/home/user/project/api/", "Imports": ["net/http"]},
    ]
)


@pytest.fixture
def mcp_server(server_config: CheckerConfig) -> object:
    """テスト用MCPサーバー。"""
    return create_server(server_config)


def parse_tool_result(result: object) -> dict:
    """CallToolResultからJSONデータを抽出する。"""
    content = result.content  # type: ignore[union-attr]
    assert len(content) > 0
    return json.loads(content[0].text)  # type: ignore[union-attr]


class TestCheckFlowViaMCP:
    async def test_check_with_configured_rules(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("check_dependencies", {"manifest": _MANIFEST})
            data = parse_tool_result(result)
            assert data["package_count"] == 2
            assert data["violation_count"] == 1
            assert data["violations"][0]["import_path"] == "github.com/blocked/pkg"
            assert data["passed"] is False

    async def test_check_with_inline_rules(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool(
                "check_dependencies",
                {
                    "manifest": _MANIFEST,
                    "rules": [
                        {"directory": "api/", "ruletype": "denied-list", "rulebody": ["net/http"]},
                        {"directory": "api/", "ruletype": "unsupported-type", "rulebody": ["*"]},
                    ],
                },
            )
            data = parse_tool_result(result)
            assert data["rule_count"] == 2
            assert [v["package_path"] for v in data["violations"]] == ["proj/api"]

    async def test_check_malformed_manifest(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("check_dependencies", {"manifest": "{invalid}"})
            data = parse_tool_result(result)
            assert data["error"] == "MalformedInputError"

    async def test_get_rules(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            result = await client.call_tool("get_rules", {})
            data = parse_tool_result(result)
            assert data["rules"] == [
                {"directory": "example/", "ruletype": "denied-list", "rulebody": ["github.com/blocked/*"]}
            ]

    async def test_get_rules_missing_file(self, tmp_path: Path) -> None:
        server = create_server(CheckerConfig(rules_file=tmp_path / "missing"))
        async with Client(server) as client:
            result = await client.call_tool("get_rules", {})
            data = parse_tool_result(result)
            assert data["error"] == "RulesFileNotFoundError"

    async def test_rules_resource(self, mcp_server: object) -> None:
        async with Client(mcp_server) as client:  # type: ignore[arg-type]
            contents = await client.read_resource("godepr://rules")
            data = yaml.safe_load(contents[0].text)  # type: ignore[union-attr]
            assert data["rules"][0]["ruletype"] == "denied-list"
