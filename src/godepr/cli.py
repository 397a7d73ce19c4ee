"""godeprのコマンドラインインターフェース。"""

import argparse
import io
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from godepr.config import CheckerConfig
from godepr.loaders.manifest import load_packages
from godepr.logging import configure_logging, parse_level, set_log_level
from godepr.models.errors import GodeprError
from godepr.services.check import CheckService, render_report

_EPILOG = """
Usage:
  go list -json ./... | godepr

godepr reads the output of 'go list -json' from stdin and checks
whether the imports comply with the rules defined in the .godepr file.

Examples:
  # Check all packages in current directory
  go list -json ./... | godepr

  # Check specific directory with an explicit rules file
  go list -json ./internal/... | godepr --rules ci/godepr.yaml

Rules file (.godepr, YAML or JSON):
  rules:
    - directory: example/
      ruletype: denied-list
      rulebody:
        - github.com/blocked/*

Supported rule types:
  denied-list   imports matching any pattern are reported
                (a trailing * matches any import starting with the prefix)
"""


def _add_check_arguments(parser: argparse.ArgumentParser, default: object) -> None:
    parser.add_argument(
        "--rules",
        type=Path,
        default=default,
        help="Path to the rules file (default: .godepr, or GODEPR_RULES_FILE)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text" if default is None else default,
        help="Output format (default: text)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godepr",
        description="godepr - Go Dependency Governance Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    _add_check_arguments(parser, None)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 引数を指定しない場合も check として扱う
    check_parser = subparsers.add_parser("check", help="Check go list -json output read from stdin (default)")
    _add_check_arguments(check_parser, argparse.SUPPRESS)

    serve_parser = subparsers.add_parser("serve", help="Start the MCP server over streamable HTTP")
    serve_parser.add_argument("--host", default=None, help="Host to bind to (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to (default: 8000)")

    return parser


def run_check(
    args: argparse.Namespace,
    config: CheckerConfig,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """stdinのマニフェストを検証し、結果を出力して終了コードを返す。"""
    rules_file = args.rules or config.rules_file

    try:
        packages = load_packages(stdin)
    except GodeprError as e:
        print(f"Error parsing packages: {e}", file=stderr)
        return 1

    check_service = CheckService(rules_file=rules_file)
    try:
        check_service.load_rules()
    except GodeprError as e:
        print(f"Error loading rules: {e}", file=stderr)
        return 1

    report = check_service.check_packages(packages)

    if args.format == "json":
        stdout.write(report.model_dump_json(indent=2) + "\n")
    else:
        stdout.write(render_report(report))

    return 0 if report.passed else 1


def _utf8_stdin() -> TextIO:
    # 不正なバイト列はU+FFFDに置き換えて読み進める
    return io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace")


def run_serve(args: argparse.Namespace, config: CheckerConfig) -> int:
    """MCPサーバーを起動する。"""
    import uvicorn

    from godepr.server import create_server

    mcp = create_server(config)
    app = mcp.http_app(transport="streamable-http")
    uvicorn.run(app, host=args.host or config.host, port=args.port or config.port)
    return 0


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = CheckerConfig()

    level = logging.DEBUG if args.verbose else parse_level(config.log_level)
    configure_logging(level)
    set_log_level(level)

    if args.command == "serve":
        return run_serve(args, config)

    return run_check(
        args,
        config,
        stdin=stdin or _utf8_stdin(),
        stdout=stdout or sys.stdout,
        stderr=stderr or sys.stderr,
    )
