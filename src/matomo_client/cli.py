"""
Command-line interface for the Matomo client.

Provides commands for single API calls, bulk calls and the MCP server.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

import httpx
import structlog

from matomo_client import __version__
from matomo_client.client import ReportingClient
from matomo_client.config import MatomoConfig, ResponseFormat, set_config
from matomo_client.dispatch.interface import MatomoError

logger = structlog.get_logger(__name__)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure structured logging."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_format
            else structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        stream=stream or sys.stderr,
        force=True,
    )


def _common_arguments() -> argparse.ArgumentParser:
    """Connection and logging flags shared by every command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--url",
        help="Matomo base URL (default: $MATOMO_URL)",
    )
    common.add_argument(
        "--token",
        help="API token_auth (default: $MATOMO_AUTH_TOKEN)",
    )
    common.add_argument(
        "--site-id",
        type=int,
        help="Default idSite (default: $MATOMO_DEFAULT_SITE_ID)",
    )
    common.add_argument(
        "--format",
        choices=[f.value for f in ResponseFormat],
        help="Response format (default: json)",
    )
    common.add_argument(
        "--no-security-mode",
        action="store_true",
        help="Send parameters as a GET query string instead of a POST body",
    )
    common.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    common.add_argument(
        "--log-json",
        action="store_true",
        help="Output logs in JSON format",
    )
    return common


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="matomo-client",
        description="Client for the Matomo Reporting API",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    common = _common_arguments()
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Call command
    call_parser = subparsers.add_parser(
        "call", parents=[common], help="Execute one API method"
    )
    call_parser.add_argument(
        "method",
        help="API method, e.g. VisitsSummary.get",
    )
    call_parser.add_argument(
        "-p", "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Call parameter, may be repeated",
    )

    # Batch command
    batch_parser = subparsers.add_parser(
        "batch", parents=[common], help="Execute several API methods in one bulk request"
    )
    batch_parser.add_argument(
        "file",
        help='JSON file holding [{"method": ..., "params": {...}}, ...], or - for stdin',
    )

    # Serve command
    subparsers.add_parser(
        "serve", parents=[common], help="Run the MCP server on stdio"
    )

    return parser


def build_config(args: argparse.Namespace) -> MatomoConfig:
    """Create configuration from the environment, overridden by command-line flags."""
    overrides: Dict[str, Any] = {}
    if args.url:
        overrides["url"] = args.url
    if args.token:
        overrides["auth_token"] = args.token
    if args.site_id is not None:
        overrides["default_site_id"] = args.site_id
    if args.format:
        overrides["format"] = ResponseFormat(args.format)
    if args.no_security_mode:
        overrides["security_mode"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_json:
        overrides["log_json"] = True
    return MatomoConfig(**overrides)


def parse_params(items: List[str]) -> Dict[str, str]:
    """
    Parse ``KEY=VALUE`` pairs.

    Raises:
        ValueError: If an item has no ``=`` or an empty key
    """
    params: Dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid parameter {item!r}, expected KEY=VALUE")
        params[key] = value
    return params


def load_batch_file(path: str) -> List[Dict[str, Any]]:
    """
    Read a batch definition.

    Raises:
        ValueError: If the file is not a JSON array of ``{"method", "params"}`` objects
    """
    text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    entries = json.loads(text)
    if not isinstance(entries, list):
        raise ValueError("Batch file must contain a JSON array")
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or not isinstance(entry.get("method"), str):
            raise ValueError(f"Batch entry {index} must be an object with a 'method' string")
        if not isinstance(entry.get("params", {}), dict):
            raise ValueError(f"Batch entry {index} has non-object 'params'")
    return entries


def format_output(result: Any) -> str:
    """Render a result for stdout."""
    if isinstance(result, httpx.Response):
        return result.text
    if isinstance(result, str):
        return result
    return json.dumps(result, indent=2, ensure_ascii=False, default=str)


async def run_call(config: MatomoConfig, method: str, params: Dict[str, str]) -> Any:
    """Execute one API method."""
    async with ReportingClient(config) as client:
        return await client.request(method, params)


async def run_batch(config: MatomoConfig, entries: List[Dict[str, Any]]) -> List[Any]:
    """
    Execute entries as one bulk request.

    Returns:
        One item per entry, in order: the result, or ``{"error": ...}`` for
        entries Matomo rejected
    """
    async with ReportingClient(config) as client:
        batch = client.prepare_requests()
        handles = [batch.add_request(e["method"], e.get("params") or {}) for e in entries]
        await batch.execute()

    output = []
    for handle in handles:
        error = handle.exception()
        output.append({"error": str(error)} if error else handle.result())
    return output


def serve(config: MatomoConfig) -> None:
    """Run the MCP server until stdin closes."""
    from matomo_client.mcp_server.context import ServerContext
    from matomo_client.mcp_server.server import build_server

    build_server(ServerContext(config)).run()


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = build_config(args)
    set_config(config)

    # Setup logging; stdout carries results and the MCP protocol
    setup_logging(config.log_level, config.log_json, stream=sys.stderr)

    try:
        if args.command == "call":
            result = asyncio.run(run_call(config, args.method, parse_params(args.param)))
            if isinstance(result, bytes):
                sys.stdout.buffer.write(result)
            else:
                print(format_output(result))
        elif args.command == "batch":
            results = asyncio.run(run_batch(config, load_batch_file(args.file)))
            print(format_output(results))
        elif args.command == "serve":
            serve(config)
    except (MatomoError, ValueError, OSError) as e:
        logger.debug("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
