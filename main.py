from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys

from dotenv import load_dotenv

import log_config
from server import SERVER_NAME, __version__, serve
from tool_registry import autodiscover_tools


def print_catalog() -> None:
    catalog = autodiscover_tools("tools").describe()
    json.dump({"server": SERVER_NAME, "version": __version__, "tools": catalog}, sys.stdout, indent=2)
    sys.stdout.write("\n")


def build_parser() -> argparse.ArgumentParser:
    default_transport = os.getenv("TRASH_TRANSPORT", "stdio")
    default_host = os.getenv("TRASH_HTTP_HOST", "127.0.0.1")
    default_port = int(os.getenv("TRASH_HTTP_PORT", "8000"))
    p = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server that moves files to the system trash instead of deleting them.",
    )
    p.add_argument(
        "--log-level",
        default=os.getenv("TRASH_LOG_LEVEL", "info"),
        help="Logging verbosity written to stderr (debug, info, warning, error).",
    )
    p.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default=default_transport,
        help="MCP transport to serve on.",
    )
    p.add_argument("--host", default=default_host, help="Bind address for the http transport.")
    p.add_argument("--port", type=int, default=default_port, help="Port for the http transport.")
    p.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the tool catalog as JSON and exit.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)
    log_config.configure(args.log_level)
    if args.list_tools:
        print_catalog()
        return
    transport_kwargs = {}
    if args.transport == "http":
        transport_kwargs = {"host": args.host, "port": args.port}
    asyncio.run(serve(args.transport, **transport_kwargs))


if __name__ == "__main__":
    main()
