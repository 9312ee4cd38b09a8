"""Command-line entry point.

Usage:
    saas-mcp                 Run the MCP server over stdio (default)
    saas-mcp serve           Same as above
    saas-mcp info            Print service info as JSON
    saas-mcp health          Print a health report as JSON

Environment Variables:
    SAAS_MCP_CONFIG          Path to a YAML configuration file
    SAAS_MCP_NAME            Server name advertised to clients
    SAAS_MCP_LOG_LEVEL       Logging level (default: INFO)
    SAAS_MCP_TRANSPORT       Transport, only "stdio" is supported
    SAAS_MCP_ENV             Deployment environment (falls back to VERCEL_ENV)
    SAAS_MCP_PLATFORM        Deployment platform reported by `info` (default: Vercel)
    SAAS_MCP_WEAVE_PROJECT   Enable Weave tracing for this project
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import json
import logging
import sys
from typing import Sequence

from dotenv import find_dotenv, load_dotenv

from saas_mcp.config import ConfigManager, ServerConfig
from saas_mcp.config.schema import LOG_LEVELS
from saas_mcp.server import create_dispatcher, init_tracing, serve
from saas_mcp.status import health_report, service_info

logger = logging.getLogger("saas_mcp")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(level: str) -> None:
    # stdout carries the MCP transport, so logs go to stderr only.
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="saas-mcp",
        description="AI-Guided SaaS MCP server: code analysis, test generation and optimization tools",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["serve", "info", "health"],
        default="serve",
        help="What to run (default: serve)",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file (overrides SAAS_MCP_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (overrides configuration)",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _load_config(args: argparse.Namespace) -> ServerConfig:
    manager = ConfigManager(args.config) if args.config else ConfigManager.from_env()
    config = manager.build()
    if args.log_level:
        config = dataclasses.replace(config, log_level=args.log_level)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run the requested command and return the process exit status."""
    args = _parse_args(argv)
    load_dotenv(find_dotenv(usecwd=True))

    try:
        config = _load_config(args)
    except ValueError as e:
        _configure_logging("ERROR")
        logger.error("Invalid configuration: %s", e)
        return 1

    _configure_logging(config.log_level)
    dispatcher = create_dispatcher()

    if args.command == "info":
        print(json.dumps(service_info(config, dispatcher), indent=2))
        return 0
    if args.command == "health":
        print(json.dumps(health_report(), indent=2))
        return 0

    try:
        init_tracing(config)
        asyncio.run(serve(config, dispatcher))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Failed to start %s", config.name)
        return 1
    return 0
