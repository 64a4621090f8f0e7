#!/usr/bin/env python3
"""
CLI for the scoreboard proxy.

Usage:
    scoreboard-proxy serve                      # Run the HTTP service on 127.0.0.1:8000
    scoreboard-proxy serve --host 0.0.0.0 --port 8080 --reload
    scoreboard-proxy info 17-1234 17-5678       # Print the /info payload for teams
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

import uvicorn

from scoreboard_proxy.core.config import settings
from scoreboard_proxy.services.scoreboard import ScoreboardClient, build_info_payload

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def run_info(teams: List[str]) -> dict:
    """Look up the teams and return the same payload GET /info serves."""
    return build_info_payload(await ScoreboardClient().get_teams(teams))


def run_serve(args: argparse.Namespace) -> int:
    logger.info(f"Starting {settings.PROJECT_NAME} on {args.host}:{args.port}")
    uvicorn.run(
        "scoreboard_proxy.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Proxy for the CyberPatriot scoreboard API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve.add_argument("--port", type=int, default=8000, help="Bind port")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    info = subparsers.add_parser("info", help="Print scoreboard info for teams")
    info.add_argument("teams", nargs="+", help="Team identifiers")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging()

    if args.command == "serve":
        return run_serve(args)

    try:
        payload = asyncio.run(run_info(args.teams))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
