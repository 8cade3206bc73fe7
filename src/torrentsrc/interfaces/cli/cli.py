from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from torrentsrc.domain.entities import MediaType, SearchRequest
from torrentsrc.domain.sources import SourceTransportError
from torrentsrc.infrastructure.config import AppConfig, load_config
from torrentsrc.infrastructure.logging.setup import configure_logging
from torrentsrc.infrastructure.sources import PirateBaySource

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="torrentsrc")

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search the index and print JSON results.")
    search.add_argument("titles", nargs="+", help="Candidate titles (first is used).")
    search.add_argument("--episode", type=int, default=None)
    search.add_argument("--season", type=int, default=None)
    search.add_argument(
        "--media-type",
        default=MediaType.ANIME.value,
        choices=[m.value for m in MediaType],
    )
    search.add_argument("--year", type=int, default=None)
    search.add_argument(
        "--kind",
        default="single",
        choices=["single", "batch", "movie"],
        help="Entry point to call.",
    )

    sub.add_parser("validate", help="Check whether the index is reachable.")

    return parser.parse_args(argv)


async def _run_search(config: AppConfig, args: argparse.Namespace) -> list[dict[str, Any]]:
    request = SearchRequest(
        titles=tuple(args.titles),
        episode=args.episode,
        season=args.season,
        media_type=MediaType(args.media_type),
        year=args.year,
    )
    async with PirateBaySource.from_config(config) as source:
        entry_point = getattr(source, args.kind)
        results = await entry_point(request)
    return [r.to_dict() for r in results]


async def _run_validate(config: AppConfig) -> bool:
    async with PirateBaySource.from_config(config) as source:
        return await source.validate()


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Loads config exactly once, configures logging, then runs one command.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    cli_overrides: dict[str, Any] = {}
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format

    config = load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=cli_overrides,
    )
    configure_logging(config)

    if args.command == "validate":
        ok = asyncio.run(_run_validate(config))
        print(json.dumps(ok))
        return 0 if ok else 1

    try:
        results = asyncio.run(_run_search(config, args))
    except SourceTransportError as exc:
        log.error("search_failed", url=exc.url, status=exc.status, error=str(exc))
        return 2

    print(json.dumps(results, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(start())
