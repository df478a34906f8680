"""CLI entry point for unisearch."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from unisearch.exceptions import AdapterError, AggregateError, ConfigurationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unisearch",
        description="unisearch — Search many web search providers with one query",
    )
    parser.add_argument("query", nargs="?", default=None, help="Search query text")
    parser.add_argument(
        "--provider",
        "-p",
        action="append",
        dest="providers",
        default=None,
        help="Provider to query (repeatable; default: configured defaults)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument("--max-results", "-n", type=int, default=None, help="Results per provider")
    parser.add_argument("--page", type=int, default=1, help="Result page number")
    parser.add_argument("--language", type=str, default=None, help="Language/locale for results")
    parser.add_argument("--region", type=str, default=None, help="Country/region for results")
    parser.add_argument(
        "--safe-search",
        type=str,
        choices=["off", "moderate", "strict"],
        default=None,
        help="Content-safety level",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Per-provider timeout in seconds")
    parser.add_argument("--id-list", type=str, default=None, help="Comma-separated arXiv IDs (instead of a query)")
    parser.add_argument(
        "--search-type",
        type=str,
        choices=["text", "images", "news"],
        default=None,
        help="Search kind, for providers that support it",
    )
    parser.add_argument("--raw", action="store_true", help="Include raw provider payloads in the output")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"unisearch {_get_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Prints one JSON result per line."""
    args = build_parser().parse_args(argv)

    from unisearch.config.settings import Settings
    from unisearch.core.engine import SearchEngine
    from unisearch.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            return 1
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.log_level:
        settings.observability.log_level = args.log_level
    setup_logging(settings.observability)

    options: dict[str, object] = {
        "page": args.page,
        "language": args.language,
        "region": args.region,
        "safe_search": args.safe_search,
        "id_list": args.id_list,
        "search_type": args.search_type,
    }
    if args.max_results is not None:
        options["max_results"] = args.max_results
    if args.timeout is not None:
        options["timeout"] = args.timeout

    engine = SearchEngine(settings)
    try:
        request = engine.build_request(args.query, **options)
        results = asyncio.run(engine.search(request, args.providers))
    except (ConfigurationError, AggregateError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except AdapterError as e:
        logger.error("Search failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    exclude = None if args.raw else {"raw"}
    for result in results:
        print(result.model_dump_json(exclude=exclude))
    return 0


def _get_version() -> str:
    """Get the package version."""
    try:
        from unisearch import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(main())
