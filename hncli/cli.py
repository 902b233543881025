"""CLI entry point for hncli."""
import argparse
import logging
import sys
from typing import Optional

from rich.console import Console

from hncli import __version__
from hncli.client import HackerNewsClient, validate_limit
from hncli.errors import HNError, InvalidArgumentError
from hncli.formatters import parse_style, render
from hncli.models import FRONT_PAGE_RANKINGS, SEARCH_RANKINGS

logger = logging.getLogger(__name__)


def resolve_ranking(ranking: Optional[str], query: Optional[str]) -> str:
    """Pick and validate the ranking: front-page words without a query, search words with one."""
    if query:
        ranking = ranking or "popularity"
        if ranking not in SEARCH_RANKINGS:
            raise InvalidArgumentError(f"invalid search ranking: {ranking} (use {'|'.join(SEARCH_RANKINGS)})")
    else:
        ranking = ranking or "top"
        if ranking not in FRONT_PAGE_RANKINGS:
            raise InvalidArgumentError(f"invalid front page ranking: {ranking} (use {'|'.join(FRONT_PAGE_RANKINGS)})")
    return ranking


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hncli",
        description="A simple commandline Hacker News client.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-l", "--limit", type=int, default=30,
                        help="Max number of results to fetch, 0-500 (default: 30)")
    parser.add_argument("-s", "--style", type=str, default="plain",
                        help="Output style: plain|markdown|md|csv|json (default: plain)")
    parser.add_argument("-r", "--ranking", type=str, default=None,
                        help="Ranking: top|new|best for front page items (default: top), "
                             "date|popularity for search results (default: popularity)")
    parser.add_argument("-q", "--query", type=str, default=None,
                        help="Search query (searches via the Algolia API)")
    parser.add_argument("-t", "--tags", type=str, default=None,
                        help="Comma-separated search tags, e.g. story,front_page (only with --query)")
    parser.add_argument("-o", "--output", type=str, default=None,
                        help="Write output to file instead of stdout")
    parser.add_argument("--timeout", type=float, default=15,
                        help="HTTP request timeout in seconds (default: 15)")
    parser.add_argument("--no-config", action="store_true",
                        help="Ignore config files (~/.hncli.yaml, ./hncli.yaml) and HNCLI_* variables")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def run(args, client: Optional[HackerNewsClient] = None) -> str:
    """Fetch and render according to parsed ``args``. Returns the document."""
    # Validate everything before touching the network
    style = parse_style(args.style)
    ranking = resolve_ranking(args.ranking, args.query)
    validate_limit(args.limit)

    client = client or HackerNewsClient(timeout=args.timeout)
    if args.query:
        ids = client.search_ids(args.query, tags=args.tags, ranking=ranking, limit=args.limit)
    else:
        ids = client.fetch_ranked_ids(ranking, args.limit)
    logger.debug(f"[CLI] fetching {len(ids)} items")

    items = client.fetch_items(ids)
    return render(items, style)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Apply config file defaults (CLI args always win)
    if not args.no_config:
        from hncli.config import apply_config_defaults
        args = apply_config_defaults(parser, args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        output = run(args)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(output)
        else:
            sys.stdout.write(output)
    except (HNError, OSError) as e:
        Console(stderr=True).print(f"Error: {e}", style="bold red", markup=False, highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
