#!/usr/bin/env python3
"""
Command line tweet search.

Usage:
    twitter-search "python"                 # Print matching tweets
    twitter-search "python" --count 5       # Limit results
    twitter-search "python" --json          # Dump raw statuses

Credentials come from TWITTER_API_KEY / TWITTER_API_SECRET (or a .env file).
"""
import argparse
import json
import sys

from .client import create_client
from .config import Config
from .errors import SearchClientError
from .logger import configure_logging, logger
from .utils import format_status


def print_statuses(statuses, as_json: bool = False):
    """Print search results."""
    if as_json:
        print(json.dumps(statuses, indent=2, ensure_ascii=False))
        return

    if not statuses:
        print("No tweets found.")
        return

    for status in statuses:
        print(format_status(status))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Search tweets with application-only auth')
    parser.add_argument('query', help='Search query')
    parser.add_argument('--count', type=int, default=Config.SEARCH_COUNT, help='Number of results')
    parser.add_argument('--api-base', default=None, help='Override the API root URL')
    parser.add_argument('--json', action='store_true', help='Print raw JSON statuses')
    parser.add_argument('--log-level', default=None, help='Logging level (default: LOG_LEVEL)')
    return parser


def main(argv=None, session=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        client = create_client(api_base=args.api_base, session=session)
        statuses = client.search(args.query, count=args.count)
    except SearchClientError as e:
        logger.error(f"Search failed: {e}")
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    print_statuses(statuses, as_json=args.json)
    return 0


if __name__ == '__main__':
    sys.exit(main())
