"""Command-line interface for smogon-scraper."""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from smogon_scraper.config import SESSION_ENV, USER_ID_ENV, check_env, load_settings
from smogon_scraper.core import SmogonScraper
from smogon_scraper.errors import ScraperError
from smogon_scraper.extractors import EXTRACTOR_CLASSES
from smogon_scraper.output import RULE, format_samples, format_stats, write_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smogon-scraper",
        description="Fetch a Smogon user's analysis credits and save them as a JSON report.",
    )
    parser.add_argument(
        "-u", "--user", type=str, default=None, dest="user_id",
        help=f"Smogon user ID (env: {USER_ID_ENV})",
    )
    parser.add_argument(
        "-s", "--session", type=str, default=None, dest="session_cookie",
        help=f"Session cookie value (env: {SESSION_ENV})",
    )
    parser.add_argument(
        "-o", "--output", type=str, default="contributions.json",
        help="Output file path (default: contributions.json)",
    )
    parser.add_argument(
        "--extractor", choices=sorted(EXTRACTOR_CLASSES), default="regex",
        help="How to locate the embedded data in the page (default: regex)",
    )
    parser.add_argument(
        "--timeout", type=float, default=30.0,
        help="HTTP timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "--check-env", action="store_true",
        help="Report which environment variables are set, then exit",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable verbose/debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    # .env in the working directory populates os.environ; real env vars win
    load_dotenv()

    if args.check_env:
        lines, ok = check_env()
        print("Environment Variable Check")
        print("\n".join(lines))
        sys.exit(0 if ok else 1)

    settings = load_settings(args.user_id, args.session_cookie, args.output)
    if not settings.user_id:
        print(f"Error: User ID is required. Use --user <ID> or set {USER_ID_ENV}.",
              file=sys.stderr)
        sys.exit(1)
    if not settings.session_cookie:
        print(f"Error: Session cookie is required. Use --session <COOKIE> or set {SESSION_ENV}.",
              file=sys.stderr)
        sys.exit(1)

    scraper = SmogonScraper(
        settings.session_cookie,
        timeout=args.timeout,
        extractor=EXTRACTOR_CLASSES[args.extractor](),
    )

    print("Smogon Contribution Scraper")
    print(RULE)
    print(f"Fetching data for user {settings.user_id}...")
    try:
        report = scraper.fetch_contributions(settings.user_id)
    except ScraperError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        write_json(report, settings.output)
    except OSError as exc:
        print(f"Error: cannot write {settings.output}: {exc}", file=sys.stderr)
        sys.exit(1)

    print(format_stats(report))
    print(f"\nData saved to: {settings.output}")
    if report.contributions:
        print("\nSample Contributions:")
        print(format_samples(report))


if __name__ == "__main__":
    main()
