import argparse
import logging
import os
import sys
import uuid as _uuid
from dataclasses import replace
from typing import List, Optional

from config.settings import Settings, get_settings
from db.schema import StoreCorrupt
from services.crawl_service import build_repos, run_browser_crawl
from services.reporting import print_crawl_report, print_progress, print_records
from services.url_utils import InvalidProfileUrl, validate_profile_url
from sources.connections_listing import ConnectionsUnavailable
from utils.logging_setup import init_logging


logger = logging.getLogger("cli")


def _settings_from_args(args) -> Settings:
	settings = get_settings()
	overrides = {}
	if getattr(args, "connections_csv", None):
		overrides["connections_csv"] = args.connections_csv
	if getattr(args, "emails_csv", None):
		overrides["emails_csv"] = args.emails_csv
	return replace(settings, **overrides) if overrides else settings


def _usage_error(message: str) -> int:
	print(message, file=sys.stderr)
	print("Usage: python cli.py crawl <linkedin-profile-url>", file=sys.stderr)
	return 2


def cmd_crawl(args) -> int:
	settings = _settings_from_args(args)
	try:
		profile_url = validate_profile_url(args.profile_url, settings.profile_url_prefix)
	except InvalidProfileUrl as e:
		return _usage_error(str(e))
	if args.max_pages is not None and args.max_pages < 1:
		return _usage_error("--max-pages must be at least 1")

	if not os.getenv("RUN_ID"):
		os.environ["RUN_ID"] = _uuid.uuid4().hex
	logger.info("Starting connections crawl for %s", profile_url, extra={"step": "crawl", "status": "start"})
	report = run_browser_crawl(
		profile_url,
		settings,
		headless=True if args.headless else None,
		debug=args.debug,
		max_pages=args.max_pages,
		on_summary=print_progress,
	)
	print_crawl_report(report, build_repos(settings).progress_summary())
	return 0


def cmd_progress(args) -> int:
	settings = _settings_from_args(args)
	print_progress(build_repos(settings).progress_summary())
	return 0


def cmd_pending(args) -> int:
	settings = _settings_from_args(args)
	store = build_repos(settings)
	if args.page is not None:
		print_records(f"Pending on page {args.page}", store.pending_for_page(args.page))
	print_records("Errored rows", store.error_rows())
	return 0


def build_parser(settings: Settings) -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="LinkedIn connections crawler")
	parser.add_argument("--connections-csv", default=None, help=f"Connections table (default: {settings.connections_csv})")
	parser.add_argument("--emails-csv", default=None, help=f"Emails table (default: {settings.emails_csv})")
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_crawl = sub.add_parser("crawl", help="Crawl the 1st-degree connections of a profile and collect emails")
	p_crawl.add_argument("profile_url", nargs="?", default=None, help=f"Profile URL starting with {settings.profile_url_prefix}")
	p_crawl.add_argument("--headless", action="store_true", help="Run the browser headless (login must already be stored)")
	p_crawl.add_argument("--debug", action="store_true", help="Save a screenshot and HTML when the crawl finds nothing")
	p_crawl.add_argument("--max-pages", type=int, default=None, help="Stop after this many result pages")
	p_crawl.set_defaults(func=cmd_crawl)

	p_prog = sub.add_parser("progress", help="Show what the stored tables already contain")
	p_prog.set_defaults(func=cmd_progress)

	p_pend = sub.add_parser("pending", help="List pending rows of a page and all errored rows")
	p_pend.add_argument("--page", type=int, default=None, help="Result page number")
	p_pend.set_defaults(func=cmd_pending)
	return parser


def main(argv: Optional[List[str]] = None) -> None:
	settings = get_settings()
	init_logging(settings.log_level)
	args = build_parser(settings).parse_args(argv)
	try:
		code = args.func(args)
	except (StoreCorrupt, ConnectionsUnavailable) as e:
		logger.error("%s", e, extra={"step": args.cmd, "status": "error", "error": type(e).__name__})
		sys.exit(1)
	except KeyboardInterrupt:
		logger.info("Process interrupted by user", extra={"step": args.cmd, "status": "interrupted"})
		sys.exit(130)
	if code:
		sys.exit(code)


if __name__ == "__main__":
	main()
