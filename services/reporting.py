from __future__ import annotations

from typing import Iterable, Optional

from models import ConnectionRecord, CrawlReport, ProgressSummary


def print_progress(summary: ProgressSummary) -> None:
    """Print what the store already holds before (or instead of) a crawl."""
    print("\n" + "=" * 60)
    print("LINKEDIN CONNECTIONS - PROGRESS")
    print("=" * 60)
    print(f"Last Page Processed: {summary.last_page}")
    print(f"Total Connections Stored: {summary.total_connections}")
    print(f"Emails Processed: {summary.processed_emails}")
    print("=" * 60)


def print_crawl_report(report: CrawlReport, summary: Optional[ProgressSummary] = None) -> None:
    print("\n" + "=" * 60)
    print("LINKEDIN CONNECTIONS - RUN SUMMARY")
    print("=" * 60)
    print(f"Pages Processed: {report.pages_processed}")
    print(f"New Connections: {report.new_connections}")
    print(f"Duplicates Skipped: {report.duplicates}")
    print(f"Emails Found: {report.emails_found}")
    print(f"Errors: {report.errors}")
    if summary is not None:
        print()
        print(f"Total Connections Stored: {summary.total_connections}")
        print(f"Emails Processed: {summary.processed_emails}")
    print("=" * 60)


def print_records(title: str, records: Iterable[ConnectionRecord]) -> int:
    rows = list(records)
    print(f"{title} ({len(rows)}):")
    for r in rows:
        print(f"- [{r.email_status.value}] {r.full_name} | {r.profile_url} | {r.current_employer} | page {r.page_found}")
    return len(rows)
