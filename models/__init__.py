from .connection_record import (
    ERROR_VALUE,
    NOT_AVAILABLE,
    ConnectionRecord,
    EmailStatus,
    ProcessingStatus,
    is_sentinel,
)
from .email_record import EmailRecord
from .discovered_connection import DiscoveredConnection
from .crawl_results import CrawlReport, EnrichmentReport, MergeResult, ProgressSummary

__all__ = [
    "ConnectionRecord",
    "EmailRecord",
    "DiscoveredConnection",
    "EmailStatus",
    "ProcessingStatus",
    "MergeResult",
    "ProgressSummary",
    "EnrichmentReport",
    "CrawlReport",
    "NOT_AVAILABLE",
    "ERROR_VALUE",
    "is_sentinel",
]
