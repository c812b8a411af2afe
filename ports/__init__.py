from .browser import NavigatorPort, PageExtractorPort, SessionPort
from .pacing import PacerPort
from .repos import ConnectionStorePort, EmailLedgerPort

__all__ = [
    "NavigatorPort",
    "PageExtractorPort",
    "SessionPort",
    "PacerPort",
    "ConnectionStorePort",
    "EmailLedgerPort",
]
