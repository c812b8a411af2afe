# Namespace for pipeline steps
from .list_connections import ListConnectionsPage  # noqa: F401
from .persist_connections import PersistConnections  # noqa: F401
from .enrich_emails import EnrichPendingEmails  # noqa: F401
from .advance_page import AdvancePage, PageBreak  # noqa: F401
