"""Domain objects for HostCrawl - explicit re-exports to satisfy linters."""
from .config import CrawlerConfig as CrawlerConfig
from .crawl_result import CrawlResult as CrawlResult
from .crawl_unit import CrawlUnit as CrawlUnit, UnitState as UnitState
from .link_outcome import Accepted as Accepted, Rejected as Rejected, RejectReason as RejectReason
from .visit_ledger import VisitLedger as VisitLedger, ClaimResult as ClaimResult
from .permit_pool import PermitPool as PermitPool

__all__ = [
    "CrawlerConfig",
    "CrawlResult",
    "CrawlUnit",
    "UnitState",
    "Accepted",
    "Rejected",
    "RejectReason",
    "VisitLedger",
    "ClaimResult",
    "PermitPool",
]
