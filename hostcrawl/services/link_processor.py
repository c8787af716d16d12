import logging

from hostcrawl.domain.crawl_context import CrawlContext
from hostcrawl.domain.link_outcome import Accepted, LinkOutcome, Rejected, RejectReason
from hostcrawl.domain.visit_ledger import ClaimResult
from hostcrawl.exceptions import InvalidLinkError, LinkError, MalformedUrlError, UnsupportedSchemeError
from hostcrawl.services.url_normalizer import host_key, normalize_link

logger = logging.getLogger(__name__)

_ERROR_REASONS = (
    (InvalidLinkError, RejectReason.INVALID_LINK),
    (MalformedUrlError, RejectReason.MALFORMED_URL),
    (UnsupportedSchemeError, RejectReason.UNSUPPORTED_SCHEME),
)

_CLAIM_REASONS = {
    ClaimResult.DUPLICATE: RejectReason.ALREADY_CLAIMED,
    ClaimResult.BUDGET_EXHAUSTED: RejectReason.BUDGET_EXHAUSTED,
}


class LinkProcessor:
    """Run one href through normalize -> host filter -> robots gate -> claim.

    Each stage either passes the link on or returns a `Rejected` outcome
    naming the stage that dropped it. An `Accepted` outcome means the URL
    was claimed in the ledger and must be crawled by the caller.
    """

    def __init__(self, robots_service):
        self.robots_service = robots_service

    def process(self, base_url: str, href: str, context: CrawlContext) -> LinkOutcome:
        try:
            url = normalize_link(base_url, href)
        except LinkError as e:
            for error_type, reason in _ERROR_REASONS:
                if isinstance(e, error_type):
                    return Rejected(href, reason, e.reason)
            return Rejected(href, RejectReason.MALFORMED_URL, e.reason)

        try:
            host = host_key(url)
        except ValueError as e:
            return Rejected(href, RejectReason.MALFORMED_URL, str(e))
        if host != context.allowed_host:
            return Rejected(href, RejectReason.OFF_HOST, host)

        if not self.robots_service.is_allowed(url, context.robots_cache):
            return Rejected(href, RejectReason.ROBOTS_DENIED, url)

        claim = context.ledger.claim(url)
        if claim is not ClaimResult.CLAIMED:
            return Rejected(href, _CLAIM_REASONS[claim], url)
        return Accepted(url)
