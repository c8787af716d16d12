from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class RejectReason(Enum):
    INVALID_LINK = "invalid_link"
    MALFORMED_URL = "malformed_url"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    OFF_HOST = "off_host"
    ROBOTS_DENIED = "robots_denied"
    ALREADY_CLAIMED = "already_claimed"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass(frozen=True)
class Accepted:
    """The href resolved to `url` and the caller now owns its claim."""
    url: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    href: str
    reason: RejectReason
    detail: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return False


LinkOutcome = Union[Accepted, Rejected]
