from typing import NamedTuple, Optional

REDIRECT_STATUSES = (301, 302, 303, 307, 308)


class HttpResponse(NamedTuple):
    """Response from HTTP fetch operation."""
    status_code: int
    content: bytes
    content_type: Optional[str] = None
    # Location header of a redirect response
    location: Optional[str] = None
    # URL the body was finally served from, when it differs from the request
    url: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= int(self.status_code) < 300

    @property
    def is_redirect(self) -> bool:
        return int(self.status_code) in REDIRECT_STATUSES

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")
