from hostcrawl.exceptions import FetchError, RobotsUnavailableError


class RobotsFetcher:
    """Fetch raw robots.txt text.

    Uses an `http_service` with a `fetch_robots(url)` method that returns
    an HttpResponse. Anything other than a 2xx response raises
    `RobotsUnavailableError`.
    """
    def __init__(self, http_service):
        self.http_service = http_service

    def fetch(self, robots_url: str) -> str:
        try:
            response = self.http_service.fetch_robots(robots_url)
        except FetchError as e:
            raise RobotsUnavailableError(robots_url, e.reason) from e

        if not response.ok:
            raise RobotsUnavailableError(robots_url, f"status {response.status_code}")

        return response.text
