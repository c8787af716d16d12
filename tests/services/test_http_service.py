from hostcrawl.services.http_service import MAX_REDIRECTS, HttpService, build_session
from hostcrawl.exceptions import FetchError
from unittest.mock import Mock
import pytest
import requests


def test_fetch_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.content = b'hello world'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.content == b'hello world'
    assert response.text == 'hello world'


def test_fetch_passes_user_agent_and_timeout():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.content = b''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client, timeout=3)
    http.fetch('http://example.com')
    mock_http_client.assert_called_once_with('http://example.com', headers={'User-Agent': 'TestAgent'}, timeout=3, allow_redirects=True)


def test_fetch_robots_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.content = b'User-agent: *\nDisallow: /private'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch_robots('http://example.com/robots.txt')
    assert response.status_code == 200
    assert 'Disallow' in response.text


def test_fetch_wraps_requests_exception():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.Timeout("timed out")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(FetchError) as exc:
        http.fetch('http://example.com')
    assert "http://example.com" in str(exc.value)
    assert isinstance(exc.value.original, requests.exceptions.Timeout)


def test_fetch_returns_error_status_without_raising():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 404
    mock_http_client.return_value.content = b'missing'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    assert http.fetch('http://example.com').status_code == 404


def test_fetch_page_raises_on_non_success_status():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 503
    mock_http_client.return_value.content = b''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    with pytest.raises(FetchError) as exc:
        http.fetch_page('http://example.com')
    assert exc.value.status_code == 503


def test_fetch_content_type_from_headers():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.content = b'<html>test</html>'
    mock_http_client.return_value.headers = {'Content-Type': 'text/html; charset=utf-8'}
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.content_type == 'text/html; charset=utf-8'


def test_fetch_bubbles_unexpected_exceptions():
    """Non-requests exceptions are NOT turned into FetchError."""
    mock_http_client = Mock()
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.content = b'test'
    mock_response.headers.get.side_effect = RuntimeError("Real bug in headers.get()")
    mock_http_client.return_value = mock_response
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(RuntimeError, match="Real bug"):
        http.fetch('http://example.com')


def test_build_session_mounts_pooled_adapter():
    session = build_session("TestAgent/1.0", pool_connections=10, pool_maxsize=5)
    adapter = session.get_adapter("https://example.com/")
    assert adapter._pool_connections == 10
    assert adapter._pool_maxsize == 5
    assert session.headers["User-Agent"] == "TestAgent/1.0"
    session.close()


class RedirectingClient:
    """Serves a redirect chain and records which URLs were requested."""

    def __init__(self, routes):
        self.routes = routes
        self.requested = []

    def __call__(self, url, headers=None, timeout=None, allow_redirects=True):
        self.requested.append((url, allow_redirects))
        status, location = self.routes[url]
        response = Mock()
        response.status_code = status
        response.content = b'' if location else b'<p>page</p>'
        response.headers = {'Location': location} if location else {'Content-Type': 'text/html'}
        return response


def test_fetch_page_follows_same_host_redirect():
    client = RedirectingClient({
        'https://example.com/old': (301, '/new#top'),
        'https://example.com/new': (200, None),
    })
    http = HttpService(user_agent='TestAgent', http_client=client)
    response = http.fetch_page('https://example.com/old')
    assert response.status_code == 200
    assert response.url == 'https://example.com/new'
    assert client.requested == [('https://example.com/old', False), ('https://example.com/new', False)]


def test_fetch_page_never_requests_off_host_redirect_target():
    client = RedirectingClient({
        'https://example.com/out': (302, 'https://other.com/landing'),
    })
    http = HttpService(user_agent='TestAgent', http_client=client)
    with pytest.raises(FetchError) as exc:
        http.fetch_page('https://example.com/out')
    assert 'off-host' in exc.value.reason
    assert exc.value.status_code == 302
    assert [url for url, _ in client.requested] == ['https://example.com/out']


def test_fetch_page_redirect_loop_is_bounded():
    client = RedirectingClient({
        'https://example.com/a': (302, '/b'),
        'https://example.com/b': (302, '/a'),
    })
    http = HttpService(user_agent='TestAgent', http_client=client)
    with pytest.raises(FetchError, match='redirects'):
        http.fetch_page('https://example.com/a')
    assert len(client.requested) == MAX_REDIRECTS + 1


def test_fetch_robots_lets_client_follow_redirects():
    client = RedirectingClient({'https://example.com/robots.txt': (200, None)})
    http = HttpService(user_agent='TestAgent', http_client=client)
    http.fetch_robots('https://example.com/robots.txt')
    assert client.requested == [('https://example.com/robots.txt', True)]
