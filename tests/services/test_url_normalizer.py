import pytest

from hostcrawl.exceptions import InvalidLinkError, MalformedUrlError, UnsupportedSchemeError
from hostcrawl.services.url_normalizer import canonical_seed, host_key, normalize_link

BASE = "https://x.com/a/b"


@pytest.mark.parametrize("href", ["", "   ", "#", "#top", "mailto:x@y.com", "tel:+123456", "MAILTO:x@y.com"])
def test_invalid_links_rejected(href):
    with pytest.raises(InvalidLinkError):
        normalize_link(BASE, href)


@pytest.mark.parametrize("href", ["javascript:void(0)", "ftp://x.com/file", "data:text/plain,hi"])
def test_unsupported_schemes_rejected(href):
    with pytest.raises(UnsupportedSchemeError) as exc:
        normalize_link(BASE, href)
    assert exc.value.scheme == href.split(":", 1)[0]


def test_malformed_href_rejected():
    with pytest.raises(MalformedUrlError):
        normalize_link(BASE, "http://[::1/broken")


def test_malformed_port_rejected():
    with pytest.raises(MalformedUrlError):
        normalize_link(BASE, "http://x.com:notaport/")


def test_malformed_base_rejected():
    with pytest.raises(MalformedUrlError):
        normalize_link("http://[bad", "/a")


@pytest.mark.parametrize("href,expected", [
    ("../c", "https://x.com/c"),
    ("c", "https://x.com/a/c"),
    ("/root", "https://x.com/root"),
    ("//x.com/proto", "https://x.com/proto"),
    ("https://x.com/abs", "https://x.com/abs"),
    ("http://other.com/p?q=1", "http://other.com/p?q=1"),
    ("?page=2", "https://x.com/a/b?page=2"),
])
def test_relative_references_resolve(href, expected):
    assert normalize_link(BASE, href) == expected


def test_fragment_is_stripped():
    assert normalize_link(BASE, "/page#section") == "https://x.com/page"
    assert normalize_link(BASE, "https://x.com/a#") == "https://x.com/a"


def test_surrounding_whitespace_ignored():
    assert normalize_link(BASE, "  /spaced \n") == "https://x.com/spaced"


def test_normalize_is_deterministic():
    assert normalize_link(BASE, "../c#x") == normalize_link(BASE, "../c#x")


def test_canonical_seed_adds_root_path():
    assert canonical_seed("https://example.com") == "https://example.com/"
    assert canonical_seed("https://example.com/#top") == "https://example.com/"
    assert canonical_seed("https://example.com/docs") == "https://example.com/docs"


def test_host_key_lowercases_and_keeps_port():
    assert host_key("https://Example.COM/a") == "example.com"
    assert host_key("http://example.com:8080/") == "example.com:8080"
    assert host_key("https://user:pw@example.com/") == "example.com"
