import logging
from typing import BinaryIO, Iterator, Union

from bs4 import BeautifulSoup, SoupStrainer
from bs4.builder import ParserRejectedMarkup

logger = logging.getLogger(__name__)

# only <a> elements are built; everything else is skipped by the parser
ANCHOR_STRAINER = SoupStrainer("a")


def _read_all(source: Union[bytes, BinaryIO]) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    chunks = []
    try:
        while True:
            chunk = source.read(64 * 1024)
            if not chunk:
                break
            chunks.append(chunk)
    except (OSError, ValueError) as e:
        logger.warning("Body stream ended with error, using %d bytes read so far: %s", sum(len(c) for c in chunks), e)
    return b"".join(chunks)


def _parse(markup: bytes) -> BeautifulSoup:
    try:
        return BeautifulSoup(
            markup,
            "html.parser",
            parse_only=ANCHOR_STRAINER,
            on_duplicate_attribute="ignore",
        )
    except ParserRejectedMarkup as e:
        # html.parser gives up on some constructs (e.g. unknown marked sections);
        # libxml2 recovers and keeps the first of duplicate attributes
        logger.warning("html.parser rejected markup (%s); re-parsing with lxml", e)
        return BeautifulSoup(markup, "lxml", parse_only=ANCHOR_STRAINER)


def extract_hrefs(source: Union[bytes, BinaryIO]) -> Iterator[str]:
    """Yield raw href values of <a> open tags in document order.

    Only the first `href` on a tag counts. Broken markup never raises: the
    sequence stops at whatever the parser managed to build.
    """
    markup = _read_all(source)
    if not markup:
        return
    try:
        soup = _parse(markup)
    except Exception:
        logger.exception("Error parsing HTML; no links extracted")
        return

    for a in soup.find_all("a"):
        href = a.get("href")
        if isinstance(href, list):
            href = " ".join(href)
        if href is None:
            continue
        yield href
