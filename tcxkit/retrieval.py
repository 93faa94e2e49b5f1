"""Load a TCX document from a local path or an HTTP(S) URL.

Gzipped documents (``.tcx.gz``) are decompressed first. Errors from the
filesystem, the HTTP layer or the XML parser are not caught here.
"""

import gzip
import logging
import xml.etree.ElementTree as ET
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT = 30
GZIP_MAGIC = b"\x1f\x8b"


def is_url(source: str) -> bool:
    return source.startswith("http")


def _is_gzipped(source: str) -> bool:
    path = urlparse(source).path if is_url(source) else source
    return path.lower().endswith(".gz")


def parse_bytes_to_tree(data: bytes, gzipped: bool = False) -> ET.Element:
    """Build an element tree from raw document bytes and return its root."""
    if gzipped:
        data = gzip.decompress(data)
    # Some exporters emit whitespace before the XML declaration
    return ET.fromstring(data.lstrip())


def fetch(url: str, timeout: float = DEFAULT_HTTP_TIMEOUT) -> bytes:
    """GET ``url`` and return the response body.

    Raises:
        requests.HTTPError: on a 4xx/5xx response.
    """
    logger.debug("Fetching %s", url)
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content


def load_tree(source: str, timeout: float = DEFAULT_HTTP_TIMEOUT) -> ET.Element:
    """Return the root element of the TCX document at ``source``."""
    gzipped = _is_gzipped(source)
    if is_url(source):
        return parse_bytes_to_tree(fetch(source, timeout=timeout), gzipped=gzipped)
    logger.debug("Reading %s", source)
    if gzipped:
        with gzip.open(source, "rb") as f:
            return parse_bytes_to_tree(f.read())
    return ET.parse(source).getroot()
