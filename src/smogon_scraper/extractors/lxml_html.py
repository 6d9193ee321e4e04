"""Extraction backed by a real HTML parse (lxml) instead of patterns."""

import logging
import re
from typing import Optional

from lxml import etree, html as lxml_html

from smogon_scraper.errors import ExtractionError
from smogon_scraper.extractors.base import MISSING_PAYLOAD_MESSAGE, BaseExtractor

logger = logging.getLogger(__name__)

_MEMBER_HREF_RE = re.compile(r"/forums/members/(?:[^/]*\.)?\d+/?$")


class LxmlExtractor(BaseExtractor):
    """Parses the document once per call; lxml decodes attribute entities itself."""

    def username(self, html: str) -> Optional[str]:
        doc = _parse(html)
        if doc is None:
            return None
        for link in doc.xpath("//a[contains(@href, '/forums/members/')]"):
            if not _MEMBER_HREF_RE.search(link.get("href", "")):
                continue
            text = link.text_content().strip()
            if text:
                return text
        return None

    def payload(self, html: str) -> str:
        doc = _parse(html)
        if doc is None:
            raise ExtractionError(MISSING_PAYLOAD_MESSAGE)
        for node in doc.xpath("//*[@react-data]"):
            value = node.get("react-data")
            if value:
                return value
        raise ExtractionError(MISSING_PAYLOAD_MESSAGE)


def _parse(html: str):
    if not html or not html.strip():
        return None
    try:
        try:
            return lxml_html.fromstring(html)
        except ValueError:
            # str input with an XML encoding declaration must be parsed as bytes
            return lxml_html.fromstring(html.encode("utf-8"))
    except (etree.ParserError, ValueError):
        logger.debug("lxml could not parse document", exc_info=True)
        return None
