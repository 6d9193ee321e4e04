"""HTML extractors: locate the username and the embedded react-data payload."""

from smogon_scraper.extractors.base import BaseExtractor
from smogon_scraper.extractors.lxml_html import LxmlExtractor
from smogon_scraper.extractors.regex import RegexExtractor, decode_entities

EXTRACTOR_CLASSES = {
    "regex": RegexExtractor,
    "lxml": LxmlExtractor,
}

__all__ = [
    "BaseExtractor",
    "EXTRACTOR_CLASSES",
    "LxmlExtractor",
    "RegexExtractor",
    "decode_entities",
]
