"""Pattern-based extraction of the CMS page's embedded data."""

import re
from typing import Optional

from smogon_scraper.errors import ExtractionError
from smogon_scraper.extractors.base import MISSING_PAYLOAD_MESSAGE, BaseExtractor

# Matches both "/forums/members/641532>Name</a>" and the XenForo form
# '/forums/members/name.641532/">Name</a>'. The id must end the path.
USERNAME_RE = re.compile(
    r"""/forums/members/(?:[^"'>/]*\.)?\d+/?(?=["'>\s])["']?[^>]*>\s*([^<]+?)\s*</a>"""
)
REACT_DATA_RE = re.compile(r'react-data="([^"]+)"')

_ENTITIES = {
    "&quot;": '"',
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
}
_ENTITY_RE = re.compile("|".join(re.escape(e) for e in _ENTITIES))


def decode_entities(text: str) -> str:
    """Decode &quot; &amp; &lt; &gt; in a single pass.

    Each escape is replaced exactly once, so "&amp;lt;" decodes to "&lt;".
    """
    return _ENTITY_RE.sub(lambda m: _ENTITIES[m.group(0)], text)


class RegexExtractor(BaseExtractor):
    def username(self, html: str) -> Optional[str]:
        match = USERNAME_RE.search(html)
        if not match:
            return None
        return decode_entities(match.group(1))

    def payload(self, html: str) -> str:
        match = REACT_DATA_RE.search(html)
        if not match:
            raise ExtractionError(MISSING_PAYLOAD_MESSAGE)
        return decode_entities(match.group(1))
