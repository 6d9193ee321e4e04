"""Abstract base class for page extractors."""

from abc import ABC, abstractmethod
from typing import Optional

MISSING_PAYLOAD_MESSAGE = (
    "Could not find contribution data in HTML. The page structure may have changed."
)


class BaseExtractor(ABC):
    @abstractmethod
    def username(self, html: str) -> Optional[str]:
        """Return the member display name linked from the page, or None."""
        ...

    @abstractmethod
    def payload(self, html: str) -> str:
        """Return the entity-decoded react-data attribute value.

        Raises ExtractionError when the attribute is missing.
        """
        ...
