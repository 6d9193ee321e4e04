"""Abstract base class for CMS page fetchers."""

from abc import ABC, abstractmethod


class BaseFetcher(ABC):
    @abstractmethod
    def fetch(self, user_id: str) -> str:
        """Return the raw HTML of the user's CMS page.

        Raises a ScraperError subclass on any failure; never retries.
        """
        ...
