"""Orchestrator — fetches a user's CMS page and builds the report."""

import logging
from typing import Optional

from smogon_scraper.extractors import BaseExtractor, RegexExtractor
from smogon_scraper.fetchers import BaseFetcher, CMSFetcher
from smogon_scraper.fetchers.cms import DEFAULT_USER_AGENT
from smogon_scraper.models import ContributionReport
from smogon_scraper.transform import Clock, build_report, utc_now

logger = logging.getLogger(__name__)


class SmogonScraper:
    def __init__(
        self,
        session_cookie: str,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30,
        extractor: Optional[BaseExtractor] = None,
        clock: Clock = utc_now,
        fetcher: Optional[BaseFetcher] = None,
    ):
        self._fetcher = fetcher or CMSFetcher(
            session_cookie, user_agent=user_agent, timeout=timeout
        )
        self._extractor = extractor or RegexExtractor()
        self._clock = clock

    def fetch_contributions(self, user_id: str) -> ContributionReport:
        """Fetch and parse contributions for one user. Errors propagate unchanged."""
        user_id = str(user_id).strip()
        logger.info("Fetching contributions for user %s via %s",
                    user_id, type(self._fetcher).__name__)
        html = self._fetcher.fetch(user_id)
        return self.parse(html, user_id)

    def parse(self, html: str, user_id: str) -> ContributionReport:
        return build_report(html, user_id, extractor=self._extractor, clock=self._clock)
