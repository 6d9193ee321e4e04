"""Page fetchers: the HTTP side of the pipeline."""

from smogon_scraper.fetchers.base import BaseFetcher
from smogon_scraper.fetchers.cms import CMSFetcher

__all__ = ["BaseFetcher", "CMSFetcher"]
