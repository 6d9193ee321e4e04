import pytest
import responses

from smogon_scraper.core import SmogonScraper
from smogon_scraper.errors import AuthenticationError, ExtractionError
from smogon_scraper.extractors import LxmlExtractor
from smogon_scraper.fetchers import BaseFetcher

CMS_URL = "https://www.smogon.com/cms/user/641532"


class StaticFetcher(BaseFetcher):
    def __init__(self, html):
        self.html = html
        self.requested = []

    def fetch(self, user_id):
        self.requested.append(user_id)
        return self.html


@responses.activate
def test_fetch_contributions_end_to_end(cms_page, fixed_clock):
    responses.add(responses.GET, CMS_URL, body=cms_page, status=200)

    scraper = SmogonScraper("cookie", clock=fixed_clock)
    report = scraper.fetch_contributions("641532")

    assert report.username == "Finchinator"
    assert report.total_contributions == 4
    assert report.fetched_at == "2024-05-01T12:30:45.123Z"
    assert report.contributions[0].id == "sv/Chinchou_sv/OU_1_0"


@responses.activate
def test_fetch_contributions_propagates_fetch_errors():
    responses.add(responses.GET, CMS_URL, status=403)
    with pytest.raises(AuthenticationError):
        SmogonScraper("stale").fetch_contributions("641532")


def test_injected_fetcher_and_extractor(cms_page, fixed_clock):
    fetcher = StaticFetcher(cms_page)
    scraper = SmogonScraper(
        "unused", fetcher=fetcher, extractor=LxmlExtractor(), clock=fixed_clock
    )
    report = scraper.fetch_contributions(" 641532 ")
    assert fetcher.requested == ["641532"]
    assert report.user_id == "641532"
    assert report.stats.written == 2


def test_parse_propagates_extraction_error():
    scraper = SmogonScraper("unused", fetcher=StaticFetcher(""))
    with pytest.raises(ExtractionError):
        scraper.fetch_contributions("1")
