"""Fetch a user's contribution page from the Smogon CMS."""

import logging
from typing import Optional

import requests

from smogon_scraper.errors import (
    AuthenticationError,
    HttpError,
    NetworkError,
    NotFoundError,
)
from smogon_scraper.fetchers.base import BaseFetcher
from smogon_scraper.models import SMOGON_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "SmogonContribScraper/1.0"
SESSION_COOKIE_NAME = "smogon_session"


class CMSFetcher(BaseFetcher):
    def __init__(
        self,
        session_cookie: str,
        session: Optional[requests.Session] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        base_url: str = SMOGON_BASE_URL,
        timeout: float = 30,
    ):
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": user_agent})
        self._cookie = session_cookie
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def user_url(self, user_id: str) -> str:
        return f"{self._base_url}/cms/user/{user_id}"

    def fetch(self, user_id: str) -> str:
        url = self.user_url(user_id)
        logger.debug("GET %s", url)
        try:
            resp = self._session.get(
                url,
                headers={"Cookie": f"{SESSION_COOKIE_NAME}={self._cookie}"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise NetworkError(exc) from exc

        _check_status(resp, user_id)
        logger.info("Fetched %d characters for user %s", len(resp.text), user_id)
        return resp.text


def _check_status(resp: requests.Response, user_id: str) -> None:
    status = resp.status_code
    if status == 401:
        raise AuthenticationError("unauthorized")
    if status == 403:
        raise AuthenticationError("forbidden — session may have expired")
    if status == 404:
        raise NotFoundError(f"user {user_id} not found")
    if not 200 <= status < 300:
        raise HttpError(status, resp.reason or "")
