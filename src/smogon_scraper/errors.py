"""Error taxonomy shared by the fetcher, extractors and transformer."""


class ScraperError(Exception):
    """Base class for every failure raised by smogon-scraper."""


class AuthenticationError(ScraperError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Authentication failed: {detail}")


class NotFoundError(ScraperError):
    pass


class HttpError(ScraperError):
    def __init__(self, status: int, reason: str = ""):
        self.status = status
        self.reason = reason
        super().__init__(f"HTTP {status}: {reason}" if reason else f"HTTP {status}")


class NetworkError(ScraperError):
    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class ExtractionError(ScraperError):
    """The embedded react-data payload could not be located in the page."""


class DecodeError(ScraperError):
    """The embedded payload was found but is not valid JSON."""
