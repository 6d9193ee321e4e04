"""Turn a CMS page into a ContributionReport.

The steps are: extract the react-data payload, parse it as JSON, map each raw
credit to a Contribution, then aggregate the stats in one pass. Everything here
is pure except the report timestamp, which comes from an injectable clock.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from smogon_scraper.errors import DecodeError
from smogon_scraper.extractors import BaseExtractor, RegexExtractor
from smogon_scraper.models import (
    QUALITY_CHECKED_BY,
    SMOGON_BASE_URL,
    WRITTEN_BY,
    Contribution,
    ContributionReport,
    ContributionStats,
    RawCredit,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_payload(text: str) -> dict:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Failed to parse contribution data: {exc}") from exc
    if not isinstance(data, dict):
        logger.warning("react-data payload is a %s, not an object", type(data).__name__)
        return {}
    return data


def raw_credits(data: dict) -> List[RawCredit]:
    """Return the credits list; a missing or null field means no credits."""
    credits = data.get("credits") or []
    if not isinstance(credits, list):
        logger.warning("Ignoring non-list credits field (%s)", type(credits).__name__)
        return []
    return [RawCredit.from_dict(c if isinstance(c, dict) else {}) for c in credits]


def to_contribution(raw: RawCredit, index: int) -> Contribution:
    generation = _part(raw.format_id, 0)
    fmt = _part(raw.format_id, 1)
    pokemon = _part(raw.pokemon_id, 1)
    return Contribution(
        id=f"{raw.pokemon_id}_{raw.format_id}_{raw.set_order}_{index}",
        credit_type=raw.credit_type,
        pokemon=pokemon,
        format=fmt,
        generation=generation,
        language=raw.language,
        url=f"{SMOGON_BASE_URL}/dex/{generation}/pokemon/{pokemon.lower()}",
        set_number=raw.set_order,
    )


def compute_stats(contributions: Iterable[Contribution]) -> ContributionStats:
    written = 0
    quality_checked = 0
    by_format = {}
    by_generation = {}
    for c in contributions:
        if c.credit_type == WRITTEN_BY:
            written += 1
        elif c.credit_type == QUALITY_CHECKED_BY:
            quality_checked += 1
        by_format[c.format] = by_format.get(c.format, 0) + 1
        by_generation[c.generation] = by_generation.get(c.generation, 0) + 1
    return ContributionStats(
        written=written,
        quality_checked=quality_checked,
        by_format=by_format,
        by_generation=by_generation,
    )


def build_report(
    html: str,
    user_id: str,
    extractor: Optional[BaseExtractor] = None,
    clock: Clock = utc_now,
) -> ContributionReport:
    """Extract, decode, map and aggregate one CMS page.

    Raises ExtractionError when the react-data attribute is missing and
    DecodeError when its value is not JSON. No partial report is returned.
    """
    extractor = extractor or RegexExtractor()

    username = extractor.username(html) or f"User {user_id}"
    data = parse_payload(extractor.payload(html))
    credits = raw_credits(data)
    logger.info("Found %d credit entries for %s", len(credits), username)

    contributions = [to_contribution(raw, i) for i, raw in enumerate(credits)]
    return ContributionReport(
        user_id=user_id,
        username=username,
        fetched_at=format_timestamp(clock()),
        total_contributions=len(contributions),
        contributions=contributions,
        stats=compute_stats(contributions),
    )


def _part(value: str, index: int) -> str:
    parts = value.split("/")
    return parts[index] if index < len(parts) else ""
