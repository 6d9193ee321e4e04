"""Contribution records — the single contract between the transformer and output."""

from dataclasses import dataclass, field
from typing import Dict, List

SMOGON_BASE_URL = "https://www.smogon.com"

WRITTEN_BY = "Written by"
QUALITY_CHECKED_BY = "Quality checked by"


@dataclass(frozen=True)
class RawCredit:
    """One entry of the ``credits`` list embedded in the CMS page."""

    format_id: str = ""  # "<generation>/<format>", e.g. "sv/OU"
    pokemon_id: str = ""  # "<generation>/<name>", e.g. "sv/Chinchou"
    language: str = ""
    credit_type: str = ""
    set_order: int = 0
    credit_order: int = 0
    gen_order: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "RawCredit":
        return cls(
            format_id=_as_str(data.get("format_id")),
            pokemon_id=_as_str(data.get("pokemon_id")),
            language=_as_str(data.get("language")),
            credit_type=_as_str(data.get("credit_type")),
            set_order=_as_int(data.get("set_order")),
            credit_order=_as_int(data.get("credit_order")),
            gen_order=_as_int(data.get("gen_order")),
        )


@dataclass(frozen=True)
class Contribution:
    id: str
    credit_type: str
    pokemon: str
    format: str
    generation: str
    language: str
    url: str
    set_number: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "creditType": self.credit_type,
            "pokemon": self.pokemon,
            "format": self.format,
            "generation": self.generation,
            "language": self.language,
            "url": self.url,
            "setNumber": self.set_number,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Contribution":
        return cls(
            id=data.get("id", ""),
            credit_type=data.get("creditType", ""),
            pokemon=data.get("pokemon", ""),
            format=data.get("format", ""),
            generation=data.get("generation", ""),
            language=data.get("language", ""),
            url=data.get("url", ""),
            set_number=data.get("setNumber", 0),
        )


@dataclass(frozen=True)
class ContributionStats:
    written: int = 0
    quality_checked: int = 0
    by_format: Dict[str, int] = field(default_factory=dict)
    by_generation: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "written": self.written,
            "qualityChecked": self.quality_checked,
            "byFormat": dict(self.by_format),
            "byGeneration": dict(self.by_generation),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContributionStats":
        return cls(
            written=data.get("written", 0),
            quality_checked=data.get("qualityChecked", 0),
            by_format=dict(data.get("byFormat", {})),
            by_generation=dict(data.get("byGeneration", {})),
        )


@dataclass(frozen=True)
class ContributionReport:
    user_id: str
    username: str
    fetched_at: str  # ISO-8601, taken when the report is assembled
    total_contributions: int
    contributions: List[Contribution]
    stats: ContributionStats

    def to_dict(self) -> dict:
        """Return the report in the JSON shape written to disk (camelCase keys)."""
        return {
            "userId": self.user_id,
            "username": self.username,
            "fetchedAt": self.fetched_at,
            "totalContributions": self.total_contributions,
            "contributions": [c.to_dict() for c in self.contributions],
            "stats": self.stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ContributionReport":
        contributions = [Contribution.from_dict(c) for c in data.get("contributions", [])]
        return cls(
            user_id=data.get("userId", ""),
            username=data.get("username", ""),
            fetched_at=data.get("fetchedAt", ""),
            total_contributions=data.get("totalContributions", len(contributions)),
            contributions=contributions,
            stats=ContributionStats.from_dict(data.get("stats", {})),
        )


def _as_str(value) -> str:
    return "" if value is None else str(value)


def _as_int(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
