"""Write ContributionReports to JSON and format them for the console."""

import json

from smogon_scraper.models import ContributionReport

RULE = "═" * 50


def write_json(report: ContributionReport, filepath: str) -> None:
    with open(filepath, "w", encoding="utf-8") as fh:
        json.dump(report.to_dict(), fh, indent=2, ensure_ascii=False)
        fh.write("\n")


def report_to_bytes(report: ContributionReport) -> bytes:
    """Serialize a report to bytes (for Streamlit download button)."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")


def format_stats(report: ContributionReport) -> str:
    stats = report.stats
    lines = [
        "Success!",
        RULE,
        f"Username: {report.username}",
        f"Total Contributions: {report.total_contributions}",
        "",
        "Breakdown:",
        f"   Written: {stats.written}",
        f"   Quality Checked: {stats.quality_checked}",
        "",
        "By Format:",
    ]
    lines.extend(f"   {name}: {count}" for name, count in _by_count(stats.by_format))
    lines.append("")
    lines.append("By Generation:")
    lines.extend(f"   {name}: {count}" for name, count in _by_count(stats.by_generation))
    return "\n".join(lines)


def format_samples(report: ContributionReport, limit: int = 3) -> str:
    return "\n".join(
        f"   • {c.pokemon} ({c.format}) - {c.credit_type}"
        for c in report.contributions[:limit]
    )


def _by_count(counts: dict) -> list:
    # Stable sort keeps first-seen order among equal counts.
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def report_from_bytes(data: bytes) -> ContributionReport:
    """Load a previously saved report. Raises ValueError on malformed input."""
    try:
        parsed = json.loads(data.decode("utf-8"))
        if not isinstance(parsed, dict):
            raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
        return ContributionReport.from_dict(parsed)
    except (AttributeError, TypeError) as exc:
        raise ValueError(f"not a contribution report: {exc}") from exc
