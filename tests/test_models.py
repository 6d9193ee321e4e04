from smogon_scraper.models import (
    Contribution,
    ContributionReport,
    ContributionStats,
    RawCredit,
)


def _report():
    contribution = Contribution(
        id="sv/Chinchou_sv/OU_1_0",
        credit_type="Written by",
        pokemon="Chinchou",
        format="OU",
        generation="sv",
        language="en",
        url="https://www.smogon.com/dex/sv/pokemon/chinchou",
        set_number=1,
    )
    return ContributionReport(
        user_id="641532",
        username="Finchinator",
        fetched_at="2024-05-01T12:30:45.123Z",
        total_contributions=1,
        contributions=[contribution],
        stats=ContributionStats(
            written=1, quality_checked=0, by_format={"OU": 1}, by_generation={"sv": 1}
        ),
    )


def test_raw_credit_from_dict():
    raw = RawCredit.from_dict({
        "format_id": "sv/OU", "pokemon_id": "sv/Chinchou", "language": "en",
        "credit_type": "Written by", "set_order": 1, "credit_order": 2, "gen_order": 9,
    })
    assert raw.format_id == "sv/OU"
    assert raw.pokemon_id == "sv/Chinchou"
    assert raw.set_order == 1
    assert raw.credit_order == 2
    assert raw.gen_order == 9


def test_raw_credit_missing_fields_default():
    raw = RawCredit.from_dict({"format_id": None, "set_order": "oops"})
    assert raw.format_id == ""
    assert raw.pokemon_id == ""
    assert raw.credit_type == ""
    assert raw.set_order == 0


def test_report_to_dict_uses_camel_case_keys():
    d = _report().to_dict()
    assert list(d.keys()) == [
        "userId", "username", "fetchedAt", "totalContributions", "contributions", "stats",
    ]
    assert list(d["contributions"][0].keys()) == [
        "id", "creditType", "pokemon", "format", "generation", "language", "url", "setNumber",
    ]
    assert d["stats"] == {
        "written": 1, "qualityChecked": 0, "byFormat": {"OU": 1}, "byGeneration": {"sv": 1},
    }


def test_report_from_dict_reads_saved_shape():
    report = _report()
    loaded = ContributionReport.from_dict(report.to_dict())
    assert loaded == report


def test_stats_defaults_are_empty():
    stats = ContributionStats()
    assert stats.written == 0
    assert stats.by_format == {}
    assert stats.by_generation == {}
