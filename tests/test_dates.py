"""Tests for the milestone date-difference utility."""

import json
from datetime import date

import pytest

from cdjkit import cli
from cdjkit.dates import (
    DEFAULT_MILESTONES,
    Period,
    format_line,
    milestone_lines,
    parse_milestones,
    period_between,
    today_in,
)
from cdjkit.errors import ConfigError


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Run each command from an empty directory so no stray milestones.json is read."""
    monkeypatch.chdir(tmp_path)


def test_period_simple():
    """Verify whole years, months and days are split out."""
    assert period_between(date(2020, 1, 15), date(2023, 3, 20)) == Period(3, 2, 5)


def test_period_across_month_end():
    """Verify month lengths are respected."""
    assert period_between(date(2024, 1, 31), date(2024, 3, 1)) == Period(0, 1, 1)


def test_period_leap_day():
    """Verify a leap-day start reaches a full year on Feb 28."""
    assert period_between(date(2016, 2, 29), date(2017, 2, 28)) == Period(1, 0, 0)


def test_period_future_date_is_non_negative():
    """Verify dates after today give the same magnitude as before."""
    assert period_between(date(2030, 5, 1), date(2026, 5, 1)) == Period(4, 0, 0)


def test_format_line():
    """Verify the output line format."""
    assert format_line("First gig", Period(1, 2, 3)) == "First gig: 1 year(s), 2 month(s), 3 day(s)."


def test_milestone_lines_keep_order():
    """Verify one line per milestone in mapping order."""
    lines = milestone_lines({"B": date(2020, 1, 1), "A": date(2021, 1, 1)}, date(2022, 1, 1))
    assert lines == ["B: 2 year(s), 0 month(s), 0 day(s).", "A: 1 year(s), 0 month(s), 0 day(s)."]


def test_today_in_known_zone():
    """Verify a known zone returns a date."""
    assert isinstance(today_in("UTC"), date)


def test_today_in_unknown_zone():
    """Verify an unknown zone raises ConfigError."""
    with pytest.raises(ConfigError):
        today_in("Mars/Olympus_Mons")


def test_parse_milestones():
    """Verify ISO strings are parsed and bad values rejected."""
    assert parse_milestones({"x": "2020-02-29"}) == {"x": date(2020, 2, 29)}
    with pytest.raises(ConfigError):
        parse_milestones({"x": "2020-13-01"})
    with pytest.raises(ConfigError):
        parse_milestones({"x": 2020})
    with pytest.raises(ConfigError):
        parse_milestones(["2020-01-01"])


def test_datediff_main_defaults(capsys):
    """Verify the script prints one line per default milestone."""
    assert cli.datediff_main(["--today", "2026-10-19"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(DEFAULT_MILESTONES)
    assert lines[0] == "First gig: 14 year(s), 4 month(s), 4 day(s)."


def test_datediff_main_config(tmp_path, capsys):
    """Verify milestones come from the JSON config."""
    cfg = tmp_path / "milestones.json"
    cfg.write_text(json.dumps({"timezone": "UTC", "milestones": {"Launch": "2025-10-19"}}))
    assert cli.datediff_main(["--config", str(cfg), "--today", "2026-10-19"]) == 0
    assert capsys.readouterr().out.strip() == "Launch: 1 year(s), 0 month(s), 0 day(s)."


def test_datediff_main_bad_zone(capsys):
    """Verify an unknown zone exits with 2."""
    assert cli.datediff_main(["--tz", "Nowhere/Special"]) == 2
    assert "[ERR]" in capsys.readouterr().err


def test_datediff_missing_library(monkeypatch, capsys):
    """Verify the run aborts before any work when dateutil is unavailable."""
    monkeypatch.setattr(cli.importlib.util, "find_spec", lambda name: None)
    with pytest.raises(SystemExit) as exc:
        cli.datediff_main([])
    assert exc.value.code == 1
    assert "python-dateutil" in capsys.readouterr().err
