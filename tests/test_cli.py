# tests/test_cli.py

from datetime import date
from unittest.mock import patch

import pytest

from sakacal import FixedClock
from sakacal.cli import main
from sakacal.render import render_month_grid


def test_bare_date_shorthand(capsys):
    assert main(["2011-03-17"]) == 0
    assert capsys.readouterr().out.strip() == "26, Phalguna 1932  (Brahaspativara)"


def test_from_greg_tuple(capsys):
    assert main(["from-greg", "2011-03-17", "--tuple"]) == 0
    assert capsys.readouterr().out.strip() == "1932 12 26"


def test_to_greg(capsys):
    assert main(["to-greg", "1932", "12", "26"]) == 0
    assert capsys.readouterr().out.strip() == "2011-03-17"


def test_invalid_input_exit_code(capsys):
    assert main(["to-greg", "1932", "13", "1"]) == 2
    assert capsys.readouterr().err.strip() == "error: Invalid month [13]."


def test_malformed_date_is_usage_error():
    with pytest.raises(SystemExit) as e:
        main(["from-greg", "2011/03/17"])
    assert e.value.code == 2


def test_month(capsys):
    assert main(["month", "1932", "12"]) == 0
    assert capsys.readouterr().out == render_month_grid(1932, 12)


def test_today(capsys):
    with patch("sakacal.core.clock.DEFAULT_CLOCK", FixedClock(date(2011, 3, 17))):
        assert main(["today"]) == 0
    assert capsys.readouterr().out.strip() == "26, Phalguna 1932  (Brahaspativara)"


def test_new_years_table(capsys):
    assert main(["new-years", "--from-year", "1933", "--to-year", "1934"]) == 0
    out = capsys.readouterr().out
    assert "2011-03-22" in out
    assert "2012-03-21" in out


def test_round_trip_diagnostic(capsys):
    assert main(["diag", "round-trip", "--N", "300", "--seed", "1"]) == 0
    assert "All 300 round-trip tests passed." in capsys.readouterr().out


def test_new_years_invalid_year_exit_code(capsys):
    assert main(["new-years", "--from-year", "0", "--to-year", "1"]) == 2
    assert capsys.readouterr().err.strip() == "error: Invalid year [0]."


@pytest.mark.parametrize("start", ["2011/01/01", "2011-13-01"])
def test_round_trip_malformed_start_is_usage_error(start):
    with pytest.raises(SystemExit) as e:
        main(["diag", "round-trip", "--start", start])
    assert e.value.code == 2
