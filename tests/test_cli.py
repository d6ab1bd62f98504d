# tests/test_cli.py

from datetime import date

import pytest

from ddate import cli


def test_classic_form_with_date(capsys):
    assert cli.main(["2017-11-04"]) == 0
    out = capsys.readouterr().out
    assert out == "2017-11-04 is Pungenday, the 16th day of The Aftermath in the YOLD 3183\n"


def test_free_form_date_and_celebration(capsys):
    assert cli.main(["Sep 26 2017"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "2017-09-26 is Prickle-Prickle, the 50th day of Bureaucracy in the YOLD 3183",
        "Celebrate Bureflux",
    ]


def test_plain_suppresses_celebration(capsys):
    assert cli.main(["day", "2017-09-26", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Celebrate" not in out


def test_today(capsys, monkeypatch):
    class FixedDate(date):
        @classmethod
        def today(cls):
            return cls(2020, 2, 29)

    monkeypatch.setattr(cli, "date", FixedDate)
    assert cli.main([]) == 0
    assert capsys.readouterr().out == "Today is St. Tib's Day, the YOLD 3186\n"


def test_unparsable_date(capsys):
    assert cli.main(["gibberish"]) == 1
    assert capsys.readouterr().out == "Could not parse provided date.\n"


def test_day_with_attributes(capsys):
    assert cli.main(["day", "2017-10-24", "--attr", "holyday"]) == 0
    out = capsys.readouterr().out
    assert "  holyday: Maladay" in out
    assert "  holyday_kind: apostle" in out


def test_ordinal(capsys):
    assert cli.cmd_ordinal(["2020", "61"]) == 0
    assert capsys.readouterr().out == "2020-03-01 is Setting Orange, the 60th day of Chaos in the YOLD 3186\n"


def test_ordinal_negative_year(capsys):
    assert cli.cmd_ordinal(["-1166", "1"]) == 0
    assert capsys.readouterr().out == "-1166-01-01 is Sweetmorn, the 1st day of Chaos in the YOLD 0\n"


def test_ordinal_out_of_range():
    with pytest.raises(SystemExit, match="outside 1..365"):
        cli.main(["ordinal", "2023", "366"])


def test_holydays_subcommand(capsys):
    assert cli.main(["holydays", "--from-year", "2017"]) == 0
    out = capsys.readouterr().out
    assert "Bureflux" in out
    assert "09-26" in out


def test_pretty_season_subcommand(capsys):
    assert cli.main(["pretty-season", "--year", "2023", "--season", "discord"]) == 0
    assert capsys.readouterr().out.startswith("Discord  YOLD 3189  (civil 2023)")
