# tests/test_api.py

from dataclasses import dataclass
from datetime import date, datetime

import pytest

import ddate
from ddate import CivilDate, DiscordianMixin


@dataclass(frozen=True)
class Ordinal(DiscordianMixin):
    """A third-party date type that only knows year, ordinal and leap flag."""
    year: int
    day_of_year: int
    is_leap: bool


class YMD:
    def __init__(self, year, month, day):
        self.year, self.month, self.day = year, month, day


def test_accepts_datetime_types():
    expected = "Pungenday, the 16th day of The Aftermath in the YOLD 3183"
    assert ddate.to_poee(date(2017, 11, 4)) == expected
    assert ddate.to_poee(datetime(2017, 11, 4, 23, 59)) == expected


def test_accepts_duck_typed_values():
    assert ddate.as_civil(YMD(2020, 2, 29)) == CivilDate(2020, 60, True)
    assert ddate.as_civil(Ordinal(2020, 60, True)) == CivilDate(2020, 60, True)
    assert ddate.discordian_date(YMD(2020, 2, 29)).is_st_tibs_day


def test_rejects_unrelated_objects():
    with pytest.raises(TypeError):
        ddate.as_civil("2017-11-04")


def test_mixin_adds_discordian_methods():
    o = Ordinal(2020, 61, True)
    dd = o.discordian()
    assert (dd.season_name, dd.day_of_season) == ("Chaos", 60)
    assert o.to_poee() == "Setting Orange, the 60th day of Chaos in the YOLD 3186"


def test_mixin_propagates_invalid_input():
    with pytest.raises(ddate.InvalidInputError):
        Ordinal(2023, 366, False).discordian()


def test_day_info_holyday():
    info = ddate.day_info(date(2017, 9, 26))
    assert info.holyday == "Bureflux"
    assert info.attributes is None
    assert info.civil == CivilDate(2017, 269, False)
    assert ddate.day_info(date(2017, 11, 4)).holyday is None


@pytest.mark.parametrize(
    "ymd, name",
    [
        ((2023, 1, 5), "Mungday"),
        ((2023, 2, 19), "Chaoflux"),
        ((2023, 3, 19), "Mojoday"),
        ((2023, 5, 3), "Discoflux"),
        ((2023, 5, 31), "Syaday"),
        ((2023, 7, 15), "Confuflux"),
        ((2023, 8, 12), "Zaraday"),
        ((2023, 9, 26), "Bureflux"),
        ((2023, 10, 24), "Maladay"),
        ((2023, 12, 8), "Afflux"),
    ],
)
def test_holydays_of_a_common_year(ymd, name):
    assert ddate.day_info(date(*ymd)).holyday == name


def test_leap_year_holydays_shift_after_st_tibs():
    assert ddate.day_info(date(2024, 2, 19)).holyday == "Chaoflux"
    assert ddate.day_info(date(2024, 3, 19)).holyday == "Mojoday"
    assert ddate.day_info(date(2024, 2, 29)).holyday is None


def test_standard_attributes():
    assert ddate.list_attributes() == ["holyday", "season", "st_tibs", "weekday"]
    info = ddate.day_info(date(2017, 10, 24), attributes=("weekday", "season", "holyday", "st_tibs"))
    assert info.attributes == {
        "weekday": 1,
        "weekday_name": "Boomtime",
        "season": 4,
        "season_name": "The Aftermath",
        "day_of_season": 5,
        "holyday": "Maladay",
        "holyday_kind": "apostle",
        "st_tibs_day": False,
    }


def test_unknown_attribute():
    with pytest.raises(KeyError, match="Unknown attribute"):
        ddate.day_info(date(2017, 10, 24), attributes=("moon_phase",))


def test_register_attribute():
    from ddate.attributes import registry

    ddate.register_attribute("yold_mod5", lambda info: {"yold_mod5": info.discordian.yold % 5})
    try:
        info = ddate.day_info(date(2017, 10, 24), attributes=("yold_mod5",))
        assert info.attributes == {"yold_mod5": 3183 % 5}
        with pytest.raises(KeyError, match="already exists"):
            ddate.register_attribute("yold_mod5", lambda info: {})
    finally:
        registry._REGISTRY.pop("yold_mod5", None)
