import pytest

from enigma_research.controlgroup import DateTimeHms
from enigma_research.timezones import actual_time_zone


def test_actual_time_zone():
    moment = DateTimeHms(year=1953, month=1, day=29, hour=8, minute=37, second=30)
    assert actual_time_zone(moment, "Europe/Amsterdam") == ("CET", 3600)


def test_actual_time_zone_for_berlin_lmt():
    moment = DateTimeHms(year=1892, month=4, day=2, hour=12, minute=0, second=0)
    assert actual_time_zone(moment, "Europe/Berlin") == ("LMT", 3208)


def test_unknown_time_zone_raises():
    moment = DateTimeHms(year=1953, month=1, day=29)
    with pytest.raises(ValueError):
        actual_time_zone(moment, "Nowhere/Nothing")


def test_invalid_date_raises():
    moment = DateTimeHms(year=2001, month=2, day=30)
    with pytest.raises(ValueError):
        actual_time_zone(moment, "Europe/Amsterdam")