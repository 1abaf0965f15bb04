from collections import Counter

import pytest

from enigma_research.calendar_checks import day_fits_in_month
from enigma_research.controlgroup import (
    DateTimeHms,
    StandardInputItem,
    create_control_data,
    create_multiple_control_data,
)


@pytest.fixture
def input_items():
    raw = [
        (1953, 1, 29, 8, 37, 30, 0.0, 52.2, 6.9),
        (1960, 4, 12, 14, 5, 0, 1.0, 48.8, 2.3),
        (1971, 7, 3, 23, 59, 59, 0.0, -33.9, 151.2),
        (1984, 11, 20, 0, 0, 10, 1.0, 40.7, -74.0),
        (1999, 2, 15, 6, 30, 45, 0.0, 35.7, 139.7),
    ]
    return [
        StandardInputItem(
            id=str(index),
            name=f"Item {index}",
            geo_longitude=lon,
            geo_latitude=lat,
            date_time=DateTimeHms(
                year=y, month=m, day=d, hour=h, minute=mi, second=s, dst=dst, tzone=1.0
            ),
        )
        for index, (y, m, d, h, mi, s, dst, lat, lon) in enumerate(raw)
    ]


def _field_counter(items, getter):
    return Counter(getter(item) for item in items)


def test_control_data_preserves_field_values(input_items):
    result = create_control_data(input_items, 0)
    assert len(result) == len(input_items)
    getters = [
        lambda i: i.date_time.year,
        lambda i: i.date_time.day,
        lambda i: i.date_time.hour,
        lambda i: i.date_time.minute,
        lambda i: i.date_time.second,
        lambda i: i.date_time.dst,
        lambda i: i.geo_latitude,
        lambda i: i.geo_longitude,
    ]
    for getter in getters:
        assert _field_counter(result, getter) == _field_counter(input_items, getter)


def test_control_data_months_come_from_input_and_fit(input_items):
    result = create_control_data(input_items, 0)
    input_months = _field_counter(input_items, lambda i: i.date_time.month)
    result_months = _field_counter(
        [i for i in result if i.date_time.month != 0], lambda i: i.date_time.month
    )
    assert not result_months - input_months
    for item in result:
        dt = item.date_time
        if dt.month != 0:
            assert day_fits_in_month(dt.day, dt.month, dt.year)


def test_control_data_with_short_days_uses_all_months():
    items = [
        StandardInputItem(
            id=str(n),
            name=str(n),
            geo_longitude=float(n),
            geo_latitude=float(n),
            date_time=DateTimeHms(year=2000 + n, month=n + 1, day=n + 1),
        )
        for n in range(6)
    ]
    result = create_control_data(items, 3)
    assert sorted(i.date_time.month for i in result) == [1, 2, 3, 4, 5, 6]


def test_control_data_ids_and_names(input_items):
    result = create_control_data(input_items, 2)
    assert [item.id for item in result] == [f"2-{n}" for n in range(len(input_items))]
    assert result[0].name == "Controldata 2-0"


def test_control_data_zone_offset_not_copied(input_items):
    result = create_control_data(input_items, 0)
    assert all(item.date_time.tzone == 0.0 for item in result)


def test_control_data_empty_input():
    assert create_control_data([], 0) == []


def test_multiple_control_data(input_items):
    result = create_multiple_control_data(input_items, 3)
    assert len(result) == 3 * len(input_items)
    ids = [item.id for item in result]
    assert len(set(ids)) == len(ids)
    assert [item.id.split("-")[0] for item in result] == [
        str(seq) for seq in range(3) for _ in input_items
    ]


def test_multiple_control_data_zero_multiplicity(input_items):
    assert create_multiple_control_data(input_items, 0) == []