import pytest

from enigma_research.oblique import (
    CelestialPosition,
    is_rising,
    oblique_longitude,
    oblique_longitudes,
    south_point,
)


def test_oblique_longitudes():
    points = [
        CelestialPosition(point=0, longitude=232.42300189310427, latitude=-9.592715239942409e-05),
        CelestialPosition(point=2, longitude=30.43675414259534, latitude=-0.4161709354253986),
        CelestialPosition(point=9, longitude=136.5627442049836, latitude=7.557009105978577),
    ]
    expected_long = [232.42290213148797, 30.744547179416834, 130.33001057246562]
    expected_lat = [-9.592715239942409e-05, -0.4161709354253986, 7.557009105978577]

    result = oblique_longitudes(points, 12.356358154336363, 23.448018383804666, 51.5, 0.0)

    assert len(result) == 3
    for item, lon, lat in zip(result, expected_long, expected_lat):
        assert abs(item.longitude - lon) < 1e-8
        assert abs(item.latitude - lat) < 1e-8
    assert [item.point for item in result] == [0, 2, 9]


def test_oblique_longitudes_keeps_other_fields():
    points = [
        CelestialPosition(point=4, longitude=100.0, latitude=1.0, longitude_speed=0.5, distance=2.0)
    ]
    result = oblique_longitudes(points, 12.0, 23.44, 51.5, 0.0)
    assert result[0].longitude_speed == 0.5
    assert result[0].distance == 2.0
    assert points[0].longitude == 100.0


def test_oblique_longitudes_empty():
    assert oblique_longitudes([], 12.0, 23.44, 51.5, 0.0) == []


def test_south_point_happy_flow():
    long_sp, lat_sp = south_point(331.883333333333, 23.449614320676233, 48.8333333333333)
    assert long_sp == pytest.approx(318.50043580207006, abs=1e-3)
    assert lat_sp == pytest.approx(-27.562090280566338, abs=1e-3)


def test_south_point_southern_hemisphere():
    long_sp, lat_sp = south_point(331.883333333333, 23.449614320676233, -48.8333333333333)
    assert long_sp == pytest.approx(174.53494810489755, abs=1e-3)
    assert lat_sp == pytest.approx(-48.16467239725159, abs=1e-3)


@pytest.mark.parametrize(
    "long_sp, long_pl, expected",
    [
        (10.0, 100.0, True),
        (100.0, 10.0, False),
        (350.0, 10.0, True),
        (10.0, 190.0, False),
    ],
)
def test_is_rising(long_sp, long_pl, expected):
    assert is_rising(long_sp, long_pl) is expected


def test_oblique_longitude_zero_latitude_is_unchanged():
    result = oblique_longitude(34.959957039085296, 0.0, 0.0, 100.0, -30.0)
    assert result == pytest.approx(34.959957039085296, abs=1e-8)


def test_oblique_longitude_in_range():
    result = oblique_longitude(359.9, 5.0, 0.0, 200.0, -30.0)
    assert 0.0 <= result < 360.0