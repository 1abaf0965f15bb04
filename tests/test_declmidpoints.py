import pytest

from enigma_research.declmidpoints import calc_decl_midpoints
from enigma_research.positions import SinglePosition


def test_calc_decl_midpoints_happy_flow():
    positions = [
        SinglePosition(1, 12.0),
        SinglePosition(2, 4.0),
        SinglePosition(4, 8.1),
        SinglePosition(7, -6.0),
        SinglePosition(8, 3.3),
    ]
    expected = [
        (1, 12.0, 2, 4.0, 4, 8.1, 0.1, 0.9),
        (1, 12.0, 7, -6.0, 2, 4.0, 1.0, 0.0),
        (1, 12.0, 7, -6.0, 8, 3.3, 0.3, 0.7),
        (1, 12.0, 8, 3.3, 4, 8.1, 0.45, 0.55),
        (2, 4.0, 8, 3.3, 2, 4.0, 0.35, 0.65),
        (2, 4.0, 8, 3.3, 8, 3.3, 0.35, 0.65),
    ]
    result = calc_decl_midpoints(positions, 1.0)
    assert len(result) == len(expected)
    for actual, (id1, pos1, id2, pos2, focus_id, focus_pos, orb, exactness) in zip(
        result, expected
    ):
        assert actual.base_pos1.id == id1
        assert actual.base_pos1.position == pytest.approx(pos1, abs=1e-8)
        assert actual.base_pos2.id == id2
        assert actual.base_pos2.position == pytest.approx(pos2, abs=1e-8)
        assert actual.focus_point.id == focus_id
        assert actual.focus_point.position == pytest.approx(focus_pos, abs=1e-8)
        assert actual.orb == pytest.approx(orb, abs=1e-8)
        assert actual.exactness == pytest.approx(exactness, abs=1e-8)


def test_calc_decl_midpoints_no_match():
    positions = [SinglePosition(1, 20.0), SinglePosition(2, 10.0)]
    assert calc_decl_midpoints(positions, 1.0) == []


def test_calc_decl_midpoints_rejects_non_positive_orb():
    with pytest.raises(ValueError):
        calc_decl_midpoints([SinglePosition(1, 1.0)], 0.0)