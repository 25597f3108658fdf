import math

import pytest

from cifra.highlight import current_chord_index, iter_chords, locate_chord, progress_ratio
from cifra.models import ParsedSheet
from cifra.parser import parse


@pytest.fixture
def sheet() -> ParsedSheet:
    # Four chords over three sections; the second section has none.
    return parse("[C]Hello [G]world\nno chords here\n[Am]Refrão [F]sing", "")


@pytest.fixture
def empty_sheet() -> ParsedSheet:
    return parse("no chords\nat all", "")


# ---------------------------------------------------------------------------
# current_chord_index
# ---------------------------------------------------------------------------


def test_index_at_start(sheet):
    assert current_chord_index(sheet, 0.0) == 0


def test_index_near_end(sheet):
    assert current_chord_index(sheet, 0.99) == 3


def test_index_at_end_is_clamped(sheet):
    assert current_chord_index(sheet, 1.0) == 3


def test_index_proportional(sheet):
    assert current_chord_index(sheet, 0.25) == 1
    assert current_chord_index(sheet, 0.5) == 2
    assert current_chord_index(sheet, 0.74) == 2


def test_index_out_of_range_ratio_clamped(sheet):
    assert current_chord_index(sheet, -0.5) == 0
    assert current_chord_index(sheet, 7.0) == 3
    assert current_chord_index(sheet, math.inf) == 3


def test_index_nan_ratio(sheet):
    assert current_chord_index(sheet, math.nan) == 0


def test_no_chords_gives_minus_one(empty_sheet):
    for ratio in (0.0, 0.5, 1.0, 3.0):
        assert current_chord_index(empty_sheet, ratio) == -1


def test_index_is_monotonic(sheet):
    indexes = [current_chord_index(sheet, step / 100) for step in range(101)]
    assert indexes == sorted(indexes)
    assert all(0 <= i <= 3 for i in indexes)


# ---------------------------------------------------------------------------
# progress_ratio
# ---------------------------------------------------------------------------


def test_progress_ratio():
    assert progress_ratio(30.0, 120.0) == 0.25


def test_progress_ratio_zero_duration():
    assert progress_ratio(10.0, 0.0) == 0.0
    assert progress_ratio(10.0, -1.0) == 0.0
    assert progress_ratio(10.0, math.nan) == 0.0


def test_progress_ratio_clamped():
    assert progress_ratio(200.0, 120.0) == 1.0
    assert progress_ratio(-5.0, 120.0) == 0.0


# ---------------------------------------------------------------------------
# iter_chords / locate_chord
# ---------------------------------------------------------------------------


def test_iter_chords_reading_order(sheet):
    assert [(s, t, tok.chord) for s, t, tok in iter_chords(sheet)] == [
        (0, 0, "C"), (0, 2, "G"), (2, 0, "Am"), (2, 2, "F"),
    ]


def test_locate_chord(sheet):
    assert locate_chord(sheet, 0) == (0, 0)
    assert locate_chord(sheet, 2) == (2, 0)
    assert locate_chord(sheet, 3) == (2, 2)


def test_locate_chord_out_of_range(sheet, empty_sheet):
    assert locate_chord(sheet, 4) is None
    assert locate_chord(sheet, -1) is None
    assert locate_chord(empty_sheet, 0) is None


def test_locate_matches_current_index(sheet):
    index = current_chord_index(sheet, 0.6)
    s, t = locate_chord(sheet, index)
    assert sheet.sections[s].tokens[t].chord == "Am"
