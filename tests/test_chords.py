from cifra.chords import find_chords, match_chord, scan_chord, split_chord
from cifra.models import ChordSymbol


def _found(text: str) -> list[str]:
    return [str(chord) for _, _, chord in find_chords(text)]


# ---------------------------------------------------------------------------
# scan_chord
# ---------------------------------------------------------------------------


def test_scan_plain_root():
    assert scan_chord("C") == (ChordSymbol("C"), 1)


def test_scan_sharp_minor_seventh():
    assert scan_chord("F#m7") == (ChordSymbol("F", "#", "m7"), 4)


def test_scan_flat_root():
    assert scan_chord("Bb") == (ChordSymbol("B", "b"), 2)


def test_scan_prefers_maj_over_m():
    chord, end = scan_chord("Cmaj7")
    assert chord.suffix == "maj7"
    assert end == 5


def test_scan_compound_suffix():
    assert scan_chord("G7sus4")[0].suffix == "7sus4"
    assert scan_chord("Cadd9")[0].suffix == "add9"
    assert scan_chord("Bdim")[0].suffix == "dim"
    assert scan_chord("Eaug")[0].suffix == "aug"


def test_scan_stops_at_slash():
    chord, end = scan_chord("G/B")
    assert chord == ChordSymbol("G")
    assert end == 1


def test_scan_at_offset():
    assert scan_chord("xx Am", 3) == (ChordSymbol("A", "", "m"), 5)


def test_scan_rejects_non_root():
    assert scan_chord("Hello") is None
    assert scan_chord("am") is None
    assert scan_chord("") is None
    assert scan_chord("C", 5) is None


# ---------------------------------------------------------------------------
# split_chord / match_chord
# ---------------------------------------------------------------------------


def test_split_chord_keeps_slash_bass_in_rest():
    assert split_chord("C#m7/G#") == ("C#", "m7/G#")


def test_split_chord_unrecognised():
    assert split_chord("N.C.") == ("", "N.C.")


def test_match_chord_whole_string_only():
    assert match_chord("Am7") == ChordSymbol("A", "", "m7")
    assert match_chord("Am7/G") is None
    assert match_chord("Dark") is None


# ---------------------------------------------------------------------------
# find_chords
# ---------------------------------------------------------------------------


def test_find_chords_spaced_line():
    assert _found("C   G   Am  F") == ["C", "G", "Am", "F"]


def test_find_chords_offsets():
    assert [(s, e) for s, e, _ in find_chords("  D  Em7")] == [(2, 3), (5, 8)]


def test_find_chords_skips_lyric_words():
    assert _found("Dark star crashes") == []
    assert _found("Bad Date") == []


def test_find_chords_bracketed_and_slash():
    assert _found("[Am]Hello [G/B]world") == ["Am", "G", "B"]


def test_find_chords_with_parenthesised_extension():
    assert _found("C#m7(9)") == ["C#m7"]


def test_find_chords_empty():
    assert _found("") == []
    assert _found("    ") == []


def test_find_chords_keeps_cifra_extensions():
    assert _found("C7M  Bº  F#m7b5") == ["C7M", "Bº", "F#m7b5"]
    assert _found("A7+  E7#9  G°") == ["A7+", "E7#9", "G°"]


def test_find_chords_extension_is_suffix():
    [(_, _, chord)] = list(find_chords("F#m7b5"))
    assert chord == ChordSymbol("F", "#", "m7b5")


def test_find_chords_skips_portuguese_words_starting_with_notes():
    assert _found("Eu Amo Dó Bela") == []
