from cifra.models import Song
from cifra.parser import parse
from cifra.plaintext import PlainTextFormatter, render_section


def _song(**kwargs) -> Song:
    defaults = dict(title="Asa Branca", artist="Luiz Gonzaga", lyrics="[C]Hello [G]world")
    defaults.update(kwargs)
    return Song(**defaults)


# ---------------------------------------------------------------------------
# render_section
# ---------------------------------------------------------------------------


def test_chords_above_words():
    lines, next_index = render_section(parse("[C]Hello [G]world", "").sections[0], 0, None)
    assert lines == ["C     G", "Hello world"]
    assert next_index == 2


def test_chord_mid_line():
    lines, _ = render_section(parse("I [D]pulled", "").sections[0], 0, None)
    assert lines == ["  D", "I pulled"]


def test_labels_pushed_apart():
    lines, _ = render_section(parse("[Cmaj7]a [G]b", "").sections[0], 0, None)
    assert lines == ["Cmaj7 G", "a b"]


def test_section_without_chords_is_lyric_only():
    lines, next_index = render_section(parse("just words", "").sections[0], 5, None)
    assert lines == ["just words"]
    assert next_index == 5


def test_current_chord_marked():
    lines, _ = render_section(parse("[C]Hello [G]world", "").sections[0], 3, 4)
    assert lines[0] == "C     *G*"


# ---------------------------------------------------------------------------
# PlainTextFormatter
# ---------------------------------------------------------------------------


def test_header():
    out = PlainTextFormatter().render(_song(key="C", capo=3))
    assert out.startswith("Asa Branca - Luiz Gonzaga\nKey: C\nCapo: 3\n")


def test_header_without_artist():
    out = PlainTextFormatter().render(_song(artist=""))
    assert out.startswith("Asa Branca\n")


def test_transposed_output():
    out = PlainTextFormatter().render(_song(transpose=2, key="C"))
    assert "Key: D" in out
    assert "D     A\nHello world" in out


def test_current_index_counts_across_sections():
    song = _song(lyrics="[C]one [D]two\n[E]three")
    out = PlainTextFormatter().render(song, current=2)
    assert "*E*" in out
    assert "*C*" not in out


def test_blank_line_between_section_types():
    song = _song(lyrics="[C]one\n[D]Refrão two")
    out = PlainTextFormatter().render(song)
    assert "one\n\nD" in out


def test_ends_with_newline():
    assert PlainTextFormatter().render(_song()).endswith("\n")
