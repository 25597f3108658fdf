"""Plain-text formatter: chords printed above the words they belong to.

Example::

    C     G
    Hello world

The chord at the current highlight position is wrapped in asterisks
(``*G*``). Chord labels never touch: a label that would overlap the previous
one is pushed right.
"""

from itertools import groupby

from .chordpro import song_key, song_sheet
from .models import Section, Song


class PlainTextFormatter:
    """Render a :class:`~cifra.models.Song` as chords-over-lyrics text."""

    def render(self, song: Song, current: int | None = None) -> str:
        """Return the song as text, marking global chord number *current*."""
        header = song.title
        if song.artist:
            header += f" - {song.artist}"
        parts: list[str] = [header]
        key = song_key(song)
        if key:
            parts.append(f"Key: {key}")
        if song.capo:
            parts.append(f"Capo: {song.capo}")

        index = 0
        for _, run in groupby(song_sheet(song).sections, key=lambda s: s.type):
            parts.append("")
            for section in run:
                lines, index = render_section(section, index, current)
                parts.extend(lines)

        return "\n".join(parts) + "\n"


def render_section(section: Section, first_index: int, current: int | None) -> tuple[list[str], int]:
    """Render one section as a chord line (if it has chords) and a lyric line.

    *first_index* is the global number of the section's first chord. Returns
    the lines and the global number of the next chord.
    """
    chord_line = ""
    lyric_line = ""
    index = first_index
    for token in section.tokens:
        if token.chord:
            label = f"*{token.chord}*" if index == current else token.chord
            column = len(lyric_line)
            if chord_line:
                column = max(column, len(chord_line) + 1)
            chord_line = chord_line.ljust(column) + label
            index += 1
        lyric_line += token.text

    lines = [chord_line] if chord_line else []
    lines.append(lyric_line.rstrip())
    return lines, index
