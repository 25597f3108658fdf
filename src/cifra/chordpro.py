"""ChordPro formatter.

Renders a :class:`~cifra.models.Song` to ChordPro (``.cho``) text.

Section type -> ChordPro directive mapping
------------------------------------------

+-------------+---------------------------------------------------+
| Type        | Directive pair                                    |
+=============+===================================================+
| ``verse``   | ``{start_of_verse}`` / ``{end_of_verse}``         |
+-------------+---------------------------------------------------+
| ``chorus``  | ``{start_of_chorus}`` / ``{end_of_chorus}``       |
+-------------+---------------------------------------------------+
| ``bridge``  | ``{start_of_bridge}`` / ``{end_of_bridge}``       |
+-------------+---------------------------------------------------+

Every parsed section is one line; runs of consecutive sections of the same
type share one directive block.

Usage::

    from cifra.chordpro import ChordProFormatter
    text = ChordProFormatter().render(song)
    Path("output.cho").write_text(text)
"""

from itertools import groupby

from .models import ParsedSheet, Section, SectionType, Song
from .parser import parse
from .transpose import transpose, transpose_sheet

_DIRECTIVES = {
    SectionType.VERSE: ("start_of_verse", "end_of_verse"),
    SectionType.CHORUS: ("start_of_chorus", "end_of_chorus"),
    SectionType.BRIDGE: ("start_of_bridge", "end_of_bridge"),
}


def song_sheet(song: Song) -> ParsedSheet:
    """Parse *song* and apply its transposition."""
    return transpose_sheet(parse(song.lyrics, song.chords), song.transpose)


def song_key(song: Song) -> str | None:
    """The key the song is shown in, after transposition."""
    if not song.key:
        return None
    return transpose(song.key, song.transpose)


class ChordProFormatter:
    """Render a :class:`~cifra.models.Song` to ChordPro text."""

    def render(self, song: Song) -> str:
        """Return ChordPro text for *song*.

        The returned string ends with a single newline and uses Unix line
        endings (``\\n``) throughout.
        """
        parts: list[str] = []

        # --- Metadata block ---
        parts.append(f"{{title: {song.title}}}")
        if song.artist:
            parts.append(f"{{artist: {song.artist}}}")
        key = song_key(song)
        if key:
            parts.append(f"{{key: {key}}}")
        if song.capo:
            parts.append(f"{{capo: {song.capo}}}")

        # --- Section blocks ---
        for section_type, run in groupby(song_sheet(song).sections, key=lambda s: s.type):
            parts.append("")  # blank line before every block
            start_dir, end_dir = _DIRECTIVES[section_type]
            parts.append(f"{{{start_dir}}}")
            parts.extend(render_line(section) for section in run)
            parts.append(f"{{{end_dir}}}")

        return "\n".join(parts) + "\n"


def render_line(section: Section) -> str:
    """Return one section as a line with its chords inline: ``[C]Hello [G]world``."""
    return "".join(
        f"[{token.chord}]{token.text}" if token.chord else token.text for token in section.tokens
    )
