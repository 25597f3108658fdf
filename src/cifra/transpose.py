"""Chord transposition.

Roots are looked up in a sharp-spelled chromatic scale anchored at C. Flat
spellings ("Db", "Bb") and other roots outside that scale are left as they
are: a symbol that can't be looked up is returned unchanged.
"""

import re
from dataclasses import replace

from .chords import find_chords, split_chord
from .models import ParsedSheet
from .parser import is_inline

CHROMATIC_SCALE = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

_BRACKET_RE = re.compile(r"\[([^\]]*)\]")


def transpose(symbol: str, steps: int) -> str:
    """Shift *symbol* by *steps* semitones, keeping its suffix.

    >>> transpose("Am", 3)
    'Cm'
    >>> transpose("G", -2)
    'F'
    """
    note, rest = split_chord(symbol)
    if note not in CHROMATIC_SCALE:
        return symbol
    index = CHROMATIC_SCALE.index(note)
    return CHROMATIC_SCALE[(index + steps) % 12] + rest


def _transpose_chords(text: str, steps: int) -> str:
    parts: list[str] = []
    cursor = 0
    for start, end, _ in find_chords(text):
        parts.append(text[cursor:start])
        parts.append(transpose(text[start:end], steps))
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def transpose_all(text: str, steps: int) -> str:
    """Transpose every chord in *text*, leaving the rest as is.

    Text with inline chords ("[C]E eu a terra") only has its brackets
    rewritten; lyric words that happen to be note names stay put. Any other
    text is treated as chord lines.
    """
    if is_inline(text):
        return _BRACKET_RE.sub(lambda m: f"[{_transpose_chords(m.group(1), steps)}]", text)
    return _transpose_chords(text, steps)


def transpose_sheet(sheet: ParsedSheet, steps: int) -> ParsedSheet:
    """Return a copy of *sheet* with every token chord transposed."""
    if steps % 12 == 0:
        return sheet
    sections = tuple(
        replace(
            section,
            tokens=tuple(
                replace(token, chord=_transpose_chords(token.chord, steps)) if token.chord else token
                for token in section.tokens
            ),
        )
        for section in sheet.sections
    )
    return ParsedSheet(sections=sections)
