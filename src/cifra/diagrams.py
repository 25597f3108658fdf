"""Chord fingering lookup and text diagrams.

Shapes are listed low string to high string (E A D G B e). A fret of -1
means the string is not played, 0 an open string; a finger of 0 means no
finger. Only guitar shapes are known so far; the other instruments look up
to nothing.

Example::

    >>> print(render_diagram("Am"))
    Am
    x o       o
    ===========
    | | | | 1 |
    | | 2 3 | |
    | | | | | |
    | | | | | |
    | | | | | |
"""

from dataclasses import dataclass

INSTRUMENTS = ("guitar", "ukulele", "piano")
FRET_COUNT = 5


@dataclass(frozen=True)
class ChordShape:
    frets: tuple[int, ...]
    fingers: tuple[int, ...]


CHORD_SHAPES: dict[str, dict[str, ChordShape]] = {
    "guitar": {
        "C": ChordShape((-1, 3, 2, 0, 1, 0), (0, 3, 2, 0, 1, 0)),
        "D": ChordShape((-1, -1, 0, 2, 3, 2), (0, 0, 0, 1, 3, 2)),
        "E": ChordShape((0, 2, 2, 1, 0, 0), (0, 2, 3, 1, 0, 0)),
        "F": ChordShape((1, 3, 3, 2, 1, 1), (1, 3, 4, 2, 1, 1)),
        "G": ChordShape((3, 2, 0, 0, 0, 3), (2, 1, 0, 0, 0, 3)),
        "A": ChordShape((-1, 0, 2, 2, 2, 0), (0, 0, 1, 2, 3, 0)),
        "B": ChordShape((-1, 2, 4, 4, 4, 2), (0, 1, 2, 3, 4, 1)),
        "Am": ChordShape((-1, 0, 2, 2, 1, 0), (0, 0, 2, 3, 1, 0)),
        "Dm": ChordShape((-1, -1, 0, 2, 3, 1), (0, 0, 0, 2, 3, 1)),
        "Em": ChordShape((0, 2, 2, 0, 0, 0), (0, 2, 3, 0, 0, 0)),
        "Fm": ChordShape((1, 3, 3, 1, 1, 1), (1, 3, 4, 1, 1, 1)),
        "Gm": ChordShape((3, 5, 5, 3, 3, 3), (1, 3, 4, 1, 1, 1)),
    },
    "ukulele": {},
    "piano": {},
}


def lookup_shape(chord: str, instrument: str = "guitar") -> ChordShape | None:
    """Return the fingering for *chord*, or ``None`` if there isn't one."""
    return CHORD_SHAPES.get(instrument, {}).get(chord)


def render_diagram(chord: str, instrument: str = "guitar") -> str:
    """Draw *chord* as a fretboard grid: markers, nut, then one row per fret.

    Unknown chords get a one-line "no diagram" note instead of a grid.
    """
    shape = lookup_shape(chord, instrument)
    if shape is None:
        return f"{chord}\n(no {instrument} diagram)"

    markers = " ".join("x" if fret < 0 else "o" if fret == 0 else " " for fret in shape.frets)
    lines = [chord, markers.rstrip(), "=" * (2 * len(shape.frets) - 1)]
    for row in range(1, FRET_COUNT + 1):
        lines.append(" ".join(
            str(finger) if fret == row else "|" for fret, finger in zip(shape.frets, shape.fingers)
        ))
    return "\n".join(lines)
