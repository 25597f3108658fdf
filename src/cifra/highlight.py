"""Map audio playback progress onto the chords of a parsed sheet.

Chords are numbered globally in reading order: section by section, then
token by token inside a section. That number is the only link between the
audio position and the chord drawn as "current", so both directions
(:func:`current_chord_index` and :func:`locate_chord`) walk the sheet the
same way through :func:`iter_chords`.
"""

import math
from collections.abc import Iterator

from .models import ParsedSheet, Token


def iter_chords(sheet: ParsedSheet) -> Iterator[tuple[int, int, Token]]:
    """Yield ``(section_index, token_index, token)`` for every chord token."""
    for s, section in enumerate(sheet.sections):
        for t, token in enumerate(section.tokens):
            if token.chord:
                yield s, t, token


def progress_ratio(current_time: float, duration: float) -> float:
    """Elapsed fraction of the track, 0.0 when the duration is unknown."""
    if not duration > 0 or math.isnan(current_time):
        return 0.0
    return min(max(current_time / duration, 0.0), 1.0)


def current_chord_index(sheet: ParsedSheet, progress: float) -> int:
    """Return the global index of the chord to highlight at *progress*.

    *progress* is elapsed/total playback time. The result is
    ``floor(progress * total)`` clamped to the valid range, or -1 when the
    sheet has no chords at all.
    """
    total = sheet.chord_count
    if total == 0:
        return -1
    if math.isnan(progress):
        return 0
    progress = min(max(progress, 0.0), 1.0)
    return min(math.floor(progress * total), total - 1)


def locate_chord(sheet: ParsedSheet, index: int) -> tuple[int, int] | None:
    """Return ``(section_index, token_index)`` of chord number *index*."""
    if index < 0:
        return None
    for n, (s, t, _) in enumerate(iter_chords(sheet)):
        if n == index:
            return s, t
    return None
