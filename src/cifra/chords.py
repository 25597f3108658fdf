"""Chord-symbol grammar.

A chord symbol is scanned in three states::

    ROOT        one of A B C D E F G
    ACCIDENTAL  optional "#" or "b"
    SUFFIX      zero or more quality tokens (maj, min, dim, aug, sus, add, m)
                or digit runs, e.g. "m7", "maj7", "sus4", "add9", "7sus4"

Only ROOT + ACCIDENTAL take part in transposition; the suffix (and anything
after it, like a slash bass) is carried through unchanged.

Cifra notation adds extensions the grammar above doesn't spell out: "7M"
(major seventh), "º" (diminished), "m7b5", "7+", "7#9". Inside free text
these ride along as an EXTENSION tail of the suffix, so "C7M" is one chord.

Two entry points:

  scan_chord()  - match a chord at a fixed position, no context checks
  find_chords() - every chord-shaped word in free text, left to right
"""

from collections.abc import Iterator

from .models import ChordSymbol

ROOTS = "ABCDEFG"
ACCIDENTALS = "#b"

# Longest first: "maj" must win over "m".
QUALITY_TOKENS = ("maj", "min", "dim", "aug", "sus", "add", "m")

# Characters allowed after the grammar match, before the chord word ends.
EXTENSION_CHARS = "0123456789#bM+º°øΔ"


def scan_chord(text: str, pos: int = 0) -> tuple[ChordSymbol, int] | None:
    """Scan a chord symbol starting exactly at *pos*.

    Returns ``(symbol, end)`` where *end* is the index just past the match,
    or ``None`` when *text[pos]* is not a root note.
    """
    if pos >= len(text) or text[pos] not in ROOTS:
        return None
    root = text[pos]
    i = pos + 1

    accidental = ""
    if i < len(text) and text[i] in ACCIDENTALS:
        accidental = text[i]
        i += 1

    suffix_start = i
    while i < len(text):
        if text[i].isdigit():
            while i < len(text) and text[i].isdigit():
                i += 1
            continue
        for quality in QUALITY_TOKENS:
            if text.startswith(quality, i):
                i += len(quality)
                break
        else:
            break

    return ChordSymbol(root, accidental, text[suffix_start:i]), i


def split_chord(symbol: str) -> tuple[str, str]:
    """Split *symbol* into ``(root + accidental, rest)``.

    Everything after the accidental, slash basses included, is the rest.
    Returns ``("", symbol)`` when the symbol does not start with a root note.
    """
    scanned = scan_chord(symbol)
    if scanned is None:
        return "", symbol
    chord, _ = scanned
    return chord.note, symbol[len(chord.note):]


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def find_chords(text: str) -> Iterator[tuple[int, int, ChordSymbol]]:
    """Yield ``(start, end, symbol)`` for each chord-shaped word in *text*.

    A chord starts at a root note with no letter or digit before it. After
    the grammar match, any EXTENSION_CHARS are taken into the suffix
    ("C7M", "Bº", "F#m7b5"); the chord must then end the word. Lyric words
    such as "Dark" or "Eu" are skipped while "[Am]", "G/B" and "C#m7(9)" are
    found. Matches never overlap.
    """
    i = 0
    while i < len(text):
        if text[i] in ROOTS and (i == 0 or not _is_word_char(text[i - 1])):
            scanned = scan_chord(text, i)
            if scanned is not None:
                chord, end = scanned
                tail_start = end
                while end < len(text) and text[end] in EXTENSION_CHARS:
                    end += 1
                if end == len(text) or not _is_word_char(text[end]):
                    if end > tail_start:
                        chord = ChordSymbol(chord.root, chord.accidental, chord.suffix + text[tail_start:end])
                    yield i, end, chord
                    i = end
                    continue
        i += 1


def match_chord(text: str) -> ChordSymbol | None:
    """Return the chord if all of *text* is exactly one chord symbol."""
    scanned = scan_chord(text)
    if scanned is None or scanned[1] != len(text):
        return None
    return scanned[0]
