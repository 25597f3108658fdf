"""Chord-sheet parser: raw song text -> :class:`~cifra.models.ParsedSheet`.

Two input shapes are accepted:

  "inline"     - chords embedded in the lyrics: "[C]Hello [G]world"
  "line-pair"  - lyrics and chords as two parallel texts, line N of the
                 chords text holding the chords for line N of the lyrics

The parser never raises. Irregular input (an unmatched "[", more chords than
words, more words than chords) loses the chords it can't place and keeps
the rest.
"""

import logging
import re
from functools import lru_cache

from .chords import find_chords
from .models import ParsedSheet, Section, SectionType, Token

logger = logging.getLogger(__name__)

# Checked in order against the lower-cased source line; first hit wins.
SECTION_KEYWORDS: list[tuple[str, SectionType]] = [
    ("refrão", SectionType.CHORUS),
    ("chorus", SectionType.CHORUS),
    ("ponte", SectionType.BRIDGE),
    ("bridge", SectionType.BRIDGE),
]

_WHITESPACE_RE = re.compile(r"(\s+)")


def classify_section(line: str) -> SectionType:
    """Guess the section type of a source line from the keywords it contains."""
    lowered = line.lower()
    for keyword, section_type in SECTION_KEYWORDS:
        if keyword in lowered:
            return section_type
    return SectionType.VERSE


def split_words(text: str) -> list[str]:
    """Split *text* into words and whitespace runs, keeping both.

    >>> split_words("Hello  world")
    ['Hello', '  ', 'world']
    """
    return [part for part in _WHITESPACE_RE.split(text) if part]


def is_inline(lyrics: str) -> bool:
    """True when *lyrics* carries its own bracketed chords."""
    return "[" in lyrics and "]" in lyrics


@lru_cache(maxsize=128)
def parse(lyrics: str, chords: str = "") -> ParsedSheet:
    """Parse a song into sections of (word, chord) tokens.

    If *lyrics* contains both "[" and "]" it is parsed in inline mode and
    *chords* is ignored. Otherwise the two texts are paired line by line.
    """
    if is_inline(lyrics):
        logger.debug("Parsing %d chars of lyrics with inline chords", len(lyrics))
        sections = _parse_inline(lyrics)
    else:
        logger.debug("Parsing lyrics and chords as line pairs")
        sections = _parse_line_pairs(lyrics, chords)
    return ParsedSheet(sections=tuple(sections))


# ---------------------------------------------------------------------------
# Inline mode
# ---------------------------------------------------------------------------


def _parse_inline(text: str) -> list[Section]:
    sections: list[Section] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        tokens = _tokenize_inline(line)
        if tokens:
            sections.append(Section(type=classify_section(line), tokens=tuple(tokens)))
    return sections


def _tokenize_inline(line: str) -> list[Token]:
    """Tokenize one line, attaching each [chord] to the word that follows it.

    A chord with no word before the next chord (or the end of the line) is
    dropped. An "[" without a closing "]" ends the line: everything from the
    whitespace before it onwards is discarded.
    """
    tokens: list[Token] = []
    pending: str | None = None
    cursor = 0

    def emit(plain: str) -> None:
        nonlocal pending
        # A whitespace-only run between chords has no word to carry a chord.
        if not plain.strip():
            return
        for word in split_words(plain):
            if pending and not word.isspace():
                tokens.append(Token(word, pending))
                pending = None
            else:
                tokens.append(Token(word))

    while True:
        start = line.find("[", cursor)
        if start == -1:
            emit(line[cursor:])
            break
        end = line.find("]", start)
        if end == -1:
            logger.debug("Unmatched '[' at column %d, dropping %r", start, line[start:])
            emit(line[cursor:start].rstrip())
            break
        emit(line[cursor:start])
        pending = line[start + 1 : end] or None
        cursor = end + 1

    return tokens


# ---------------------------------------------------------------------------
# Line-pair mode
# ---------------------------------------------------------------------------


def _parse_line_pairs(lyrics: str, chords: str) -> list[Section]:
    lyric_lines = lyrics.splitlines()
    chord_lines = chords.splitlines()
    sections: list[Section] = []

    for i in range(max(len(lyric_lines), len(chord_lines))):
        lyric = lyric_lines[i] if i < len(lyric_lines) else ""
        chord_line = chord_lines[i] if i < len(chord_lines) else ""
        if not lyric.strip() and not chord_line.strip():
            continue

        section_type = classify_section(lyric) if lyric.strip() else SectionType.VERSE
        candidates = [str(chord) for _, _, chord in find_chords(chord_line)]
        sections.append(Section(type=section_type, tokens=tuple(_pair_tokens(lyric, candidates))))

    return sections


def _pair_tokens(lyric: str, candidates: list[str]) -> list[Token]:
    """Give the Nth word of *lyric* the Nth chord; extra chords are dropped."""
    words = split_words(lyric)
    if not words:
        # Chord-only line: keep a single empty token so the section isn't empty.
        words = [""]

    tokens: list[Token] = []
    remaining = iter(candidates)
    for word in words:
        if word and not word.isspace():
            tokens.append(Token(word, next(remaining, None)))
        else:
            tokens.append(Token(word))

    unused = sum(1 for _ in remaining)
    if unused:
        logger.debug("Discarding %d chord(s) with no word on line %r", unused, lyric)
    return tokens
