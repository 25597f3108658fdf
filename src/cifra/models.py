from dataclasses import dataclass
from enum import Enum


class SectionType(str, Enum):
    VERSE = "verse"
    CHORUS = "chorus"
    BRIDGE = "bridge"


@dataclass(frozen=True)
class ChordSymbol:
    """A chord split into the part that transposes and the part that doesn't.

    Example: "F#m7" -> root "F", accidental "#", suffix "m7".
    """

    root: str
    accidental: str = ""
    suffix: str = ""

    @property
    def note(self) -> str:
        """Root plus accidental, e.g. "F#"."""
        return self.root + self.accidental

    def __str__(self) -> str:
        return self.note + self.suffix


@dataclass(frozen=True)
class Token:
    """A verbatim run of source text, either a word or a whitespace run.

    Only word tokens may carry a chord: the chord played on that word.
    """

    text: str
    chord: str | None = None

    @property
    def is_space(self) -> bool:
        return self.text.isspace()


@dataclass(frozen=True)
class Section:
    """One parsed line of a song, classified as verse, chorus or bridge."""

    type: SectionType
    tokens: tuple[Token, ...] = ()

    @property
    def text(self) -> str:
        """The lyric text of the line, chords removed."""
        return "".join(token.text for token in self.tokens)


@dataclass(frozen=True)
class ParsedSheet:
    """Ordered sections of a parsed chord sheet.

    Order is significant: highlighting counts chords section by section,
    token by token.
    """

    sections: tuple[Section, ...] = ()

    @property
    def chords(self) -> list[str]:
        return [t.chord for s in self.sections for t in s.tokens if t.chord]

    @property
    def chord_count(self) -> int:
        return len(self.chords)


@dataclass
class Song:
    """A stored song record, as handed over by whatever keeps the songs."""

    title: str
    artist: str
    lyrics: str
    chords: str = ""  # parallel chord lines, ignored when lyrics has [chords]
    key: str | None = None
    capo: int | None = None
    transpose: int = 0  # semitones applied at render time
