"""Load song records from disk or over HTTP.

Two document shapes are understood, picked by the file (or URL path) suffix:

  *.json  - one stored song record: {"title", "artist", "lyrics", "chords",
            "content", "key", "capo", "transpose"}; "content" stands in for
            empty "lyrics"
  other   - plain UTF-8 text used as the lyrics; the title is the file stem
"""

import json
import logging
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

import httpx

from .exceptions import FetchError, SongLoadError
from .models import Song

logger = logging.getLogger(__name__)


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def fetch(url: str) -> str:
    """Fetch *url* and return the response body.

    Raises FetchError on HTTP-level failures.
    """
    try:
        resp = httpx.get(url, follow_redirects=True, timeout=15)
    except httpx.RequestError as exc:
        raise FetchError(url, 0) from exc
    if resp.status_code != 200:
        raise FetchError(url, resp.status_code)
    return resp.text


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SongLoadError(str(path), f"not UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise SongLoadError(str(path), exc.strerror or str(exc)) from exc


def _optional_int(record: dict, name: str, source: str) -> int | None:
    value = record.get(name)
    if value is None or value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise SongLoadError(source, f"{name!r} must be an integer")
    try:
        return int(value)
    except ValueError as exc:
        raise SongLoadError(source, f"{name!r} must be an integer") from exc


def song_from_record(record: dict, source: str, default_title: str = "") -> Song:
    """Build a :class:`Song` from a decoded JSON song record."""
    if not isinstance(record, dict):
        raise SongLoadError(source, "expected a JSON object")

    lyrics = record.get("lyrics") or record.get("content") or ""
    chords = record.get("chords") or ""
    if not isinstance(lyrics, str) or not isinstance(chords, str):
        raise SongLoadError(source, "'lyrics' and 'chords' must be strings")

    return Song(
        title=str(record.get("title") or default_title),
        artist=str(record.get("artist") or ""),
        lyrics=lyrics,
        chords=chords,
        key=str(record["key"]) if record.get("key") else None,
        capo=_optional_int(record, "capo", source),
        transpose=_optional_int(record, "transpose", source) or 0,
    )


def parse_song(text: str, source: str, name: str) -> Song:
    """Turn a document's text into a :class:`Song`.

    *name* is the file name (or last URL path segment); its suffix picks the
    document shape and its stem is the fallback title.
    """
    stem = PurePosixPath(name).stem
    if PurePosixPath(name).suffix.lower() == ".json":
        try:
            record = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SongLoadError(source, f"invalid JSON: {exc.msg} (line {exc.lineno})") from exc
        return song_from_record(record, source, default_title=stem)
    return Song(title=stem, artist="", lyrics=text)


def load_song(source: str | Path, chords: str | Path | None = None) -> Song:
    """Load a song from a file path or http(s) URL.

    *chords*, when given, is another path or URL whose text replaces the
    song's chord lines.

    Raises SongLoadError if a file is unreadable or malformed, FetchError if
    a URL cannot be fetched.
    """
    if is_url(source):
        text = fetch(source)
        song = parse_song(text, source, urlparse(source).path or "song")
    else:
        path = Path(source)
        song = parse_song(_read(path), str(path), path.name)

    if chords is not None:
        song.chords = fetch(chords) if is_url(chords) else _read(Path(chords))

    logger.debug("Loaded %r from %s (%d lyric lines)", song.title, source, len(song.lyrics.splitlines()))
    return song
