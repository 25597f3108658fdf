import logging
import sys
from pathlib import Path

import click

from .chordpro import ChordProFormatter, song_sheet
from .diagrams import INSTRUMENTS, lookup_shape, render_diagram
from .exceptions import CifraError, FetchError
from .highlight import current_chord_index, locate_chord, progress_ratio
from .models import Song
from .plaintext import PlainTextFormatter
from .songs import load_song
from .transpose import transpose_all

FORMATS = ("chordpro", "text")

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG with --verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _load(source: str, chords: str | None, transpose: int | None) -> Song:
    try:
        song = load_song(source, chords)
    except FetchError as exc:
        msg = f"Error: Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        click.echo(msg, err=True)
        sys.exit(1)
    except CifraError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    if transpose is not None:
        song.transpose = transpose
    return song


song_argument = click.argument("song_source", metavar="SONG")
chords_option = click.option(
    "--chords", "chords_source", default=None, metavar="PATH",
    help="Chord lines for a lyrics file without [bracketed] chords.",
)
transpose_option = click.option(
    "-t", "--transpose", type=int, default=None,
    help="Semitones to shift every chord by (default: the song's own setting).",
)


@click.group(context_settings={"auto_envvar_prefix": "CIFRA"})
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """Parse, transpose and render chord sheets ("cifras").

    \b
    SONG is a path or http(s) URL to either:
      - a .json song record (title, artist, lyrics, chords, key, capo)
      - a plain-text lyrics file, chords inline as [C]Hello [G]world
    """
    setup_logging(verbose)


@main.command()
@song_argument
@chords_option
@transpose_option
@click.option("-f", "--format", "fmt", type=click.Choice(FORMATS), default="chordpro",
              show_default=True, help="Output format.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to a file instead of stdout.")
def render(song_source: str, chords_source: str | None, transpose: int | None, fmt: str,
           output_path: str | None) -> None:
    """Render a song as ChordPro or chords-over-lyrics text."""
    song = _load(song_source, chords_source, transpose)

    if fmt == "chordpro":
        text = ChordProFormatter().render(song)
    else:
        text = PlainTextFormatter().render(song)

    if output_path is None:
        click.echo(text, nl=False)
        return

    Path(output_path).write_text(text, encoding="utf-8")
    click.echo(f"Written to {output_path}")


@main.command("transpose")
@click.argument("infile", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-s", "--steps", type=int, required=True, help="Semitones, negative to go down.")
def transpose_command(infile, steps: int) -> None:
    """Transpose every chord found in a text file (or stdin)."""
    click.echo(transpose_all(infile.read(), steps), nl=False)


@main.command()
@song_argument
@chords_option
@transpose_option
@click.option("--time", "current_time", type=float, required=True, help="Playback position in seconds.")
@click.option("--duration", type=float, required=True, help="Track length in seconds.")
@click.option("--show", is_flag=True, default=False, help="Also print the song with the chord marked.")
def highlight(song_source: str, chords_source: str | None, transpose: int | None, current_time: float,
              duration: float, show: bool) -> None:
    """Show which chord is current at a playback position."""
    song = _load(song_source, chords_source, transpose)
    sheet = song_sheet(song)
    index = current_chord_index(sheet, progress_ratio(current_time, duration))

    position = locate_chord(sheet, index)
    if position is None:
        click.echo("-1 (no chords)")
    else:
        token = sheet.sections[position[0]].tokens[position[1]]
        click.echo(f"{index} {token.chord} {token.text}")

    if show:
        click.echo(PlainTextFormatter().render(song, current=index), nl=False)


@main.command()
@click.argument("chord")
@click.option("-i", "--instrument", type=click.Choice(INSTRUMENTS), default="guitar",
              show_default=True, help="Instrument to draw the fingering for.")
def diagram(chord: str, instrument: str) -> None:
    """Draw the fingering for CHORD as a text diagram."""
    if lookup_shape(chord, instrument) is None:
        logger.debug("No %s shape for %r", instrument, chord)
    click.echo(render_diagram(chord, instrument))
