"""simpletab CLI entry point."""

import logging
import sys

import click

from simpletab import __version__
from simpletab.errors import ParseError
from simpletab.log import setup_logger
from simpletab.tab_exporter import SUPPORTED_FORMATS, TabExporter, default_output_path
from simpletab.track_resolver import parse

STDOUT_PATH = "-"


def _read_or_exit(exporter: TabExporter, input_file: str) -> str:
    """Read the notation file, exiting with status 1 if it is unreadable or not UTF-8."""
    try:
        return exporter.read(input_file)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"  ERROR: Could not read input file — {exc}", err=True)
        sys.exit(1)


def _convert_or_exit(exporter: TabExporter, input_file: str) -> str:
    raw_text = _read_or_exit(exporter, input_file)
    try:
        return exporter.convert(raw_text)
    except ParseError as exc:
        click.echo(f"  ERROR: Could not parse notation — {exc}", err=True)
        sys.exit(1)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="simpletab")
@click.option("--verbose", "-v", is_flag=True, help="Log each conversion stage to stderr.")
def main(verbose: bool) -> None:
    """simpletab — simplified tab notation to ASCII guitar tablature."""
    setup_logger(logging.DEBUG if verbose else logging.WARNING)


# ── convert subcommand ─────────────────────────────────────────────────────────

@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination tab file. Defaults to <input-stem>-output.txt; '-' writes to stdout.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(SUPPORTED_FORMATS), case_sensitive=False),
    default="plain",
    show_default=True,
    help="plain: frets and dashes only. labeled: string names, bar lines and beat counter.",
)
def convert(input_file: str, output: str | None, output_format: str) -> None:
    """
    Convert a simplified tab notation file into ASCII tablature.

    INPUT_FILE is the notation file to read.

    \b
    Examples:
      simpletab convert riff.tab
      simpletab convert riff.tab -o riff.txt --format labeled
      simpletab convert riff.tab -o -
    """
    exporter = TabExporter(output_format=output_format)

    if output == STDOUT_PATH:
        content = _convert_or_exit(exporter, input_file)
        click.echo(content, nl=False)
        return

    resolved_output = output if output is not None else str(default_output_path(input_file))

    click.echo(f"simpletab v{__version__}")
    click.echo(f"  Input  : {input_file}")
    click.echo(f"  Format : {exporter.output_format}")
    click.echo(f"  Output : {resolved_output}")
    click.echo()

    click.echo("[1/2] Parsing notation...")
    content = _convert_or_exit(exporter, input_file)

    click.echo("[2/2] Writing tablature...")
    try:
        exporter.write(content, resolved_output)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file — {exc}", err=True)
        sys.exit(1)

    click.echo()
    click.echo(f"Done!  Open '{resolved_output}' in any text editor.")


# ── check subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, readable=True))
def check(input_file: str) -> None:
    """
    Validate a notation file without writing any output.

    Prints the time signature, fidelity and string count on success.
    """
    raw_text = _read_or_exit(TabExporter(), input_file)
    try:
        document = parse(raw_text)
    except ParseError as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)

    configuration = document.configuration
    names = " ".join(track.name for track in document.tracks)
    click.echo(f"OK  {input_file}")
    click.echo(f"  Time     : {configuration.time_signature}  |  Fidelity: {configuration.fidelity}")
    click.echo(f"  Strings  : {names}")
    click.echo(f"  Beats    : {document.slot_count // configuration.fidelity}")
