# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
CLI implementation for the list subcommand.

Prints the summary, timing histogram and process list of a trace file.
"""

from pathlib import Path

import click
from tracetool.report.formatters import format_trace_report, OUTPUT_FORMATS
from tracetool.tracefile import read_trace
from tracetool.trace import ParseError, Trace

DEFAULT_INPUT = "resources/sample_trace.json"

input_option = click.option(
    "--input",
    "-i",
    "input_file",
    type=click.Path(path_type=Path),
    default=DEFAULT_INPUT,
    show_default=True,
    help="Input trace file (.json, optionally Zstd-compressed).",
)


def load_trace(input_file: Path) -> Trace:
    """Read a trace file, turning read and parse failures into CLI errors."""
    try:
        return read_trace(input_file)
    except ParseError as e:
        raise click.ClickException(f"Failed to parse {input_file}: {e}")
    except OSError as e:
        raise click.ClickException(f"Failed to read {input_file}: {e}")


@click.command(name="list")
@input_option
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    show_default=True,
    help="Output format.",
)
def list_command(input_file: Path, output_format: str) -> None:
    """
    List the processes of a trace.

    Shows the capture info, process count, duration, a histogram of event
    density over time, and one line per process (renderers last).

    \b
    Examples:
      tracetool list -i trace.json
      tracetool list -i trace.json.zst --format table
      tracetool list -i trace.json --format json
    """
    trace = load_trace(input_file)
    click.echo(format_trace_report(trace, output_format))
