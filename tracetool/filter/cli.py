# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
CLI implementation for the filter subcommand.

Writes a new trace that only holds the given Renderer processes plus every
non-Renderer process.
"""

from pathlib import Path

import click
from tracetool.filter.selection import filter_processes
from tracetool.report.cli import input_option, load_trace
from tracetool.report.formatters import format_trace_report
from tracetool.tracefile import write_trace

DEFAULT_OUTPUT = "output.json"


@click.command(name="filter")
@click.argument("process_ids", nargs=-1, required=True)
@input_option
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.Path(path_type=Path),
    default=DEFAULT_OUTPUT,
    show_default=True,
    help="Output trace file. A .zst suffix enables compression.",
)
@click.option(
    "--compress",
    "-z",
    is_flag=True,
    help="Compress the output with Zstd regardless of its suffix.",
)
def filter_command(
    process_ids: tuple[str, ...],
    input_file: Path,
    output_file: Path,
    compress: bool,
) -> None:
    """
    Create a new trace with only the given Renderer processes.

    Non-renderer processes such as GPU and Browser are always included.
    PROCESS_IDS are matched against the pid of each event.

    \b
    Examples:
      tracetool filter 1234 -i trace.json -o renderer_1234.json
      tracetool filter 1234 5678 -i trace.json -o filtered.json.zst
    """
    trace = load_trace(input_file)
    filtered = filter_processes(trace, process_ids)

    click.echo(format_trace_report(filtered))

    try:
        write_trace(filtered, output_file, compress=True if compress else None)
    except OSError as e:
        raise click.ClickException(f"Failed to write {output_file}: {e}")

    click.echo(f"{len(filtered.events)} events written to {output_file}", err=True)
