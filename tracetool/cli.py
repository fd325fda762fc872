# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
tracetool CLI entry point.

Provides command-line interface for listing and filtering Chrome traces.
"""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version

import click
from tracetool.filter.cli import filter_command
from tracetool.report.cli import list_command

ENV_PREFIX = "TRACETOOL"


def _get_package_version() -> str:
    """Get package version from metadata."""
    try:
        return version("tracetool")
    except PackageNotFoundError:
        return "0+unknown"


EXAMPLES = """
Examples:
  tracetool list -i trace.json
  tracetool filter 1234 -i trace.json -o output.json

Options can also be set through TRACETOOL_<COMMAND>_<OPTION> environment
variables, e.g. TRACETOOL_LIST_INPUT=trace.json.
"""


@click.group(epilog=EXAMPLES, context_settings={"auto_envvar_prefix": ENV_PREFIX})
@click.version_option(version=_get_package_version(), prog_name="tracetool")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """tracetool: Chrome trace inspection and process filtering."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
main.add_command(list_command)
main.add_command(filter_command)


if __name__ == "__main__":
    sys.exit(main())
