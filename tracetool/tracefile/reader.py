# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Reading and writing Chrome trace files.

Thin file layer around tracetool.trace.parse and serialize. Errors from
the filesystem propagate unchanged; malformed contents raise ParseError.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import zstandard as zstd
from tracetool.trace import parse, ParseError, serialize, Trace

from .compression import read_trace_bytes, should_compress, write_trace_file

_LOGGER: logging.Logger = logging.getLogger(__name__)


def read_trace(filepath: Union[str, Path]) -> Trace:
    """
    Read and parse a trace file.

    Args:
        filepath: Path to a .json or Zstd-compressed trace file

    Returns:
        The parsed Trace

    Raises:
        FileNotFoundError: If the file does not exist
        ParseError: If the file is not a valid trace document, including
            invalid UTF-8 and corrupt Zstd data
    """
    try:
        content = read_trace_bytes(filepath)
    except zstd.ZstdError as e:
        raise ParseError(f"Corrupt Zstd data: {e}") from e
    _LOGGER.debug("Read %d bytes of trace JSON from %s", len(content), filepath)

    trace = parse(content)
    _LOGGER.debug("Parsed %d events from %s", len(trace.events), filepath)
    return trace


def write_trace(
    trace: Trace,
    filepath: Union[str, Path],
    compress: Optional[bool] = None,
) -> int:
    """
    Serialize a trace and write it to disk.

    Args:
        trace: Trace to write
        filepath: Destination path
        compress: Compress with Zstd. When None, compress if the path ends
            in ".zst".

    Returns:
        Number of bytes written
    """
    if compress is None:
        compress = should_compress(filepath)

    size = write_trace_file(filepath, serialize(trace), compress=compress)
    _LOGGER.info(
        "Wrote %d events to %s (%d bytes%s)",
        len(trace.events),
        filepath,
        size,
        ", zstd" if compress else "",
    )
    return size
