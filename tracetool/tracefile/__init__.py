# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Trace file input and output.

- read_trace / write_trace: Load and store a Trace
- detect_compression / read_trace_bytes: Transparent Zstd handling
"""

from .compression import (
    detect_compression,
    read_trace_bytes,
    should_compress,
    write_trace_file,
)
from .reader import read_trace, write_trace

__all__ = [
    "detect_compression",
    "read_trace",
    "read_trace_bytes",
    "should_compress",
    "write_trace",
    "write_trace_file",
]
