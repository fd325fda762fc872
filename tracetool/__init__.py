# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
tracetool: summarize and filter Chrome trace files.
"""

from tracetool.trace import (
    Histogram,
    InvalidRangeError,
    parse,
    ParseError,
    ProcessInfo,
    serialize,
    Timing,
    Trace,
    TraceEvent,
)

__all__ = [
    "Histogram",
    "InvalidRangeError",
    "parse",
    "ParseError",
    "ProcessInfo",
    "serialize",
    "Timing",
    "Trace",
    "TraceEvent",
]
