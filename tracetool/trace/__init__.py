# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Trace analysis engine.

This module provides the data model and derivations for Chrome traces:
- TraceEvent: One decoded trace event
- Trace, parse, serialize: The trace aggregate and its JSON codec
- ProcessInfo, Timing: Views derived from a Trace
- Histogram: Fixed bucket count aggregator used for event density
"""

from .event import METADATA_CATEGORY, TraceEvent
from .histogram import Histogram, InvalidRangeError
from .model import (
    parse,
    ParseError,
    ProcessInfo,
    RENDERER_PROCESS_NAME,
    serialize,
    Timing,
    Trace,
)
from .values import as_string_id, value_to_string

__all__ = [
    # Events
    "METADATA_CATEGORY",
    "TraceEvent",
    # Model
    "parse",
    "serialize",
    "ParseError",
    "ProcessInfo",
    "RENDERER_PROCESS_NAME",
    "Timing",
    "Trace",
    # Histogram
    "Histogram",
    "InvalidRangeError",
    # Value helpers
    "as_string_id",
    "value_to_string",
]
