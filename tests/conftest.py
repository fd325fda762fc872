# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Shared trace record builders for tracetool tests.
"""

import json
from typing import Any


def metadata_event(pid: int, event_name: str, **args: Any) -> dict:
    """Build a __metadata event record."""
    return {
        "pid": pid,
        "tid": pid + 1,
        "ph": "M",
        "cat": "__metadata",
        "name": event_name,
        "args": args,
    }


def complete_event(pid: int, ts: int, name: str = "RunTask", dur: int = 10) -> dict:
    """Build a complete ("X") event record."""
    return {
        "pid": pid,
        "tid": pid + 1,
        "ts": ts,
        "ph": "X",
        "cat": "toplevel",
        "name": name,
        "dur": dur,
        "args": {},
    }


def trace_document(events: list, metadata: Any = None) -> str:
    """Build trace JSON text from event records."""
    document: dict = {"traceEvents": events}
    if metadata is not None:
        document["metadata"] = metadata
    return json.dumps(document)


# Renderer pid 1 and Browser pid 2, with one timed event each
TWO_PROCESS_EVENTS = [
    metadata_event(1, "process_name", name="Renderer"),
    metadata_event(2, "process_name", name="Browser"),
    complete_event(1, 1000),
    complete_event(2, 2000),
]

