# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
JSON Schema for the Chrome trace document envelope.

Only the envelope is checked: a top-level object holding a ``traceEvents``
array of objects. Individual event fields are not validated, missing or
mistyped fields are defaulted when events are decoded.
"""

from typing import Any, Dict

TRACE_EVENTS_KEY = "traceEvents"
METADATA_KEY = "metadata"

TRACE_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": [TRACE_EVENTS_KEY],
    "properties": {
        TRACE_EVENTS_KEY: {
            "type": "array",
            "items": {"type": "object"},
        },
    },
    "additionalProperties": True,
}
