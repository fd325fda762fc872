# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Trace event record.

A TraceEvent is one entry of the ``traceEvents`` array of a Chrome trace
file. Every field is optional in the source; absent fields get a zero or
empty default so that downstream code never has to check for presence.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from .values import as_id, as_int, as_number, Number

METADATA_CATEGORY = "__metadata"

# Keys always written back on serialization, in Chrome's own order.
CORE_KEYS = ("pid", "tid", "ts", "ph", "cat", "name", "args")

# Keys written back only when they hold a non-default value.
OPTIONAL_KEYS = ("dur", "tdur", "tts", "s", "id", "scope")

_OPTIONAL_DEFAULTS = {"dur": 0, "tdur": 0, "tts": 0, "s": "", "id": "", "scope": ""}

KNOWN_KEYS = frozenset(CORE_KEYS + OPTIONAL_KEYS)


@dataclass
class TraceEvent:
    """
    One event of a Chrome trace.

    Attributes:
        pid: Process id
        tid: Thread id
        ts: Timestamp in microseconds; 0 means unset
        ph: Phase code ("X", "B", "E", "M", "i", ...)
        cat: Category list as a comma separated string
        name: Event name, may be empty
        args: Schemaless argument payload
        dur: Wall duration of complete events
        tdur: Thread duration of complete events
        tts: Thread timestamp
        s: Scope of instant events ("g", "p", "t")
        id: Async/flow event id, string or integer
        scope: Id scope of async events
        extra: Unknown keys of the source object, passed through unchanged
    """

    pid: int = 0
    tid: int = 0
    ts: Number = 0
    ph: str = ""
    cat: str = ""
    name: str = ""
    args: Any = field(default_factory=dict)
    dur: Number = 0
    tdur: Number = 0
    tts: Number = 0
    s: Union[str, int] = ""
    id: Union[str, int] = ""
    scope: Union[str, int] = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "TraceEvent":
        """
        Build an event from a decoded JSON object.

        Missing keys take their defaults and mistyped values are coerced
        best-effort; this never raises for a dict input.
        """
        name = record.get("name", "")
        ph = record.get("ph", "")
        cat = record.get("cat", "")
        return cls(
            pid=as_int(record.get("pid")),
            tid=as_int(record.get("tid")),
            ts=as_number(record.get("ts")),
            ph=ph if isinstance(ph, str) else "",
            cat=cat if isinstance(cat, str) else "",
            name=name if isinstance(name, str) else "",
            args=record.get("args", {}),
            dur=as_number(record.get("dur")),
            tdur=as_number(record.get("tdur")),
            tts=as_number(record.get("tts")),
            s=as_id(record.get("s")),
            id=as_id(record.get("id")),
            scope=as_id(record.get("scope")),
            extra={k: v for k, v in record.items() if k not in KNOWN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to a JSON-ready dict (see CORE_KEYS / OPTIONAL_KEYS)."""
        record: dict[str, Any] = {key: getattr(self, key) for key in CORE_KEYS}
        for key in OPTIONAL_KEYS:
            value = getattr(self, key)
            default = _OPTIONAL_DEFAULTS[key]
            if type(value) is not type(default) or value != default:
                record[key] = value
        record.update(self.extra)
        return record

    @property
    def is_metadata(self) -> bool:
        return self.cat == METADATA_CATEGORY
