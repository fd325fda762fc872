# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Trace model for Chrome trace files.

This module provides the Trace aggregate (events plus an opaque metadata
blob), the views derived from it (ProcessInfo, Timing, timing histogram),
and the parse/serialize pair that converts between JSON text and a Trace.

Derived views are recomputed on every call. Callers that need them
repeatedly should keep the result.
"""

import copy
import json
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

import jsonschema

from .event import TraceEvent
from .histogram import DEFAULT_BUCKET_COUNT, Histogram
from .schemas import METADATA_KEY, TRACE_DOCUMENT_SCHEMA, TRACE_EVENTS_KEY
from .values import as_string_id, get_arg, value_to_string

RENDERER_PROCESS_NAME = "Renderer"

# Name of the metadata events that describe processes and threads
PROCESS_NAME_EVENT = "process_name"
PROCESS_LABELS_EVENT = "process_labels"
THREAD_NAME_EVENT = "thread_name"

# Metadata keys used by Trace.info()
CAPTURE_DATETIME_KEY = "trace-capture-datetime"
PRODUCT_VERSION_KEY = "product-version"

LABEL_DISPLAY_WIDTH = 40


class ParseError(ValueError):
    """Exception raised when a trace document cannot be decoded."""

    pass


@dataclass(frozen=True)
class ProcessInfo:
    """
    Process description derived from metadata events.

    Attributes:
        id: Process id
        name: Name from the process_name event
        label: Labels from the first process_labels event, or ""
        threads: Names from the thread_name events, in trace order
    """

    id: int
    name: str
    label: str = ""
    threads: tuple[str, ...] = ()

    @property
    def thread_count(self) -> int:
        return len(self.threads)

    def is_renderer(self) -> bool:
        return self.name == RENDERER_PROCESS_NAME

    def name_rank(self) -> int:
        """Sort rank: renderers after every other process."""
        return 1 if self.is_renderer() else 0

    def __str__(self) -> str:
        return (
            f"{self.id} - {self.name} ({self.thread_count} thread): "
            f"{self.label[:LABEL_DISPLAY_WIDTH]}"
        )


@dataclass(frozen=True)
class Timing:
    """Earliest and latest nonzero event timestamps, in microseconds."""

    min: int = 0
    max: int = 0

    @property
    def duration(self) -> int:
        return self.max - self.min

    @property
    def duration_seconds(self) -> float:
        return self.duration / 1_000_000


@dataclass
class Trace:
    """
    A parsed Chrome trace.

    Attributes:
        events: Trace events in file order
        metadata: The document's metadata object, kept as decoded JSON
        extras: Other top-level keys of the document, kept as decoded JSON
    """

    events: list[TraceEvent] = field(default_factory=list)
    metadata: Any = None
    extras: dict[str, Any] = field(default_factory=dict)

    def info(self) -> str:
        """One-line capture description taken from the metadata blob."""
        metadata = self.metadata if isinstance(self.metadata, dict) else {}
        captured = value_to_string(metadata.get(CAPTURE_DATETIME_KEY))
        version = value_to_string(metadata.get(PRODUCT_VERSION_KEY))
        return f"captured={captured}, version={version}"

    def metadata_events(self) -> list[TraceEvent]:
        return [event for event in self.events if event.is_metadata]

    def processes(self) -> list[ProcessInfo]:
        """
        Derive the process list from metadata events.

        A process is listed once per pid that has a process_name event; the
        first such event names it. Its label comes from the first
        process_labels event and its threads from every thread_name event
        with the same pid. Renderers are moved after all other processes,
        keeping the original order within each group.
        """
        names: dict[int, str] = {}
        labels: dict[int, str] = {}
        threads: dict[int, list[str]] = defaultdict(list)

        for event in self.metadata_events():
            if event.name == PROCESS_NAME_EVENT:
                names.setdefault(
                    event.pid, value_to_string(get_arg(event.args, "name"))
                )
            elif event.name == PROCESS_LABELS_EVENT:
                labels.setdefault(
                    event.pid, value_to_string(get_arg(event.args, "labels"))
                )
            elif event.name == THREAD_NAME_EVENT:
                thread_name = value_to_string(get_arg(event.args, "name"))
                threads[event.pid].append(thread_name)

        processes = [
            ProcessInfo(
                id=pid,
                name=name,
                label=labels.get(pid, ""),
                threads=tuple(threads.get(pid, ())),
            )
            for pid, name in names.items()
        ]
        # list.sort is stable
        processes.sort(key=lambda process: process.name_rank())
        return processes

    def process_ids(self) -> set[str]:
        """Stringified pids of all events."""
        return {as_string_id(event.pid) for event in self.events}

    def timestamps(self) -> list[Union[int, float]]:
        """Nonzero event timestamps in file order."""
        return [event.ts for event in self.events if event.ts != 0]

    def timing(self) -> Timing:
        timestamps = self.timestamps()
        if not timestamps:
            return Timing()
        return Timing(min=min(timestamps), max=max(timestamps))

    def timing_histogram(self, bucket_count: int = DEFAULT_BUCKET_COUNT) -> Histogram:
        """
        Histogram of nonzero event timestamps over the trace's time span.

        Raises:
            InvalidRangeError: If the trace has fewer than two distinct
                nonzero timestamps
        """
        timing = self.timing()
        histogram: Histogram = Histogram(timing.min, timing.max, bucket_count)
        histogram.add_samples(self.timestamps())
        return histogram

    def filter(self, process_ids: Iterable[Union[str, int]]) -> "Trace":
        """
        Create a new trace holding only events of the given processes.

        Args:
            process_ids: Process ids as strings; compared against str(pid)

        Returns:
            A new Trace. Events, metadata and extras are deep copies, the
            receiver is left untouched.

        Raises:
            TypeError: If process_ids is a single string rather than a
                collection of ids
        """
        if isinstance(process_ids, (str, bytes)):
            raise TypeError(
                f"process_ids must be a collection of ids, not {process_ids!r}"
            )
        wanted = {as_string_id(process_id) for process_id in process_ids}
        return Trace(
            events=[
                copy.deepcopy(event)
                for event in self.events
                if as_string_id(event.pid) in wanted
            ],
            metadata=copy.deepcopy(self.metadata),
            extras=copy.deepcopy(self.extras),
        )

    def to_dict(self) -> dict[str, Any]:
        document: dict[str, Any] = {
            TRACE_EVENTS_KEY: [event.to_dict() for event in self.events]
        }
        if self.metadata is not None:
            document[METADATA_KEY] = self.metadata
        document.update(self.extras)
        return document


_DOCUMENT_VALIDATOR = jsonschema.Draft7Validator(TRACE_DOCUMENT_SCHEMA)


def parse(text: Union[str, bytes, bytearray]) -> Trace:
    """
    Parse Chrome trace JSON text into a Trace.

    Args:
        text: The full JSON document (str, or UTF-8 bytes)

    Returns:
        The decoded Trace

    Raises:
        ParseError: If the text is not JSON, or is not an object holding a
            traceEvents array of objects
    """
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON: {e}") from e

    errors = list(_DOCUMENT_VALIDATOR.iter_errors(document))
    if errors:
        # Show first 3 errors
        details = []
        for error in errors[:3]:
            field_path = "/".join(str(p) for p in error.path)
            details.append(f"at '{field_path}': {error.message}")
        raise ParseError("Invalid trace document: " + "; ".join(details))

    return Trace(
        events=[TraceEvent.from_dict(record) for record in document[TRACE_EVENTS_KEY]],
        metadata=document.get(METADATA_KEY),
        extras={
            k: v
            for k, v in document.items()
            if k not in (TRACE_EVENTS_KEY, METADATA_KEY)
        },
    )


def serialize(trace: Trace, indent: Optional[int] = None) -> str:
    """
    Serialize a Trace back to JSON text.

    The metadata blob and extra top-level keys are written unchanged.
    """
    return json.dumps(trace.to_dict(), indent=indent)
