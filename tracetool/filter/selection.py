# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Process selection for the filter command.

Trace.filter is a pure subset operation. The command adds one rule on top:
non-Renderer processes (Browser, GPU, ...) are always kept, so that the
requested renderers still have the processes they talk to.
"""

from typing import Iterable

from tracetool.trace import as_string_id, Trace


def non_renderer_process_ids(trace: Trace) -> list[str]:
    """Ids of named processes that are not renderers, in process list order."""
    return [
        as_string_id(process.id)
        for process in trace.processes()
        if not process.is_renderer()
    ]


def select_process_ids(trace: Trace, requested_ids: Iterable[str]) -> set[str]:
    """
    Compute the full id set to keep.

    Args:
        trace: Source trace
        requested_ids: Process ids given by the user, as strings

    Returns:
        requested_ids plus every non-Renderer process id
    """
    return set(requested_ids) | set(non_renderer_process_ids(trace))


def filter_processes(trace: Trace, requested_ids: Iterable[str]) -> Trace:
    """Filter a trace to the requested processes plus all non-Renderer ones."""
    return trace.filter(select_process_ids(trace, requested_ids))
