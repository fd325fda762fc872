# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Process filtering for the filter command.
"""

from .selection import filter_processes, non_renderer_process_ids, select_process_ids

__all__ = [
    "filter_processes",
    "non_renderer_process_ids",
    "select_process_ids",
]
