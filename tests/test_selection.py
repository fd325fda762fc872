# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Unit tests for the filter command's process selection rule.
"""

import unittest

from tests.conftest import complete_event, metadata_event, trace_document
from tests.test_base import BaseTraceTest, SAMPLE_EVENTS_PER_PID, SAMPLE_TRACE_JSON
from tracetool.filter.selection import (
    filter_processes,
    non_renderer_process_ids,
    select_process_ids,
)
from tracetool.trace import parse


class TestSelectionScenario(unittest.TestCase):
    """Browser (pid 1) and Renderer (pid 2), filtering on the renderer."""

    def setUp(self):
        self.trace = parse(
            trace_document(
                [
                    metadata_event(1, "process_name", name="Browser"),
                    metadata_event(2, "process_name", name="Renderer"),
                    complete_event(1, 1000),
                    complete_event(2, 2000),
                ]
            )
        )

    def test_non_renderer_ids(self):
        self.assertEqual(non_renderer_process_ids(self.trace), ["1"])

    def test_select_adds_non_renderers(self):
        self.assertEqual(select_process_ids(self.trace, ["2"]), {"1", "2"})

    def test_filter_keeps_browser(self):
        filtered = filter_processes(self.trace, ["2"])
        self.assertEqual({e.pid for e in filtered.events}, {1, 2})
        self.assertEqual(len(filtered.events), 4)

    def test_trace_filter_alone_drops_browser(self):
        self.assertEqual({e.pid for e in self.trace.filter(["2"]).events}, {2})


class TestSelectionSample(BaseTraceTest):
    """Selection on the sample trace."""

    def setUp(self):
        super().setUp()
        self.trace = parse(SAMPLE_TRACE_JSON.read_text())

    def test_non_renderer_ids(self):
        self.assertEqual(non_renderer_process_ids(self.trace), ["100", "200"])

    def test_filter_one_renderer(self):
        filtered = filter_processes(self.trace, ["300"])
        self.assertEqual({e.pid for e in filtered.events}, {100, 200, 300})
        expected = sum(SAMPLE_EVENTS_PER_PID[pid] for pid in (100, 200, 300))
        self.assertEqual(len(filtered.events), expected)
        self.assertEqual([p.id for p in filtered.processes()], [100, 200, 300])

    def test_filter_unknown_id_keeps_only_non_renderers(self):
        filtered = filter_processes(self.trace, ["999"])
        self.assertEqual({e.pid for e in filtered.events}, {100, 200})

    def test_original_unchanged(self):
        filter_processes(self.trace, ["300"])
        self.assertEqual(self.trace.process_ids(), {"100", "200", "300", "400"})
