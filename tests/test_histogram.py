# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Unit tests for the Histogram class.
"""

import unittest

from tracetool.trace.histogram import (
    DEFAULT_BUCKET_COUNT,
    Histogram,
    InvalidRangeError,
)


class TestHistogramConstruction(unittest.TestCase):
    """Tests for Histogram construction."""

    def test_default_bucket_count(self):
        histogram = Histogram(0, 1000)
        self.assertEqual(histogram.bucket_count, DEFAULT_BUCKET_COUNT)
        # N regular buckets plus the overflow bucket
        self.assertEqual(len(histogram.counts), DEFAULT_BUCKET_COUNT + 1)
        self.assertEqual(histogram.total, 0)

    def test_width(self):
        self.assertEqual(Histogram(100, 300, bucket_count=4).width, 50)

    def test_empty_range_raises(self):
        with self.assertRaises(InvalidRangeError):
            Histogram(5, 5)

    def test_inverted_range_raises(self):
        with self.assertRaises(InvalidRangeError):
            Histogram(10, 5)

    def test_invalid_bucket_count_raises(self):
        with self.assertRaises(InvalidRangeError):
            Histogram(0, 10, bucket_count=0)

    def test_invalid_range_is_value_error(self):
        self.assertTrue(issubclass(InvalidRangeError, ValueError))


class TestHistogramSamples(unittest.TestCase):
    """Tests for add_sample and bucket_index."""

    def test_min_goes_to_first_bucket(self):
        histogram = Histogram(1000, 2000, bucket_count=10)
        histogram.add_sample(1000)
        self.assertEqual(histogram.counts[0], 1)

    def test_max_goes_to_last_bucket(self):
        histogram = Histogram(1000, 2000, bucket_count=10)
        histogram.add_sample(2000)
        self.assertEqual(histogram.counts[-1], 1)
        self.assertEqual(histogram.bucket_index(2000), 10)

    def test_above_max_clamped_to_last_bucket(self):
        histogram = Histogram(0, 100, bucket_count=10)
        histogram.add_sample(10**12)
        self.assertEqual(histogram.counts[-1], 1)

    def test_just_below_max_goes_to_last_regular_bucket(self):
        histogram = Histogram(0, 100, bucket_count=10)
        self.assertEqual(histogram.bucket_index(99), 9)

    def test_bucket_boundaries(self):
        histogram = Histogram(0, 100, bucket_count=10)
        self.assertEqual(histogram.bucket_index(9), 0)
        self.assertEqual(histogram.bucket_index(10), 1)
        self.assertEqual(histogram.bucket_index(55), 5)

    def test_range_smaller_than_bucket_count(self):
        # Width is below one; integer samples must still spread out
        histogram = Histogram(0, 50, bucket_count=100)
        self.assertEqual(histogram.bucket_index(1), 2)
        self.assertEqual(histogram.bucket_index(49), 98)

    def test_float_samples(self):
        histogram = Histogram(0.0, 1.0, bucket_count=4)
        histogram.add_samples([0.1, 0.3, 0.6, 0.9, 1.0])
        self.assertEqual(histogram.counts, [1, 1, 1, 1, 1])

    def test_below_min_raises(self):
        histogram = Histogram(100, 200)
        with self.assertRaises(ValueError):
            histogram.add_sample(99)
        self.assertEqual(histogram.total, 0)

    def test_total_equals_sample_count(self):
        histogram = Histogram(0, 1000, bucket_count=7)
        samples = list(range(0, 1500, 3))
        histogram.add_samples(samples)
        self.assertEqual(histogram.total, len(samples))
        self.assertEqual(sum(histogram.counts), len(samples))

    def test_counts_is_a_copy(self):
        histogram = Histogram(0, 10)
        histogram.counts[0] = 99
        self.assertEqual(histogram.counts[0], 0)


class TestHistogramBucketRange(unittest.TestCase):
    """Tests for bucket_range."""

    def test_regular_bucket(self):
        histogram = Histogram(100, 300, bucket_count=4)
        self.assertEqual(histogram.bucket_range(1), (150, 200))

    def test_overflow_bucket(self):
        histogram = Histogram(100, 300, bucket_count=4)
        self.assertEqual(histogram.bucket_range(4), (300, float("inf")))

    def test_out_of_range_index(self):
        with self.assertRaises(IndexError):
            Histogram(0, 10, bucket_count=2).bucket_range(3)


class TestHistogramRender(unittest.TestCase):
    """Tests for levels and render."""

    def test_render_shape(self):
        histogram = Histogram(0, 1000)
        histogram.add_samples([0, 500, 999])
        rows = histogram.render().split("\n")
        self.assertEqual(len(rows), 10)
        for row in rows:
            self.assertEqual(len(row), DEFAULT_BUCKET_COUNT + 1)

    def test_render_bars(self):
        histogram = Histogram(0, 4, bucket_count=4)
        histogram.add_samples([0, 1, 1, 2, 2, 2, 2, 3])
        self.assertEqual(histogram.counts, [1, 2, 4, 1, 0])
        self.assertEqual(histogram.levels(4), [1, 2, 4, 1, 0])
        self.assertEqual(
            histogram.render(levels=4),
            "\n".join(["  #  ", "  #  ", " ##  ", "#### "]),
        )

    def test_render_custom_characters(self):
        histogram = Histogram(0, 2, bucket_count=2)
        histogram.add_sample(0)
        self.assertEqual(histogram.render(levels=1, bar="*", empty="."), "*..")

    def test_all_empty_buckets_render_empty(self):
        histogram = Histogram(0, 10, bucket_count=2)
        self.assertEqual(histogram.levels(), [0, 0, 0])
        self.assertEqual(histogram.render(levels=2), "   \n   ")

    def test_all_equal_buckets_render_full(self):
        histogram = Histogram(0, 10, bucket_count=2)
        histogram.add_samples([0, 5, 10])
        self.assertEqual(histogram.counts, [1, 1, 1])
        self.assertEqual(histogram.levels(), [10, 10, 10])
        self.assertEqual(histogram.render(levels=2), "###\n###")
