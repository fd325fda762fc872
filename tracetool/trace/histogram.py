# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Fixed bucket count histogram.

Histogram spreads samples from [min, max) over ``bucket_count`` buckets of
equal width, plus one trailing overflow bucket that receives every sample
>= max. It is used to show event density over the span of a trace but works
for any numeric type supporting subtraction, multiplication and floor
division.
"""

from typing import Generic, Iterable, TypeVar

T = TypeVar("T", int, float)

DEFAULT_BUCKET_COUNT = 100
DEFAULT_RENDER_LEVELS = 10


class InvalidRangeError(ValueError):
    """Raised when a histogram is built over an empty or inverted range."""

    pass


class Histogram(Generic[T]):
    """
    Histogram over the range [min_value, max_value).

    Example:
        >>> h = Histogram(0, 100, bucket_count=10)
        >>> h.add_samples([0, 15, 99, 100, 250])
        >>> h.counts
        [1, 1, 0, 0, 0, 0, 0, 0, 0, 1, 2]
    """

    def __init__(
        self, min_value: T, max_value: T, bucket_count: int = DEFAULT_BUCKET_COUNT
    ) -> None:
        """
        Initialize an empty histogram.

        Args:
            min_value: Inclusive lower bound
            max_value: Exclusive upper bound of the regular buckets
            bucket_count: Number of regular buckets (N); N + 1 slots are kept

        Raises:
            InvalidRangeError: If max_value <= min_value or bucket_count < 1
        """
        if bucket_count < 1:
            raise InvalidRangeError(
                f"Bucket count must be positive, got {bucket_count}"
            )
        if not max_value > min_value:
            raise InvalidRangeError(
                f"Invalid histogram range: max ({max_value}) must be greater "
                f"than min ({min_value})"
            )
        self.min_value = min_value
        self.max_value = max_value
        self.bucket_count = bucket_count
        self._counts = [0] * (bucket_count + 1)

    @property
    def width(self) -> float:
        """Width of a regular bucket."""
        return (self.max_value - self.min_value) / self.bucket_count

    @property
    def counts(self) -> list[int]:
        """Copy of the bucket counts, overflow bucket last."""
        return list(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts)

    def bucket_index(self, value: T) -> int:
        """
        Return the bucket a sample falls into.

        Computed as (value - min) * N // (max - min), which equals
        floor((value - min) / width) without the rounding error of a
        precomputed width, then clamped to the overflow bucket.

        Raises:
            ValueError: If value is below the histogram minimum
        """
        if value < self.min_value:
            raise ValueError(
                f"Sample {value} is below histogram minimum {self.min_value}"
            )
        span = self.max_value - self.min_value
        index = int((value - self.min_value) * self.bucket_count // span)
        return min(index, self.bucket_count)

    def add_sample(self, value: T) -> None:
        self._counts[self.bucket_index(value)] += 1

    def add_samples(self, values: Iterable[T]) -> None:
        for value in values:
            self.add_sample(value)

    def bucket_range(self, index: int) -> tuple[float, float]:
        """
        Return the [start, end) value range covered by a bucket.

        The overflow bucket covers [max, inf).
        """
        if not 0 <= index <= self.bucket_count:
            raise IndexError(f"Bucket index out of range: {index}")
        if index == self.bucket_count:
            return (self.max_value, float("inf"))
        start = self.min_value + index * self.width
        return (start, start + self.width)

    def levels(self, levels: int = DEFAULT_RENDER_LEVELS) -> list[int]:
        """
        Quantize each bucket count to a column height in [0, levels].

        Heights are proportional to (count - lo) / (hi - lo) where lo and hi
        are the smallest and largest counts. When every bucket holds the same
        count the columns are all full, or all empty if that count is zero.
        """
        lo = min(self._counts)
        hi = max(self._counts)
        if hi == lo:
            return [levels if hi > 0 else 0] * len(self._counts)
        return [round((count - lo) / (hi - lo) * levels) for count in self._counts]

    def render(
        self,
        levels: int = DEFAULT_RENDER_LEVELS,
        bar: str = "#",
        empty: str = " ",
    ) -> str:
        """
        Render the histogram as an ASCII bar chart.

        Returns ``levels`` rows of one character per bucket, highest level
        first.
        """
        heights = self.levels(levels)
        rows = []
        for level in range(levels, 0, -1):
            rows.append("".join(bar if h >= level else empty for h in heights))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return (
            f"Histogram(min={self.min_value}, max={self.max_value}, "
            f"buckets={self.bucket_count}, total={self.total})"
        )
