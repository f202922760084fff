"""Spherocity distributions per FT0 multiplicity class and their quantiles."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence

from .events import Event
from .histogram import Histogram

# Lower (exclusive) FT0 bounds of the classes, highest multiplicity first;
# each class reaches up to and including the previous bound.
_CLASS_LOWER_BOUNDS = (58, 32, 22, 15, 10, 7, 4)

MIN_SPHEROCITY_MULTIPLICITY = 10
N_CLASSES = len(_CLASS_LOWER_BOUNDS)


def ft0_class_index(ft0) -> int | None:
    """Index of the FT0 class (0 = highest multiplicity), or None outside all."""
    upper = None
    for index, lower in enumerate(_CLASS_LOWER_BOUNDS):
        if ft0 > lower and (upper is None or ft0 <= upper):
            return index
        upper = lower
    return None


def spherocity_distributions(events: Iterable[Event]) -> list[Histogram]:
    """Spherocity histograms for the seven FT0 classes followed by minimum bias.

    Only events with at least ten charged particles in the spherocity
    acceptance contribute.
    """
    histograms = [Histogram.uniform(1000, 0.0, 1.0) for _ in range(N_CLASSES + 1)]
    for event in events:
        if event.etamultpoint8s0 < MIN_SPHEROCITY_MULTIPLICITY:
            continue
        index = ft0_class_index(event.ft0)
        if index is not None:
            histograms[index].fill(event.spherocity)
        if event.ft0 >= 0:
            histograms[N_CLASSES].fill(event.spherocity)
    return histograms


def find_quantiles(
    histogram: Histogram, fractions: Sequence[float] = (0.2, 0.8)
) -> list[tuple[int, float] | None]:
    """For each fraction, the first cumulative count reaching it and that bin's center.

    The total is truncated to a whole count, as are the cumulative sums.
    A fraction that is never reached gives None.
    """
    total = int(histogram.integral())
    cumulative = list(
        accumulate(histogram.bin_content(i) for i in range(1, histogram.nbins + 1))
    )
    results: list[tuple[int, float] | None] = []
    for fraction in fractions:
        threshold = fraction * total
        found = None
        for bin_index, running in enumerate(cumulative, start=1):
            count = int(running)
            if count >= threshold:
                found = (count, histogram.bin_center(bin_index))
                break
        results.append(found)
    return results