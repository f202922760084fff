"""Binned histograms and profiles with under/overflow bins, plus JSON storage."""

from __future__ import annotations

import json
import math
from bisect import bisect_right
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Union


@dataclass(frozen=True)
class _Axis:
    """Bin edges of one axis; bin 0 is underflow and bin ``nbins + 1`` overflow."""

    edges: tuple[float, ...]
    uniform_range: tuple[float, float] | None = None

    @classmethod
    def variable(cls, edges) -> "_Axis":
        values = tuple(float(edge) for edge in edges)
        if len(values) < 2:
            raise ValueError("an axis needs at least two edges")
        if any(high <= low for low, high in zip(values, values[1:])):
            raise ValueError("bin edges must be strictly increasing")
        return cls(values)

    @classmethod
    def fixed(cls, nbins: int, low: float, high: float) -> "_Axis":
        if nbins < 1:
            raise ValueError("number of bins must be positive")
        low, high = float(low), float(high)
        if not high > low:
            raise ValueError("upper edge must be above the lower edge")
        edges = tuple(low + (high - low) * i / nbins for i in range(nbins + 1))
        return cls(edges, (low, high))

    @property
    def nbins(self) -> int:
        return len(self.edges) - 1

    def find_bin(self, x: float) -> int:
        low, high = self.edges[0], self.edges[-1]
        if x < low:
            return 0
        if x >= high:
            return self.nbins + 1
        if self.uniform_range is not None:
            return min(int(self.nbins * (x - low) / (high - low)) + 1, self.nbins)
        return bisect_right(self.edges, x)

    def _check_regular(self, i: int) -> None:
        if not 1 <= i <= self.nbins:
            raise IndexError(f"bin {i} is not a regular bin (1..{self.nbins})")

    def center(self, i: int) -> float:
        self._check_regular(i)
        return 0.5 * (self.edges[i - 1] + self.edges[i])

    def width(self, i: int) -> float:
        self._check_regular(i)
        return self.edges[i] - self.edges[i - 1]

    def to_dict(self) -> dict:
        if self.uniform_range is not None:
            return {"uniform": [self.nbins, *self.uniform_range]}
        return {"edges": list(self.edges)}

    @classmethod
    def from_dict(cls, data: Mapping) -> "_Axis":
        if data.get("uniform") is not None:
            nbins, low, high = data["uniform"]
            return cls.fixed(int(nbins), low, high)
        return cls.variable(data["edges"])


class Histogram:
    """One-dimensional weighted histogram with optional sum-of-squares errors."""

    def __init__(self, edges):
        self._setup(_Axis.variable(edges))

    def _setup(self, axis: _Axis) -> None:
        self._axis = axis
        self._contents = [0.0] * (axis.nbins + 2)
        self._sumw2: list[float] | None = None
        self.entries = 0

    @classmethod
    def _with_axis(cls, axis: _Axis) -> "Histogram":
        hist = cls.__new__(cls)
        hist._setup(axis)
        return hist

    @classmethod
    def uniform(cls, nbins, low, high) -> "Histogram":
        """Histogram with ``nbins`` equal bins between ``low`` and ``high``."""
        return cls._with_axis(_Axis.fixed(nbins, low, high))

    @property
    def edges(self) -> tuple[float, ...]:
        return self._axis.edges

    @property
    def nbins(self) -> int:
        return self._axis.nbins

    def _check_index(self, i: int) -> None:
        if not 0 <= i <= self.nbins + 1:
            raise IndexError(f"bin {i} out of range 0..{self.nbins + 1}")

    def _activate_sumw2(self) -> None:
        if self._sumw2 is None:
            self._sumw2 = [abs(c) for c in self._contents]

    def find_bin(self, x) -> int:
        return self._axis.find_bin(x)

    def fill(self, x, weight=1.0) -> int:
        """Add ``weight`` to the bin holding ``x`` and return that bin."""
        if weight != 1.0:
            self._activate_sumw2()
        index = self.find_bin(x)
        self._contents[index] += weight
        if self._sumw2 is not None:
            self._sumw2[index] += weight * weight
        self.entries += 1
        return index

    def bin_content(self, i) -> float:
        self._check_index(i)
        return self._contents[i]

    def set_bin_content(self, i, value) -> None:
        self._check_index(i)
        self._contents[i] = float(value)

    def bin_error(self, i) -> float:
        self._check_index(i)
        if self._sumw2 is None:
            return math.sqrt(abs(self._contents[i]))
        return math.sqrt(self._sumw2[i])

    def bin_center(self, i) -> float:
        return self._axis.center(i)

    def bin_width(self, i) -> float:
        return self._axis.width(i)

    def integral(self, first=1, last=None) -> float:
        """Sum of contents from ``first`` to ``last`` inclusive.

        By default the regular bins only; a negative or too large ``last``
        extends the range up to and including the overflow bin.
        """
        if last is None:
            last = self.nbins
        first = max(first, 0)
        if last > self.nbins + 1 or last < first:
            last = self.nbins + 1
        return sum(self._contents[first:last + 1])

    def scale(self, factor) -> None:
        if factor != 1.0:
            self._activate_sumw2()
        self._contents = [c * factor for c in self._contents]
        if self._sumw2 is not None:
            self._sumw2 = [e * factor * factor for e in self._sumw2]

    def divide(self, other: "Histogram") -> None:
        """Divide bin by bin; bins with a zero divisor become zero."""
        if other.edges != self.edges:
            raise ValueError("histograms have different binning")
        self._activate_sumw2()
        contents, errors = [], []
        for i, (c1, c2) in enumerate(zip(self._contents, other._contents)):
            if c2 == 0:
                contents.append(0.0)
                errors.append(0.0)
                continue
            e1 = self._sumw2[i]
            e2 = other.bin_error(i) ** 2
            contents.append(c1 / c2)
            errors.append((e1 * c2 * c2 + e2 * c1 * c1) / (c2 ** 4))
        self._contents = contents
        self._sumw2 = errors

    def copy(self) -> "Histogram":
        clone = type(self)._with_axis(self._axis)
        clone._contents = list(self._contents)
        clone._sumw2 = None if self._sumw2 is None else list(self._sumw2)
        clone.entries = self.entries
        return clone

    def to_dict(self) -> dict:
        return {
            "kind": "histogram",
            **self._axis.to_dict(),
            "contents": list(self._contents),
            "sumw2": None if self._sumw2 is None else list(self._sumw2),
            "entries": self.entries,
        }

    @classmethod
    def from_dict(cls, data) -> "Histogram":
        if data.get("kind") != "histogram":
            raise ValueError(f"not a histogram: {data.get('kind')!r}")
        hist = cls._with_axis(_Axis.from_dict(data))
        contents = [float(c) for c in data["contents"]]
        if len(contents) != hist.nbins + 2:
            raise ValueError("content length does not match the binning")
        hist._contents = contents
        if data.get("sumw2") is not None:
            hist._sumw2 = [float(e) for e in data["sumw2"]]
        hist.entries = int(data.get("entries", 0))
        return hist


class Profile:
    """Mean of a quantity per bin, with the error on the mean."""

    def __init__(self, edges):
        self._setup(_Axis.variable(edges))

    def _setup(self, axis: _Axis) -> None:
        self._axis = axis
        size = axis.nbins + 2
        self._counts = [0] * size
        self._sum_y = [0.0] * size
        self._sum_y2 = [0.0] * size

    @classmethod
    def _with_axis(cls, axis: _Axis) -> "Profile":
        prof = cls.__new__(cls)
        prof._setup(axis)
        return prof

    @classmethod
    def uniform(cls, nbins, low, high) -> "Profile":
        return cls._with_axis(_Axis.fixed(nbins, low, high))

    @property
    def edges(self) -> tuple[float, ...]:
        return self._axis.edges

    @property
    def nbins(self) -> int:
        return self._axis.nbins

    def _check_index(self, i: int) -> None:
        if not 0 <= i <= self.nbins + 1:
            raise IndexError(f"bin {i} out of range 0..{self.nbins + 1}")

    def find_bin(self, x) -> int:
        return self._axis.find_bin(x)

    def fill(self, x, y) -> int:
        index = self.find_bin(x)
        self._counts[index] += 1
        self._sum_y[index] += y
        self._sum_y2[index] += y * y
        return index

    def bin_content(self, i) -> float:
        self._check_index(i)
        count = self._counts[i]
        return self._sum_y[i] / count if count else 0.0

    def bin_error(self, i) -> float:
        self._check_index(i)
        count = self._counts[i]
        if not count:
            return 0.0
        mean = self._sum_y[i] / count
        variance = max(self._sum_y2[i] / count - mean * mean, 0.0)
        return math.sqrt(variance) / math.sqrt(count)

    def bin_center(self, i) -> float:
        return self._axis.center(i)

    def bin_width(self, i) -> float:
        return self._axis.width(i)

    def to_dict(self) -> dict:
        return {
            "kind": "profile",
            **self._axis.to_dict(),
            "counts": list(self._counts),
            "sum_y": list(self._sum_y),
            "sum_y2": list(self._sum_y2),
        }

    @classmethod
    def from_dict(cls, data) -> "Profile":
        if data.get("kind") != "profile":
            raise ValueError(f"not a profile: {data.get('kind')!r}")
        prof = cls._with_axis(_Axis.from_dict(data))
        counts = [int(c) for c in data["counts"]]
        if len(counts) != prof.nbins + 2:
            raise ValueError("count length does not match the binning")
        prof._counts = counts
        prof._sum_y = [float(v) for v in data["sum_y"]]
        prof._sum_y2 = [float(v) for v in data["sum_y2"]]
        return prof


Binned = Union[Histogram, Profile]

_KINDS = {"histogram": Histogram, "profile": Profile}


def save_objects(path, objects: Mapping[str, Binned]) -> None:
    """Write named histograms and profiles to a JSON file, replacing it."""
    document = {"objects": {name: obj.to_dict() for name, obj in objects.items()}}
    Path(path).write_text(json.dumps(document), encoding="utf-8")


def load_objects(path) -> dict[str, Binned]:
    """Read the named histograms and profiles written by :func:`save_objects`."""
    document = json.loads(Path(path).read_text(encoding="utf-8"))
    result: dict[str, Binned] = {}
    for name, data in document.get("objects", {}).items():
        kind = _KINDS.get(data.get("kind"))
        if kind is None:
            raise ValueError(f"unknown object kind {data.get('kind')!r} for {name!r}")
        result[name] = kind.from_dict(data)
    return result