"""Self-normalised D0 yields versus FT0 multiplicity for jetty and isotropic events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .events import Event, Track
from .histogram import Histogram

MIN_SPHEROCITY_MULTIPLICITY = 10
MAX_ABS_RAPIDITY = 0.5

# Open transverse-momentum intervals, named "1", "2", "3" in the output.
PT_RANGES = ((1.0, 2.0), (2.0, 5.0), (5.0, 24.0))

MIN_BIAS_EDGES = (0.0, 200.0)

PROMPT_TAG = 1
NONPROMPT_TAG = 2

_SPECIES = (("prompt", PROMPT_TAG), ("nonprompt", NONPROMPT_TAG))


@dataclass(frozen=True)
class ClassCuts:
    """FT0 class edges and per-class spherocity cuts for one tune."""

    ft0_edges: tuple[float, ...]
    jetty: tuple[float, ...]
    isotropic: tuple[float, ...]

    def __post_init__(self) -> None:
        nclasses = len(self.ft0_edges) - 1
        if nclasses < 1:
            raise ValueError("at least one FT0 class is needed")
        if len(self.jetty) != nclasses or len(self.isotropic) != nclasses:
            raise ValueError("one jetty and one isotropic cut are needed per FT0 class")

    @property
    def nclasses(self) -> int:
        return len(self.ft0_edges) - 1

    def ft0_class(self, ft0) -> int | None:
        """Index of the class with ``low <= ft0 < high``, or None outside all."""
        found = None
        for m, (low, high) in enumerate(zip(self.ft0_edges, self.ft0_edges[1:])):
            if low <= ft0 < high:
                found = m
        return found


_CUTS = {
    "on": ClassCuts(
        ft0_edges=(3, 7, 9, 13, 18, 26, 46, 200),
        jetty=(0.491, 0.503, 0.514, 0.531, 0.558, 0.614, 0.689),
        isotropic=(0.762, 0.768, 0.775, 0.784, 0.80, 0.830, 0.864),
    ),
    "off": ClassCuts(
        ft0_edges=(4, 7, 10, 15, 22, 32, 58, 200),
        jetty=(0.483, 0.495, 0.51, 0.533, 0.572, 0.644, 0.722),
        isotropic=(0.756, 0.763, 0.772, 0.786, 0.808, 0.845, 0.879),
    ),
}


def cuts_for(cr) -> ClassCuts:
    """Class cuts for colour reconnection switched ``"on"`` or ``"off"``."""
    try:
        return _CUTS[cr]
    except KeyError:
        raise ValueError(f"CR must be 'on' or 'off', got {cr!r}") from None


def _pt_ranges_of(track: Track) -> list[int]:
    if abs(track.rapidity()) >= MAX_ABS_RAPIDITY:
        return []
    return [k for k, (low, high) in enumerate(PT_RANGES) if low < track.pt < high]


def _fill_tracks(hists: dict[tuple[int, int], Histogram], event: Event) -> None:
    for track in event.tracks:
        if track.tag not in (PROMPT_TAG, NONPROMPT_TAG):
            continue
        for k in _pt_ranges_of(track):
            hists[(track.tag, k)].fill(event.ft0)


def self_normalised_yields(events: Iterable[Event], cuts: ClassCuts) -> dict[str, Histogram]:
    """Per-event D0 yields in jetty and isotropic events, divided by the minimum-bias yield.

    Keys are ``{prompt,nonprompt}_{J,I}_{1,2,3}`` for the three pT ranges.
    """
    edges = cuts.ft0_edges
    keys = [(tag, k) for _, tag in _SPECIES for k in range(len(PT_RANGES))]
    jetty = {key: Histogram(edges) for key in keys}
    isotropic = {key: Histogram(edges) for key in keys}
    minimum_bias = {key: Histogram(MIN_BIAS_EDGES) for key in keys}
    jetty_events = Histogram(edges)
    isotropic_events = Histogram(edges)
    n_events = 0

    for event in events:
        index = cuts.ft0_class(event.ft0)
        if event.etamultpoint8s0 >= MIN_SPHEROCITY_MULTIPLICITY and index is not None:
            sp = event.spherocity
            if 0.0 <= sp < cuts.jetty[index]:
                _fill_tracks(jetty, event)
                jetty_events.fill(event.ft0)
            if cuts.isotropic[index] < sp <= 1.0:
                _fill_tracks(isotropic, event)
                isotropic_events.fill(event.ft0)
        _fill_tracks(minimum_bias, event)
        n_events += 1

    result: dict[str, Histogram] = {}
    for prefix, tag in _SPECIES:
        for k in range(len(PT_RANGES)):
            mb_yield = minimum_bias[(tag, k)].integral()
            for shape, hists, counter in (
                ("J", jetty, jetty_events),
                ("I", isotropic, isotropic_events),
            ):
                hist = hists[(tag, k)]
                if mb_yield:
                    hist.scale(n_events / mb_yield)
                hist.divide(counter)
                result[f"{prefix}_{shape}_{k + 1}"] = hist
    return result