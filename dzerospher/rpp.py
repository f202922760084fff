"""Jetty and isotropic D0 transverse-momentum spectra relative to all events."""

from __future__ import annotations

from typing import Iterable

from .events import Event, Track
from .histogram import Histogram

PT_BINS = (0.15, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 10.0, 12.0, 16.0, 24.0)

JETTY = (0.68875, 0.61395, 0.55805, 0.53135, 0.51455, 0.50265, 0.49125)
ISOTROPIC = (0.86455, 0.83045, 0.80005, 0.78425, 0.77465, 0.76845, 0.76255)
FT0_LOW = (46, 26, 18, 13, 9, 7, 3)
FT0_HIGH = (242, 46, 26, 18, 13, 9, 7)

MIN_BIAS_JETTY = 0.55755
MIN_BIAS_ISOTROPIC = 0.80685
MIN_SPHEROCITY_MULTIPLICITY = 10
MIN_PT = 0.15
MAX_ABS_RAPIDITY = 0.5

N_CLASSES = len(JETTY) + 1
MIN_BIAS_CLASS = N_CLASSES - 1

PROMPT_TAG = 1
NONPROMPT_TAG = 2


def _accepted(track: Track) -> bool:
    return (
        abs(track.rapidity()) < MAX_ABS_RAPIDITY
        and track.transverse_momentum() > MIN_PT
    )


def accepted_pts(event: Event, tag) -> list[float]:
    """Transverse momenta of tracks with ``tag`` at mid-rapidity above 0.15 GeV/c."""
    return [
        track.transverse_momentum()
        for track in event.tracks
        if track.tag == tag and _accepted(track)
    ]


class _Spectra:
    """Prompt and non-prompt spectra of one event selection with their fill counts."""

    def __init__(self) -> None:
        self.hists = {PROMPT_TAG: Histogram(PT_BINS), NONPROMPT_TAG: Histogram(PT_BINS)}
        self.counts = {PROMPT_TAG: 0, NONPROMPT_TAG: 0}

    def add(self, event: Event) -> None:
        for tag, hist in self.hists.items():
            for pt in accepted_pts(event, tag):
                hist.fill(pt)
                self.counts[tag] += 1

    def normalise(self) -> None:
        for tag, hist in self.hists.items():
            for i in range(1, hist.nbins + 1):
                hist.set_bin_content(i, hist.bin_content(i) / hist.bin_width(i))
            if self.counts[tag]:
                hist.scale(1.0 / self.counts[tag])


def _selections(event: Event):
    """Yield (class index, jetty, isotropic, all) for every class the event enters."""
    sp = event.spherocity
    for m, (low, high) in enumerate(zip(FT0_LOW, FT0_HIGH)):
        if low <= event.ft0 < high:
            yield m, 0 <= sp < JETTY[m], ISOTROPIC[m] < sp <= 1, sp >= 0
    if event.ft0 > 0:
        yield (
            MIN_BIAS_CLASS,
            0 <= sp < MIN_BIAS_JETTY,
            MIN_BIAS_ISOTROPIC < sp <= 1.0,
            sp >= 0,
        )


def rpp_ratios(events: Iterable[Event]) -> dict[str, Histogram]:
    """Per-class ratios of jetty and isotropic spectra to the class-integrated spectra.

    Classes 0..6 are FT0 multiplicity classes (0 highest); class 7 is minimum bias.
    """
    jetty = [_Spectra() for _ in range(N_CLASSES)]
    isotropic = [_Spectra() for _ in range(N_CLASSES)]
    integrated = [_Spectra() for _ in range(N_CLASSES)]

    for event in events:
        if event.etamultpoint8s0 < MIN_SPHEROCITY_MULTIPLICITY:
            continue
        for m, is_jetty, is_isotropic, is_any in _selections(event):
            if is_jetty:
                jetty[m].add(event)
            if is_isotropic:
                isotropic[m].add(event)
            if is_any:
                integrated[m].add(event)

    for spectra in (*jetty, *isotropic, *integrated):
        spectra.normalise()

    ratios: dict[str, Histogram] = {}
    for m in range(N_CLASSES):
        for shape, selection in (("J", jetty[m]), ("I", isotropic[m])):
            for prefix, tag in (("prompt", PROMPT_TAG), ("nonprompt", NONPROMPT_TAG)):
                ratio = selection.hists[tag].copy()
                ratio.divide(integrated[m].hists[tag])
                ratios[f"{prefix}_{shape}_mult_{m}"] = ratio
    return ratios