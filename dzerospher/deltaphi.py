"""Azimuthal separation between leading D0 mesons and the leading charged particle."""

from __future__ import annotations

import math
from typing import Iterable

from .events import Event
from .histogram import Histogram

DELTA_PHI_LOW = -0.5 * math.pi
DELTA_PHI_HIGH = 1.5 * math.pi
N_BINS = 25
MIN_LEADING_PT = 0.15

# Indices into the per-event leading-particle arrays.
PROMPT = 1
NONPROMPT = 2
CHARGED = 3

PROMPT_NAME = "Delphi-dist-prompt"
NONPROMPT_NAME = "Delphi-dist-nonprompt"


def wrap_delta_phi(delta) -> float:
    """Shift an angle difference by whole turns into [-pi/2, 3pi/2]."""
    delta = float(delta)
    while delta < DELTA_PHI_LOW:
        delta += 2 * math.pi
    while delta > DELTA_PHI_HIGH:
        delta -= 2 * math.pi
    return delta


def normalize_spectrum(histogram: Histogram) -> None:
    """Scale to unit area per bin width, counting under- and overflow."""
    total = histogram.integral(0, -1)
    if total == 0:
        raise ValueError("cannot normalise an empty spectrum")
    histogram.scale(1.0 / (total * histogram.bin_width(1)))


def _leading_pair_filled(event: Event, species: int) -> float | None:
    if event.pt_lead[species] > MIN_LEADING_PT and event.pt_lead[CHARGED] > MIN_LEADING_PT:
        return wrap_delta_phi(event.phi_lead[species] - event.phi_lead[CHARGED])
    return None


def delta_phi_spectra(events: Iterable[Event]) -> dict[str, Histogram]:
    """Normalised delta-phi spectra for prompt and non-prompt leading D0 mesons.

    A spectrum that received no entries is returned empty.
    """
    spectra = {
        PROMPT_NAME: Histogram.uniform(N_BINS, DELTA_PHI_LOW, DELTA_PHI_HIGH),
        NONPROMPT_NAME: Histogram.uniform(N_BINS, DELTA_PHI_LOW, DELTA_PHI_HIGH),
    }
    species_of = {PROMPT_NAME: PROMPT, NONPROMPT_NAME: NONPROMPT}
    for event in events:
        for name, species in species_of.items():
            delta = _leading_pair_filled(event, species)
            if delta is not None:
                spectra[name].fill(delta)
    for histogram in spectra.values():
        if histogram.integral(0, -1) != 0:
            normalize_spectrum(histogram)
    return spectra