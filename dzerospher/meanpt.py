"""Mean D0 transverse momentum versus FT0 multiplicity for jetty and isotropic events."""

from __future__ import annotations

from typing import Iterable

from .events import Event
from .histogram import Profile

MULT_BINS = (3, 7, 9, 13, 18, 26, 46, 200)
JETTY = (0.49125, 0.50265, 0.51455, 0.53135, 0.55805, 0.61395, 0.68875)
ISOTROPIC = (0.76255, 0.76845, 0.77465, 0.78425, 0.80005, 0.83045, 0.86455)

MIN_SPHEROCITY_MULTIPLICITY = 10
MIN_PT = 0.15
MAX_ABS_RAPIDITY = 0.5

_NAMES = {
    ("jetty", 1): "prompt_jetty",
    ("jetty", 2): "nonprompt_jetty",
    ("isotropic", 1): "prompt_isotropic",
    ("isotropic", 2): "nonprompt_isotropic",
}


def _ft0_class(ft0) -> int | None:
    found = None
    for m, (low, high) in enumerate(zip(MULT_BINS, MULT_BINS[1:])):
        if low <= ft0 < high:
            found = m
    return found


def _fill(profiles: dict[str, Profile], shape: str, event: Event) -> None:
    for track in event.tracks:
        name = _NAMES.get((shape, track.tag))
        if name is None:
            continue
        if abs(track.rapidity()) < MAX_ABS_RAPIDITY and track.transverse_momentum() > MIN_PT:
            profiles[name].fill(event.ft0, track.pt)


def mean_pt_profiles(events: Iterable[Event]) -> dict[str, Profile]:
    """Profiles of D0 pT against FT0 for prompt/non-prompt, jetty/isotropic events."""
    profiles = {name: Profile(MULT_BINS) for name in _NAMES.values()}
    for event in events:
        index = _ft0_class(event.ft0)
        if event.etamultpoint8s0 < MIN_SPHEROCITY_MULTIPLICITY or index is None:
            continue
        sp = event.spherocity
        if 0.0 <= sp < JETTY[index]:
            _fill(profiles, "jetty", event)
        if ISOTROPIC[index] < sp <= 1.0:
            _fill(profiles, "isotropic", event)
    return profiles