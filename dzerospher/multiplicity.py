"""Mean mid-rapidity charged-particle density per FT0 multiplicity class."""

from __future__ import annotations

from typing import Iterable

from .events import Event
from .histogram import Profile

# FT0 class edges used with colour reconnection off; the class with the
# highest multiplicity is the last bin.
FT0_EDGES = (4, 7, 10, 15, 22, 32, 58, 200)
CR_ON_FT0_EDGES = (3, 7, 9, 13, 18, 26, 46, 200)

# Width of the |eta| < 0.8 acceptance.
ETA_WIDTH = 1.6

MIN_BIAS_BINS = 1
MIN_BIAS_LOW = 0.0
MIN_BIAS_HIGH = 200.0

DEFAULT_FRACTION = 0.1

PROFILE_NAME = "profile_FT0_0p8dNchdeta"
MIN_BIAS_PROFILE_NAME = "profile_MB_0p8dNchdeta"

SEPARATOR = "=" * 61


def multiplicity_profiles(
    events: Iterable[Event], edges=FT0_EDGES, fraction=DEFAULT_FRACTION
) -> tuple[Profile, Profile]:
    """Profiles of dNch/deta in |eta| < 0.8 against FT0, per class and minimum bias.

    Only the leading ``fraction`` of the events, rounded down, is used.
    """
    if not 0.0 < fraction <= 1.0:
        raise ValueError(f"fraction must lie in (0, 1], got {fraction!r}")
    sample = list(events)
    used = int(len(sample) * fraction + 1e-9)
    per_class = Profile(edges)
    minimum_bias = Profile.uniform(MIN_BIAS_BINS, MIN_BIAS_LOW, MIN_BIAS_HIGH)
    for event in sample[:used]:
        density = event.etamultpoint8 / ETA_WIDTH
        per_class.fill(event.ft0, density)
        minimum_bias.fill(event.ft0, density)
    return per_class, minimum_bias


def _number(value: float) -> str:
    return f"{value:g}"


def _braced(values) -> str:
    return "{" + ",".join(_number(v) for v in values) + "}"


def format_summary(profile: Profile, minimum_bias: Profile) -> str:
    """Text report of the per-class and minimum-bias densities with their errors."""
    nbins = profile.nbins
    bins = range(1, nbins + 1)
    lines = [
        f"Class = {nbins + 1 - i}\t NchFT0 = {_number(profile.bin_center(i))}"
        f"\t <dNchmid/deta> = {_number(profile.bin_content(i))}"
        f" +/- {_number(profile.bin_error(i))}"
        for i in bins
    ]
    lines.append(SEPARATOR)
    lines.append(
        f"Min Bias <dNch/deta> = {_number(minimum_bias.bin_center(1))}\t"
        f"{_number(minimum_bias.bin_content(1))} +/- {_number(minimum_bias.bin_error(1))}"
    )
    contents = [profile.bin_content(i) for i in bins]
    errors = [profile.bin_error(i) for i in bins]
    lines.append(_braced(reversed(contents)))
    lines.append(_braced(reversed(errors)))
    lines.append("right order")
    lines.append(_braced(contents))
    lines.append(_braced(errors))
    return "\n".join(lines) + "\n"