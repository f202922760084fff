import pytest

from dzerospher.events import Event
from dzerospher.multiplicity import (
    FT0_EDGES,
    SEPARATOR,
    format_summary,
    multiplicity_profiles,
)


def _events(pairs):
    return [Event(ft0=ft0, etamultpoint8=mult) for ft0, mult in pairs]


def test_constant_density_fills_every_bin_with_same_mean():
    events = _events([(5, 16), (8, 16), (50, 16), (100, 16)])
    profile, mb = multiplicity_profiles(events, fraction=1.0)
    assert profile.bin_content(1) == pytest.approx(10.0)
    assert profile.bin_content(7) == pytest.approx(profile.bin_content(1))
    assert profile.bin_error(7) == pytest.approx(0.0)
    assert mb.bin_content(1) == pytest.approx(profile.bin_content(1))


def test_default_fraction_uses_leading_tenth_of_events():
    events = _events([(5, 16)] * 2 + [(5, 160)] * 18)
    _, mb = multiplicity_profiles(events)
    full_profile, full_mb = multiplicity_profiles(events[:2], fraction=1.0)
    assert mb.bin_content(1) == pytest.approx(full_mb.bin_content(1))
    assert mb.bin_content(1) < multiplicity_profiles(events, fraction=1.0)[1].bin_content(1)


def test_edges_are_taken_from_argument():
    profile, _ = multiplicity_profiles([], edges=(0, 10, 20), fraction=1.0)
    assert profile.edges == (0.0, 10.0, 20.0)
    default_profile, _ = multiplicity_profiles([], fraction=1.0)
    assert default_profile.edges == tuple(float(e) for e in FT0_EDGES)


@pytest.mark.parametrize("fraction", [0.0, -0.5, 1.5])
def test_bad_fraction_raises(fraction):
    with pytest.raises(ValueError):
        multiplicity_profiles([], fraction=fraction)


def test_summary_layout():
    events = _events([(5, 8), (5, 24), (60, 40), (100, 48)])
    profile, mb = multiplicity_profiles(events, fraction=1.0)
    lines = format_summary(profile, mb).splitlines()
    assert lines[0].startswith("Class = 7\t")
    assert lines[6].startswith("Class = 1\t")
    assert lines[7] == SEPARATOR
    assert lines[8].startswith("Min Bias <dNch/deta> = 100\t")
    assert lines[11] == "right order"


def test_summary_reverse_lists_mirror_forward_lists():
    events = _events([(5, 8), (12, 24), (60, 40), (100, 48)])
    profile, mb = multiplicity_profiles(events, fraction=1.0)
    lines = format_summary(profile, mb).splitlines()
    reversed_contents = lines[9].strip("{}").split(",")
    forward_contents = lines[12].strip("{}").split(",")
    assert reversed_contents == forward_contents[::-1]
    reversed_errors = lines[10].strip("{}").split(",")
    forward_errors = lines[13].strip("{}").split(",")
    assert reversed_errors == forward_errors[::-1]
    assert len(forward_contents) == profile.nbins