import pytest

from dzerospher.events import Event, Track
from dzerospher.meanpt import MULT_BINS, mean_pt_profiles


def _track(pt, tag, **extra):
    return Track(px=pt, py=0.0, pz=0.0, energy=pt + 1.0, tag=tag, **extra)


def _event(ft0, sp, tracks, mult=10):
    return Event(tracks=tracks, ft0=ft0, spherocity=sp, etamultpoint8s0=mult)


def test_profile_names_and_binning():
    profiles = mean_pt_profiles([])
    assert set(profiles) == {
        "prompt_jetty",
        "nonprompt_jetty",
        "prompt_isotropic",
        "nonprompt_isotropic",
    }
    for prof in profiles.values():
        assert prof.edges == tuple(float(e) for e in MULT_BINS)


def test_jetty_prompt_mean():
    events = [_event(50, 0.3, [_track(2.0, 1), _track(4.0, 1)])]
    profiles = mean_pt_profiles(events)
    prompt = profiles["prompt_jetty"]
    assert prompt.bin_content(prompt.find_bin(50)) == pytest.approx(3.0)
    nonprompt = profiles["nonprompt_jetty"]
    assert nonprompt.bin_content(nonprompt.find_bin(50)) == 0.0
    iso = profiles["prompt_isotropic"]
    assert iso.bin_content(iso.find_bin(50)) == 0.0


def test_isotropic_nonprompt_filled():
    events = [_event(50, 0.95, [_track(5.0, 2)])]
    profiles = mean_pt_profiles(events)
    prof = profiles["nonprompt_isotropic"]
    assert prof.bin_content(prof.find_bin(50)) == pytest.approx(5.0)
    assert profiles["nonprompt_jetty"].bin_content(prof.find_bin(50)) == 0.0


def test_stored_pt_is_averaged():
    events = [_event(20, 0.3, [_track(1.0, 1, pt=7.0)])]
    prof = mean_pt_profiles(events)["prompt_jetty"]
    assert prof.bin_content(prof.find_bin(20)) == pytest.approx(7.0)


def test_low_multiplicity_and_out_of_range_skipped():
    events = [
        _event(50, 0.3, [_track(2.0, 1)], mult=9),
        _event(2, 0.3, [_track(2.0, 1)]),
    ]
    profiles = mean_pt_profiles(events)
    for prof in profiles.values():
        assert all(prof.bin_content(i) == 0.0 for i in range(prof.nbins + 2))


def test_soft_track_excluded():
    events = [_event(50, 0.3, [_track(0.1, 1), _track(3.0, 1)])]
    prof = mean_pt_profiles(events)["prompt_jetty"]
    assert prof.bin_content(prof.find_bin(50)) == pytest.approx(3.0)