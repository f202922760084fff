import pytest

from dzerospher.events import Event, Track
from dzerospher.rpp import PT_BINS, accepted_pts, rpp_ratios


def _track(pt, tag, pz=0.0):
    return Track(px=pt, py=0.0, pz=pz, energy=pt + 1.0 + abs(pz), tag=tag)


def _event(ft0, sp, tracks, mult=10):
    return Event(tracks=tracks, ft0=ft0, spherocity=sp, etamultpoint8s0=mult)


def test_accepted_pts_filters_tag_pt_and_rapidity():
    event = Event(
        tracks=[
            _track(3.0, 1),
            _track(0.1, 1),
            _track(5.0, 2),
            Track(px=3.0, py=0.0, pz=3.0, energy=4.0, tag=1),
        ]
    )
    assert accepted_pts(event, 1) == [pytest.approx(3.0)]
    assert accepted_pts(event, 2) == [pytest.approx(5.0)]
    assert accepted_pts(event, 3) == []


def test_ratio_names_and_binning():
    ratios = rpp_ratios([])
    assert len(ratios) == 32
    for m in range(8):
        for name in ("prompt_J", "nonprompt_J", "prompt_I", "nonprompt_I"):
            assert ratios[f"{name}_mult_{m}"].edges == PT_BINS


def test_empty_input_gives_zero_ratios():
    ratios = rpp_ratios([])
    hist = ratios["prompt_J_mult_0"]
    assert hist.integral(0, -1) == 0


def test_jetty_and_isotropic_ratio_to_integrated():
    events = [
        _event(50, 0.3, [_track(3.0, 1)]),
        _event(50, 0.9, [_track(3.0, 1)]),
    ]
    ratios = rpp_ratios(events)
    for name in ("prompt_J_mult_0", "prompt_I_mult_0"):
        hist = ratios[name]
        assert hist.bin_content(hist.find_bin(3.0)) == pytest.approx(1.0)
    nonprompt = ratios["nonprompt_J_mult_0"]
    assert nonprompt.integral(0, -1) == 0


def test_minimum_bias_class_uses_own_cuts():
    events = [_event(50, 0.3, [_track(6.5, 2)])]
    ratios = rpp_ratios(events)
    jetty = ratios["nonprompt_J_mult_7"]
    assert jetty.bin_content(jetty.find_bin(6.5)) == pytest.approx(1.0)
    assert ratios["nonprompt_I_mult_7"].integral(0, -1) == 0
    assert ratios["nonprompt_J_mult_3"].integral(0, -1) == 0


def test_low_spherocity_multiplicity_skipped():
    events = [_event(50, 0.3, [_track(3.0, 1)], mult=9)]
    ratios = rpp_ratios(events)
    assert all(hist.integral(0, -1) == 0 for hist in ratios.values())


def test_intermediate_spherocity_enters_neither_shape():
    events = [_event(50, 0.75, [_track(3.0, 1)])]
    ratios = rpp_ratios(events)
    assert ratios["prompt_J_mult_0"].integral(0, -1) == 0
    assert ratios["prompt_I_mult_0"].integral(0, -1) == 0