from pathlib import Path

import math

import pytest

from dzerospher.events import Event, Track, event_file, read_events, write_events


def test_rapidity_zero_for_transverse_track():
    track = Track(px=1.0, py=0.5, pz=0.0, energy=2.0)
    assert track.rapidity() == 0.0


def test_rapidity_antisymmetric_in_pz():
    forward = Track(px=1.0, py=0.0, pz=1.5, energy=3.0)
    backward = Track(px=1.0, py=0.0, pz=-1.5, energy=3.0)
    assert forward.rapidity() > 0
    assert backward.rapidity() == pytest.approx(-forward.rapidity())


def test_rapidity_on_light_cone():
    track = Track(px=0.0, py=0.0, pz=2.0, energy=2.0)
    assert track.rapidity() == math.inf


def test_transverse_momentum_and_default_pt():
    track = Track(px=3.0, py=4.0, pz=1.0, energy=10.0)
    assert track.transverse_momentum() == pytest.approx(5.0)
    assert track.pt == track.transverse_momentum()
    assert Track(px=3.0, py=4.0, pz=0.0, energy=9.0, pt=7.5).pt == 7.5


def test_write_read_round_trip(tmp_path):
    events = [
        Event(
            tracks=[Track(1.0, 2.0, 0.5, 3.0, tag=1), Track(0.1, 0.2, 0.0, 0.3, tag=2)],
            ft0=17,
            spherocity=0.62,
            etamultpoint8s0=12,
            pt_lead=(0.0, 1.2, 0.0, 3.4),
            phi_lead=(0.0, 0.3, 0.0, 2.1),
        ),
        Event(ft0=3),
    ]
    path = tmp_path / "events.jsonl"
    assert write_events(path, events) == len(events)
    loaded = list(read_events(path))
    assert loaded == events
    assert loaded[0].ntrack == 2


def test_read_bad_record(tmp_path):
    path = tmp_path / "bad.jsonl"
    path.write_text('{"ft0": 1}\n{"unknown_field": 2}\n', encoding="utf-8")
    with pytest.raises(ValueError):
        list(read_events(path))


def test_event_file_path():
    assert event_file("base", "on", "off") == Path("base/CR-on-MPI-off/pp-on-off.jsonl")


def test_event_file_rejects_both_off_and_bad_values():
    with pytest.raises(ValueError):
        event_file("base", "off", "off")
    with pytest.raises(ValueError):
        event_file("base", "yes", "on")