import math

import pytest

from dzerospher.deltaphi import (
    NONPROMPT_NAME,
    PROMPT_NAME,
    delta_phi_spectra,
    normalize_spectrum,
    wrap_delta_phi,
)
from dzerospher.events import Event
from dzerospher.histogram import Histogram


def _event(pt_lead, phi_lead):
    return Event(pt_lead=tuple(pt_lead), phi_lead=tuple(phi_lead))


def test_wrap_keeps_values_in_range():
    assert wrap_delta_phi(0.0) == 0.0
    assert wrap_delta_phi(1.0) == 1.0


@pytest.mark.parametrize("delta", [-7.0, -3.0, -1.6, 4.8, 5.0, 10.0, 20.0])
def test_wrap_result_in_window_and_whole_turns(delta):
    wrapped = wrap_delta_phi(delta)
    assert -0.5 * math.pi <= wrapped <= 1.5 * math.pi
    turns = (wrapped - delta) / (2 * math.pi)
    assert turns == pytest.approx(round(turns))


def test_wrap_negative_pi_goes_to_pi():
    assert wrap_delta_phi(-math.pi) == pytest.approx(math.pi)


def test_normalize_gives_unit_area():
    hist = Histogram.uniform(25, -0.5 * math.pi, 1.5 * math.pi)
    for x in (0.1, 0.2, 1.0, 3.0, 4.0):
        hist.fill(x)
    normalize_spectrum(hist)
    assert hist.integral(0, -1) * hist.bin_width(1) == pytest.approx(1.0)


def test_normalize_empty_raises():
    hist = Histogram.uniform(25, -0.5 * math.pi, 1.5 * math.pi)
    with pytest.raises(ValueError):
        normalize_spectrum(hist)


def test_spectra_binning():
    spectra = delta_phi_spectra([])
    for hist in spectra.values():
        assert hist.nbins == 25
        assert hist.edges[0] == pytest.approx(-0.5 * math.pi)
        assert hist.edges[-1] == pytest.approx(1.5 * math.pi)


def test_spectra_fill_and_normalise():
    events = [_event((0.0, 1.0, 1.0, 1.0), (0.0, 0.5, 1.0, 0.0))]
    spectra = delta_phi_spectra(events)
    prompt = spectra[PROMPT_NAME]
    nonprompt = spectra[NONPROMPT_NAME]
    width = prompt.bin_width(1)
    assert prompt.bin_content(prompt.find_bin(0.5)) == pytest.approx(1.0 / width)
    assert nonprompt.bin_content(nonprompt.find_bin(1.0)) == pytest.approx(1.0 / width)
    assert prompt.integral(0, -1) * width == pytest.approx(1.0)


def test_spectra_require_leading_pt_threshold():
    events = [_event((0.0, 0.1, 1.0, 1.0), (0.0, 0.5, 1.0, 0.0))]
    spectra = delta_phi_spectra(events)
    assert spectra[PROMPT_NAME].integral(0, -1) == 0
    assert spectra[NONPROMPT_NAME].integral(0, -1) * spectra[
        NONPROMPT_NAME
    ].bin_width(1) == pytest.approx(1.0)


def test_spectra_need_charged_leader():
    events = [_event((0.0, 1.0, 1.0, 0.15), (0.0, 0.5, 1.0, 0.0))]
    spectra = delta_phi_spectra(events)
    assert spectra[PROMPT_NAME].integral(0, -1) == 0
    assert spectra[NONPROMPT_NAME].integral(0, -1) == 0


def test_spectra_wraps_before_filling():
    events = [_event((0.0, 1.0, 0.0, 1.0), (0.0, -math.pi, 0.0, 0.0))]
    prompt = delta_phi_spectra(events)[PROMPT_NAME]
    assert prompt.bin_content(prompt.find_bin(math.pi)) > 0
    assert prompt.bin_content(0) == 0