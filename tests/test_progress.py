import pytest

from dzerospher.progress import BAR_WIDTH, BLUE, RESET, progress_bar


def test_start_of_bar():
    bar = progress_bar(0, 10)
    assert bar.startswith("\r" + BLUE + "[>")
    assert bar.endswith(RESET + "(0/10)")
    assert "0% " in bar


def test_half_way_counts():
    bar = progress_bar(5, 10, done="#", remain="-")
    assert bar.count("#") == BAR_WIDTH // 2
    assert bar.count("-") == BAR_WIDTH // 2 - 1
    assert bar.count(">") == 1
    assert "50% " in bar


def test_complete_bar_has_no_arrow():
    bar = progress_bar(10, 10, done="#", remain="-")
    assert ">" not in bar
    assert bar.count("#") == BAR_WIDTH
    assert "100% " in bar


def test_zero_total_raises():
    with pytest.raises(ValueError):
        progress_bar(1, 0)