import pytest

from delivery.smoothing import smooth_series


def test_empty_series() -> None:
    assert smooth_series([]) == []


def test_alpha_one_is_identity() -> None:
    series = [3.0, -1.0, 7.5, 0.0]

    assert smooth_series(series, 1.0) == series


def test_known_values() -> None:
    assert smooth_series([0.0, 10.0, 10.0], 0.5) == pytest.approx([0.0, 5.0, 7.5])


def test_default_alpha_is_speed_factor() -> None:
    assert smooth_series([0.0, 100.0]) == pytest.approx([0.0, 35.0])


def test_constant_series_stays_at_first_value() -> None:
    assert smooth_series([4.0] * 50, 1e-6) == pytest.approx([4.0] * 50)


def test_small_alpha_holds_first_value() -> None:
    output = smooth_series([1.0, 100.0, 100.0], 1e-9)

    assert output[-1] == pytest.approx(1.0, abs=1e-6)


def test_no_state_between_calls() -> None:
    series = [1.0, 5.0, 2.0]

    assert smooth_series(series, 0.25) == smooth_series(series, 0.25)


@pytest.mark.parametrize("alpha", [0.0, -0.1, 1.5])
def test_invalid_alpha_rejected(alpha) -> None:
    with pytest.raises(ValueError):
        smooth_series([1.0, 2.0], alpha)
