import math

import pytest

from taptempo.modules.tempo_estimator import (
    Estimate,
    InsufficientData,
    TempoEstimator,
    compute_bpm,
    format_bpm,
)
from taptempo.modules.tempo_params import TempoParams

MS = 1_000_000


def make_estimator(precision=0, reset_time=5, sample_size=5, clock=None):
    params = TempoParams.validate(precision, reset_time, sample_size)
    if clock is None:
        return TempoEstimator(params)
    return TempoEstimator(params, clock=clock)


def test_first_tap_is_insufficient():
    estimator = make_estimator()
    assert estimator.record_tap(0) == InsufficientData(sample_count=1)


def test_two_taps_one_second_apart_give_120_bpm():
    estimator = make_estimator()
    estimator.record_tap(0)
    result = estimator.record_tap(1000 * MS)
    assert isinstance(result, Estimate)
    assert result.bpm == pytest.approx(120.0)
    assert result.sample_count == 2


def test_full_window_uses_every_sample():
    estimator = make_estimator(sample_size=5)
    for ms in (0, 500, 1000, 1500):
        estimator.record_tap(ms * MS)
    result = estimator.record_tap(2000 * MS)
    assert result == Estimate(bpm=150.0, sample_count=5)


def test_sixth_tap_evicts_oldest():
    estimator = make_estimator(sample_size=5)
    for ms in (0, 500, 1000, 1500, 2000, 2500):
        result = estimator.record_tap(ms * MS)
    assert estimator.samples == tuple(ms * MS for ms in (500, 1000, 1500, 2000, 2500))
    assert result.sample_count == 5
    assert result.bpm == pytest.approx(150.0)


@pytest.mark.parametrize("sample_size", [1, 2, 3, 7])
def test_window_never_exceeds_sample_size(sample_size):
    estimator = make_estimator(sample_size=sample_size)
    for i in range(20):
        estimator.record_tap(i * 300 * MS)
        assert estimator.sample_count <= sample_size


def test_sample_size_one_never_estimates():
    estimator = make_estimator(sample_size=1)
    for i in range(4):
        assert estimator.record_tap(i * 400 * MS) == InsufficientData(sample_count=1)


def test_idle_gap_resets_window():
    estimator = make_estimator(reset_time=2)
    estimator.record_tap(0)
    estimator.record_tap(500 * MS)
    result = estimator.record_tap(2500 * MS)
    assert result == InsufficientData(sample_count=1)
    assert estimator.samples == (2500 * MS,)


def test_reset_compares_with_latest_tap_only():
    estimator = make_estimator(reset_time=2)
    for ms in (0, 1500, 3000, 4500):
        result = estimator.record_tap(ms * MS)
    assert result.sample_count == 4


def test_reset_uses_whole_seconds():
    estimator = make_estimator(reset_time=1)
    estimator.record_tap(0)
    assert not estimator.reset_time_elapsed(999 * MS)
    assert estimator.reset_time_elapsed(1000 * MS)
    result = estimator.record_tap(1999 * MS)
    assert result == InsufficientData(sample_count=1)


def test_reset_time_elapsed_on_empty_window():
    assert not make_estimator().reset_time_elapsed(10_000 * MS)


def test_explicit_reset_clears_window():
    estimator = make_estimator()
    estimator.record_tap(0)
    estimator.record_tap(400 * MS)
    estimator.reset()
    assert estimator.sample_count == 0
    assert estimator.record_tap(800 * MS) == InsufficientData(sample_count=1)


def test_identical_timestamps_are_insufficient():
    estimator = make_estimator()
    estimator.record_tap(1000 * MS)
    result = estimator.record_tap(1000 * MS)
    assert result == InsufficientData(sample_count=2)


def test_clock_going_backwards_is_insufficient():
    estimator = make_estimator()
    estimator.record_tap(1000 * MS)
    assert estimator.record_tap(900 * MS) == InsufficientData(sample_count=2)


def test_sub_millisecond_precision_is_kept():
    estimator = make_estimator()
    estimator.record_tap(0)
    result = estimator.record_tap(1_000_500_000)
    assert result.bpm == pytest.approx(2 * 60_000 / 1000.5)
    assert result.bpm != pytest.approx(120.0)


def test_tap_reads_injected_clock(fake_clock):
    estimator = make_estimator(clock=fake_clock(0, 250))
    assert estimator.tap() == InsufficientData(sample_count=1)
    assert estimator.tap() == Estimate(bpm=480.0, sample_count=2)


def test_compute_bpm_is_pure():
    samples = (0, 400 * MS, 800 * MS)
    first = compute_bpm(samples)
    assert first == compute_bpm(samples)
    assert first == pytest.approx(3 * 60_000 / 800)


@pytest.mark.parametrize("samples", [(), (5 * MS,), (7 * MS, 7 * MS)])
def test_compute_bpm_without_elapsed_time(samples):
    assert compute_bpm(samples) is None


def test_estimates_are_finite():
    estimator = make_estimator(sample_size=3)
    for ms in (0, 0, 0, 1, 1, 2):
        result = estimator.record_tap(ms * MS)
        if isinstance(result, Estimate):
            assert math.isfinite(result.bpm)


@pytest.mark.parametrize("bpm, precision, expected", [
    (120.0, 0, "120"),
    (119.94002998500749, 0, "120"),
    (119.94002998500749, 2, "119.94"),
    (150.0, 5, "150.00000"),
    (128.25, 1, "128.2"),
])
def test_format_bpm(bpm, precision, expected):
    assert format_bpm(bpm, precision) == expected
