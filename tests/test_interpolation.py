import importlib

import numpy as np
import pytest

PathSeries = importlib.import_module('loadpath.series.path_series').PathSeries
interpolation = importlib.import_module('loadpath.core.interpolation')
path_store = importlib.import_module('loadpath.domain.path_store')


def test_midpoint_between_first_samples(triangle):
    assert triangle.get_factor(0.5) == 1.0


def test_interior_points(triangle):
    assert triangle.get_factor(1.0) == 2.0
    assert triangle.get_factor(2.25) == pytest.approx(3.5)
    assert triangle.get_factor(3.5) == pytest.approx(1.0)


@pytest.mark.parametrize("t", [-10.0, -1e-12, 0.999])
def test_zero_before_start_time(t):
    series = PathSeries(1, [5.0, 5.0, 5.0], time_increment=0.5, start_time=1.0, use_last=True)
    assert series.get_factor(t) == 0.0
    assert series.get_factor(1.0) == 5.0


def test_zero_before_start_time_on_empty_series():
    series = PathSeries.blank(1)
    assert series.get_factor(-1.0) == 0.0
    assert series.get_factor(3.0) == 0.0


def test_hold_last_value_beyond_end():
    series = PathSeries(1, [1.0, 2.0, 4.0], time_increment=1.0, factor=2.0, use_last=True)
    for t in (2.0, 2.5, 3.0, 1e6):
        assert series.get_factor(t) == 8.0


def test_zero_beyond_end():
    series = PathSeries(1, [1.0, 2.0, 4.0], time_increment=1.0, factor=2.0, use_last=False)
    for t in (2.5, 3.0, 1e6):
        assert series.get_factor(t) == 0.0


def test_last_sample_time_counts_as_beyond_end(triangle):
    # i1 = n уже за концом массива
    assert triangle.get_factor(4.0) == 0.0
    assert triangle.get_factor(3.999) == pytest.approx(0.002)


def test_single_sample_path_always_extrapolates():
    held = PathSeries(1, [3.0], time_increment=1.0, use_last=True)
    zero = PathSeries(1, [3.0], time_increment=1.0)
    assert held.get_factor(0.0) == 3.0
    assert zero.get_factor(0.0) == 0.0


def test_scale_and_offset():
    series = PathSeries(1, [0.0, 1.0], time_increment=0.1, factor=-3.0, start_time=2.0)
    assert series.get_factor(2.05) == pytest.approx(-1.5)


def test_peak_factor():
    series = PathSeries(1, [1.0, -5.0, 3.0], time_increment=1.0, factor=2.0)
    assert series.get_peak_factor() == 10.0


def test_duration():
    series = PathSeries(1, [1, 2, 3, 4, 5], time_increment=0.1, start_time=2.0)
    assert series.get_duration() == pytest.approx(2.5)


def test_degraded_queries_log_and_return_zero(caplog):
    series = PathSeries.blank(1)
    with caplog.at_level("WARNING"):
        assert series.get_duration() == 0.0
        assert series.get_peak_factor() == 0.0
    assert "get_duration() called on an empty path" in caplog.text
    assert "get_peak_factor() called on an empty path" in caplog.text


@pytest.mark.parametrize("use_last", [False, True])
def test_evaluate_many_matches_scalar(use_last):
    store = path_store.PathStore(
        factor=1.7,
        time_increment=0.25,
        start_time=0.5,
        extrapolation=path_store.Extrapolation.from_use_last(use_last),
        data=path_store.PopulatedPath([0.0, 1.0, -2.0, 0.5, 4.0]),
    )
    times = np.linspace(-1.0, 3.0, 97)
    expected = [interpolation.path_factor(store, t) for t in times]
    np.testing.assert_allclose(interpolation.evaluate_many(store, times), expected, rtol=0, atol=1e-12)


def test_evaluate_many_on_empty_store():
    store = path_store.PathStore(factor=1.0, time_increment=1.0)
    assert not interpolation.evaluate_many(store, [0.0, 1.0, 2.0]).any()


@pytest.mark.parametrize("use_last, expected", [(True, 8.0), (False, 0.0)])
def test_infinite_time_is_beyond_end(use_last, expected):
    series = PathSeries(1, [1.0, 2.0, 4.0], time_increment=1.0, factor=2.0, use_last=use_last)
    assert series.get_factor(float("inf")) == expected
    assert interpolation.evaluate_many(series.store, [float("inf")])[0] == expected


def test_nan_time_gives_zero():
    series = PathSeries(1, [1.0, 2.0, 4.0], time_increment=1.0, use_last=True)
    assert series.get_factor(float("nan")) == 0.0
    assert interpolation.evaluate_many(series.store, [float("nan")])[0] == 0.0
