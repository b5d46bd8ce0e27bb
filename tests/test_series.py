import importlib

import pytest

series_pkg = importlib.import_module('loadpath.series')
PathSeries = importlib.import_module('loadpath.series.path_series').PathSeries


def test_factory_path():
    s = series_pkg.get("path", tag=4, values=[0.0, 1.0], time_increment=0.5, factor=3.0)
    assert isinstance(s, PathSeries)
    assert s.tag == 4
    assert s.get_factor(0.25) == pytest.approx(1.5)


def test_factory_path_file(tmp_path):
    path = tmp_path / "p.txt"
    path.write_text("2 4 6")
    s = series_pkg.get("path_file", tag=5, path=path, time_increment=1.0)
    assert s.get_peak_factor() == 6.0


def test_factory_unknown_name():
    with pytest.raises(ValueError):
        series_pkg.get("sine")


def test_path_series_is_a_time_series(triangle):
    assert isinstance(triangle, series_pkg.TimeSeries)


def test_copy_keeps_scalars():
    s = PathSeries(2, [1.0, 3.0], time_increment=0.25, factor=-2.0, use_last=True, start_time=1.0, db_tag=8)
    c = s.get_copy()
    assert (c.tag, c.db_tag, c.factor, c.time_increment, c.start_time, c.use_last) == (
        2, 8, -2.0, 0.25, 1.0, True,
    )
    assert c.get_factor(1.125) == s.get_factor(1.125)


def test_copy_of_empty_series_is_empty():
    assert PathSeries.blank(1).get_copy().is_empty


def test_describe(triangle):
    assert triangle.describe(1) == "0 2 4 2 0"
    assert "size=5" in triangle.describe()
    assert "ZERO_BEYOND_END" in repr(triangle)


def test_custom_interpolator():
    s = PathSeries(1, [1.0, 2.0], time_increment=1.0, interp=lambda store, t: store.factor * 42.0)
    assert s.get_factor(0.0) == 42.0
    assert s.get_copy().get_factor(0.0) == 42.0
