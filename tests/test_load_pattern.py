import importlib

import pytest

LoadPattern = importlib.import_module('loadpath.core.load_pattern').LoadPattern
PathAnalyzer = importlib.import_module('loadpath.facade.analyzer').PathAnalyzer
PathSeries = importlib.import_module('loadpath.series.path_series').PathSeries
plots = importlib.import_module('loadpath.visualization.plots')


def test_run_over_duration(triangle):
    df = LoadPattern(triangle).run(dt=0.5)
    assert list(df.columns) == ["t", "factor"]
    assert len(df) == 11  # 0 … 5 с шагом 0.5
    assert df["factor"].iloc[1] == 1.0
    assert df["factor"].iloc[4] == 4.0
    assert (df["factor"].iloc[8:] == 0.0).all()


def test_run_matches_get_factor(triangle):
    df = LoadPattern(triangle).run(dt=0.3, t_end=6.0)
    for t, f in zip(df["t"], df["factor"]):
        assert f == pytest.approx(triangle.get_factor(t), abs=1e-12)


def test_run_with_custom_interpolator(triangle):
    df = LoadPattern(triangle, interp=lambda store, t: 1.0).run(dt=1.0)
    assert (df["factor"] == 1.0).all()


def test_run_rejects_non_positive_step(triangle):
    with pytest.raises(ValueError):
        LoadPattern(triangle).run(dt=0.0)


def test_run_on_empty_series():
    df = LoadPattern(PathSeries.blank(1)).run(dt=0.1)
    assert list(df["factor"]) == [0.0]


def test_analyzer_summary():
    s = PathSeries(3, [1.0, -5.0, 3.0], time_increment=0.5, factor=2.0, start_time=1.0, use_last=True)
    summary = PathAnalyzer(s).summary()
    assert summary["size"] == 3
    assert summary["peak_factor"] == 10.0
    assert summary["duration"] == pytest.approx(2.5)
    assert summary["extrapolation"] == "HOLD_LAST"


def test_analyzer_plots(triangle, monkeypatch):
    shown = []
    monkeypatch.setattr(plots.plt, "show", lambda: shown.append(True))
    analyzer = PathAnalyzer(triangle)
    df = analyzer.tabulate(dt=0.25)
    analyzer.plot_samples()
    analyzer.plot_factor(df)
    plots.plt.close("all")
    assert len(shown) == 2
