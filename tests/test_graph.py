from unittest import mock

import pytest

from mileagefit.graph import build_plots, main
from mileagefit.plotting import PlotStyle
from mileagefit.regression import predict, write_specs


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data.csv").write_text("km,price\n3000,8000\n1000,9000\n5000,7000\n")
    return tmp_path


def _written(popen):
    return "".join(call.args[0] for call in popen.return_value.stdin.write.call_args_list)


def test_build_plots_dataset_only():
    plots = build_plots("-d", [1.0, 2.0], [3.0, 4.0], 0, 0)
    assert len(plots) == 1
    assert plots[0].style == PlotStyle.SCATTER
    assert plots[0].x == [1.0, 2.0]
    assert plots[0].y == [3.0, 4.0]
    assert (plots[0].title, plots[0].color, plots[0].line_width) == ("Dataset", "#FF8800", 1)


def test_build_plots_line_spans_mileage_range():
    mileages = [3000.0, 1000.0, 5000.0]
    plots = build_plots("-l", mileages, [1.0, 2.0, 3.0], -0.5, 10000.0)
    assert len(plots) == 1
    line = plots[0]
    assert line.style == PlotStyle.LINE
    assert line.x == [min(mileages), max(mileages)]
    assert line.y == [predict(x, -0.5, 10000.0) for x in line.x]
    assert (line.title, line.color, line.line_width) == ("Regression", "#0000FF", 2)


def test_build_plots_both_in_order():
    plots = build_plots("-b", [1.0, 2.0], [3.0, 4.0], 1.0, 0.0)
    assert [p.title for p in plots] == ["Dataset", "Regression"]


def test_build_plots_unknown_option():
    assert build_plots("-x", [1.0], [2.0], 0, 0) == []


def test_build_plots_line_needs_data():
    with pytest.raises(ValueError):
        build_plots("-l", [], [], 1.0, 0.0)


def test_main_usage(workdir, capsys):
    assert main(["-d"]) == 1
    assert "Usage: ./graph <option> <dataset_file>" in capsys.readouterr().out


def test_main_missing_dataset(workdir):
    assert main(["-d", "missing.csv"]) == 1


def test_main_line_needs_specs(workdir, capsys):
    assert main(["-l", "data.csv"]) == 1
    assert "spec file" in capsys.readouterr().err


def test_main_unknown_option(workdir, capsys):
    with mock.patch("subprocess.Popen") as popen:
        assert main(["-z", "data.csv"]) == 1
    assert not popen.called
    assert "Invalid multi-plot call." in capsys.readouterr().err


def test_main_sends_dataset_to_gnuplot(workdir):
    with mock.patch("subprocess.Popen") as popen:
        assert main(["-d", "data.csv"]) == 0
    assert popen.call_args.args[0] == ["gnuplot", "-persist"]
    text = _written(popen)
    assert 'set title "Linear Regression Visualization"\n' in text
    assert 'set xlabel "Mileage"\n' in text
    assert 'set ylabel "Price"\n' in text
    assert "with points" in text
    assert "3000.000000 8000.000000\n" in text


def test_main_both_draws_two_series(workdir):
    write_specs(workdir / "specs", -0.5, 10000)
    with mock.patch("subprocess.Popen") as popen:
        assert main(["-b", "data.csv"]) == 0
    text = _written(popen)
    plot_line = next(line for line in text.splitlines() if line.startswith("plot "))
    assert plot_line.count("'-' with") == 2
    assert text.count("e\n") == 2


def test_main_reports_missing_gnuplot(workdir, capsys):
    with mock.patch("subprocess.Popen", side_effect=OSError("no gnuplot")):
        assert main(["-d", "data.csv"]) == 1
    assert "gnuplot" in capsys.readouterr().err