from core_models import StormSummary
from plotter import StormPlotter


def test_plot_writes_png(tmp_path):
    out = tmp_path / "peaks.png"
    summaries = [StormSummary("ANDRES", 83.34), StormSummary("LANA", 148.16)]
    assert StormPlotter(2009).plot(summaries, out) is True
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_nothing_to_plot(tmp_path, capsys):
    out = tmp_path / "peaks.png"
    assert StormPlotter(2009).plot([], out) is False
    assert not out.exists()
    assert "NO HURRICANES TO PLOT" in capsys.readouterr().err


def test_unsupported_extension_is_reported(tmp_path, capsys):
    out = tmp_path / "peaks.xyz"
    summaries = [StormSummary("ANDRES", 83.34)]
    assert StormPlotter(2009).plot(summaries, out) is False
    captured = capsys.readouterr()
    assert f"[ERROR] Could not save {out}" in captured.err
    assert captured.out == ""
