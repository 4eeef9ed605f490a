from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from linear_function import parse  # noqa: E402
from linear_function.tools import render_graph, sample_points  # noqa: E402


def test_sample_points_lie_on_the_line() -> None:
    f = parse("2x+4")
    pts = sample_points(f, -2, 2, 5)
    assert [p[0] for p in pts] == [-2.0, -1.0, 0.0, 1.0, 2.0]
    assert [p[1] for p in pts] == [0.0, 2.0, 4.0, 6.0, 8.0]


@pytest.mark.parametrize("x_min, x_max, num", [(0, 1, 1), (1, 1, 5), (2, -2, 5)])
def test_sample_points_rejects_bad_ranges(x_min: float, x_max: float, num: int) -> None:
    with pytest.raises(ValueError):
        sample_points(parse("x"), x_min, x_max, num)


def test_render_graph_writes_png(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("MPLBACKEND", raising=False)
    out = tmp_path / "f.png"
    path = render_graph(parse("15-2x"), out, x_range=(0, 10), title="demo")
    assert path == str(out)
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_graph_defaults_to_temp_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("MPLBACKEND", raising=False)
    path = render_graph(parse("0.0x+3"))
    try:
        assert Path(path).is_file()
        import matplotlib

        assert matplotlib.get_backend().lower() == "agg"
    finally:
        Path(path).unlink(missing_ok=True)


def test_missing_gui_backend_warns(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MPLBACKEND", "tkagg")
    monkeypatch.delenv("DISPLAY", raising=False)

    import matplotlib
    original_use = matplotlib.use

    def fail_use(backend: str, *args: Any, **kwargs: Any) -> Any:
        if backend == "TkAgg":
            raise ImportError("TkAgg not available")
        return original_use(backend, *args, **kwargs)

    original_use("pdf")
    monkeypatch.setattr(matplotlib, "use", fail_use)
    import linear_function.tools.graph as graph

    with pytest.warns(RuntimeWarning):
        path = graph.render_graph(parse("x"))
    Path(path).unlink(missing_ok=True)
    assert matplotlib.get_backend().lower() == "agg"


def test_render_graph_closes_figure_when_saving_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("MPLBACKEND", raising=False)
    import matplotlib.pyplot as plt
    from matplotlib.figure import Figure

    def fail_savefig(self: Figure, *args: Any, **kwargs: Any) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(Figure, "savefig", fail_savefig)
    before = set(plt.get_fignums())
    with pytest.raises(OSError, match="disk full"):
        render_graph(parse("2x+4"), tmp_path / "f.png")
    assert set(plt.get_fignums()) == before
