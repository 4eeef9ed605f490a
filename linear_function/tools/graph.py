"""Graph sampling and rendering helpers."""
from __future__ import annotations

import logging
import os
import tempfile
import warnings
from pathlib import Path

import numpy as np

from ..constants import DEFAULT_SAMPLES, DEFAULT_X_RANGE
from ..function import LinearFunction

__all__ = ["sample_points", "render_graph"]

logger = logging.getLogger(__name__)


def sample_points(
    fn: LinearFunction,
    x_min: float = DEFAULT_X_RANGE[0],
    x_max: float = DEFAULT_X_RANGE[1],
    num: int = DEFAULT_SAMPLES,
) -> list[tuple[float, float]]:
    """Return ``num`` evenly spaced ``(x, f(x))`` pairs over ``[x_min, x_max]``."""
    if num < 2:
        raise ValueError(f"num must be at least 2, got {num}")
    if not x_min < x_max:
        raise ValueError(f"empty range: [{x_min}, {x_max}]")
    xs = np.linspace(float(x_min), float(x_max), int(num))
    ys = fn.slope * xs + fn.intercept
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def _select_backend() -> None:
    try:
        import matplotlib  # type: ignore
    except Exception as exc:  # pragma: no cover - environment-dependent
        raise RuntimeError("matplotlib is required to render graphs.") from exc

    try:
        backend = matplotlib.get_backend().lower()
    except Exception:
        backend = ""
    if backend in {"agg", "tkagg"}:
        return
    env_backend = os.environ.get("MPLBACKEND", "").lower()
    if os.environ.get("DISPLAY") or env_backend == "tkagg":
        try:
            matplotlib.use("TkAgg")
            return
        except Exception as exc:  # pragma: no cover - depends on system backend
            warnings.warn(
                f"Preferred GUI backend 'TkAgg' unavailable; falling back to 'Agg': {exc}",
                RuntimeWarning,
            )
    matplotlib.use("Agg")


def render_graph(
    fn: LinearFunction,
    path: str | Path | None = None,
    x_range: tuple[float, float] | None = None,
    num: int = DEFAULT_SAMPLES,
    title: str | None = None,
) -> str:
    """Plot *fn* to a **PNG file** and return the file path.

    Writes to a fresh temp file when *path* is omitted. The root is marked
    when it falls inside the plotted range.
    """
    _select_backend()
    import matplotlib.pyplot as plt  # type: ignore

    x_min, x_max = x_range or DEFAULT_X_RANGE
    points = sample_points(fn, x_min, x_max, num)
    xs, ys = zip(*points)

    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        ax.plot(xs, ys)
        root = fn.root()
        if np.isfinite(root) and x_min <= root <= x_max:
            ax.scatter([root], [0.0], color="red", zorder=3)

        ax.set_title(title if title is not None else f"y = {fn}")
        ax.grid(True)
        ax.axhline(0, color="black", linewidth=1.5)
        ax.axvline(0, color="black", linewidth=1.5)

        ax.spines["right"].set_color("none")
        ax.spines["top"].set_color("none")

        if path is None:
            fd, tmp = tempfile.mkstemp(suffix=".png")
            os.close(fd)
            png_path = Path(tmp)
        else:
            png_path = Path(path)
        fig.savefig(png_path, format="png")
    finally:
        plt.close(fig)
    logger.info("rendered %s to %s", fn, png_path)
    return str(png_path)
