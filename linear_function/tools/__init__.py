"""Plotting helpers built on the core value type."""

from .graph import render_graph, sample_points

__all__ = [
    "render_graph",
    "sample_points",
]
