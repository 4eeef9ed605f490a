"""Package‑wide constants and demo inputs."""

VARIABLE = "x"

# Environment variable read by the CLI for its default ``--log-level``.
LOG_LEVEL_ENV = "LINEAR_FUNCTION_LOG_LEVEL"

_DEMO_FUNCTION = "2x + 4"
_DEMO_POINTS = [8.0]  # f(8) = 20, f⁻¹(8) = 2, root −2

DEFAULT_X_RANGE: tuple[float, float] = (-10.0, 10.0)
DEFAULT_SAMPLES = 50

__all__ = [
    "VARIABLE",
    "LOG_LEVEL_ENV",
    "_DEMO_FUNCTION",
    "_DEMO_POINTS",
    "DEFAULT_X_RANGE",
    "DEFAULT_SAMPLES",
]
