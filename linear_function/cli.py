"""Command‑line interface around :pyfunc:`linear_function.parse`."""
from __future__ import annotations

import argparse
import json
import logging
import math
import os
import sys
from pathlib import Path
from typing import Any

from . import constants as C
from .function import LinearFunction, MalformedLinearFunctionError, parse
from .grammar import is_valid

__all__ = ["main"]

logger = logging.getLogger(__name__)

_HANDLER_NAME = "linear_function.cli"


def _default_log_level() -> str:
    level = os.environ.get(C.LOG_LEVEL_ENV, "WARNING").upper()
    return level if level in {"WARNING", "INFO", "DEBUG"} else "WARNING"


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(
        description="Evaluate a linear function such as '2x + 3'",
        epilog="Put '--' before an expression that starts with '-', e.g. -- -x+20",
    )
    parser.add_argument("expression", nargs="?", help="Linear function string")
    parser.add_argument(
        "--at",
        action="append",
        type=float,
        default=[],
        metavar="X",
        help="Evaluate f(X); may be repeated",
    )
    parser.add_argument(
        "--solve-for",
        action="append",
        type=float,
        default=[],
        metavar="Y",
        help="Find x with f(x) = Y; may be repeated",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the expression is valid (exit status 0/1)",
    )
    parser.add_argument("--plot", metavar="PATH", help="Render the function to a PNG file")
    parser.add_argument("--out", help="Write JSON output to file")
    parser.add_argument("--demo", action="store_true", help=f"Use the demo function '{C._DEMO_FUNCTION}'")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default=_default_log_level(),
        help=f"Logging level for linear_function (default from ${C.LOG_LEVEL_ENV})",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("linear_function")
    handler = next((h for h in pkg_logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
        pkg_logger.addHandler(handler)
    elif isinstance(handler, logging.StreamHandler):
        handler.setStream(sys.stderr)
    handler.setLevel(level)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def _json_safe(value: Any) -> Any:
    """Replace non‑finite floats with ``None`` so the output stays strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    return value


def _report(fn: LinearFunction, xs: list[float], ys: list[float]) -> dict[str, Any]:
    out = fn.to_dict()
    out["values"] = {str(x): fn(x) for x in xs}
    out["inverse"] = {str(y): fn.x_from_y(y) for y in ys}
    return _json_safe(out)


def main(argv: list[str] | None = None) -> int:  # noqa: D401 – imperative mood
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level)

    if ns.demo:
        if ns.expression is not None:
            sys.exit("Error: an expression cannot be combined with --demo.")
        expression = C._DEMO_FUNCTION
        xs = ns.at or list(C._DEMO_POINTS)
        ys = ns.solve_for or list(C._DEMO_POINTS)
    else:
        if ns.expression is None:
            sys.exit("Error: an expression is required unless using --demo.")
        expression = ns.expression
        xs, ys = ns.at, ns.solve_for

    if ns.check:
        ok = is_valid(expression)
        print("valid" if ok else "invalid")
        return 0 if ok else 1

    try:
        fn = parse(expression)
    except MalformedLinearFunctionError as exc:
        sys.exit(f"Error: {exc}")
    logger.info("parsed %r as %s", expression, fn)

    result = _report(fn, xs, ys)
    if ns.plot:
        from .tools.graph import render_graph

        result["graph"] = render_graph(fn, ns.plot)

    json_out = json.dumps(result, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    if ns.out:
        Path(ns.out).write_text(json_out, "utf-8")
        print(f"✔ JSON written to {ns.out}")
    else:
        print(json_out)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
