import logging
import sys
from pathlib import Path
from typing import Any

sys.path.append(str(Path(__file__).resolve().parents[1]))

from linear_function import cli  # noqa: E402


def test_log_level_is_isolated(capsys: Any) -> None:
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    for h in old_handlers:
        root.removeHandler(h)

    pkg_logger = logging.getLogger("linear_function")
    pkg_old_handlers = pkg_logger.handlers[:]
    pkg_old_level = pkg_logger.level
    for h in pkg_old_handlers:
        pkg_logger.removeHandler(h)

    try:
        assert cli.main(["2x+4", "--log-level", "DEBUG"]) == 0
        logging.getLogger().debug("root debug")
        err = capsys.readouterr().err
        assert "extracted slope=2.0 intercept=4.0" in err
        assert "root debug" not in err
    finally:
        for h in old_handlers:
            root.addHandler(h)
        root.setLevel(old_level)
        for h in pkg_logger.handlers[:]:
            pkg_logger.removeHandler(h)
        for h in pkg_old_handlers:
            pkg_logger.addHandler(h)
        pkg_logger.setLevel(pkg_old_level)
        pkg_logger.propagate = True
