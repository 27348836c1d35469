# SPDX-License-Identifier: MIT

import logging
import sys
from pathlib import Path
from typing import Optional


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the terminal readable:
    - codetodo logs pass at the handler's level
    - python warnings and third-party loggers only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "codetodo" or record.name.startswith("codetodo."):
            return True
        return record.levelno >= logging.ERROR


def resolve_level(level_name: Optional[str], default: int = logging.WARNING) -> int:
    if level_name is None:
        return default
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    log_file: Optional[Path] = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler on stderr, filtered, so command output stays clean
    - File handler with full logs for diagnostics (skipped if log_file is None)

    Call this once, before the first command runs.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(fmt)
    console_handler.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console_handler)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        except OSError as e:
            logging.getLogger(__name__).warning(
                "file logging disabled, cannot open %s: %s", log_file, e
            )
        else:
            file_handler.setLevel(file_level)
            file_handler.setFormatter(fmt)
            root.addHandler(file_handler)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
