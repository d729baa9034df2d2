"""Logging setup for applications embedding the pricer.

Library modules never configure handlers; they only do
``logger = logging.getLogger(__name__)``. An application calls
:func:`setup_logging` (or :func:`setup_logging_from_config`) once.

The console handler injects ``record.shortname``, the last dotted component of
the logger name, so ``%(shortname)s`` can be used in console formats.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

DEFAULT_LOGGING: dict[str, Any] = {
    "level": "INFO",
    "format": "%(asctime)s %(levelname)s %(shortname)s - %(message)s",
    "file": None,
    "color": True,
}

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ShortNameFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.shortname = record.name.rsplit(".", 1)[-1]
        return True


class _LevelColorFormatter(logging.Formatter):
    """Colors the level name only; used for the console handler."""

    _RESET = "\033[0m"
    _COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self._RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def coerce_level(level: int | str) -> int:
    """Coerce ``"debug"``, ``"10"`` or ``logging.DEBUG`` to an int level."""
    if isinstance(level, int):
        return level

    name = str(level).strip().upper()
    if not name:
        raise ValueError("Empty logging level")
    if name.isdigit():
        return int(name)

    resolved = logging.getLevelNamesMapping().get(name)
    if resolved is None:
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def setup_logging(
    level: int | str = "INFO",
    *,
    fmt_console: str = DEFAULT_LOGGING["format"],
    log_file: str | Path | None = None,
    colored: bool = False,
    module_levels: Mapping[str, int | str] | None = None,
) -> None:
    """Configure root logging (call once from an entrypoint).

    Uses ``force=True`` so repeated calls (e.g. notebooks) replace handlers
    instead of duplicating them.
    """
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.addFilter(_ShortNameFilter())
    formatter_cls = _LevelColorFormatter if colored else logging.Formatter
    console.setFormatter(formatter_cls(fmt=fmt_console, datefmt=_DATE_FORMAT))
    handlers.append(console)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(fmt=_FILE_FORMAT, datefmt=_DATE_FORMAT)
        )
        handlers.append(file_handler)

    logging.basicConfig(level=coerce_level(level), handlers=handlers, force=True)

    for name, module_level in (module_levels or {}).items():
        logging.getLogger(name).setLevel(coerce_level(module_level))


def normalize_logging_config(config: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge a ``logging`` config section over :data:`DEFAULT_LOGGING`."""
    merged = dict(DEFAULT_LOGGING)
    for key in ("level", "format", "file", "color", "module_levels"):
        if config and config.get(key) is not None:
            merged[key] = config[key]
    return merged


def setup_logging_from_config(config: Mapping[str, Any] | None) -> None:
    log_cfg = normalize_logging_config(config)
    setup_logging(
        log_cfg["level"],
        fmt_console=log_cfg["format"],
        log_file=log_cfg["file"],
        colored=log_cfg["color"],
        module_levels=log_cfg.get("module_levels"),
    )
