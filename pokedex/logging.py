from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .settings import app_dir


def _resolve_log_dir(settings: object) -> Path:
    """Resolve the log directory.

    - Unset: `logs/` in the per-user app directory.
    - If POKEDEX_LOG_DIR is absolute, use it directly.
    - Otherwise, treat it as relative to the working directory.
    """

    raw = getattr(settings, "POKEDEX_LOG_DIR", None)
    if raw is None or str(raw) == "":
        return app_dir() / "logs"
    p = raw if isinstance(raw, Path) else Path(str(raw))
    if p.is_absolute():
        return p
    return Path.cwd() / p


def setup_logging(settings: object, *, console: bool = False) -> Path | None:
    """Configure Python logging to write to a rotating diagnostic log file.

    Returns the resolved log file path, or None when the log directory cannot
    be written. In that case warnings go to stderr instead and the command
    carries on.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last `POKEDEX_LOG_BACKUP_COUNT` rotated files.

    Notes:
      - The interactive session draws over the whole terminal, so it only logs
        to the file. One-shot CLI commands pass `console=True` to also send
        warnings to stderr.
      - This function is safe to call multiple times (it resets handlers).
    """

    level_name = str(getattr(settings, "POKEDEX_LOG_LEVEL", "INFO") or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    log_file: Path | None = _resolve_log_dir(settings) / "pokedex.log"
    file_handler: logging.Handler | None = None
    file_error: OSError | None = None
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=max(0, int(getattr(settings, "POKEDEX_LOG_BACKUP_COUNT", 14) or 0)),
            encoding="utf-8",
            utc=False,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(fmt))
    except OSError as e:
        file_error = e

    # Reset root handlers so we don't duplicate logs on repeated starts.
    root = logging.getLogger()
    for handler in root.handlers:
        handler.close()
    root.handlers = []
    root.setLevel(level)
    if file_handler is not None:
        root.addHandler(file_handler)

    if console or file_handler is None:
        # Only warnings and up on stderr; the file keeps everything.
        console_handler = logging.StreamHandler()
        console_handler.setLevel(max(level, logging.WARNING))
        console_handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(console_handler)

    logger = logging.getLogger("pokedex")
    if file_error is not None:
        logger.warning("Log file %s is not writable (%s); logging to stderr only", log_file, file_error)
        log_file = None

    logger.info(
        "pokedex logging enabled (file=%s, level=%s, console=%s)",
        os.fspath(log_file) if log_file else "-",
        level_name,
        console,
    )

    return log_file
