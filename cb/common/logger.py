import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler
from cb.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attaches the given handler to the logger, unless a handler of the same name already exists (module reloads, tests
# calling get_logger twice, etc).
def _attach(logger: logging.Logger, handler: logging.Handler, handler_name: str, level, fmt) -> bool:
    if any(h.get_name() == handler_name for h in logger.handlers):
        handler.close()
        return False
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.set_name(handler_name)
    logger.addHandler(handler)
    return True

def get_logger(
        name = "counterblock",
        level = logging.INFO,
        log_dir: Path | None = None,
        max_bytes = 2 * 1024 * 1024,
        backup_count = 3,
        persistent = True,
        console = False,
        historical_debugs: int = 5
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)

    log_dir = log_dir or PATHS.logs
    log_dir.mkdir(parents=True,exist_ok=True)
    fmt = logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT)

    # Rotating log that survives across runs
    if persistent and not any(h.get_name() == f"{name}:persistent" for h in logger.handlers):
        _attach(logger, RotatingFileHandler(
            filename=log_dir / f"{name}.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        ), f"{name}:persistent", level, fmt)

    # Latest-only log, overwritten on each run
    if not any(h.get_name() == f"{name}:latest" for h in logger.handlers):
        _attach(logger, logging.FileHandler(log_dir / "latest.log", mode="w", encoding="utf-8"),
                f"{name}:latest", level, fmt)

    # One full debug log per run, only the newest `historical_debugs` are kept around.
    if historical_debugs > 0 and not any(h.get_name() == f"{name}:historical_debug" for h in logger.handlers):
        debug_dir = log_dir / "debug"
        debug_dir.mkdir(parents=True,exist_ok=True)
        run_log = debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        _attach(logger, logging.FileHandler(run_log, encoding="utf-8"),
                f"{name}:historical_debug", logging.DEBUG, fmt)

        runs = sorted(debug_dir.glob(f"{name}_*.log"),key=lambda p: p.stat().st_mtime,reverse=True)
        for run in runs[historical_debugs:]:
            try: run.unlink()
            except OSError: pass

    if console:
        _attach(logger, logging.StreamHandler(), f"{name}:console", level, fmt)

    return logger

# Console output is opt-in, mostly for running the preview app from a terminal.
_console = os.getenv("COUNTERBLOCK_LOG_CONSOLE", "").lower() in ("1", "true", "yes")
log = get_logger(level=logging.DEBUG,console=_console,historical_debugs=5)
log.info("=== INITIALIZED NEW SESSION ===")
