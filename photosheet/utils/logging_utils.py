from __future__ import annotations
import logging, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_DIR = Path("logs")
LOG_FILE_NAME = "photosheet.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

BANNER = "=" * 75

def build_logger(name: str = "photosheet", log_dir: Optional[Path] = None) -> logging.Logger:
    """Root project logger; module loggers (photosheet.*) propagate into it."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers.clear()

    fmt = logging.Formatter(LOG_FORMAT)

    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(exist_ok=True, parents=True)
    fh = RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
    fh.setFormatter(fmt)
    fh.setLevel(logging.INFO)
    logger.addHandler(fh)

    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    sh.setLevel(logging.INFO)
    logger.addHandler(sh)
    return logger

class QtTailHandler(logging.Handler):
    """Hands formatted records to a callable, usually a Qt signal's emit."""

    def __init__(self, signal_emit):
        super().__init__()
        self.emit_to_gui = signal_emit
        self.setFormatter(logging.Formatter(LOG_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.emit_to_gui(self.format(record))
        except Exception:
            self.handleError(record)

class log_section:
    def __init__(self, title: str, logger: logging.Logger):
        self.title = title
        self.logger = logger

    def __enter__(self):
        self.logger.info("\n%s\n%s\n%s", BANNER, self.title, BANNER)
        return self.logger

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self.logger.error("%s failed: %s", self.title, exc)
        return False
