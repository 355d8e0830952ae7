import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from schoolhub.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# the http middleware already logs every request once
_QUIET_LOGGERS = ("uvicorn.access",)


def setup_logging(level: Optional[str] = None, log_dir: Optional[Path] = None) -> None:
    """
    Root logging for the service.
    - console + logs/schoolhub.log, rotated at 5 MB, 5 backups
    - level from settings.LOG_LEVEL unless given
    - calling it twice does not stack handlers
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_dir = Path(log_dir or settings.LOG_DIR)

    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(h, "_schoolhub", False) for h in root.handlers):
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers = [
        logging.StreamHandler(),
        RotatingFileHandler(
            log_dir / "schoolhub.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        ),
    ]
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        h._schoolhub = True
        root.addHandler(h)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
