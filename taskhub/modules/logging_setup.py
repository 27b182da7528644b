"""
Logging Setup

Console output plus a daily rolling log file.
"""
import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from taskhub.modules.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s :: %(message)s"


def setup_logging(settings: Settings) -> None:
    """
    Configure the root logger.

    Call this once, before the app starts serving requests.
    """
    root = logging.getLogger()
    root.setLevel(settings.log_level)

    # Remove any pre-existing handlers to avoid duplicates.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            str(log_dir / "api.log"),
            when="midnight",
            backupCount=14,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # uvicorn's access log duplicates what the services already record
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.captureWarnings(True)
