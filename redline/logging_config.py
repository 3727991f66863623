import logging.config
import os
import sys
from typing import Optional

from rich.console import Console

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Configures logging for the command-line tool.

    Log records go to stderr through rich so they never mix with the result
    printed on stdout. When log_file is given, a rotating file handler with a
    detailed format is added as well.
    """
    level_name = (level or "WARNING").upper()
    log_level = LOG_LEVELS.get(level_name)
    if log_level is None:
        print(
            f"Warning: Invalid log level '{level}'. "
            f"Valid values: {', '.join(LOG_LEVELS.keys())}. Using WARNING.",
            file=sys.stderr,
        )
        level_name, log_level = "WARNING", logging.WARNING

    handlers = {
        "rich": {
            "class": "rich.logging.RichHandler",
            "rich_tracebacks": True,
            "formatter": "default",
            "console": Console(file=sys.stderr),
            "level": log_level,
        },
    }
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 1024 * 1024 * 5,  # 5 MB
            "backupCount": 5,
            "formatter": "detailed",
            "encoding": "utf-8",
            "level": log_level,
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": "%(message)s"},
                "detailed": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
            },
            "handlers": handlers,
            "root": {"level": log_level, "handlers": list(handlers)},
        }
    )
    logging.getLogger(__name__).debug(f"Logging configured. Level: {level_name}")
