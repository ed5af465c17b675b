import logging
import logging.config
from pathlib import Path

from config import settings

LOG_DIR = Path(settings.LOG_DIR).resolve()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(module)s:%(lineno)d - %(message)s"


def build_log_config(log_dir: Path = LOG_DIR, level: str = settings.LOG_LEVEL) -> dict:
    """
    Build the dictConfig mapping for console and rotating file output.

    Args:
        log_dir (Path): Directory that receives crustaceans.log
        level (str): Level for the application and server loggers

    Returns:
        dict: Configuration accepted by logging.config.dictConfig
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "default",
                "filename": str(log_dir / "crustaceans.log"),
                "maxBytes": 10485760,
                "backupCount": 5,
                "level": level,
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["console", "file"], "level": level, "propagate": False},
            "uvicorn.error": {"handlers": ["console", "file"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["console", "file"], "level": level, "propagate": False},
            "sqlalchemy.engine": {"handlers": ["file"], "level": "WARNING", "propagate": False},
            "app": {
                "handlers": ["console", "file"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }


def setup_logging(log_dir: Path = LOG_DIR):
    """Create the log directory and configure application logging."""
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_log_config(log_dir))
