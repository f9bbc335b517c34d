import logging.config
from typing import Optional

from .consts import LOG_BACKUP_COUNT, LOG_MAX_BYTES
from .utils import canonicalify, ensure_path

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": logging.INFO,
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "autoform": {
            "handlers": ["console"],
            "level": logging.DEBUG,
            "propagate": True,
        }
    },
}


def build_config(logfile: Optional[str] = None, level: int = logging.INFO) -> dict:
    config = {
        **LOGGING_CONFIG,
        "handlers": {
            name: dict(handler) for name, handler in LOGGING_CONFIG["handlers"].items()
        },
        "loggers": {
            name: dict(logger_config, handlers=list(logger_config["handlers"]))
            for name, logger_config in LOGGING_CONFIG["loggers"].items()
        },
    }
    config["handlers"]["console"]["level"] = level

    if logfile:
        p = canonicalify(logfile)
        ensure_path(p.parent)
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": logging.DEBUG,
            "formatter": "default",
            "filename": str(p),
            "maxBytes": LOG_MAX_BYTES,
            "backupCount": LOG_BACKUP_COUNT,
        }
        config["loggers"]["autoform"]["handlers"].append("file")

    return config


def setup(logfile: Optional[str] = None, level: int = logging.INFO):
    logging.config.dictConfig(build_config(logfile, level))


logger = logging.getLogger("autoform")
