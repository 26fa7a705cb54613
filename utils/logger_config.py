import logging.config
import sys


def configure_logging(log_file: str = "app_errors.log", level: str = "INFO"):
    """Console and error-file logging for the API and the puzzle engine"""
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        # one line per record: time, level, logger
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
        },

        # stdout for everything, a rotating file for errors
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stdout,
            },
            "file": {
                "level": "ERROR",
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "standard",
                "filename": log_file,
                "maxBytes": 10 * 1024 * 1024,
                "backupCount": 5,
                "delay": True,  # file is only created on the first error
            },
        },

        # per-package levels
        "loggers": {
            "": {
                "handlers": ["console", "file"],
                "level": level,
                "propagate": True
            },
            "numberpath.engine.hamiltonian": {  # obstacle placement logs a search per layout
                "level": "WARNING",
            },
            "sqlalchemy.engine": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False
            },
        }
    }

    logging.config.dictConfig(logging_config)
