import logging
import logging.config

FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def logging_config(level: str = "INFO") -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": "INFO", "propagate": False},
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    }


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configura logging de la aplicación (consola, formato estándar)."""
    logging.config.dictConfig(logging_config(level.upper()))
    logger = logging.getLogger("courtbook")
    logger.debug("Logging initialized with level: %s", level)
    return logger
