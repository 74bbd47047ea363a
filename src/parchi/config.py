"""Environment-driven settings and logging configuration."""

import logging
import logging.config
import os

DB_PATH_ENV = "PARCHI_DB_PATH"

GEMINI_API_KEY_ENV = "GEMINI_API_KEY"
INSIGHTS_MODEL_ENV = "PARCHI_INSIGHTS_MODEL"
INSIGHTS_URL_ENV = "PARCHI_INSIGHTS_URL"
INSIGHTS_TIMEOUT_ENV = "PARCHI_INSIGHTS_TIMEOUT"

DEFAULT_INSIGHTS_MODEL = "gemini-2.0-flash"
DEFAULT_INSIGHTS_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_INSIGHTS_TIMEOUT = 60.0

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "parchi": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}


def configure_logging(verbose: bool = False) -> None:
    """Apply LOGGING_CONFIG, at DEBUG level when verbose."""
    logging.config.dictConfig(LOGGING_CONFIG)
    if verbose:
        logging.getLogger("parchi").setLevel(logging.DEBUG)


def insights_settings() -> dict:
    """Read insights endpoint settings from the environment."""
    return {
        "api_key": os.environ.get(GEMINI_API_KEY_ENV),
        "model": os.environ.get(INSIGHTS_MODEL_ENV, DEFAULT_INSIGHTS_MODEL),
        "base_url": os.environ.get(INSIGHTS_URL_ENV, DEFAULT_INSIGHTS_URL),
        "timeout": float(os.environ.get(INSIGHTS_TIMEOUT_ENV, DEFAULT_INSIGHTS_TIMEOUT)),
    }
