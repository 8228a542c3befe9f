import logging
import sys

import sentry_sdk

from .settings import settings


logging_formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s")

logging_handler = logging.StreamHandler(sys.stdout)
logging_handler.setFormatter(logging_formatter)


def get_logger(name: str) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    logger.setLevel(logging.getLevelName(settings.log_level))
    if logging_handler not in logger.handlers:
        logger.addHandler(logging_handler)
    return logger


def setup_sentry(dsn: str, name: str, version: str) -> None:
    get_logger(__name__).debug("initializing sentry")
    sentry_sdk.init(
        dsn=dsn,
        attach_stacktrace=True,
        shutdown_timeout=5,
        release=f"{name}@{version}",
        environment=settings.sentry_environment,
    )
