import logging

from showcase.models.logging import configure_logger

logger = logging.getLogger("showcase-client")
logger.propagate = True


def setup_logging(verbose: bool = False, verbose_level: str = "INFO") -> logging.Logger:
    # Terminal store failures stay visible even without --verbose
    return configure_logger(logger, verbose, verbose_level, quiet_level=logging.ERROR)
