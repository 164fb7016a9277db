import logging

from showcase.models.logging import configure_logger

# Initialize logger without handlers
logger = logging.getLogger("showcase-cli")
logger.propagate = True


def setup_logging(verbose: bool = False, verbose_level: str = "INFO") -> logging.Logger:
    return configure_logger(logger, verbose, verbose_level, quiet_level=logging.ERROR)


# Don't automatically set up logging - will be controlled by CLI
