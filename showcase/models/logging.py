import logging

from colorlog import ColoredFormatter

LOG_FORMAT = (
    "%(log_color)s%(asctime)s%(reset)s - %(name)s - %(log_color)s%(levelname)s%(reset)s"
    " - %(filename)s - %(funcName)s - line %(lineno)d - %(message)s"
)

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Initialize logger without handlers
logger = logging.getLogger("showcase-models")
logger.propagate = True


def configure_logger(
    target: logging.Logger,
    verbose: bool = False,
    verbose_level: str = "INFO",
    quiet_level: int = logging.CRITICAL,
) -> logging.Logger:
    """
    Attach a single colored stream handler to ``target`` and set its level.

    When ``verbose`` is off the logger only lets ``quiet_level`` records through.
    """
    target.handlers.clear()
    formatter = ColoredFormatter(LOG_FORMAT, datefmt=None, reset=True, log_colors=LOG_COLORS)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    target.addHandler(handler)
    if verbose:
        level_name = logging.getLevelNamesMapping().get(verbose_level.upper(), verbose_level)
        target.setLevel(level_name)
    else:
        target.setLevel(quiet_level)

    return target


def setup_logging(verbose: bool = False, verbose_level: str = "INFO") -> logging.Logger:
    return configure_logger(logger, verbose, verbose_level)


# Don't automatically set up logging - will be controlled by CLI
