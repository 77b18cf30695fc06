import logging
import sys


def setup_logging(level=logging.INFO, format_string='%(asctime)s - %(name)s - %(levelname)s - %(message)s'):
    """Configures the odestep logger to write to stdout."""
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


# Package logger; module loggers (odestep.*) propagate to it
logger = logging.getLogger("odestep")
