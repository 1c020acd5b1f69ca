import sys
from typing import Optional
from loguru import logger
import os

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = None):
    """
    Configures Loguru logger.

    Args:
        debug_mode: Log DEBUG to the console instead of INFO
        log_dir: Directory for rotating log files; no file sink when None
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    # File Handler
    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        logger.add(os.path.join(log_dir, "fastscroll_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    logger.info("Logging initialized.")
