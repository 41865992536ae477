"""
Logging module for whoisparser
"""
import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "whoisparser"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(verbose: bool = False, log_file: Optional[str] = None,
                 level: str = "INFO") -> logging.Logger:
    """
    Setup and configure the logger for whoisparser

    Only the command line front-end calls this; the parsers themselves just
    emit records through module loggers.

    Args:
        verbose (bool): Whether to enable verbose logging
        log_file (str): Optional path of a log file to write to
        level (str): Level name used when not verbose

    Returns:
        logging.Logger: Configured logger instance
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(str(level).upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    # Clear any existing handlers
    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {log_path}")

    if verbose:
        logger.debug("Verbose logging enabled")

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get a module-specific logger

    Args:
        module_name (str): Name of the module requesting the logger

    Returns:
        logging.Logger: Module-specific logger
    """
    return logging.getLogger(f"{LOGGER_NAME}.{module_name}")
