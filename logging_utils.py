"""
Logging Utilities for the Slide Deck Builder

Centralized logging configuration and exception reporting. Console output goes
to stderr because stdout carries the MCP stdio transport.
"""

import logging
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def setup_logging(log_dir: Optional[str] = None,
                  level: Union[int, str] = logging.INFO) -> Optional[str]:
    """
    Configure the ROOT logger so all module loggers inherit its handlers.

    Args:
        log_dir: Directory for a timestamped run log file. No file when None.
        level: Console level (name or number)

    Returns:
        Path of the run log file, or None when file logging is disabled
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root_logger.addHandler(console_handler)

    log_file_path = None
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file_path = str(Path(log_dir) / f"run_log_{timestamp}.log")
        file_handler = logging.FileHandler(log_file_path, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    # googleapiclient logs every discovery fetch at INFO
    logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.ERROR)

    return log_file_path


def log_exception(logger: logging.Logger, exc: Exception, context: str = "", **kwargs) -> None:
    """
    Log a full exception with traceback and context information.

    Args:
        logger: Logger instance to use
        exc: Exception that was raised
        context: Additional context string
        **kwargs: Additional context key-value pairs
    """
    error_msg = f"Exception occurred: {type(exc).__name__}: {str(exc)}"
    if context:
        error_msg = f"{context} - {error_msg}"

    logger.error(error_msg)

    tb_str = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.debug(f"Traceback:\n{tb_str}")

    cause = exc.__cause__
    while cause is not None:
        logger.error(f"Caused by: {type(cause).__name__}: {cause}")
        cause = cause.__cause__

    if kwargs:
        logger.error(f"Context: {kwargs}")
