"""
Logging Utilities for the Deck Generator

Provides run-level logging configuration (file + console handlers) and
exception logging with context for debugging failed runs.
"""

import logging
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Tuple


def setup_run_logging(log_dir: str, label: str) -> Tuple[logging.Logger, str]:
    """
    Set up file-based logging for a deck generation run.
    Configures ROOT logger so all child loggers inherit the file handler.

    Args:
        log_dir: Directory where the run log will be written
        label: Short description of the run (template / copy name)

    Returns:
        Tuple of (run_logger instance, log_file_path)
    """
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_filename = f"run_log_{timestamp}.log"
    log_file_path = str(Path(log_dir) / log_filename)

    Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.FileHandler(log_file_path, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root_logger.addHandler(console_handler)

    # googleapiclient logs every discovery fetch at INFO
    logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.ERROR)

    run_logger = logging.getLogger('deck_run')
    run_logger.setLevel(logging.DEBUG)

    run_logger.info("=" * 70)
    run_logger.info("Deck Generator - Run Log")
    run_logger.info(f"Run: {label}")
    run_logger.info(f"Log File: {log_file_path}")
    run_logger.info(f"Started: {datetime.now().isoformat()}")
    run_logger.info("=" * 70)

    return run_logger, log_file_path


def enable_debug_logging() -> None:
    logging.getLogger().setLevel(logging.DEBUG)
    for handler in logging.getLogger().handlers:
        handler.setLevel(logging.DEBUG)
    for logger_name in logging.Logger.manager.loggerDict:
        logging.getLogger(logger_name).setLevel(logging.DEBUG)


def log_exception(logger: logging.Logger, exc: Exception, context: str = "", **kwargs) -> None:
    """
    Log a full exception with traceback and context information.

    Args:
        logger: Logger instance to use
        exc: Exception that was raised
        context: Step that failed
        **kwargs: Additional context key-value pairs
    """
    error_msg = f"Exception occurred: {type(exc).__name__}: {str(exc)}"
    if context:
        error_msg = f"{context} - {error_msg}"

    logger.error(error_msg)
    tb_str = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(f"Traceback:\n{tb_str}")

    if kwargs:
        logger.error(f"Context: {kwargs}")
