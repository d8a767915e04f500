"""uno_engine/log_setup.py"""

import logging
import logging.handlers
import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Config


def setup_logging(config: Config, verbose: bool = False) -> Optional[str]:
    """
    Configures the root logger with a Rich console handler and a rotating file.

    Returns the log file path, or None if file logging could not be set up.
    """
    log_level_file_str = config.logging.log_level_file.upper()
    log_level_console_str = "DEBUG" if verbose else config.logging.log_level_console.upper()

    file_log_level_value = getattr(logging, log_level_file_str, logging.DEBUG)
    console_log_level_value = getattr(logging, log_level_console_str, logging.WARNING)

    handlers: List[logging.Handler] = []

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(console_log_level_value)
    handlers.append(console_handler)

    log_file: Optional[str] = None
    log_dir = config.logging.log_dir
    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            log_file = os.path.join(log_dir, f"{config.logging.log_file_prefix}.log")
            fh = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=config.logging.log_max_bytes,
                backupCount=config.logging.log_backup_count,
                encoding="utf-8",
            )
            fh.setLevel(file_log_level_value)
            fh.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(levelname)-8s - %(name)-25s - %(message)s"
                )
            )
            handlers.append(fh)
        except OSError as e:
            print(
                f"ERROR: Could not set up file logging in '{log_dir}': {e}",
                file=sys.stderr,
            )
            log_file = None

    # Configure Root Logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Set root logger to lowest level
    for handler in root_logger.handlers[:]:  # Remove any existing handlers
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        "Logging initialized. File: %s (Level: %s), Console Level: %s",
        log_file or "disabled",
        logging.getLevelName(file_log_level_value),
        logging.getLevelName(console_log_level_value),
    )
    return log_file
