"""
Logging setup for the resume generator.

Everything logs under the ``resume_generator`` namespace. The CLI calls
``init_logger`` once; library code only asks for ``get_logger("part")``.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

NAMESPACE = "resume_generator"


def setup_logging(
    log_dir: Path,
    log_level: str = "INFO",
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the namespace logger, replacing any earlier handlers.

    Args:
        log_dir: Directory for the timestamped run log (created on demand)
        log_level: Console level name, e.g. "DEBUG" or "WARNING"
        log_to_file: Also write a detailed log file at DEBUG
        log_to_console: Write short messages to stderr
    """
    level = getattr(logging, log_level.upper())
    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(logging.DEBUG if log_to_file else level)
    logger.handlers.clear()

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_handler = logging.FileHandler(log_dir / f"{NAMESPACE}_{stamp}.log", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)8s] %(name)s:%(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

    # stderr, so --stdout output stays clean
    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """``get_logger("export")`` -> the ``resume_generator.export`` logger."""
    return logging.getLogger(f"{NAMESPACE}.{name}" if name else NAMESPACE)


_logger: Optional[logging.Logger] = None


def init_logger(log_dir: Path, log_level: str = "INFO", log_to_file: bool = True) -> logging.Logger:
    global _logger
    _logger = setup_logging(log_dir, log_level, log_to_file=log_to_file)
    return _logger
