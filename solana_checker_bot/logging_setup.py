"""
Logging setup: console plus an append-only log file.
"""
import logging
import sys

from .config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"


def setup_logging(config: Config) -> logging.Logger:
    """
    Configure the root logger with a console handler and a file handler.

    Args:
        config: Application configuration (LOG_FILE, LOG_LEVEL)

    Returns:
        The package logger
    """
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    file_handler = logging.FileHandler(config.LOG_FILE, mode="a", encoding="utf-8")
    file_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(config.LOG_LEVEL)
    root.handlers.clear()
    root.addHandler(console_handler)
    root.addHandler(file_handler)

    # telethon logs every reconnect at INFO
    logging.getLogger("telethon").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger("solana_checker_bot")
