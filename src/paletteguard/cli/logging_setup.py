"""Logging configuration for the paletteguard CLI."""

from __future__ import annotations

import logging
import os

NOISY_LOGGERS = ("httpx", "httpcore", "openai", "urllib3", "huggingface_hub")


def setup_logging(
    verbose: bool = False,
    log_file: str | None = None,
    logger_name: str = "paletteguard",
) -> logging.Logger:
    """
    Configure dual-handler logging (console + file).

    Args:
        verbose: Enable DEBUG level on console (default WARNING)
        log_file: Path to log file (None for no file logging)
        logger_name: Logger to attach the handlers to

    Returns:
        Configured logger instance
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")
    )

    file_handler = None
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    # Repeated invocations in one process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(console_handler)
    if file_handler:
        logger.addHandler(file_handler)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
