#!/usr/bin/env python3
"""
Logging setup for the Blackbody Spectrum simulation.

Configures a dedicated application logger ("blackbody_sim") rather than the root
logger, so output from Pygame and Dear PyGui is not captured.
"""
import logging
import os
from datetime import datetime
from typing import Optional

from .config_loader import LoggingConfig

LOGGER_NAME = "blackbody_sim"


def setup_logging(log_config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the "blackbody_sim" logger to write to the console and, when
    log_config.log_dir is set, to <log_dir>/<run id>/simulation.log.

    Calling it again replaces the previous handlers.

    Returns:
        The configured logger
    """
    log_config = log_config or LoggingConfig()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config.level)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(log_config.format)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file = None
    if log_config.log_dir:
        run_id = datetime.now().strftime("%Y%m%d-%H%M%S")
        run_dir = os.path.join(log_config.log_dir, run_id)
        os.makedirs(run_dir, exist_ok=True)
        log_file = os.path.join(run_dir, "simulation.log")
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized. Log file: %s", log_file or "(console only)")
    return logger
