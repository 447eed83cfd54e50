"""
Logger configuration for salvo.

Built on loguru. Importing salvo only disables its own ``salvo`` namespace and
leaves the process-wide handlers alone; an application that wants salvo's
logs calls ``configure_logger``, which reads ``settings.logging`` at call time
unless a config is passed.

Environment variables:
    - SALVO__LOGGING__DISABLED: Disable logging (default: false).
    - SALVO__LOGGING__CLEAR_LOGGERS: Remove existing loguru handlers first
      (default: true).
    - SALVO__LOGGING__CONSOLE_LOG_LEVEL: Console log level (default: WARNING).
    - SALVO__LOGGING__LOG_FILE: Path to a log file (default: None).
    - SALVO__LOGGING__LOG_FILE_LEVEL: File log level (default: INFO when a
      file is set).
"""

from __future__ import annotations

import sys

from loguru import logger

from salvo.settings import LoggingSettings, settings

__all__ = ["configure_logger", "logger"]


def configure_logger(config: LoggingSettings | None = None) -> None:
    if config is None:
        config = settings.logging

    if config.disabled:
        logger.disable("salvo")
        return

    logger.enable("salvo")

    if config.clear_loggers:
        logger.remove()

    logger.add(
        sys.stdout,
        level=config.console_log_level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level>"
        " | {name}:{function}:{line} - {message}",
    )

    if config.log_file or config.log_file_level:
        log_file = config.log_file or "salvo.log"
        log_file_level = config.log_file_level or "INFO"
        logger.add(log_file, level=log_file_level.upper())


logger.disable("salvo")
