"""
OmniMeasure - Logging Setup
===========================

Ersetzt die Default-Sinks von loguru durch ein kompaktes Konsolenformat,
optional zusätzlich eine Logdatei.
"""

import sys
from typing import Optional, Union
from pathlib import Path

from loguru import logger

from config.version import APP_NAME, VERSION

CONSOLE_FORMAT = "<level>{level: <8}</level> | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def configure_logging(level: str = "INFO", log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Konfiguriert loguru für die Anwendung.

    Args:
        level: Log-Level ("DEBUG", "INFO", ...)
        log_file: Optionaler Pfad für eine zusätzliche Logdatei
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        logger.add(str(log_file), format=FILE_FORMAT, level=level, encoding="utf-8")

    logger.debug(f"{APP_NAME} {VERSION}: Logging initialisiert (level={level})")
