"""
Logger utilities for the evapotranspiration package.

Provides a Logger class for consistent logging across the project
with Loguru-based logging and colored output. The package disables its
own records on import; calling ``Logger.setup`` switches them on.

Only sinks added by ``Logger.setup`` are ever removed, so handlers installed
by the host application are left alone.
"""

from loguru import logger
import sys
from typing import List, Optional
from pathlib import Path


PACKAGE_NAME = "evapotranspiration"


class Logger:
    """
    Logger class for the evapotranspiration package.

    Features:
    - Loguru-based logging with colored output
    - File rotation and retention
    - Setup from a loaded configuration dictionary
    """

    _handler_ids: List[int] = []
    _default_format: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{message}</cyan>"
    )

    @staticmethod
    def setup(
        log_file: Optional[str] = None,
        level: str = "INFO",
        console: bool = True,
        rotation: str = "10 MB",
        retention: str = "10 files",
        log_format: Optional[str] = None
    ) -> None:
        """
        Initialize package logging with specified configuration.

        Calling it again replaces the sinks of the previous call.

        Args:
            log_file: Path to log file (optional)
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console: Whether to output to console
            rotation: Log file rotation size
            retention: Log file retention policy
            log_format: Loguru format string, defaults to the package format
        """
        fmt = log_format or Logger._default_format
        only_package = {PACKAGE_NAME: level, "": False}

        Logger.reset()

        if console:
            Logger._handler_ids.append(logger.add(
                sys.stderr,
                format=fmt,
                level=level,
                filter=only_package,
                colorize=True,
                backtrace=True,
                diagnose=True
            ))

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            Logger._handler_ids.append(logger.add(
                str(log_path),
                format=fmt,
                level=level,
                filter=only_package,
                rotation=rotation,
                retention=retention,
                compression="gz",
                serialize=False,
                backtrace=True,
                diagnose=True
            ))

        logger.enable(PACKAGE_NAME)

    @staticmethod
    def setup_from_config(config: dict) -> None:
        """
        Initialize package logging from a configuration dictionary.

        Args:
            config: Configuration as returned by ``config.load_config``; only
                the ``logging`` section is read
        """
        settings = config.get("logging", {})
        log_file = settings.get("log_file") if settings.get("file_log", False) else None
        Logger.setup(
            log_file=log_file,
            level=settings.get("level", "INFO"),
            console=settings.get("console", True),
            rotation=settings.get("rotation", "10 MB"),
            retention=settings.get("retention", "10 files"),
            log_format=settings.get("format")
        )

    @staticmethod
    def reset() -> None:
        """Remove the sinks added by ``setup``."""
        while Logger._handler_ids:
            logger.remove(Logger._handler_ids.pop())

    @staticmethod
    def debug(message: str, **kwargs) -> None:
        """Log debug message"""
        logger.opt(depth=1).debug(message, **kwargs)

    @staticmethod
    def warning(message: str, **kwargs) -> None:
        """Log warning message"""
        logger.opt(depth=1).warning(message, **kwargs)

    @staticmethod
    def configure_for_testing() -> None:
        """Configure logger for testing (quiet mode)"""
        Logger.setup(level="DEBUG", console=False)
