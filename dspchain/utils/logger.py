"""
Logger - Central logging for the DSP chain preset core

Usage:
    from dspchain.utils.logger import logger

    logger.debug("Scanning presets dir")
    logger.info("Catalog loaded")
    logger.warning("Plugin manifest entry skipped", component="PLUGINS")
    logger.error("Preset parse failed", component="PRESET", details=str(e))

    # Shorthand for preset-catalog chatter
    logger.preset("current preset missing, skipped")

Records are also re-emitted as a Qt signal so an editor window can show
them in its console pane.
"""

import logging
import sys
from datetime import datetime
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogSignalEmitter(QObject):
    """Carries formatted log lines to the GUI console."""
    log_message = pyqtSignal(str, int, str)  # message, level, timestamp


class QtSignalHandler(logging.Handler):
    """logging.Handler that forwards each record through a LogSignalEmitter."""

    def __init__(self, emitter: LogSignalEmitter):
        super().__init__()
        self.emitter = emitter

    def emit(self, record: logging.LogRecord):
        try:
            msg = self.format(record)
            timestamp = datetime.now().strftime("%H:%M:%S")
            self.emitter.log_message.emit(msg, record.levelno, timestamp)
        except Exception:
            self.handleError(record)


class DSPChainLogger:
    """
    Component-tagged wrapper around the ``dspchain`` stdlib logger.

    Handlers:
    - console (stdout), INFO and above by default
    - Qt signal, all levels
    - file, only after enable_file_logging()
    """

    def __init__(self, name: str = "dspchain"):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self.signal_emitter = LogSignalEmitter()

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        self._console_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S"
        ))
        self._logger.addHandler(self._console_handler)

        self._qt_handler = QtSignalHandler(self.signal_emitter)
        self._qt_handler.setLevel(logging.DEBUG)
        self._qt_handler.setFormatter(logging.Formatter("%(message)s"))
        self._logger.addHandler(self._qt_handler)

        self._file_handler: Optional[logging.FileHandler] = None

    @property
    def name(self) -> str:
        return self._logger.name

    def set_level(self, level: LogLevel):
        """Set minimum level for console output."""
        self._console_handler.setLevel(level)

    def set_gui_level(self, level: LogLevel):
        """Set minimum level for the Qt console signal."""
        self._qt_handler.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Mirror every record into filepath (replaces a previous file)."""
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()

        self._file_handler = logging.FileHandler(filepath, encoding="utf-8")
        self._file_handler.setLevel(logging.DEBUG)
        self._file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s"
        ))
        self._logger.addHandler(self._file_handler)

    def disable_file_logging(self):
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    @staticmethod
    def format_message(msg: str, component: Optional[str] = None,
                       details: Optional[str] = None) -> str:
        """Build "[COMPONENT] msg - details"."""
        parts = []
        if component:
            parts.append(f"[{component}]")
        parts.append(msg)
        if details:
            parts.append(f"- {details}")
        return " ".join(parts)

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._logger.debug(self.format_message(msg, component, details))

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        self._logger.info(self.format_message(msg, component, details))

    def warning(self, msg: str, component: Optional[str] = None,
                details: Optional[str] = None):
        self._logger.warning(self.format_message(msg, component, details))

    def error(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._logger.error(self.format_message(msg, component, details))

    def preset(self, msg: str, details: Optional[str] = None):
        """Debug-level preset catalog message."""
        self.debug(msg, component="PRESET", details=details)

    def plugins(self, msg: str, details: Optional[str] = None):
        """Debug-level plugin registry message."""
        self.debug(msg, component="PLUGINS", details=details)


# Global logger instance
logger = DSPChainLogger()


def set_log_level(level: LogLevel):
    """Set the console log level."""
    logger.set_level(level)
