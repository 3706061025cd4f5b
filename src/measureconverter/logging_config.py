"""
Logging Configuration
Sets up the global logger for the application and routes Qt's own
diagnostics (qDebug/qWarning) into it.
"""
import logging
import sys
from typing import Optional, Union

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

_qt_logger = logging.getLogger("measureconverter.qt")


def _qt_message_handler(mode: QtMsgType, context, message: str) -> None:
    _qt_logger.log(_QT_LEVELS.get(mode, logging.WARNING), message)


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    capture_qt: bool = True,
) -> logging.Logger:
    """
    Configures the root logger for the 'measureconverter' namespace.

    Args:
        level: Logging level, as a number or a name (e.g. logging.DEBUG, "DEBUG")
        log_file: Optional path to save logs to a file.
        capture_qt: Forward Qt messages to the 'measureconverter.qt' logger.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level_name = level
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level_name}")

    logger = logging.getLogger("measureconverter")
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs during reload/restart
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if capture_qt:
        qInstallMessageHandler(_qt_message_handler)

    logger.info("Logging initialized.")
    return logger
