"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details
"""

import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
import traceback
from typing import Dict, Optional, Union


def formatTraceback(err: Exception) -> str:
    """
    Format a traceback for an error so that it can go into logs.

    Args:
        err: The error the traceback is extracted from.

    Returns:
        The __str__() of the error, followed by the standard formatting
            of the traceback on the following lines.
    """
    return "".join(traceback.format_exception(None, err, err.__traceback__))


class LogSettings:
    """
    Used to track a few logging-related settings.
    """

    root = logging.getLogger("")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handlers: Dict[str, logging.Handler] = {}


LogSettings.root.setLevel(logging.NOTSET)


def _replaceHandler(key: str, handler: logging.Handler) -> None:
    old = LogSettings.handlers.pop(key, None)
    if old:
        LogSettings.root.removeHandler(old)
        old.close()
    LogSettings.handlers[key] = handler
    LogSettings.root.addHandler(handler)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Prepare for using getLogger. Logs to stderr. If filepath is provided, log
    outputs will be saved to a rotating log file at the specified location. Any
    loggers, both future loggers and those already created, will have their
    levels set according to the new logLvl and lvlMap. Calling it again
    replaces the handlers installed by the previous call.

    Args:
        filepath: The base name for the rotating log file.
        logLvl: The default logging level used for all new loggers without
            entries in the lvlMap.
        lvlMap: The name->level mapping will be added to the stored level dict,
            which is referenced when loggers are created using getLogger.
    """
    # Set log level for existing loggers.
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        if name in LogSettings.moduleLevels:
            logger.setLevel(LogSettings.moduleLevels[name])
        else:
            logger.setLevel(LogSettings.defaultLevel)

    log_formatter = logging.Formatter(
        "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"
    )
    if filepath:
        fileHandler = RotatingFileHandler(
            filepath,
            mode="a",
            maxBytes=5 * 1024 * 1024,
            backupCount=2,
            encoding=None,
            delay=False,
        )
        fileHandler.setFormatter(log_formatter)
        _replaceHandler("file", fileHandler)
    if not sys.executable.endswith("pythonw.exe"):
        # Skip adding the stream handler for pythonw in windows.
        printHandler = logging.StreamHandler()
        printHandler.setFormatter(log_formatter)
        _replaceHandler("stream", printHandler)


def getLogger(name: str) -> Logger:
    """
    Gets a named logger. If the name has a log level registered with
    prepareLogging, that level will be used, otherwise the default is used.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l
