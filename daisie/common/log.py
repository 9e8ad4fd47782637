"""Module containing standardized logging class for the DAISIE checklist."""
import logging
from logging.handlers import RotatingFileHandler
import os
import sys

from daisie.common.constants import (
    LOG_DATE_FORMAT, LOG_FORMAT, LOGFILE_BACKUP_COUNT, LOGFILE_MAX_BYTES)
from daisie.common.util import get_today_str


# ...............................................
def logit(msg, logger=None, refname="", log_level=logging.INFO):
    """Method to log a message to a logger/file/stream or print to console.

    Args:
        msg: message to print.
        logger (daisie.common.log.Logger): logger instance or None
        refname: calling function name.
        log_level: logging constant error level (logging.INFO, logging.DEBUG,
            logging.WARNING, logging.ERROR)
    """
    if logger is not None:
        logger.log(msg, refname=refname, log_level=log_level)
    else:
        print(msg)


# .....................................................................................
class Logger:
    """Class containing a logger for consistent logging."""

    # .......................
    def __init__(
            self, log_name, log_path=None, log_console=True, log_level=logging.INFO):
        """Constructor.

        Args:
            log_name (str): A name for the logger.
            log_path (str): Directory for the logfile.  If None, no file is written.
            log_console (bool): Flag indicating logs be written to the console.
            log_level (int): What level of logs should be retained.
        """
        self.logger = None
        todaystr = get_today_str()
        self.name = f"{log_name}_{todaystr}"
        self.log_directory = log_path
        self.filename = None
        self.log_console = log_console
        self.log_level = log_level

        handlers = []
        if self.log_directory is not None:
            os.makedirs(self.log_directory, exist_ok=True)
            self.filename = os.path.join(self.log_directory, f"{self.name}.log")
            handlers.append(
                RotatingFileHandler(
                    self.filename, mode="w", maxBytes=LOGFILE_MAX_BYTES,
                    backupCount=LOGFILE_BACKUP_COUNT, encoding="utf-8"))
        if self.log_console:
            handlers.append(logging.StreamHandler(stream=sys.stdout))

        self.logger = logging.getLogger(self.name)
        self.logger.setLevel(logging.DEBUG)
        # Loggers are global by name, do not stack handlers on re-creation
        for old_handler in list(self.logger.handlers):
            self.logger.removeHandler(old_handler)
            old_handler.close()

        formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
        for handler in handlers:
            handler.setLevel(self.log_level)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.propagate = False

    # ........................
    def log(self, msg, refname="", log_level=logging.INFO):
        """Log a message.

        Args:
            msg (str): A message to write to the logger.
            refname (str): Class or function name to use in logging message.
            log_level (int): A level to use when logging the message.
        """
        if self.logger is not None:
            self.logger.log(log_level, refname + ': ' + msg)

    # ........................
    def close(self):
        """Close and detach all handlers, releasing the logfile."""
        if self.logger is not None:
            for handler in list(self.logger.handlers):
                self.logger.removeHandler(handler)
                handler.close()


# .....................................................................................
__all__ = ["Logger", "logit"]
