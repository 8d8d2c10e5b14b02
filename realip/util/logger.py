#!/usr/bin/env python3
import logging
from realip.const import LOG_LEVEL


class CustomFormatter(logging.Formatter):
    muted = "\x1b[38;2;2;20;5m"
    debug = "\x1b[30;1m"
    lightyellow = "\x1b[38;2;250;250;150m"
    lightgreen = "\x1b[92m"
    skyblue = "\x1b[38;2;150;250;250m"
    red = "\x1b[31;20m"
    lightred = "\x1b[91m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    format = (
        "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s (%(filename)s:%(lineno)d)"
    )
    short_format = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
    datefmt = "%d-%b-%y %H:%M:%S"

    FORMATS = {
        logging.DEBUG: debug + format + reset,
        logging.INFO: lightgreen + format + reset,
        logging.WARNING: red + format + reset,
        logging.ERROR: lightred + format + reset,
        logging.CRITICAL: bold_red + format + reset,
    }

    def format(self, record):
        if record.levelname == "TRUST":
            log_fmt = self.skyblue + self.short_format + self.reset
        elif record.levelname == "REQUEST":
            log_fmt = self.lightyellow + self.short_format + self.reset
        elif record.levelname == "MUTED":
            log_fmt = self.muted + self.short_format + self.reset
        else:
            log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt, datefmt=self.datefmt)
        return formatter.format(record)


def addLoggingLevel(levelName, levelNum, methodName=None):
    # From https://stackoverflow.com/questions/2183233/
    # how-to-add-a-custom-loglevel-to-pythons-logging-facility/

    if not methodName:
        methodName = levelName.lower()

    if hasattr(logging, levelName):
        raise AttributeError("{} already defined in logging module".format(levelName))
    if hasattr(logging, methodName):
        raise AttributeError("{} already defined in logging module".format(methodName))
    if hasattr(logging.getLoggerClass(), methodName):
        raise AttributeError("{} already defined in logger class".format(methodName))

    def logForLevel(self, message, *args, **kwargs):
        if self.isEnabledFor(levelNum):
            self._log(levelNum, message, args, **kwargs)

    def logToRoot(message, *args, **kwargs):
        logging.log(levelNum, message, *args, **kwargs)

    logging.addLevelName(levelNum, levelName)
    setattr(logging, levelName, levelNum)
    setattr(logging.getLoggerClass(), methodName, logForLevel)
    setattr(logging, methodName, logToRoot)


logger = logging.getLogger("realip")
# create console handler
handler = logging.StreamHandler()
handler.setFormatter(CustomFormatter())
logger.addHandler(handler)

# Shows trust cache insertions
addLoggingLevel("TRUST", logging.DEBUG + 5)

# Shows per request resolutions
addLoggingLevel("REQUEST", logging.DEBUG + 2)

# Shows generally ignorable degradations, e.g. an unparseable peer address
addLoggingLevel("MUTED", logging.DEBUG - 1)

logger.setLevel(LOG_LEVEL)
