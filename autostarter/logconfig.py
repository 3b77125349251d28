# -*- coding: utf-8 -*-
"""Autostarter: Logging configuration

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
import logging
import logging.config

from .colorlog import COLORED_FORMAT


DEFAULT_LEVEL = logging.INFO

PLAIN_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s:  %(message)s"


def parseLevel(level, default=DEFAULT_LEVEL):
    """Convert a level name ("debug", "WARNING") or number ("10") into a numeric logging level.

    Unknown names fall back to `default`.

    """
    if level is None:
        return default

    if isinstance(level, int):
        return level

    level = level.strip()
    if level.isdigit():
        return int(level)

    numeric = logging.getLevelName(level.upper())
    if isinstance(numeric, int):
        return numeric

    return default


def configure(level=None, logFile=None):
    """Set up the "autostarter" logger hierarchy.

    Console output goes to stderr through a ColoredConsoleHandler; if `logFile` is given, records are also appended
    to that file without color codes.

    """
    handlers = {
            'console': {
                'class': 'autostarter.colorlog.ColoredConsoleHandler',
                'formatter': 'colored',
                'stream': 'ext://sys.stderr'
                }
            }

    if logFile:
        handlers['file'] = {
                'class': 'logging.FileHandler',
                'formatter': 'plain',
                'filename': logFile,
                'delay': True
                }

    logging.config.dictConfig({
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'colored': {
                    'format': COLORED_FORMAT
                    },
                'plain': {
                    'format': PLAIN_FORMAT
                    }
                },
            'handlers': handlers,
            'loggers': {
                'autostarter': {
                    'handlers': list(handlers),
                    'level': parseLevel(level),
                    'propagate': False
                    }
                }
            })

    return logging.getLogger("autostarter")
