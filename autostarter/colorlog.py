# -*- coding: utf-8 -*-
"""Colored logger class

Copyright (c) 2011 David H. Bronke and Christopher S. Case
Licensed under the MIT license; see the LICENSE file for details.

"""
import logging

from colorama import Fore, Style, just_fix_windows_console


just_fix_windows_console()


LEVEL_COLORS = (
        (logging.CRITICAL, Style.BRIGHT + Fore.MAGENTA),
        (logging.ERROR, Style.BRIGHT + Fore.RED),
        (logging.WARNING, Style.BRIGHT + Fore.YELLOW),
        (logging.INFO, Style.BRIGHT + Fore.GREEN),
        (logging.DEBUG, Fore.WHITE),
        )

TERM_ATTRIBUTES = dict(
        bold=Style.BRIGHT,
        faint=Style.DIM,
        blackFG=Fore.BLACK,
        redFG=Fore.RED,
        greenFG=Fore.GREEN,
        yellowFG=Fore.YELLOW,
        blueFG=Fore.BLUE,
        magentaFG=Fore.MAGENTA,
        cyanFG=Fore.CYAN,
        whiteFG=Fore.WHITE,
        resetTerm=Style.RESET_ALL,
        )

COLORED_FORMAT = ("%(bold)s%(blackFG)s[%(resetTerm)s%(levelColor)s%(levelname)-8s%(resetTerm)s"
        "%(bold)s%(blackFG)s]%(resetTerm)s %(cyanFG)s%(name)s%(bold)s%(blackFG)s:%(resetTerm)s  "
        "%(faint)s%(message)s%(resetTerm)s")


def levelColor(levelno):
    for threshold, color in LEVEL_COLORS:
        if levelno >= threshold:
            return color

    return Style.RESET_ALL


class ColoredConsoleHandler(logging.StreamHandler):
    """A StreamHandler that adds terminal color attributes to each record before formatting.

    The attributes (`levelColor`, `bold`, `cyanFG`, `resetTerm`, ...) are set to empty strings when the stream isn't a
    terminal, so the same format string works when output is redirected to a file.

    """
    def __init__(self, stream=None, useColor=None):
        super(ColoredConsoleHandler, self).__init__(stream)

        if useColor is None:
            isatty = getattr(self.stream, 'isatty', None)
            useColor = bool(isatty and isatty())

        self.useColor = useColor

    def emit(self, record):
        if self.useColor:
            record.levelColor = levelColor(record.levelno)
            for attr, code in TERM_ATTRIBUTES.items():
                setattr(record, attr, code)

        else:
            record.levelColor = ''
            for attr in TERM_ATTRIBUTES:
                setattr(record, attr, '')

        return logging.StreamHandler.emit(self, record)
