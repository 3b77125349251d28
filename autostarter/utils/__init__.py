# -*- coding: utf-8 -*-
"""Autostarter: Utility functions

Copyright (c) 2012-2013 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
import logging
import re


def loggerFor(cls):
    if not isinstance(cls, type):
        cls = type(cls)

    return logging.getLogger('{}.{}'.format(cls.__module__, cls.__name__))


leadingIntRE = re.compile(r'^\s*([+-]?\d+)')


def parseInt(value):
    """Parse the leading integer of `value`, the way C's atoi() does.

    Leading whitespace and a sign are accepted; parsing stops at the first non-digit. If there is no leading integer
    at all, 0 is returned instead of raising.

        >>> parseInt("500ms")
        500
        >>> parseInt(" -1")
        -1
        >>> parseInt("soon")
        0

    """
    match = leadingIntRE.match(value)
    if match is None:
        return 0

    return int(match.group(1))
