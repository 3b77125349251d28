# -*- coding: utf-8 -*-
"""Autostarter: Human readability utility functions

Copyright (c) 2012-2013 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""


def pl(number, singularUnit, pluralUnit=None):
    """Attach the appropriate singular or plural units to the given number.

    If `pluralUnit` is omitted, it defaults to `singularUnit + "s"`.

    """
    if pluralUnit is None:
        pluralUnit = singularUnit + "s"

    return '{} {}'.format(number, singularUnit if number == 1 else pluralUnit)


def duration(milliseconds):
    """Format a delay given in milliseconds.

        >>> duration(200)
        '200 ms'
        >>> duration(1500)
        '1.5 s'

    """
    if milliseconds < 1000:
        return '{} ms'.format(milliseconds)

    return '{:g} s'.format(milliseconds / 1000.0)
