# -*- coding: utf-8 -*-
"""Autostarter: Launch XDG autostart applications under an operator-supplied policy

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
__version__ = '0.1.0'
