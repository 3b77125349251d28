# -*- coding: utf-8 -*-
"""Autostarter: Simple callback signals

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
import logging


logger = logging.getLogger("autostarter.signals")


class Signal(object):
    """A list of handlers that are all called, in connection order, when the signal is fired.

    Example:

        >>> launched = Signal()
        >>> launched.connect(print)
        >>> launched("firefox")
        firefox

    A handler that raises is logged and skipped; it does not keep the remaining handlers from running.

    """
    def __init__(self):
        self.handlers = list()

    def connect(self, handler):
        self.handlers.append(handler)

    def disconnect(self, handler):
        self.handlers.remove(handler)

    def __call__(self, *args, **kwargs):
        for handler in list(self.handlers):
            try:
                handler(*args, **kwargs)
            except Exception:
                logger.exception("Exception in signal handler %r!", handler)

    def __len__(self):
        return len(self.handlers)

    def __repr__(self):
        return '<Signal with {} handler(s)>'.format(len(self.handlers))
