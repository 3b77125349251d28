# -*- coding: utf-8 -*-
"""Autostarter: Queue of entries awaiting launch

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
import threading

from .utils import loggerFor


class LaunchQueue(object):
    """An ordered, append-only collection of desktop entries that passed filtering.

    Entries keep the order they were appended in: source directories in order of importance, and files in the order
    the filesystem listed them. Appends are serialized, so several scanners may fill one queue from different threads.

    """
    def __init__(self, entries=()):
        self.logger = loggerFor(self)
        self._lock = threading.Lock()
        self._entries = list()

        for entry in entries:
            self.append(entry)

    def append(self, entry):
        if not entry.isValid:
            raise ValueError("Refusing to queue invalid desktop entry {!r}".format(entry))

        with self._lock:
            self._entries.append(entry)
            position = len(self._entries)

        self.logger.debug("Queued %r at position %d.", entry.name, position)

    @property
    def entries(self):
        with self._lock:
            return tuple(self._entries)

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index):
        with self._lock:
            return self._entries[index]

    def __bool__(self):
        return len(self) > 0

    def __repr__(self):
        return '<LaunchQueue with {} entries>'.format(len(self))
