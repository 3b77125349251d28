# -*- coding: utf-8 -*-
"""Autostarter: Exception types

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""


class AutostartError(Exception):
    pass


class FileUnreadable(AutostartError):
    """An entry file or policy file could not be opened or decoded."""
    def __init__(self, path, reason):
        super(FileUnreadable, self).__init__('{}: {}'.format(path, reason))
        self.path = path
        self.reason = reason


class SpawnFailed(AutostartError):
    """The child process for a queued entry could not be created."""
    def __init__(self, command, reason):
        super(SpawnFailed, self).__init__('{!r}: {}'.format(command, reason))
        self.command = command
        self.reason = reason
