"""Desktop Application Autostart Specification support

This module aims to implement the Desktop Application Autostart Specification version 0.5, available at:
http://standards.freedesktop.org/autostart-spec/autostart-spec-0.5.html

The autostart directories are searched in order of importance, and every entry that passes the policy is queued in
that order. Unlike the specification, an entry in a less important directory is not shadowed by a file with the same
name in a more important one; hide it with `Hidden=true` or deny it in the policy instead.

"""
import logging
import os
from os.path import join
import shutil

from ..enum import Enum
from ..errors import FileUnreadable
from ..signals import Signal
from ..utils import loggerFor
from . import basedir, desktopentry


logger = logging.getLogger("autostarter.xdg.autostart")

AUTOSTART_SUBDIR = 'autostart'

ENTRY_SUFFIX = '.desktop'

# Searched after the XDG config directories.
EXTRA_AUTOSTART_DIRS = ['/usr/share/autostart']


def autostartDirs(environ=None):
    """The autostart directories, in order of importance.

    With no XDG variables set, these are ~/.config/autostart, /etc/xdg/autostart and /usr/share/autostart.

    """
    return basedir.configDirs(environ).subdirs(AUTOSTART_SUBDIR) + EXTRA_AUTOSTART_DIRS


class SkipReason(metaclass=Enum):
    FileUnreadable = "The entry file couldn't be opened or read."
    NotAnApplication = "The file isn't a valid desktop entry of type Application."
    Hidden = "The entry has Hidden=true or NoDisplay=true."
    PolicyDenied = "An application rule denies the entry."
    ExecutableMissing = "The entry's TryExec program wasn't found."


class SkippedFile(object):
    def __init__(self, filename, reason, name=None):
        self.filename = filename
        self.reason = reason
        self.name = name

    def __repr__(self):
        return '<SkippedFile {!r}: {!r}>'.format(self.name or self.filename, self.reason)


class DirectorySummary(object):
    """What a scan of one autostart directory found, queued, and skipped."""
    def __init__(self, path):
        self.path = path
        self.exists = True
        self.blocked = False
        self.found = 0
        self.queued = list()
        self.skipped = list()

    def skippedFor(self, reason):
        return [skip for skip in self.skipped if skip.reason is reason]

    def __repr__(self):
        return '<DirectorySummary {!r}: {} found, {} queued, {} skipped>'.format(
                self.path, self.found, len(self.queued), len(self.skipped))


class Scanner(object):
    """Reads the desktop entries in autostart directories and queues the ones that should be launched.

    An entry is rejected, checking in this order, if it isn't a valid application, if it's hidden or has NoDisplay
    set, if an application rule denies it, or if it has a TryExec key naming a program that can't be found in $PATH.

    A directory is skipped entirely if a directory rule blocks it; directories without a rule are always scanned.

    """
    def __init__(self, config, queue, which=shutil.which):
        self.logger = loggerFor(self)
        self.config = config
        self.queue = queue
        self.which = which

        self.entryQueued = Signal()
        self.fileSkipped = Signal()

    def tryExecFound(self, tryExec):
        if not tryExec:
            return True

        return self.which(tryExec) is not None

    def check(self, entry):
        """Return the SkipReason that rejects `entry`, or None if it should be queued."""
        if not entry.isValid:
            return SkipReason.NotAnApplication

        if entry.isHidden or entry.isNoDisplay:
            return SkipReason.Hidden

        rule = self.config.findApp(entry.name)
        if rule is not None and not rule.allow:
            return SkipReason.PolicyDenied

        if not self.tryExecFound(entry.tryExec):
            return SkipReason.ExecutableMissing

    def scanFile(self, filename, summary):
        try:
            entry, _ = desktopentry.parseFile(filename)

        except FileUnreadable as ex:
            self.logger.warning("Couldn't read desktop entry %s", ex)
            self._skip(summary, SkippedFile(filename, SkipReason.FileUnreadable))
            return None

        reason = self.check(entry)
        if reason is not None:
            if reason is not SkipReason.NotAnApplication:
                self.logger.debug("Skipping %r (%s): %s", entry.name, filename, reason.__doc__)
            self._skip(summary, SkippedFile(filename, reason, entry.name or None))
            return None

        self.queue.append(entry)
        summary.queued.append(entry)
        self.entryQueued(entry)
        return entry

    def scanDirectory(self, path):
        summary = DirectorySummary(path)

        rule = self.config.findDir(path)
        if rule is not None and not rule.allow:
            self.logger.info("Skipping autostart directory %s: blocked by policy.", path)
            summary.blocked = True
            return summary

        try:
            # Filesystem order, deliberately unsorted.
            filenames = os.listdir(path)
        except OSError as ex:
            self.logger.warning("Can't read autostart directory %s: %s", path, ex.strerror or ex)
            summary.exists = False
            return summary

        self.logger.debug("Scanning autostart directory %s", path)

        for filename in filenames:
            if not filename.endswith(ENTRY_SUFFIX):
                continue

            summary.found += 1
            self.scanFile(join(path, filename), summary)

        return summary

    def scan(self, paths):
        return [self.scanDirectory(path) for path in paths]

    def _skip(self, summary, skipped):
        summary.skipped.append(skipped)
        self.fileSkipped(skipped)
