# -*- coding: utf-8 -*-
"""Autostarter: Staggered launching of queued applications

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

Every queued entry is started with `sh -c`, in its own session, with its standard streams connected to /dev/null. The
launcher never waits for (or reaps) the applications it starts; that is left to whatever process inherits them.

"""
import logging
import os
from os.path import isdir
import subprocess
import time

from .enum import Enum
from .errors import SpawnFailed
from .signals import Signal
from .utils import loggerFor
from .xdg.fieldcodes import sanitize


logger = logging.getLogger("autostarter.sequencer")

SHELL = 'sh'


class LaunchState(metaclass=Enum):
    Pending = "Waiting for its pre-launch delay to elapse."
    Launching = "Its command line is being started."
    Launched = "Its child process was created."
    LaunchFailed = "Its child process could not be created."


_TRANSITIONS = {
        LaunchState.Pending: (LaunchState.Launching, ),
        LaunchState.Launching: (LaunchState.Launched, LaunchState.LaunchFailed),
        LaunchState.Launched: (),
        LaunchState.LaunchFailed: (),
        }


def spawnDetached(command, workingDirectory=None):
    """Start `command` through the shell as a detached background process, and return its PID.

    The child gets a new session (so it has no controlling terminal), and stdin, stdout and stderr are all redirected
    to /dev/null. This returns as soon as the child exists; it never waits for it.

    If `workingDirectory` isn't an existing directory, a warning is logged and the child is started in the current
    directory instead.

    Raises SpawnFailed if the command line is empty or the process can't be created.

    """
    if not command.strip():
        raise SpawnFailed(command, "empty command line")

    cwd = None
    if workingDirectory:
        if isdir(workingDirectory):
            cwd = workingDirectory
        else:
            logger.warning("Working directory %r doesn't exist; starting %r in %s instead.",
                    workingDirectory, command, os.getcwd())

    try:
        proc = subprocess.Popen([SHELL, '-c', command],
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                close_fds=True,
                start_new_session=True
                )

    except (OSError, ValueError) as ex:
        raise SpawnFailed(command, getattr(ex, 'strerror', None) or str(ex)) from ex

    logger.debug("Command %r started; PID: %r", command, proc.pid)
    return proc.pid


class LaunchOutcome(object):
    """The launch of one queued entry, as it moves from Pending to Launched or LaunchFailed."""
    def __init__(self, index, entry, delayMs):
        self.index = index
        self.entry = entry
        self.delayMs = delayMs
        self.state = LaunchState.Pending
        self.command = None
        self.pid = None
        self.error = None

    def advance(self, state):
        if state not in _TRANSITIONS[self.state]:
            raise RuntimeError("Can't go from {!r} to {!r} while launching {!r}!".format(
                    self.state, state, self.entry.name))

        self.state = state

    @property
    def succeeded(self):
        return self.state is LaunchState.Launched

    def __repr__(self):
        return '<LaunchOutcome #{} {!r}: {!r}>'.format(self.index, self.entry.name, self.state)


class LaunchReport(object):
    def __init__(self):
        self.outcomes = list()

    @property
    def total(self):
        return len(self.outcomes)

    @property
    def succeeded(self):
        return sum(1 for outcome in self.outcomes if outcome.state is LaunchState.Launched)

    @property
    def failed(self):
        return sum(1 for outcome in self.outcomes if outcome.state is LaunchState.LaunchFailed)

    @property
    def failures(self):
        return [outcome for outcome in self.outcomes if outcome.state is LaunchState.LaunchFailed]

    def __repr__(self):
        return '<LaunchReport: {} total, {} succeeded, {} failed>'.format(self.total, self.succeeded, self.failed)


class Sequencer(object):
    """Launches the entries of a LaunchQueue one at a time, in queue order, with a delay before each.

    The delay before the first entry is the policy's `startupDelayMs`, and `interItemDelayMs` before each one after
    that. An application rule with a delay override replaces the default delay for that entry, wherever it is in the
    queue.

    Connect to `itemLaunching` and `itemFinished` to follow progress; both are called with the LaunchOutcome.

    `sleep` takes seconds, like time.sleep; `spawn` takes a command line and working directory and returns a PID.

    """
    def __init__(self, config, sleep=time.sleep, spawn=spawnDetached):
        self.logger = loggerFor(self)
        self.config = config
        self.sleep = sleep
        self.spawn = spawn

        self.itemLaunching = Signal()
        self.itemFinished = Signal()

    def delayFor(self, index, entry):
        rule = self.config.findApp(entry.name)
        if rule is not None and rule.hasDelayOverride:
            return rule.delayOverrideMs

        if index == 0:
            return self.config.startupDelayMs

        return self.config.interItemDelayMs

    def run(self, queue):
        report = LaunchReport()

        for index, entry in enumerate(queue):
            outcome = LaunchOutcome(index, entry, self.delayFor(index, entry))
            report.outcomes.append(outcome)
            self.launch(outcome)

        self.logger.info("Launch finished: %d succeeded, %d failed.", report.succeeded, report.failed)
        return report

    def launch(self, outcome):
        entry = outcome.entry

        if outcome.delayMs > 0:
            self.logger.debug("Waiting %d ms before launching %r.", outcome.delayMs, entry.name)
            self.sleep(outcome.delayMs / 1000.0)

        outcome.advance(LaunchState.Launching)
        self.itemLaunching(outcome)

        outcome.command = sanitize(entry.exec)

        try:
            outcome.pid = self.spawn(outcome.command, entry.workingDirectory or None)

        except (SpawnFailed, OSError) as ex:
            outcome.error = ex
            outcome.advance(LaunchState.LaunchFailed)
            self.logger.error("Failed to launch %r: %s", entry.name, ex)

        except Exception as ex:
            # A replacement spawn hook may raise anything; it still only fails this entry.
            outcome.error = ex
            outcome.advance(LaunchState.LaunchFailed)
            self.logger.exception("Unexpected error launching %r!", entry.name)

        else:
            outcome.advance(LaunchState.Launched)
            self.logger.info("Launched %r (PID %r).", entry.name, outcome.pid)

        self.itemFinished(outcome)
        return outcome
