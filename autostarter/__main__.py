# -*- coding: utf-8 -*-
"""Autostarter: Main application

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

"""
import argparse
import logging
import sys

from . import __version__, logconfig, policy
from .errors import FileUnreadable
from .launchqueue import LaunchQueue
from .report import describeConfig, describeDirectory, describeLaunch, describeOutcome
from .sequencer import Sequencer
from .xdg import basedir
from .xdg.autostart import Scanner, autostartDirs


logger = logging.getLogger("autostarter")

DEFAULT_POLICY_FILE = 'autostarter/autostart.conf'


def parseArgs(argv=None):
    parser = argparse.ArgumentParser(prog='autostarter',
            description="Launch the XDG autostart applications allowed by a policy file.")
    parser.add_argument('config', metavar='CONFIG', nargs='?',
            help="policy file (default: the first {} in the XDG config directories)".format(DEFAULT_POLICY_FILE))
    parser.add_argument('-d', '--dir', metavar='DIR', dest='dirs', action='append',
            help="scan DIR instead of the standard autostart directories (may be given more than once)")
    parser.add_argument('-n', '--dry-run', action='store_true',
            help="scan and report, but don't launch anything")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_const', dest='logLevel', const=logging.DEBUG,
            help="show debugging output")
    verbosity.add_argument('-q', '--quiet', action='store_const', dest='logLevel', const=logging.WARNING,
            help="only show warnings and errors")

    parser.add_argument('--version', action='version', version='%(prog)s ' + __version__)

    return parser.parse_args(argv)


def loadPolicy(path):
    """Load the policy file, falling back to the defaults (no filtering) if there isn't one or it can't be read."""
    if path is None:
        path = basedir.configDirs().findFirstFile(DEFAULT_POLICY_FILE)

        if path is None:
            logger.debug("No policy file found; using defaults.")
            return policy.Config()

    try:
        return policy.load(path)
    except FileUnreadable as ex:
        logger.warning("Couldn't load policy file %s; continuing with defaults.", ex)
        return policy.Config()


def printLines(lines):
    for line in lines:
        print(line)


def main(argv=None):
    args = parseArgs(argv)

    logconfig.configure(args.logLevel)
    config = loadPolicy(args.config)

    # The command line's verbosity wins over the policy file's log_level.
    if config.logLevel or config.logFile:
        logconfig.configure(config.logLevel if args.logLevel is None else args.logLevel, config.logFile)

    printLines(describeConfig(config))

    dirs = args.dirs or autostartDirs()

    print()
    print("Scanning directories:")
    printLines("  {}. {}".format(index + 1, path) for index, path in enumerate(dirs))

    queue = LaunchQueue()
    scanner = Scanner(config, queue)

    for index, path in enumerate(dirs):
        print()
        printLines(describeDirectory(scanner.scanDirectory(path), index))

    print()
    if args.dry_run:
        print("Dry run; would launch {} application(s):".format(len(queue)))
        printLines("  {}. {} ({})".format(index + 1, entry.name, entry.exec) for index, entry in enumerate(queue))
        return 0

    sequencer = Sequencer(config)
    sequencer.itemFinished.connect(lambda outcome: print(describeOutcome(outcome, len(queue))))

    report = sequencer.run(queue)
    printLines(describeLaunch(report))

    return 1 if report.failed else 0


if __name__ == '__main__':
    sys.exit(main())
