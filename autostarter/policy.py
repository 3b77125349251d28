# -*- coding: utf-8 -*-
"""Autostarter: Launch policy

Copyright (c) 2012 David H. Bronke
Licensed under the MIT license; see the LICENSE file for details.

The policy file is an INI-like text file:

    # Wait two seconds before the first launch, then half a second between launches.
    [general]
    startup_delay=2000
    delay=500
    log_level=debug

    [apps]
    Firefox=allow:1,delay:1500
    Dropbox=allow:0

    [dirs]
    /usr/share/autostart=block

Application rules are matched against the `Name` key of each desktop entry, case-sensitively. Note that `allow:` takes
a number (0 denies, anything else allows), unlike the "true"/"false" strings used in desktop entries.

"""
import logging

from .errors import FileUnreadable
from .utils import parseInt


logger = logging.getLogger("autostarter.policy")

DEFAULT_STARTUP_DELAY_MS = 0
DEFAULT_DELAY_MS = 200

NO_DELAY_OVERRIDE = -1

# Rules past these limits are dropped (with a warning) while loading.
MAX_APP_RULES = 128
MAX_DIR_RULES = 32

BLOCK = 'block'


class AppRule(object):
    def __init__(self, name, allow=True, delayOverrideMs=NO_DELAY_OVERRIDE):
        self.name = name
        self.allow = allow
        self.delayOverrideMs = delayOverrideMs

    @property
    def hasDelayOverride(self):
        return self.delayOverrideMs >= 0

    def __eq__(self, other):
        if not isinstance(other, AppRule):
            return NotImplemented

        return (self.name, self.allow, self.delayOverrideMs) == (other.name, other.allow, other.delayOverrideMs)

    def __repr__(self):
        return 'AppRule({!r}, allow={!r}, delayOverrideMs={!r})'.format(self.name, self.allow, self.delayOverrideMs)


class DirRule(object):
    def __init__(self, path, allow=True):
        self.path = path
        self.allow = allow

    def __eq__(self, other):
        if not isinstance(other, DirRule):
            return NotImplemented

        return (self.path, self.allow) == (other.path, other.allow)

    def __repr__(self):
        return 'DirRule({!r}, allow={!r})'.format(self.path, self.allow)


class Config(object):
    """Global timing defaults, logging hints, and the ordered application and directory rules.

    A Config is built once by `parse` or `load` and only read after that.

    """
    def __init__(self, startupDelayMs=DEFAULT_STARTUP_DELAY_MS, interItemDelayMs=DEFAULT_DELAY_MS,
            logLevel=None, logFile=None, appRules=(), dirRules=()):
        self.startupDelayMs = startupDelayMs
        self.interItemDelayMs = interItemDelayMs
        self.logLevel = logLevel
        self.logFile = logFile
        self.appRules = list(appRules)
        self.dirRules = list(dirRules)

    def findApp(self, name):
        """Return the AppRule for the application with the given display name, or None.

        Rules are scanned in the order they were defined and the first match wins. Since loading never stores two
        rules with the same name, this is also the last definition of that name in the policy file.

        """
        for rule in self.appRules:
            if rule.name == name:
                return rule

    def findDir(self, path):
        """Return the DirRule for exactly this directory path, or None."""
        for rule in self.dirRules:
            if rule.path == path:
                return rule

    def dirAllowed(self, path):
        """Whether a rule explicitly allows this directory; False if no rule names it."""
        rule = self.findDir(path)
        return rule is not None and rule.allow

    def __repr__(self):
        return '<Config startupDelayMs={} interItemDelayMs={} {} app rule(s), {} dir rule(s)>'.format(
                self.startupDelayMs, self.interItemDelayMs, len(self.appRules), len(self.dirRules))


def _storeRule(rules, rule, key, limit, kind):
    # A redefined key replaces the earlier rule, keeping its position.
    for index, existing in enumerate(rules):
        if getattr(existing, key) == getattr(rule, key):
            logger.debug("Redefining %s rule %r.", kind, getattr(rule, key))
            rules[index] = rule
            return True

    if len(rules) >= limit:
        logger.warning("Too many %s rules (the limit is %d); ignoring the rule for %r.", kind, limit,
                getattr(rule, key))
        return False

    rules.append(rule)
    return True


def parseAppRule(name, value):
    """Build an AppRule from one line of the [apps] section, e.g. `parseAppRule("Firefox", "allow:1,delay:500")`."""
    rule = AppRule(name)

    for token in value.split(','):
        token = token.strip()

        if token.startswith('allow:'):
            rule.allow = parseInt(token[len('allow:'):]) != 0
        elif token.startswith('delay:'):
            rule.delayOverrideMs = parseInt(token[len('delay:'):])
        elif token:
            logger.debug("Ignoring unknown option %r in the rule for %r.", token, name)

    return rule


def parse(text):
    """Parse the contents of a policy file into a Config.

    Malformed lines and numbers never fail; they are skipped or read as 0.

    """
    config = Config()
    section = ''

    for line in text.split('\n'):
        line = line.strip()

        if not line or line.startswith('#'):
            continue

        if line.startswith('['):
            section = line[1:].split(']', 1)[0]
            continue

        if '=' not in line:
            continue

        key, value = line.split('=', 1)
        key, value = key.strip(), value.strip()
        if not key or not value:
            continue

        if section == 'general':
            if key == 'startup_delay':
                config.startupDelayMs = parseInt(value)
            elif key == 'delay':
                config.interItemDelayMs = parseInt(value)
            elif key == 'log_level':
                config.logLevel = value
            elif key == 'log_file':
                config.logFile = value
            else:
                logger.debug("Ignoring unknown setting %r in [general].", key)

        elif section == 'apps':
            _storeRule(config.appRules, parseAppRule(key, value), 'name', MAX_APP_RULES, "application")

        elif section == 'dirs':
            _storeRule(config.dirRules, DirRule(key, value != BLOCK), 'path', MAX_DIR_RULES, "directory")

    return config


def load(path):
    """Load the policy file at `path`.

    Raises FileUnreadable if it can't be opened; callers should fall back to `Config()`, which applies no filtering.

    """
    try:
        with open(path, encoding='utf-8') as file:
            text = file.read()

    except OSError as ex:
        raise FileUnreadable(path, ex.strerror or str(ex)) from ex

    except UnicodeDecodeError as ex:
        raise FileUnreadable(path, "not valid UTF-8 ({})".format(ex.reason)) from ex

    config = parse(text)
    logger.debug("Loaded policy from %s: %r", path, config)
    return config
