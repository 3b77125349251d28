"""Desktop Entry Specification support

This module (partially) implements the Desktop Entry Specification version 1.1, available at:
http://standards.freedesktop.org/desktop-entry-spec/desktop-entry-spec-1.1.html

Only the keys an autostart launcher needs are read; localized keys, actions and string escapes are not supported.

"""
from collections import namedtuple
import logging

from ..errors import FileUnreadable


logger = logging.getLogger("autostarter.xdg.desktopentry")

DESKTOP_ENTRY_GROUP = 'Desktop Entry'

APPLICATION_TYPE = 'Application'

# Maximum number of characters kept for each string key; longer values are silently truncated.
FIELD_WIDTHS = {
        'name': 255,
        'exec': 1023,
        'tryExec': 255,
        'icon': 255,
        'workingDirectory': 1023,
        }

STRING_KEYS = {
        'Name': 'name',
        'Exec': 'exec',
        'TryExec': 'tryExec',
        'Icon': 'icon',
        'Path': 'workingDirectory',
        }

BOOLEAN_KEYS = {
        'Terminal': 'isTerminalApp',
        'Hidden': 'isHidden',
        'NoDisplay': 'isNoDisplay',
        }


_DesktopEntryBase = namedtuple('_DesktopEntryBase', [
        'name',
        'exec',
        'tryExec',
        'icon',
        'workingDirectory',
        'isTerminalApp',
        'isHidden',
        'isNoDisplay',
        'isApplication',
        'filename',
        ])


class DesktopEntry(_DesktopEntryBase):
    """One parsed application descriptor.

    name: Specific name of the application, for example "Mozilla". Required.
    exec: Program to execute, possibly with arguments and field codes. Required.
    tryExec: Executable used to determine if the program is actually installed. If it's not an absolute path, it's
        looked up in $PATH.
    icon: Icon to display in menus. Not used when launching.
    workingDirectory: The working directory to run the program in (the `Path` key).
    isTerminalApp: Whether the program runs in a terminal window.
    isHidden: Whether the user deleted this entry; equivalent to the file not existing at all.
    isNoDisplay: "This application exists, but don't display it in the menus".
    isApplication: Whether a `Type=Application` line was seen.
    filename: The file the entry was read from, if any.

    """
    __slots__ = ()

    @classmethod
    def empty(cls, filename=None):
        return cls('', '', '', '', '', False, False, False, False, filename)

    @property
    def isValid(self):
        return self.isApplication and len(self.name) > 0 and len(self.exec) > 0

    def __repr__(self):
        return '<DesktopEntry {!r} exec={!r}{}>'.format(self.name, self.exec, '' if self.isValid else ' (invalid)')


def parse(text, filename=None):
    """Parse the contents of a desktop entry file.

    Returns a `(DesktopEntry, ok)` tuple, where `ok` is the entry's `isValid`. Files without a `[Desktop Entry]` group,
    or whose `Type` isn't "Application", give an invalid entry; that is not an error.

    """
    fields = DesktopEntry.empty(filename)._asdict()
    inDesktopEntry = False

    # Only '\n' ends a line; other Unicode line breaks are part of the value.
    for line in text.split('\n'):
        line = line.strip()

        if not line or line.startswith('#'):
            continue

        if line.startswith('['):
            inDesktopEntry = line.startswith('[{}]'.format(DESKTOP_ENTRY_GROUP))
            continue

        if not inDesktopEntry or '=' not in line:
            continue

        key, value = line.split('=', 1)
        key, value = key.strip(), value.strip()

        if key == 'Type':
            if value != APPLICATION_TYPE:
                # Not an application; don't bother reading the rest.
                logger.debug("Ignoring %s: type is %r, not %r.", filename or "<string>", value, APPLICATION_TYPE)
                return DesktopEntry.empty(filename), False

            fields['isApplication'] = True

        elif key in STRING_KEYS:
            field = STRING_KEYS[key]
            fields[field] = value[:FIELD_WIDTHS[field]]

        elif key in BOOLEAN_KEYS:
            fields[BOOLEAN_KEYS[key]] = value == 'true'

    entry = DesktopEntry(**fields)
    return entry, entry.isValid


def parseFile(filename):
    """Read and parse the desktop entry file at `filename`.

    Raises FileUnreadable if the file can't be opened or isn't valid UTF-8.

    """
    try:
        with open(filename, encoding='utf-8') as file:
            text = file.read()

    except OSError as ex:
        raise FileUnreadable(filename, ex.strerror or str(ex)) from ex

    except UnicodeDecodeError as ex:
        raise FileUnreadable(filename, "not valid UTF-8 ({})".format(ex.reason)) from ex

    return parse(text, filename)
