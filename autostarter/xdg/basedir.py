# -*- coding: utf-8 -*-
"""XDG Base Directory Specification support

This module aims to implement the parts of the XDG Base Directory Specification version 0.8 that autostart needs,
available at:
http://standards.freedesktop.org/basedir-spec/basedir-spec-0.8.html

"""
import os
from os.path import expanduser, isfile, join


class BaseDirManager(object):
    def __init__(self, homeVar, defaultHome, dirsVar=None, defaultDirs='', environ=None):
        if environ is None:
            environ = os.environ

        # Variables that are set but empty are treated as unset.
        self.home = environ.get(homeVar) or expanduser(defaultHome)
        if dirsVar is None:
            self.dirs = []
        else:
            self.dirs = [expanduser(dir) for dir in (environ.get(dirsVar) or defaultDirs).split(':') if dir]

    @property
    def baseDirs(self):
        """All base directories, in order of importance."""
        return [self.home] + self.dirs

    def findFirstFile(self, filename):
        """Find the first existing file by this name in the configured base directories.

        Base directories are searched in order of importance.

        """
        for dir in self.baseDirs:
            fullpath = join(dir, filename)
            if isfile(fullpath):
                return fullpath

    def subdirs(self, subdir):
        """Return `subdir` joined onto each base directory, in order of importance, whether it exists or not."""
        return [join(dir, subdir) for dir in self.baseDirs]


# $XDG_CONFIG_HOME defines the base directory relative to which user specific configuration files should be stored. If
# $XDG_CONFIG_HOME is either not set or empty, a default equal to $HOME/.config should be used.
#
# $XDG_CONFIG_DIRS defines the preference-ordered set of base directories to search for configuration files in addition
# to the $XDG_CONFIG_HOME base directory. If $XDG_CONFIG_DIRS is either not set or empty, a value equal to /etc/xdg
# should be used.
def configDirs(environ=None):
    return BaseDirManager('XDG_CONFIG_HOME', '~/.config', 'XDG_CONFIG_DIRS', '/etc/xdg', environ=environ)
