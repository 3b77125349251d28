import os

from autostarter.xdg.basedir import BaseDirManager, configDirs


def test_defaults_when_unset():
    dirs = configDirs({})

    assert dirs.home == os.path.expanduser('~/.config')
    assert dirs.dirs == ['/etc/xdg']


def test_empty_variables_count_as_unset():
    dirs = configDirs({'XDG_CONFIG_HOME': '', 'XDG_CONFIG_DIRS': ''})

    assert dirs.home == os.path.expanduser('~/.config')
    assert dirs.dirs == ['/etc/xdg']


def test_dirs_are_split_in_order_skipping_empty_items():
    dirs = configDirs({'XDG_CONFIG_HOME': '/h', 'XDG_CONFIG_DIRS': '/a::/b:'})

    assert dirs.baseDirs == ['/h', '/a', '/b']
    assert dirs.subdirs('autostart') == ['/h/autostart', '/a/autostart', '/b/autostart']


def test_manager_without_dirs_variable():
    manager = BaseDirManager('XDG_CACHE_HOME', '~/.cache', environ={'XDG_CACHE_HOME': '/c'})

    assert manager.baseDirs == ['/c']


def test_find_files_in_order_of_importance(tmp_path):
    home = tmp_path / 'home'
    system = tmp_path / 'system'
    for base in (home, system):
        (base / 'autostarter').mkdir(parents=True)
    (system / 'autostarter' / 'autostart.conf').write_text("", encoding='utf-8')

    dirs = configDirs({'XDG_CONFIG_HOME': str(home), 'XDG_CONFIG_DIRS': str(system)})

    assert dirs.findFirstFile('autostarter/autostart.conf') == str(system / 'autostarter' / 'autostart.conf')

    (home / 'autostarter' / 'autostart.conf').write_text("", encoding='utf-8')

    assert dirs.findFirstFile('autostarter/autostart.conf') == str(home / 'autostarter' / 'autostart.conf')
    assert dirs.findFirstFile('autostarter/missing.conf') is None
