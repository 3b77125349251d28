import pytest

from autostarter import __main__ as cli
from autostarter.sequencer import Sequencer


class FakeSpawn(object):
    def __init__(self, failFor=()):
        self.commands = []
        self.failFor = failFor

    def __call__(self, command, workingDirectory=None):
        self.commands.append(command)
        if command in self.failFor:
            raise OSError(2, "No such file or directory")
        return 100 + len(self.commands)


@pytest.fixture
def fakeSpawn(monkeypatch):
    spawn = FakeSpawn()

    def makeSequencer(config):
        return Sequencer(config, sleep=lambda seconds: None, spawn=spawn)

    monkeypatch.setattr(cli, 'Sequencer', makeSequencer)
    return spawn


@pytest.fixture
def autostartDir(tmp_path, writeEntry):
    directory = tmp_path / 'autostart'
    writeEntry(directory, 'firefox.desktop', name='firefox', exec='firefox %u --new-window')
    writeEntry(directory, 'dropbox.desktop', name='Dropbox', exec='dropbox start -i')
    writeEntry(directory, 'hidden.desktop', name='Hidden', exec='hidden', extra='Hidden=true')
    return directory


@pytest.fixture
def noUserPolicy(tmp_path, monkeypatch):
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path / 'no-config'))
    monkeypatch.setenv('XDG_CONFIG_DIRS', str(tmp_path / 'no-config-dirs'))


def test_launches_allowed_entries(autostartDir, fakeSpawn, noUserPolicy, capsys):
    status = cli.main(['--dir', str(autostartDir)])

    assert status == 0
    assert sorted(fakeSpawn.commands) == ['dropbox start -i', 'firefox  --new-window']
    out = capsys.readouterr().out
    assert "Skipped (hidden/no-display): Hidden" in out
    assert "Successful: 2" in out
    assert "Failed:     0" in out


def test_policy_file_filters_entries(autostartDir, fakeSpawn, tmp_path, capsys):
    config = tmp_path / 'autostart.conf'
    config.write_text("[general]\ndelay=0\n[apps]\nDropbox=allow:0\nfirefox=allow:1,delay:500\n", encoding='utf-8')

    status = cli.main([str(config), '--dir', str(autostartDir)])

    assert status == 0
    assert fakeSpawn.commands == ['firefox  --new-window']
    out = capsys.readouterr().out
    assert "Skipped (disallowed by config): Dropbox" in out
    assert "  - firefox: ALLOW, delay: 500 ms" in out


def test_missing_policy_file_falls_back_to_defaults(autostartDir, fakeSpawn, tmp_path):
    status = cli.main([str(tmp_path / 'missing.conf'), '--dir', str(autostartDir)])

    assert status == 0
    assert len(fakeSpawn.commands) == 2


def test_policy_file_is_found_in_xdg_config_home(autostartDir, fakeSpawn, tmp_path, monkeypatch):
    configHome = tmp_path / 'config'
    (configHome / 'autostarter').mkdir(parents=True)
    (configHome / 'autostarter' / 'autostart.conf').write_text("[apps]\nfirefox=allow:0\n", encoding='utf-8')
    monkeypatch.setenv('XDG_CONFIG_HOME', str(configHome))
    monkeypatch.setenv('XDG_CONFIG_DIRS', str(tmp_path / 'no-config-dirs'))

    cli.main(['--dir', str(autostartDir)])

    assert fakeSpawn.commands == ['dropbox start -i']


def test_dry_run_launches_nothing(autostartDir, fakeSpawn, noUserPolicy, capsys):
    status = cli.main(['--dry-run', '--dir', str(autostartDir)])

    assert status == 0
    assert fakeSpawn.commands == []
    assert "would launch 2 application(s)" in capsys.readouterr().out


def test_failed_launch_sets_exit_status(autostartDir, fakeSpawn, noUserPolicy, capsys):
    fakeSpawn.failFor = ('dropbox start -i', )

    status = cli.main(['--dir', str(autostartDir)])

    assert status == 1
    out = capsys.readouterr().out
    assert "FAILED: Dropbox" in out
    assert "Successful: 1" in out
    assert "Failed:     1" in out


def test_nothing_to_launch(tmp_path, fakeSpawn, noUserPolicy, capsys):
    status = cli.main(['--dir', str(tmp_path / 'empty')])

    assert status == 0
    assert "No applications to launch." in capsys.readouterr().out


def test_verbose_and_quiet_are_exclusive():
    with pytest.raises(SystemExit):
        cli.parseArgs(['-v', '-q'])
