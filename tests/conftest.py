import logging

import pytest


APPLICATION = """\
[Desktop Entry]
Type=Application
Name={name}
Exec={exec}
{extra}
"""


@pytest.fixture(autouse=True)
def resetLogging():
    yield

    # logconfig.configure() detaches the "autostarter" logger from the root logger; undo that so caplog keeps working.
    logger = logging.getLogger("autostarter")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def writeEntry():
    """Write a desktop entry file; returns its path."""
    def write(directory, filename, name='App', exec='app', extra='', text=None):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        if text is None:
            text = APPLICATION.format(name=name, exec=exec, extra=extra)
        path.write_text(text, encoding='utf-8')
        return path

    return write
