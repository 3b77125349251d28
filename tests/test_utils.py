import logging

import pytest

from autostarter.utils import loggerFor, parseInt
from autostarter.utils.humanize import duration, pl


@pytest.mark.parametrize('value, expected', [
    ('42', 42),
    ('  42  ', 42),
    ('-3', -3),
    ('12abc', 12),
    ('abc12', 0),
    ('', 0),
    ('- 3', 0),
])
def test_parse_int(value, expected):
    assert parseInt(value) == expected


def test_pl():
    assert pl(1, "application") == "1 application"
    assert pl(3, "application") == "3 applications"
    assert pl(0, "entry", "entries") == "0 entries"


def test_duration():
    assert duration(0) == "0 ms"
    assert duration(999) == "999 ms"
    assert duration(2000) == "2 s"
    assert duration(1250) == "1.25 s"


def test_logger_for_class_and_instance():
    class Thing(object):
        pass

    assert loggerFor(Thing) is loggerFor(Thing())
    assert loggerFor(Thing).name == '{}.Thing'.format(__name__)
    assert isinstance(loggerFor(Thing), logging.Logger)
