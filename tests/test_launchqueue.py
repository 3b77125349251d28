import threading

import pytest

from autostarter.launchqueue import LaunchQueue
from autostarter.xdg.desktopentry import DesktopEntry, parse


def makeEntry(name, exec='app'):
    entry, ok = parse("[Desktop Entry]\nType=Application\nName={}\nExec={}\n".format(name, exec))
    assert ok
    return entry


def test_append_keeps_insertion_order():
    queue = LaunchQueue()
    for name in ['Zeta', 'Alpha', 'Mu']:
        queue.append(makeEntry(name))

    assert [entry.name for entry in queue] == ['Zeta', 'Alpha', 'Mu']
    assert len(queue) == 3
    assert queue[1].name == 'Alpha'


def test_invalid_entries_are_refused():
    queue = LaunchQueue()

    with pytest.raises(ValueError):
        queue.append(DesktopEntry.empty())

    assert len(queue) == 0
    assert not queue


def test_grows_without_limit():
    queue = LaunchQueue(makeEntry('App{}'.format(index)) for index in range(1000))

    assert len(queue) == 1000
    assert queue[999].name == 'App999'


def test_entries_is_a_snapshot():
    queue = LaunchQueue([makeEntry('One')])
    snapshot = queue.entries
    queue.append(makeEntry('Two'))

    assert len(snapshot) == 1
    assert len(queue.entries) == 2


def test_concurrent_appends_are_not_lost():
    queue = LaunchQueue()
    entries = [makeEntry('App{}'.format(index)) for index in range(50)]

    def fill(prefix):
        for entry in entries:
            queue.append(entry)

    threads = [threading.Thread(target=fill, args=(index, )) for index in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(queue) == 200


def test_reads_take_the_lock():
    queue = LaunchQueue([makeEntry('One')])

    with queue._lock:
        reader = threading.Thread(target=lambda: (len(queue), queue[0], bool(queue)))
        reader.start()
        reader.join(0.2)
        blocked = reader.is_alive()

    reader.join()
    assert blocked
