import logging

from autostarter.signals import Signal


def test_handlers_called_in_connection_order():
    calls = []
    signal = Signal()
    signal.connect(lambda value: calls.append(('first', value)))
    signal.connect(lambda value: calls.append(('second', value)))

    signal(42)

    assert calls == [('first', 42), ('second', 42)]
    assert len(signal) == 2


def test_disconnect():
    calls = []
    handler = calls.append
    signal = Signal()
    signal.connect(handler)
    signal.disconnect(handler)

    signal('x')

    assert calls == []


def test_failing_handler_is_logged_and_others_still_run(caplog):
    calls = []

    def broken(value):
        raise RuntimeError("boom")

    signal = Signal()
    signal.connect(broken)
    signal.connect(calls.append)

    with caplog.at_level(logging.ERROR, logger="autostarter.signals"):
        signal('x')

    assert calls == ['x']
    assert any("signal handler" in record.getMessage() for record in caplog.records)
