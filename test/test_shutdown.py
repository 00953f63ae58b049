import signal

import pytest

from teleop_control.shutdown import ShutdownHandler

from conftest import FakeReader, FakeSink


def test_signal_only_cancels_the_read():
    reader = FakeReader()
    reader.open()
    sink = FakeSink()
    handler = ShutdownHandler(reader, sink)
    handler.install()
    try:
        signal.raise_signal(signal.SIGINT)
        assert handler.requested
        assert reader.cancelled
        assert reader.is_open
        assert sink.close_calls == 0
    finally:
        handler.shutdown()


def test_shutdown_restores_previous_handler():
    previous = signal.getsignal(signal.SIGINT)
    handler = ShutdownHandler(FakeReader(), FakeSink())
    handler.install()
    assert signal.getsignal(signal.SIGINT) == handler._on_signal
    handler.shutdown()
    assert signal.getsignal(signal.SIGINT) == previous


def test_shutdown_runs_once():
    reader = FakeReader()
    reader.open()
    sink = FakeSink()
    handler = ShutdownHandler(reader, sink)
    handler.shutdown()
    handler.shutdown()
    assert reader.close_calls == 1
    assert reader.restores == 1
    assert sink.close_calls == 1


def test_sink_is_released_when_restore_fails():
    class BrokenReader(FakeReader):
        def close(self):
            raise OSError('tcsetattr failed')

    sink = FakeSink()
    previous = signal.getsignal(signal.SIGINT)
    handler = ShutdownHandler(BrokenReader(), sink)
    handler.install()
    with pytest.raises(OSError):
        handler.shutdown()
    assert sink.close_calls == 1
    assert signal.getsignal(signal.SIGINT) == previous
