from unittest.mock import MagicMock

import pytest

from teleop_control.exceptions import InputCancelled
from teleop_control.exceptions import InputReadError


class FakeReader:
    """Hands out scripted keys, then reports end of input."""

    def __init__(self, keys=(), on_read=None):
        self.keys = list(keys)
        self.on_read = on_read
        self.cancelled = False
        self.is_open = False
        self.close_calls = 0
        self.restores = 0

    def open(self):
        self.is_open = True

    def read_key(self):
        if self.on_read is not None:
            self.on_read(self)
        if self.cancelled:
            raise InputCancelled('read cancelled')
        if not self.keys:
            raise InputReadError('end of input')
        return self.keys.pop(0)

    def cancel(self):
        self.cancelled = True

    def close(self):
        self.close_calls += 1
        if self.is_open:
            self.is_open = False
            self.restores += 1


class FakeSink:

    def __init__(self):
        self.sent = []
        self.close_calls = 0

    def send(self, command):
        self.sent.append(command)

    def close(self):
        self.close_calls += 1


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def sink():
    return FakeSink()
