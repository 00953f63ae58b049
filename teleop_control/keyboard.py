#!/usr/bin/env python3
"""Keyboard readers returning one logical key code per read."""

import os
import select
import sys
import time

if sys.platform == 'win32':
    import msvcrt
else:
    import termios
    import tty

from teleop_control.exceptions import InputCancelled
from teleop_control.exceptions import InputReadError
from teleop_control.exceptions import TerminalConfigError
from teleop_control.keymap import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP

ESC = 0x1b

# How long to wait for the rest of an escape sequence after ESC.
ESCAPE_TIMEOUT = 0.05

ANSI_ARROWS = {
    ord('A'): KEY_UP,
    ord('B'): KEY_DOWN,
    ord('C'): KEY_RIGHT,
    ord('D'): KEY_LEFT,
}

# Unbound codes for console function keys, clear of the byte range.
FUNCTION_KEY_BASE = 0x200

# Console scan codes that follow a \x00 or \xe0 prefix.
CONSOLE_ARROWS = {
    'H': KEY_UP,
    'P': KEY_DOWN,
    'M': KEY_RIGHT,
    'K': KEY_LEFT,
}


class KeyboardReader:
    """Common interface of the platform readers."""

    def open(self):
        raise NotImplementedError

    def read_key(self):
        raise NotImplementedError

    def close(self):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class PosixKeyboardReader(KeyboardReader):

    def __init__(self, fd, logger=None):
        self.fd = fd
        self.logger = logger
        self.settings = None
        self.cancelled = False
        self._pending = []
        self._wake_r = None
        self._wake_w = None

    def open(self):
        try:
            wake_r, wake_w = os.pipe()
        except OSError as e:
            raise TerminalConfigError(f'cannot create wake-up pipe: {e}') from e
        try:
            os.set_blocking(wake_w, False)
            settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd, termios.TCSANOW)
        except (termios.error, OSError) as e:
            os.close(wake_r)
            os.close(wake_w)
            raise TerminalConfigError(f'cannot set raw mode on fd {self.fd}: {e}') from e
        self.settings = settings
        self._wake_r, self._wake_w = wake_r, wake_w

    def cancel(self):
        self.cancelled = True
        if self._wake_w is not None:
            try:
                os.write(self._wake_w, b'\0')
            except BlockingIOError:
                pass

    def read_key(self):
        if self._pending and not self.cancelled:
            return self._pending.pop(0)

        c = self._read_byte(None)
        if c != ESC:
            return c

        follow = self._read_byte(ESCAPE_TIMEOUT)
        if follow is None:
            return ESC
        if follow not in (ord('['), ord('O')):
            self._pending.append(follow)
            return ESC

        final = self._read_byte(ESCAPE_TIMEOUT)
        if final in ANSI_ARROWS:
            return ANSI_ARROWS[final]
        # Not an arrow; hand the fragments back one by one.
        self._pending.append(follow)
        if final is not None:
            self._pending.append(final)
        return ESC

    def _read_byte(self, timeout):
        """Read one byte; None if ``timeout`` expires first."""
        if self.cancelled:
            raise InputCancelled('read cancelled')
        if self._wake_r is None:
            raise InputReadError('keyboard is not open')

        try:
            rlist, _, _ = select.select([self.fd, self._wake_r], [], [], timeout)
        except (OSError, ValueError) as e:
            raise InputReadError(str(e)) from e
        if self._wake_r in rlist or self.cancelled:
            raise InputCancelled('read cancelled')
        if not rlist:
            return None

        try:
            data = os.read(self.fd, 1)
        except OSError as e:
            raise InputReadError(str(e)) from e
        if not data:
            raise InputReadError('end of input')
        return data[0]

    def close(self):
        if self._wake_r is None:
            return
        # Detach first so a late cancel() never writes to a closed fd.
        wake_r, wake_w = self._wake_r, self._wake_w
        settings = self.settings
        self._wake_r = self._wake_w = None
        self.settings = None
        try:
            termios.tcsetattr(self.fd, termios.TCSANOW, settings)
        except termios.error as e:
            # A hung-up tty has no mode left to restore.
            if self.logger is not None:
                self.logger.warning(f'cannot restore terminal on fd {self.fd}: {e}')
        finally:
            os.close(wake_r)
            os.close(wake_w)


class WindowsKeyboardReader(KeyboardReader):
    """Polls the console for key presses; the console needs no mode change."""

    poll_interval = 0.01

    def __init__(self, console=None):
        if console is None:
            console = msvcrt
        self.console = console
        self.cancelled = False
        self.is_open = False

    def open(self):
        self.is_open = True

    def cancel(self):
        self.cancelled = True

    def read_key(self):
        if not self.is_open:
            raise InputReadError('keyboard is not open')
        while not self.cancelled:
            if self.console.kbhit():
                break
            time.sleep(self.poll_interval)
        if self.cancelled:
            raise InputCancelled('read cancelled')

        ch = self.console.getwch()
        if ch == '\x03':
            self.cancelled = True
            raise InputCancelled('ctrl-c')
        if ch in ('\x00', '\xe0'):
            code = self.console.getwch()
            # Other function keys stay unbound.
            return CONSOLE_ARROWS.get(code, FUNCTION_KEY_BASE + ord(code))
        return ord(ch)

    def close(self):
        self.is_open = False


def create_keyboard_reader(logger=None):
    if sys.platform == 'win32':
        return WindowsKeyboardReader()
    return PosixKeyboardReader(sys.stdin.fileno(), logger)
