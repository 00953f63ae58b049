#!/usr/bin/env python3

import signal


class ShutdownHandler:

    def __init__(self, reader, sink, signum=signal.SIGINT):
        self.reader = reader
        self.sink = sink
        self.signum = signum
        self.requested = False
        self.done = False
        self._previous_handler = None
        self._installed = False

    def install(self):
        self._previous_handler = signal.signal(self.signum, self._on_signal)
        self._installed = True

    def _on_signal(self, signum, frame):
        self.requested = True
        self.reader.cancel()

    def shutdown(self):
        """Restore the terminal, release the sink and the signal handler."""
        if self.done:
            return
        self.done = True
        try:
            self.reader.close()
        finally:
            try:
                self.sink.close()
            finally:
                self._uninstall()

    def _uninstall(self):
        if not self._installed:
            return
        self._installed = False
        previous = self._previous_handler
        if previous is None:
            previous = signal.SIG_DFL
        signal.signal(self.signum, previous)
