"""Errors raised by the teleop components."""


class TeleopError(Exception):
    pass


class TerminalConfigError(TeleopError):
    """The terminal could not be queried or switched to raw mode."""


class InputReadError(TeleopError):
    """Reading from the keyboard failed; the loop should stop."""


class InputCancelled(InputReadError):
    """A blocked read was woken up by cancel()."""


class InvalidConfiguration(TeleopError):
    """The speed arguments could not be used."""
