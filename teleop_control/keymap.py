#!/usr/bin/env python3
"""Arrow-key bindings. Arrow codes are the curses key numbers."""

from collections import namedtuple

KEY_DOWN = 0x102
KEY_UP = 0x103
KEY_LEFT = 0x104
KEY_RIGHT = 0x105

KEY_NAMES = {
    KEY_UP: 'UP',
    KEY_DOWN: 'DOWN',
    KEY_LEFT: 'LEFT',
    KEY_RIGHT: 'RIGHT',
}

# (linear, angular) multipliers, scaled by the configured maximum speeds.
# Left turns are positive angular.
MOVE_BINDINGS = {
    KEY_UP: (1.0, 0.0),
    KEY_DOWN: (-1.0, 0.0),
    KEY_LEFT: (0.0, 1.0),
    KEY_RIGHT: (0.0, -1.0),
}

QUIT_KEYS = (ord('q'), ord('Q'))

KeyAction = namedtuple('KeyAction', ['linear', 'angular', 'quit'])

QUIT = KeyAction(0.0, 0.0, True)


def key_name(key):
    if key in KEY_NAMES:
        return KEY_NAMES[key]
    if key in QUIT_KEYS:
        return 'quit'
    return None


def map_key(key, max_linear, max_angular):
    """Resolve a key code to a KeyAction, or None when the key is unbound."""
    if key in QUIT_KEYS:
        return QUIT
    if key in MOVE_BINDINGS:
        x, th = MOVE_BINDINGS[key]
        return KeyAction(x * max_linear, th * max_angular, False)
    return None
