#!/usr/bin/env python3
"""Read, map and publish loop; each key press replaces the last command."""

from dataclasses import dataclass
from enum import Enum

from teleop_control.exceptions import InputCancelled
from teleop_control.exceptions import InputReadError
from teleop_control.keymap import key_name, map_key

HELP_MSG = """
---------------------------
Reading from keyboard
---------------------------
Use arrow keys to move the robot. 'q' to quit.
"""


@dataclass(frozen=True)
class VelocityCommand:
    linear: float = 0.0
    angular: float = 0.0


class TeleopState:

    def __init__(self, max_linear, max_angular):
        self._max_linear = float(max_linear)
        self._max_angular = float(max_angular)
        self.linear = 0.0
        self.angular = 0.0

    @property
    def max_linear(self):
        return self._max_linear

    @property
    def max_angular(self):
        return self._max_angular

    def reset(self):
        self.linear = 0.0
        self.angular = 0.0

    def command(self):
        return VelocityCommand(self.linear, self.angular)


class LoopStatus(Enum):
    RUNNING = 'running'
    STOPPING = 'stopping'


class TeleopLoop:

    def __init__(self, reader, sink, state, logger):
        self.reader = reader
        self.sink = sink
        self.state = state
        self.logger = logger
        self.status = LoopStatus.RUNNING
        self.dirty = False

    def run(self):
        """Run until the quit key is pressed or the keyboard stops."""
        self.logger.info(HELP_MSG)
        while self.status is LoopStatus.RUNNING:
            self.step()

    def step(self):
        """Process a single key. Returns the command sent, if any."""
        self.state.reset()

        try:
            key = self.reader.read_key()
        except InputCancelled:
            self.logger.info('Keyboard input cancelled')
            self.status = LoopStatus.STOPPING
            return None
        except InputReadError as e:
            self.logger.error(f'read(): {e}')
            self.status = LoopStatus.STOPPING
            return None

        self.logger.debug(f'value: 0x{key:02X}')
        action = map_key(key, self.state.max_linear, self.state.max_angular)
        if action is None:
            return None

        self.logger.debug(key_name(key))
        if action.quit:
            self.status = LoopStatus.STOPPING
            return None

        self.state.linear = action.linear
        self.state.angular = action.angular
        self.dirty = True
        return self.publish()

    def publish(self):
        if not self.dirty:
            return None
        command = self.state.command()
        self.sink.send(command)
        self.dirty = False
        return command
