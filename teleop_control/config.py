#!/usr/bin/env python3
"""Speed limits from the positional command line arguments."""

import math

from teleop_control.exceptions import InvalidConfiguration

DEFAULT_LINEAR_VEL = 1.0   # m/s
DEFAULT_ANGULAR_VEL = 0.5  # rad/s


def parse_speed_args(argv):
    """
    Parse ``[linear_vel angular_vel]``.

    Returns None when no arguments were given. Raises InvalidConfiguration
    for anything other than exactly two finite numbers.
    """
    if not argv:
        return None
    if len(argv) != 2:
        raise InvalidConfiguration(
            f'expected linear_vel and angular_vel, got {len(argv)} argument(s)')

    speeds = []
    for name, value in zip(('linear_vel', 'angular_vel'), argv):
        try:
            speed = float(value)
        except ValueError:
            raise InvalidConfiguration(f'{name} is not a number: {value!r}') from None
        if not math.isfinite(speed):
            raise InvalidConfiguration(f'{name} must be finite, got {value!r}')
        speeds.append(speed)
    return tuple(speeds)


def load_speed_limits(argv, logger):
    """Like parse_speed_args, but falls back to the defaults instead of failing."""
    try:
        speeds = parse_speed_args(argv)
    except InvalidConfiguration as e:
        logger.warning(f'Ignoring speed arguments: {e}')
        speeds = None

    if speeds is None:
        logger.info(
            'Using default values: \n'
            f'  linear_vel = {DEFAULT_LINEAR_VEL} m/s\n'
            f'  angular_vel = {DEFAULT_ANGULAR_VEL} rad/s')
        return DEFAULT_LINEAR_VEL, DEFAULT_ANGULAR_VEL

    linear_vel, angular_vel = speeds
    logger.info(
        'Setup:\n'
        f'  linear_vel = {linear_vel} m/s\n'
        f'  angular_vel = {angular_vel} rad/s')
    return linear_vel, angular_vel
