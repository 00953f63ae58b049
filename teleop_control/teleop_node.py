#!/usr/bin/env python3

import sys

import rclpy
from rclpy.node import Node
from rclpy.signals import SignalHandlerOptions
from rclpy.utilities import remove_ros_args
from geometry_msgs.msg import Twist

from teleop_control.config import load_speed_limits
from teleop_control.exceptions import TerminalConfigError
from teleop_control.keyboard import create_keyboard_reader
from teleop_control.shutdown import ShutdownHandler
from teleop_control.teleop import TeleopLoop, TeleopState


def to_twist(command):
    twist = Twist()
    twist.linear.x = float(command.linear)
    twist.angular.z = float(command.angular)
    return twist


class TeleopControl(Node):

    def __init__(self):
        super().__init__('teleop_control')
        self.publisher_ = self.create_publisher(Twist, 'cmd_vel', 1)

    def send(self, command):
        self.publisher_.publish(to_twist(command))

    def close(self):
        self.destroy_node()
        if rclpy.ok():
            rclpy.shutdown()


def main(args=None):
    # SIGINT belongs to ShutdownHandler, not rclpy.
    rclpy.init(args=args, signal_handler_options=SignalHandlerOptions.NO)
    node = TeleopControl()
    logger = node.get_logger()

    argv = remove_ros_args(args if args is not None else sys.argv)[1:]
    linear_vel, angular_vel = load_speed_limits(argv, logger)

    reader = create_keyboard_reader(logger)
    handler = ShutdownHandler(reader, node)
    handler.install()
    try:
        reader.open()
    except TerminalConfigError as e:
        logger.fatal(str(e))
        handler.shutdown()
        return 1

    loop = TeleopLoop(reader, node, TeleopState(linear_vel, angular_vel), logger)
    try:
        loop.run()
    finally:
        handler.shutdown()
    return 0


if __name__ == '__main__':
    sys.exit(main())
