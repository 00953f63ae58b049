from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node


def generate_launch_description():
    return LaunchDescription([
        DeclareLaunchArgument('linear_vel', default_value='1.0',
                              description='Maximum linear speed (m/s)'),
        DeclareLaunchArgument('angular_vel', default_value='0.5',
                              description='Maximum angular speed (rad/s)'),
        Node(
            package='teleop_control',
            executable='teleop_control',
            name='teleop_control',
            output='screen',
            arguments=[LaunchConfiguration('linear_vel'),
                       LaunchConfiguration('angular_vel')],
            prefix='xterm -e'
        )
    ])
