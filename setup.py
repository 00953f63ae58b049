from setuptools import setup

package_name = 'teleop_control'

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch',
            ['launch/teleop.launch.py']),
    ],
    install_requires=['setuptools'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='Ashwin',
    maintainer_email='ashwinsivakumar.in@gmail.com',
    description='Arrow-key teleop publishing cmd_vel',
    license='Apache License 2.0',
    entry_points={
        'console_scripts': [
            'teleop_control = teleop_control.teleop_node:main',
        ],
    },
)
