#!/usr/bin/env python3
import os
import re

from setuptools import setup, find_packages


def main():
    os.chdir(os.path.dirname(os.path.realpath(__file__)))

    with open('gridtable/__init__.py', 'r') as file:
        version = re.search(r"^__version__\s*=\s*'(.*)'", file.read(), re.M).group(1)

    with open('README', 'rb') as f:
        long_descr = f.read().decode('utf-8')

    setup(
        name='gridtable',
        version=version,
        packages=find_packages(exclude=['tests']),
        install_requires=[
            'wcwidth',
            'toml',
            'appdirs',
        ],
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts': [
                'gridtable = gridtable.cli:main',
            ],
        },
        long_description=long_descr,
        license='MIT',
        description='Lay out and render text tables for terminal user interfaces',
    )


if __name__ == "__main__":
    main()
