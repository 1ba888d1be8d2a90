#!/usr/bin/env python3

"""SimpleTimer setup script"""

import os
import sys

from setuptools import setup, find_packages

if sys.version_info < (3,):
    print("""You are trying to install simpletimer on python {py}

simpletimer is not compatible with python 2, please upgrade to python 3.8 or newer."""
          .format(py='.'.join([str(v) for v in sys.version_info[:3]])), file=sys.stderr)
    sys.exit(1)


def read_requirements(filename):
    """Read a pip requirements file next to this script"""
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), filename)
    with open(path) as requirements:
        return [line.strip() for line in requirements
                if line.strip() and not line.startswith('#')]


setup(
    name='simpletimer',
    version='0.1.0',
    description='Named, shareable countdown timers on eventlet',
    packages=find_packages(include=['simpletimer', 'simpletimer.*']),
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'test': read_requirements('test-requirements.txt'),
        'graph': ['graphviz'],
    },
    entry_points={
        'console_scripts': ['simpletimer = simpletimer.__main__:main'],
    },
    python_requires='>=3.8',
)
