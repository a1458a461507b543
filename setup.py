#!/usr/bin/env python
"""Optimal natural breaks (Fisher-Jenks) classification of one-dimensional data."""

from os.path import dirname, join

from setuptools import setup

setup_args = {}

# Dependencies for easy_install and pip:
install_requires = [
    'numpy >= 1.17',
    'pandas >= 0.25',
]

DIR = (dirname(__file__) or '.')
with open(join(DIR, 'natbreaks', '_version.py')) as handle:
    VERSION = handle.readline().split('=')[-1].strip().replace('"','')

setup_args.update(
    name='natbreaks',
    version=VERSION,
    description=__doc__,
    packages=[
        'natbreaks',
    ],
    entry_points={
        'console_scripts': [
            'natbreaks = natbreaks.natbreaks:main',
        ],
    },
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: GIS",
        "Topic :: Scientific/Engineering :: Information Analysis",
    ],
)

setup(**setup_args)
