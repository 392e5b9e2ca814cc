#!/usr/bin/env python
"""
Setup.py distribution file for ansicut.
"""
# std imports
import os
import codecs

# 3rd party
import setuptools


def _get_here(fname):
    return os.path.join(os.path.dirname(__file__), fname)


def _get_version(fname, key='package'):
    import json
    with open(fname, 'r') as fin:
        return json.load(fin)[key]


def main():
    """Setup.py entry point."""
    setuptools.setup(
        name='ansicut',
        version=_get_version(
            _get_here(os.path.join('ansicut', 'version.json'))),
        description=(
            "Cut strings containing ANSI escape sequences while keeping "
            "their colors"),
        long_description=codecs.open(
            _get_here('README.rst'), 'rb', 'utf8').read(),
        license='MIT',
        packages=['ansicut'],
        python_requires='>=3.8',
        extras_require={
            'test': ['pytest'],
            'benchmark': ['pytest-codspeed'],
        },
        package_data={
            'ansicut': ['*.json'],
            '': ['*.rst'],
        },
        zip_safe=True,
        classifiers=[
            'Intended Audience :: Developers',
            'Natural Language :: English',
            'Environment :: Console',
            'License :: OSI Approved :: MIT License',
            'Operating System :: POSIX',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Libraries',
            'Topic :: Terminals'
        ],
        keywords=[
            'ansi',
            'color',
            'console',
            'cut',
            'escape',
            'sgr',
            'terminal',
            'truncate',
        ],
    )


if __name__ == '__main__':
    main()
