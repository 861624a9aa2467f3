#! /usr/bin/env python3


# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation; either version 3 of the
# License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see
# <http://www.gnu.org/licenses/>.


"""
Tramp, stack-safe folds over persistent lists

:license: LGPL v.3
"""


TROVE_CLASSIFIERS = (
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "License :: OSI Approved"
    " :: GNU Lesser General Public License v3 or later (LGPLv3+)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3 :: Only",
    "Topic :: Software Development :: Libraries :: Python Modules",
)


def config():
    return {
        "name": "tramp",
        "version": "0.9.0",

        "packages": [
            "tramp",
        ],

        "python_requires": ">=3.8",

        "install_requires": [
            "appdirs",
        ],

        "extras_require": {
            "test": [
                "pytest",
            ],
        },

        "zip_safe": True,

        "entry_points": {
            "console_scripts": [
                "tramp=tramp.cli:main",
            ],
        },

        "license": "GNU Lesser General Public License v3",
        "description": "Stack-safe trampolined folds over persistent lists",
        "classifiers": TROVE_CLASSIFIERS,
    }


def setup():
    from setuptools import setup

    setup(**config())


if __name__ == "__main__":
    setup()


#
# The end.
