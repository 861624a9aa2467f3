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
tramp.cli

Command-line interface for running the worked recursion examples with
a chosen strategy, to compare how each copes with deep recursion

license: LGPL v.3
"""


import sys

from appdirs import AppDirs
from argparse import ArgumentParser
from configparser import ConfigParser, Error as ConfigError
from os.path import basename, join

from . import TrampException
from .curry import curry2
from .lists import get_strategy
from .recursion import EXAMPLES, STRATEGIES, decimal_digits, get_example


_APPDIR = AppDirs("tramp")

DEFAULT_CONFIG = join(_APPDIR.user_config_dir, "tramp.conf")

DEFAULT_STRATEGY = "trampoline"


# the list strategy used by range-sum for each example strategy
LIST_STRATEGIES = {
    "iterative": "imperative",
    "recursive": "recursive",
    "trampoline": "trampoline",
    "tailcall": "trampoline",
}


class CLIException(TrampException):
    pass


def load_config(filename):
    """
    The default strategy from the [tramp] section of the given config
    file. A missing file is not an error, a malformed one raises
    `CLIException`.
    """

    config = ConfigParser()
    try:
        config.read(filename)
    except ConfigError as exc:
        raise CLIException("%s: %s" % (filename, exc)) from exc

    strategy = config.get("tramp", "strategy", fallback=DEFAULT_STRATEGY)
    if strategy not in STRATEGIES:
        raise CLIException("%s: unknown strategy %r" % (filename, strategy))

    return strategy


def range_sum(num, strategy):
    """
    The sum of 0 through num - 1, built as a list with range and
    reduced with fold_left, using the named list strategy
    """

    ops = get_strategy(LIST_STRATEGIES[strategy])
    return ops.fold_left(ops.range(0, num), 0, curry2(lambda a, b: a + b))


def cli(options):
    """
    Run as from the command line, with the given options. Returns the
    text to print.
    """

    strategy = options.strategy or load_config(options.config)

    if options.example == "range-sum":
        result = range_sum(options.number, strategy)
    else:
        result = get_example(options.example, strategy)(options.number)

    text = decimal_digits(result)
    if options.digits:
        text = text[:options.digits]

    return text


def cli_option_parser(name):
    """
    Create an `ArgumentParser` instance with the options requested by
    the `cli` function
    """

    parser = ArgumentParser(prog=basename(name))

    parser.add_argument("example",
                        choices=sorted(EXAMPLES) + ["range-sum"],
                        help="The computation to run")

    parser.add_argument("number", type=int,
                        help="The input to the computation")

    parser.add_argument("-s", "--strategy", dest="strategy",
                        action="store", default=None, choices=STRATEGIES,
                        help="How to recurse (default: from the config"
                        " file, or %s)" % DEFAULT_STRATEGY)

    parser.add_argument("-d", "--digits", dest="digits",
                        action="store", type=int, default=None,
                        help="Only print this many leading characters of"
                        " the result")

    parser.add_argument("--config", dest="config",
                        action="store", default=DEFAULT_CONFIG,
                        help="Per-user defaults file")

    return parser


def main(args=sys.argv):
    """
    Entry point for the tramp command
    """

    name, *args = args

    parser = cli_option_parser(name)
    options = parser.parse_args(args)

    if options.number < 0:
        parser.error("number must not be negative")

    if options.digits is not None and options.digits < 1:
        parser.error("--digits must be positive")

    try:
        text = cli(options)

    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    except RecursionError:
        print("%s: recursion limit exceeded, try --strategy trampoline" %
              parser.prog, file=sys.stderr)
        return 1

    except TrampException as exc:
        print("%s: %s" % (parser.prog, exc), file=sys.stderr)
        return 1

    else:
        print(text)
        return 0


if __name__ == "__main__":
    sys.exit(main())


#
# The end.
