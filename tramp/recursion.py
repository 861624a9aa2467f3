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
tramp.recursion

Worked examples of deep recursion. Each example is written four ways:

 * ``_recursive``: plain Python recursion, which raises
   `RecursionError` once the input nears `sys.getrecursionlimit()`
 * ``_iterative``: a loop
 * ``_trampolined``: explicit `suspend` and `done` cells, driven by
   `tramp.tco.run`
 * ``_tailcall``: the recursive definition decorated with
   `tramp.tco.trampoline`, bouncing via `tramp.tco.tailcall`

license: LGPL v.3
"""


import sys

from contextlib import contextmanager
from functools import partial

from . import InvalidArgumentError
from .tco import done, run, suspend, tailcall, trampoline


__all__ = (
    "factorial_recursive", "factorial_iterative",
    "factorial_trampolined", "factorial_tailcall",

    "fibonacci_recursive", "fibonacci_iterative",
    "fibonacci_trampolined", "fibonacci_tailcall",

    "even_recursive", "odd_recursive",
    "even_iterative", "odd_iterative",
    "even_trampolined", "odd_trampolined",
    "even_tailcall", "odd_tailcall",

    "EXAMPLES", "STRATEGIES", "get_example",
    "int_str_digits", "decimal_digits",
)


def _require_natural(num):
    if isinstance(num, bool) or not isinstance(num, int) or num < 0:
        raise InvalidArgumentError("expected a non-negative integer, not %r"
                                   % (num, ))


# === factorial ===

def _factorial(num, accu):
    if num <= 1:
        return accu
    else:
        return _factorial(num - 1, accu * num)


def factorial_recursive(num):
    _require_natural(num)
    return _factorial(num, 1)


def factorial_iterative(num):
    _require_natural(num)

    accu = 1
    while num > 1:
        accu *= num
        num -= 1
    return accu


def _factorial_bounce(num, accu):
    if num <= 1:
        return done(accu)
    else:
        return suspend(partial(_factorial_bounce, num - 1, accu * num))


def factorial_trampolined(num):
    _require_natural(num)
    return run(suspend(partial(_factorial_bounce, num, 1)))


@trampoline
def _factorial_tco(num, accu):
    if num <= 1:
        return accu
    else:
        return tailcall(_factorial_tco)(num - 1, accu * num)


def factorial_tailcall(num):
    _require_natural(num)
    return _factorial_tco(num, 1)


# === fibonacci ===

def _fibonacci(num, accu, carry):
    if num < 1:
        return accu
    else:
        return _fibonacci(num - 1, carry, carry + accu)


def fibonacci_recursive(num):
    _require_natural(num)
    return _fibonacci(num, 0, 1)


def fibonacci_iterative(num):
    _require_natural(num)

    accu, carry = 0, 1
    while num > 0:
        accu, carry = carry, carry + accu
        num -= 1
    return accu


def _fibonacci_bounce(num, accu, carry):
    if num < 1:
        return done(accu)
    else:
        return suspend(partial(_fibonacci_bounce,
                               num - 1, carry, carry + accu))


def fibonacci_trampolined(num):
    _require_natural(num)
    return run(suspend(partial(_fibonacci_bounce, num, 0, 1)))


@trampoline
def _fibonacci_tco(num, accu, carry):
    if num < 1:
        return accu
    else:
        return tailcall(_fibonacci_tco)(num - 1, carry, carry + accu)


def fibonacci_tailcall(num):
    _require_natural(num)
    return _fibonacci_tco(num, 0, 1)


# === mutual recursion ===

def _even(num):
    return True if num == 0 else _odd(num - 1)


def _odd(num):
    return False if num == 0 else _even(num - 1)


def even_recursive(num):
    _require_natural(num)
    return _even(num)


def odd_recursive(num):
    _require_natural(num)
    return _odd(num)


@trampoline
def _even_tco(num):
    return True if num == 0 else tailcall(_odd_tco)(num - 1)


@trampoline
def _odd_tco(num):
    return False if num == 0 else tailcall(_even_tco)(num - 1)


def even_tailcall(num):
    _require_natural(num)
    return _even_tco(num)


def odd_tailcall(num):
    _require_natural(num)
    return _odd_tco(num)


def _even_bounce(num):
    if num == 0:
        return done(True)
    else:
        return suspend(partial(_odd_bounce, num - 1))


def _odd_bounce(num):
    if num == 0:
        return done(False)
    else:
        return suspend(partial(_even_bounce, num - 1))


def even_trampolined(num):
    _require_natural(num)
    return run(_even_bounce(num))


def odd_trampolined(num):
    _require_natural(num)
    return run(_odd_bounce(num))


def even_iterative(num):
    _require_natural(num)
    return num % 2 == 0


def odd_iterative(num):
    _require_natural(num)
    return num % 2 == 1


STRATEGIES = ("iterative", "recursive", "trampoline", "tailcall")


EXAMPLES = {
    "factorial": {
        "iterative": factorial_iterative,
        "recursive": factorial_recursive,
        "trampoline": factorial_trampolined,
        "tailcall": factorial_tailcall,
    },
    "fibonacci": {
        "iterative": fibonacci_iterative,
        "recursive": fibonacci_recursive,
        "trampoline": fibonacci_trampolined,
        "tailcall": fibonacci_tailcall,
    },
    "even": {
        "iterative": even_iterative,
        "recursive": even_recursive,
        "trampoline": even_trampolined,
        "tailcall": even_tailcall,
    },
    "odd": {
        "iterative": odd_iterative,
        "recursive": odd_recursive,
        "trampoline": odd_trampolined,
        "tailcall": odd_tailcall,
    },
}


def get_example(name, strategy):
    """
    The function computing the named example with the named strategy
    """

    forms = EXAMPLES.get(name)
    if forms is None:
        raise InvalidArgumentError("unknown example %r" % (name, ))

    found = forms.get(strategy)
    if found is None:
        raise InvalidArgumentError("unknown strategy %r for %s" %
                                   (strategy, name))

    return found


@contextmanager
def int_str_digits(limit=0):
    """
    Context manager which changes the interpreter's limit on the
    number of digits an int may be converted to or from, restoring it
    on exit. A limit of 0 removes it. Does nothing on interpreters
    which have no such limit.
    """

    getter = getattr(sys, "get_int_max_str_digits", None)
    if getter is None:
        yield
        return

    original = getter()
    sys.set_int_max_str_digits(limit)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(original)


def decimal_digits(num):
    """
    The decimal representation of num, however many digits it has
    """

    with int_str_digits(0):
        return str(num)


#
# The end.
