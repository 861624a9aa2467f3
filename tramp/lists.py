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
tramp.lists

Operations over persistent lists. Most operations come in several
interchangeable flavors which must all produce the same results:

 * ``_imperative`` walks the list with a loop
 * ``_recursive`` is the naive recursive definition. It needs one
   Python frame per element, so it raises `RecursionError` on long
   lists. It's here for comparison, not for use.
 * ``_trampolined`` is the recursive definition run on a trampoline
   from `tramp.tco`, one bounce per element, in constant stack.

The un-suffixed names (`fold_left`, `fold_right`, `map`, `reverse`,
`range`) are bound to the default strategy, which is "trampoline"
unless configured otherwise with ``-X tramp.strategy=imperative`` or
the ``TRAMP_STRATEGY`` environment variable.

Fold functions are curried. The left fold step is called as
``f(accumulator)(element)`` and the right fold step as
``f(element)(accumulator)``.

license: LGPL v.3
"""


from collections import namedtuple
from functools import partial

from . import EmptyListError, InvalidArgumentError
from .curry import curry2
from .plist import nil, pair, plist, singleton, from_iterable
from .tco import done, run, suspend


__all__ = (
    "head", "tail", "append", "prepend", "prepend_fold_left",
    "apply_effect",

    "fold_left", "fold_left_imperative", "fold_left_recursive",
    "fold_left_trampolined", "deferred_fold_left",

    "fold_right", "fold_right_imperative", "fold_right_recursive",
    "fold_right_trampolined", "deferred_fold_right",

    "map", "map_imperative", "map_recursive", "map_trampolined",
    "map_fold_left", "map_fold_right",

    "reverse", "reverse_imperative", "reverse_recursive",
    "reverse_trampolined", "reverse_prepend", "reverse_fold_left",

    "range", "range_imperative", "range_recursive",
    "range_tail_recursive", "range_trampolined", "deferred_range",

    "Strategy", "STRATEGIES", "SAFE_STRATEGIES", "DEFAULT_STRATEGY",
    "get_strategy",
)


def _require_list(value, opname):
    if not isinstance(value, plist):
        raise InvalidArgumentError("%s requires a plist, not %r" %
                                   (opname, type(value).__name__))


def _require_int(value, opname):
    if value is None or isinstance(value, bool) or \
       not isinstance(value, int):
        raise InvalidArgumentError("%s requires integer bounds, not %r" %
                                   (opname, value))


def head(lst):
    """
    The first element of lst. Raises `EmptyListError` if lst is empty
    or None.
    """

    if lst is None:
        raise EmptyListError("head of empty list")
    _require_list(lst, "head")
    return lst.head


def tail(lst):
    """
    A list of all but the first element of lst. Raises
    `EmptyListError` if lst is empty or None.
    """

    if lst is None:
        raise EmptyListError("tail of empty list")
    _require_list(lst, "tail")
    return lst.tail


def append(lst, value):
    """
    A new list of the elements of lst followed by value. The cells of
    lst are rebuilt, so this is O(n).
    """

    _require_list(lst, "append")

    result = pair(value, nil)
    for item in reversed(tuple(lst)):
        result = pair(item, result)
    return result


def prepend(lst, value):
    """
    A new list of value followed by the elements of lst. The cells of
    lst are shared, so this is O(1).
    """

    _require_list(lst, "prepend")
    return pair(value, lst)


def prepend_fold_left(lst, value):
    """
    prepend, defined as a left fold which appends each element of lst
    onto a list holding only value. Quadratic, don't use it when
    performance matters.
    """

    _require_list(lst, "prepend")
    return fold_left_trampolined(lst, singleton(value), curry2(append))


def apply_effect(lst, effect):
    """
    Calls effect with each element of lst in order
    """

    _require_list(lst, "apply_effect")
    for item in lst:
        effect(item)


# === fold left ===

def fold_left_imperative(lst, identity, fun):
    _require_list(lst, "fold_left")

    result = identity
    for item in lst:
        result = fun(result)(item)
    return result


def _fold_left_recursive(lst, identity, fun):
    if lst.is_empty():
        return identity
    else:
        return _fold_left_recursive(tail(lst), fun(identity)(head(lst)),
                                    fun)


def fold_left_recursive(lst, identity, fun):
    _require_list(lst, "fold_left")
    return _fold_left_recursive(lst, identity, fun)


def _fold_left_bounce(lst, accu, fun):
    accu = fun(accu)(lst._head)
    rest = lst._tail

    if rest is nil:
        return done(accu)
    else:
        return suspend(partial(_fold_left_bounce, rest, accu, fun))


def deferred_fold_left(lst, identity, fun):
    """
    The first cell of a trampolined left fold. Each bounce consumes
    one element.
    """

    _require_list(lst, "fold_left")

    if lst is nil:
        return done(identity)
    else:
        return suspend(partial(_fold_left_bounce, lst, identity, fun))


def fold_left_trampolined(lst, identity, fun):
    return run(deferred_fold_left(lst, identity, fun))


# === fold right ===

def fold_right_imperative(lst, identity, fun):
    # a singly-linked list can only be walked forwards, so we
    # materialize it first and then walk that backwards.

    _require_list(lst, "fold_right")

    result = identity
    for item in reversed(tuple(lst)):
        result = fun(item)(result)
    return result


def _fold_right_recursive(lst, identity, fun):
    if lst.is_empty():
        return identity
    else:
        return fun(head(lst))(_fold_right_recursive(tail(lst), identity, fun))


def fold_right_recursive(lst, identity, fun):
    _require_list(lst, "fold_right")
    return _fold_right_recursive(lst, identity, fun)


def _fold_right_ascend(pending, accu, fun):
    accu = fun(pending._head)(accu)
    rest = pending._tail

    if rest is nil:
        return done(accu)
    else:
        return suspend(partial(_fold_right_ascend, rest, accu, fun))


def _fold_right_descend(lst, pending, identity, fun):
    # pending collects the elements we've passed on the way down, in
    # reverse order, standing in for the frames a recursive right fold
    # would have left on the stack.

    pending = pair(lst._head, pending)
    rest = lst._tail

    if rest is nil:
        return suspend(partial(_fold_right_ascend, pending, identity, fun))
    else:
        return suspend(partial(_fold_right_descend,
                               rest, pending, identity, fun))


def deferred_fold_right(lst, identity, fun):
    """
    The first cell of a trampolined right fold. The chain walks down
    the list and then back up, one element per bounce each way.
    """

    _require_list(lst, "fold_right")

    if lst is nil:
        return done(identity)
    else:
        return suspend(partial(_fold_right_descend, lst, nil, identity, fun))


def fold_right_trampolined(lst, identity, fun):
    return run(deferred_fold_right(lst, identity, fun))


# === map ===

def map_imperative(lst, fun):
    _require_list(lst, "map")
    return from_iterable([fun(item) for item in lst])


def _map_recursive(lst, fun):
    if lst.is_empty():
        return nil
    else:
        return pair(fun(head(lst)), _map_recursive(tail(lst), fun))


def map_recursive(lst, fun):
    _require_list(lst, "map")
    return _map_recursive(lst, fun)


def map_trampolined(lst, fun):
    # building by prepend is linear but leaves the result backwards
    flipped = fold_left_trampolined(lst, nil,
                                    lambda acc: lambda x: pair(fun(x), acc))
    return reverse_trampolined(flipped)


def map_fold_left(lst, fun):
    """
    map, defined as a left fold which appends each transformed element
    onto an initially empty list. Quadratic, don't use it when
    performance matters.
    """

    return fold_left_trampolined(lst, nil,
                                 lambda acc: lambda x: append(acc, fun(x)))


def map_fold_right(lst, fun):
    """
    map, defined as a right fold which prepends each transformed
    element onto an initially empty list.
    """

    return fold_right_trampolined(lst, nil,
                                  lambda x: lambda acc: prepend(acc, fun(x)))


# === reverse ===

def reverse_imperative(lst):
    _require_list(lst, "reverse")

    result = nil
    for item in lst:
        result = pair(item, result)
    return result


def _reverse_recursive(lst):
    if lst.is_empty():
        return nil
    else:
        return append(_reverse_recursive(tail(lst)), head(lst))


def reverse_recursive(lst):
    _require_list(lst, "reverse")
    return _reverse_recursive(lst)


def reverse_prepend(lst):
    """
    reverse, defined as a left fold which prepends each element
    """

    return fold_left_trampolined(lst, nil, curry2(prepend))


reverse_trampolined = reverse_prepend


def reverse_fold_left(lst):
    """
    reverse, defined as a left fold whose step is itself a left fold,
    rebuilding the whole result for each element. Very slow, and only
    here to show that it can be done.
    """

    def step(accu):
        def with_item(item):
            return fold_left_trampolined(accu, singleton(item),
                                         curry2(append))
        return with_item

    return fold_left_trampolined(lst, nil, step)


# === range ===

def range_imperative(start, end):
    _require_int(start, "range")
    _require_int(end, "range")

    result = nil
    while end > start:
        end -= 1
        result = pair(end, result)
    return result


def _range_recursive(start, end):
    # not a tail call, the prepend happens after the recursion returns
    if end <= start:
        return nil
    else:
        return prepend(_range_recursive(start + 1, end), start)


def range_recursive(start, end):
    _require_int(start, "range")
    _require_int(end, "range")
    return _range_recursive(start, end)


def _range_tail(accu, start, end):
    if end <= start:
        return accu
    else:
        return _range_tail(pair(end - 1, accu), start, end - 1)


def range_tail_recursive(start, end):
    """
    range as a tail-recursive function. Python doesn't eliminate tail
    calls, so this is no more stack safe than range_recursive.
    """

    _require_int(start, "range")
    _require_int(end, "range")
    return _range_tail(nil, start, end)


def _range_bounce(accu, start, end):
    end -= 1
    accu = pair(end, accu)

    if end <= start:
        return done(accu)
    else:
        return suspend(partial(_range_bounce, accu, start, end))


def deferred_range(start, end):
    """
    The first cell of a trampolined range. Each bounce advances the
    counter by one, building the list from its end.
    """

    _require_int(start, "range")
    _require_int(end, "range")

    if end <= start:
        return done(nil)
    else:
        return suspend(partial(_range_bounce, nil, start, end))


def range_trampolined(start, end):
    return run(deferred_range(start, end))


# === strategies ===

Strategy = namedtuple("Strategy", ("name", "fold_left", "fold_right",
                                   "map", "reverse", "range"))


STRATEGIES = {
    "imperative": Strategy("imperative",
                           fold_left_imperative, fold_right_imperative,
                           map_imperative, reverse_imperative,
                           range_imperative),

    "recursive": Strategy("recursive",
                          fold_left_recursive, fold_right_recursive,
                          map_recursive, reverse_recursive,
                          range_recursive),

    "trampoline": Strategy("trampoline",
                           fold_left_trampolined, fold_right_trampolined,
                           map_trampolined, reverse_trampolined,
                           range_trampolined),
}


# the strategies which may be used as the module default
SAFE_STRATEGIES = ("trampoline", "imperative")


def get_strategy(name):
    """
    The Strategy record of list operations for the given name
    """

    found = STRATEGIES.get(name)
    if found is None:
        raise InvalidArgumentError("unknown strategy %r, expected one of %s"
                                   % (name, ", ".join(sorted(STRATEGIES))))
    return found


def setup():
    # picks the default strategy from the tramp.strategy interpreter
    # option, then the TRAMP_STRATEGY environment variable.

    from os import environ
    from sys import _xoptions

    name = (_xoptions.get("tramp.strategy") or
            environ.get("TRAMP_STRATEGY") or
            "trampoline")

    if name not in SAFE_STRATEGIES:
        raise InvalidArgumentError("tramp.strategy must be one of %s, not %r"
                                   % (", ".join(SAFE_STRATEGIES), name))

    return get_strategy(name)


_default = setup()
del setup

DEFAULT_STRATEGY = _default.name

fold_left = _default.fold_left
fold_right = _default.fold_right
map = _default.map
reverse = _default.reverse
range = _default.range

del _default


#
# The end.
