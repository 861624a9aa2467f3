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
tramp.tco

Stack-safe recursion via Trampoline

There are two ways to use this module. The explicit way builds a
chain of cells, where each `suspend` cell holds a producer of the next
cell and a `done` cell holds the answer, and hands the first cell to
`run`. The implicit way decorates a function with `trampoline` and has
it return `tailcall(fun)(*args)` wherever it would have recursed.

license: LGPL v.3
"""


from functools import partial

from . import InvalidArgumentError, InvalidStateError


__all__ = (
    "Cell", "suspend", "done",
    "is_cell", "is_terminal", "terminal_value", "run",
    "trampoline", "tailcall", "is_trampoline",
    "tailcall_disable", "tailcall_enable",
)


class Cell(object):
    """
    Base class for the two states of a deferred computation
    """

    __slots__ = ()


    def is_terminal(self):
        return False


    def value(self):
        raise InvalidStateError("value of a suspended computation")


    def resume(self):
        raise InvalidStateError("resume of a completed computation")


class Suspended(Cell):
    """
    A computation with at least one more step to take
    """

    __slots__ = ("_producer", )


    def __init__(self, producer):
        self._producer = producer


    def resume(self):
        return self._producer()


    def __repr__(self):
        return "<suspended %r>" % (self._producer, )


class Done(Cell):
    """
    A completed computation
    """

    __slots__ = ("_value", )


    def __init__(self, value):
        self._value = value


    def is_terminal(self):
        return True


    def value(self):
        return self._value


    def __repr__(self):
        return "done(%r)" % (self._value, )


def suspend(producer):
    """
    Wraps a zero-argument callable which, when invoked, returns the
    next cell. The producer isn't called here.
    """

    return Suspended(producer)


def done(value):
    """
    Wraps the final value of a computation
    """

    return Done(value)


def is_cell(value):
    return isinstance(value, Cell)


def _require_cell(value, opname):
    if not isinstance(value, Cell):
        raise InvalidArgumentError("cannot %s %r, not a cell" %
                                   (opname, value))


def is_terminal(cell):
    _require_cell(cell, "inspect")
    return cell.is_terminal()


def terminal_value(cell):
    """
    The value held by a done cell. Raises `InvalidStateError` if the
    cell is still suspended.
    """

    _require_cell(cell, "inspect")
    return cell.value()


def run(cell):
    """
    Unwinds a chain of cells until a done cell is reached, and returns
    its value. A chain which never reaches a done cell will never
    return.
    """

    _require_cell(cell, "run")

    while cell.__class__ is Suspended:
        cell = cell._producer()

    if cell.__class__ is not Done:
        raise InvalidStateError("producer returned %r, not a cell" % (cell, ))

    return cell._value


def setup():
    # builds the @trampoline decorator used by the _tailcall examples
    # in tramp.recursion. A pending tail call is a TailCall instance,
    # and nothing outside this closure can construct one, so a
    # decorated function may return any other value, cells and
    # partials included, without it being mistaken for a bounce.

    _getattr = getattr


    class TailCall(partial):
        # the deferred call of the next function in a tail position.
        # bounce() keeps invoking these until something else comes
        # back.
        pass


    def bounce(fun, *args, **kwds):
        result = fun(*args, **kwds)
        while result.__class__ is TailCall:
            result = result()
        return result


    class Trampoline(partial):

        def __new__(cls, fun):
            # decorating twice wraps the undecorated function
            fun = _getattr(fun, "_tco_original", fun)

            part = partial.__new__(cls, bounce, fun)

            part._tco_original = fun
            part._tco_enable = _getattr(fun, "_tco_enable", True)

            part.__name__ = fun.__name__
            part.__doc__ = fun.__doc__
            part.__qualname__ = fun.__qualname__

            return part


    Trampoline.__qualname__ = "Trampoline"


    class FunctionTrampoline(Trampoline):
        """
        A tail-call trampoline wrapper for a function
        """

        def __get__(self, inst, owner):
            return self if inst is None else \
                MethodTrampoline(self._tco_original.__get__(inst, owner))


        def __repr__(self):
            return "<trampoline function %s at 0x%x>" % \
                (self.__name__, id(self))


    FunctionTrampoline.__qualname__ = "FunctionTrampoline"


    class MethodTrampoline(Trampoline):
        """
        A tail-call trampoline wrapper for a method
        """

        def __repr__(self):
            return "<trampoline bound method %s of %r>" % \
                (self.__qualname__, self._tco_original.__self__)


    MethodTrampoline.__qualname__ = "MethodTrampoline"


    def tailcall(fun):
        # marks a call in tail position, eg. tailcall(_odd_tco)(n - 1),
        # to be made by the bounce loop of the caller's trampoline
        # rather than on top of the caller's frame. Anything which
        # isn't an enabled trampoline is handed back unchanged, so the
        # call happens immediately as usual.

        if not _getattr(fun, "_tco_enable", False):
            return fun

        fun = _getattr(fun, "_tco_original", fun)

        return partial(TailCall, fun)


    tailcall.__qualname__ = "tramp.tco.tailcall"


    def is_trampoline(value):
        return isinstance(value, Trampoline)


    return FunctionTrampoline, tailcall, is_trampoline


trampoline, tailcall, is_trampoline = setup()
del setup


def tailcall_disable(fun):
    """
    Decorator which makes `tailcall` leave fun alone, so calls to it
    from a trampoline recurse normally instead of bouncing.
    """

    fun._tco_enable = False

    return fun


def tailcall_enable(fun):
    """
    Decorator which undoes `tailcall_disable`
    """

    fun._tco_enable = True

    return fun


#
# The end.
