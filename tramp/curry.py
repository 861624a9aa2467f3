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
tramp.curry

Curried functions, ie. functions of N arguments which accept their
arguments one call at a time.

::

  add = curry2(lambda x, y: x + y)
  add(4)(3)        # 7
  add_to_5 = add(5)
  add_to_5(2)      # 7

license: LGPL v.3
"""


from functools import partial, wraps
from inspect import Parameter, signature

from . import InvalidArgumentError


__all__ = (
    "Curried", "curry", "curry2", "curry3", "curry4",
    "uncurry", "is_curried", "required_arity",
)


_POSITIONAL = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


class Curried(partial):
    """
    A function which still needs `arity` more arguments. Each call
    supplies exactly one of them.
    """

    def __new__(cls, fun, arity, *args):
        obj = partial.__new__(cls, fun, *args)
        obj.arity = arity
        obj.__name__ = getattr(fun, "__name__", "curried")
        obj.__doc__ = getattr(fun, "__doc__", None)
        return obj


    def __call__(self, arg):
        if self.arity == 1:
            return self.func(*self.args, arg)
        else:
            return Curried(self.func, self.arity - 1, *self.args, arg)


    def __repr__(self):
        return "<curried %s awaiting %i of %i>" % \
            (self.__name__, self.arity, self.arity + len(self.args))


def required_arity(fun):
    """
    The count of positional parameters of fun which have no default
    """

    params = signature(fun).parameters.values()
    return sum(1 for p in params
               if p.kind in _POSITIONAL and p.default is Parameter.empty)


def curry(fun, arity=None):
    """
    Produce the curried form of fun. If arity isn't given, it is the
    number of required positional parameters of fun.
    """

    if arity is None:
        arity = required_arity(fun)

    if arity < 1:
        raise InvalidArgumentError("cannot curry %r with arity %r" %
                                   (fun, arity))

    return Curried(fun, arity)


curry2 = partial(curry, arity=2)
curry3 = partial(curry, arity=3)
curry4 = partial(curry, arity=4)


def is_curried(value):
    return isinstance(value, Curried)


def uncurry(fun, arity):
    """
    The inverse of curry. Produces a function of arity arguments which
    applies them one at a time to the curried function fun.
    """

    if arity < 1:
        raise InvalidArgumentError("cannot uncurry %r with arity %r" %
                                   (fun, arity))

    def uncurried(*args):
        if len(args) != arity:
            raise TypeError("expected %i arguments, got %i" %
                            (arity, len(args)))

        result = fun
        for arg in args:
            result = result(arg)
        return result

    if is_curried(fun):
        wraps(fun.func)(uncurried)

    return uncurried


#
# The end.
