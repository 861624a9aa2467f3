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
tramp.compose

Function composition, both as plain two-argument functions and as
curried values which can be partially applied.

license: LGPL v.3
"""


from .curry import curry2


__all__ = (
    "identity", "compose", "and_then",
    "curried_compose", "higher_compose",
    "curried_and_then", "higher_and_then",
    "negate", "is_not_empty",
)


def identity(value):
    return value


def compose(f, g):
    """
    A function which applies g and then f, ie. x -> f(g(x))
    """

    def composed(x):
        return f(g(x))

    return composed


def and_then(f, g):
    """
    A function which applies f and then g, ie. x -> g(f(x)). The
    mirror of compose.
    """

    def composed(x):
        return g(f(x))

    return composed


# curried composition. The curried_ forms take their arguments in the
# same order as the two-argument form. The higher_ forms take the
# second argument first.

_curried_compose = curry2(compose)
_higher_compose = curry2(lambda g, f: compose(f, g))
_curried_and_then = curry2(and_then)
_higher_and_then = curry2(lambda g, f: and_then(f, g))


def curried_compose():
    """
    Composition as a value. ``curried_compose()(f)(g)`` is
    ``compose(f, g)``
    """

    return _curried_compose


def higher_compose():
    """
    Composition as a value, inner function first.
    ``higher_compose()(g)(f)`` is ``compose(f, g)``
    """

    return _higher_compose


def curried_and_then():
    return _curried_and_then


def higher_and_then():
    return _higher_and_then


def negate(predicate):
    def negated(value):
        return not predicate(value)
    return negated


def is_not_empty(text):
    """
    False for None and for the empty string
    """

    return text is not None and len(text) != 0


#
# The end.
