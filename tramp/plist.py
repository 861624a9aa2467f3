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
tramp.plist

The persistent list type. A list is either the `nil` singleton, or a
`pair` of a head value and a tail list. Pairs are immutable, so lists
built by prepending onto an existing list may safely share its cells.

Everything in here walks lists with loops rather than recursion, so
comparing, hashing or printing a very long list is safe.

license: LGPL v.3
"""


from itertools import islice

from . import EmptyListError, InvalidArgumentError


__all__ = (
    "plist", "pair", "nil",
    "cons", "empty", "singleton",
    "from_values", "from_iterable", "from_list", "copy",
    "is_plist", "is_nil",
)


class plist(object):
    """
    Base class for the persistent list types
    """

    __slots__ = ()


    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)


    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % type(self).__name__)


    def __iter__(self):
        current = self
        while current is not nil:
            yield current._head
            current = current._tail


    def __eq__(self, other):
        if self is other:
            return True
        elif not isinstance(other, plist):
            return NotImplemented
        elif len(self) != len(other):
            return False

        left, right = self, other
        while left is not nil:
            if left is right:
                # shared structure from here on
                return True
            if left._head != right._head:
                return False
            left, right = left._tail, right._tail

        return True


    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result


    def __hash__(self):
        return hash(tuple(self))


    def __str__(self):
        return "[%s]" % ", ".join(map(str, self))


    def __repr__(self):
        return "cons(%s)" % ", ".join(map(repr, (*self, nil)))


    def count(self):
        return len(self)


    def unpack(self):
        return iter(self)


    def take(self, count):
        return from_iterable(islice(self, count))


class pair(plist):
    """
    A persistent list cell of a head value and a tail list
    """

    __slots__ = ("_head", "_tail", "_length")


    def __init__(self, head, tail):
        if not isinstance(tail, plist):
            raise InvalidArgumentError("tail must be a plist, not %r" %
                                       type(tail).__name__)

        setter = object.__setattr__
        setter(self, "_head", head)
        setter(self, "_tail", tail)
        setter(self, "_length", tail._length + 1)


    def __len__(self):
        return self._length


    def __bool__(self):
        return True


    @property
    def head(self):
        return self._head


    @property
    def tail(self):
        return self._tail


    def is_empty(self):
        return False


class Nil(plist):
    """
    The empty list. There is only ever one instance.
    """

    __slots__ = ()

    _instance = None
    _length = 0


    def __new__(cls):
        inst = cls._instance
        if inst is None:
            inst = object.__new__(cls)
            cls._instance = inst
        return inst


    def __len__(self):
        return 0


    def __bool__(self):
        return False


    def __hash__(self):
        return hash(())


    def __repr__(self):
        return "nil"


    @property
    def head(self):
        raise EmptyListError("head of empty list")


    @property
    def tail(self):
        raise EmptyListError("tail of empty list")


    def is_empty(self):
        return True


nil = Nil()


def is_plist(value):
    return isinstance(value, plist)


def is_nil(value):
    return value is nil


def cons(head, tail=nil):
    """
    A new list with head in front of tail. The tail is shared, not
    copied.
    """

    return pair(head, tail)


def empty():
    return nil


def singleton(value):
    return pair(value, nil)


def from_iterable(values):
    """
    A new list of the items of any finite iterable, in order
    """

    result = nil
    for value in reversed(list(values)):
        result = pair(value, result)
    return result


def from_values(*values):
    return from_iterable(values)


def from_list(source):
    """
    A new list equal to source, but sharing none of its cells
    """

    if not isinstance(source, plist):
        raise InvalidArgumentError("cannot copy %r, not a plist" %
                                   type(source).__name__)

    return from_iterable(source)


copy = from_list


#
# The end.
