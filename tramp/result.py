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
tramp.result

A value which may be present, absent, or the failure to produce it.

license: LGPL v.3
"""


from . import InvalidStateError, TrampException


__all__ = (
    "Result", "Success", "Empty", "Failure",
    "success", "failure", "empty",
    "is_result",
)


class Result(object):
    """
    Base class for Success, Empty and Failure
    """

    __slots__ = ()


    def is_present(self):
        return False


    def get(self):
        raise NotImplementedError()


    def get_or_else(self, default):
        return default


    def get_or_else_get(self, supplier):
        return supplier()


    def or_else(self, supplier):
        return supplier()


    def to_optional(self):
        return None


class Success(Result):

    __slots__ = ("value", )


    def __init__(self, value):
        self.value = value


    def is_present(self):
        return True


    def get(self):
        return self.value


    def get_or_else(self, default):
        return self.value


    def get_or_else_get(self, supplier):
        return self.value


    def or_else(self, supplier):
        return self


    def to_optional(self):
        return self.value


    def __eq__(self, other):
        return type(other) is Success and self.value == other.value


    def __hash__(self):
        return hash((Success, self.value))


    def __repr__(self):
        return "success(%r)" % (self.value, )


class Empty(Result):
    """
    The absent result. There is only ever one instance.
    """

    __slots__ = ()

    _instance = None


    def __new__(cls):
        inst = cls._instance
        if inst is None:
            inst = object.__new__(cls)
            cls._instance = inst
        return inst


    def get(self):
        raise InvalidStateError("get called on empty Result")


    def __repr__(self):
        return "empty()"


class Failure(Result):

    __slots__ = ("error", )


    def __init__(self, error):
        self.error = error


    def get(self):
        raise self.error


    def __repr__(self):
        return "failure(%r)" % (self.error, )


def success(value):
    return Success(value)


def empty():
    return Empty()


def failure(error):
    """
    A failed Result. error may be a message, a TrampException which is
    kept as-is, or any other exception, which is wrapped in an
    InvalidStateError.
    """

    if isinstance(error, TrampException):
        return Failure(error)

    elif isinstance(error, BaseException):
        wrapped = InvalidStateError(str(error))
        wrapped.__cause__ = error
        return Failure(wrapped)

    else:
        return Failure(InvalidStateError(error))


def is_result(value):
    return isinstance(value, Result)


#
# The end.
