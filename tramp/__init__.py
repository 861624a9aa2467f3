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

license: LGPL v.3
"""


__all__ = (
    "TrampException",
    "EmptyListError", "InvalidStateError", "InvalidArgumentError",
)


class TrampException(Exception):
    """
    Base class for error-driven Exceptions raised by Tramp
    """
    pass


class EmptyListError(TrampException):
    """
    Raised when the head or tail of an empty list is requested. A None
    list counts as empty.
    """
    pass


class InvalidStateError(TrampException):
    """
    Raised when a value is requested from something that doesn't have
    one yet, such as a suspended trampoline cell or an empty result.
    """
    pass


class InvalidArgumentError(TrampException, ValueError):
    """
    Raised for structurally invalid arguments, eg. a None range bound
    or an unknown strategy name.
    """
    pass


#
# The end.
