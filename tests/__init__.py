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


from contextlib import contextmanager
from sys import getrecursionlimit, setrecursionlimit


# comfortably more than any of the recursive strategies can manage
# under the default recursion limit
DEEP = 100000


@contextmanager
def recursionlimit(limit=(getrecursionlimit() // 2)):
    original = getrecursionlimit()
    setrecursionlimit(limit)
    try:
        yield limit
    finally:
        setrecursionlimit(original)
    assert getrecursionlimit() == original, "could not reset recursion limit"


def make_accumulator():
    accu = list()

    def accumulate(x):
        accu.append(x)
        return x

    return accu, accumulate


#
# The end.
