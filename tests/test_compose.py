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
unittest for tramp.compose

license: LGPL v.3
"""


from unittest import TestCase

from tramp.compose import (
    identity, compose, and_then,
    curried_compose, higher_compose,
    curried_and_then, higher_and_then,
    negate, is_not_empty,
)


string_to_int = int
int_to_string = str


def increment(i):
    return i + 1


def decrement(i):
    return i - 1


SAMPLE_FUNCS = (
    increment,
    decrement,
    lambda x: x * 3,
    lambda x: x * x - 7,
    abs,
    identity,
)

SAMPLE_VALUES = (-10, -1, 0, 1, 2, 17, 1000)


class TestCompose(TestCase):

    def test_simple_compose(self):
        inc_str = compose(int_to_string, compose(increment, string_to_int))
        self.assertEqual(inc_str("1"), "2")

        inc_str = and_then(and_then(string_to_int, increment), int_to_string)
        self.assertEqual(inc_str("1"), "2")

        chain = string_to_int
        for fun in (increment, int_to_string, lambda s: s + "1",
                    string_to_int, increment, int_to_string):
            chain = and_then(chain, fun)

        self.assertEqual(chain("1"), "22")


    def test_compose_law(self):
        for f in SAMPLE_FUNCS:
            for g in SAMPLE_FUNCS:
                composed = compose(f, g)
                mirrored = and_then(g, f)
                curried = curried_compose()(f)(g)
                higher = higher_compose()(g)(f)

                for x in SAMPLE_VALUES:
                    expected = f(g(x))
                    self.assertEqual(composed(x), expected)
                    self.assertEqual(mirrored(x), expected)
                    self.assertEqual(curried(x), expected)
                    self.assertEqual(higher(x), expected)


    def test_and_then_law(self):
        for f in SAMPLE_FUNCS:
            for g in SAMPLE_FUNCS:
                curried = curried_and_then()(f)(g)
                higher = higher_and_then()(g)(f)

                for x in SAMPLE_VALUES:
                    expected = g(f(x))
                    self.assertEqual(and_then(f, g)(x), expected)
                    self.assertEqual(curried(x), expected)
                    self.assertEqual(higher(x), expected)


    def test_currying_compose_constants(self):
        f1 = lambda a: a + 2.0  # noqa
        f2 = lambda a: a + 3.0  # noqa
        g1 = lambda a: int(a * 3)  # noqa
        g2 = lambda a: int(a * 4)  # noqa

        # currying the inner function, then the outer
        f1_applied = higher_compose()(f1)
        f2_applied = higher_compose()(f2)

        self.assertEqual(f1_applied(g1)(1), 9)
        self.assertEqual(f1_applied(g2)(1), 12)
        self.assertEqual(f2_applied(g1)(1), 12)
        self.assertEqual(f2_applied(g2)(1), 16)

        # currying the outer function, then the inner
        g1_applied = curried_compose()(g1)
        g2_applied = curried_compose()(g2)

        self.assertEqual(g1_applied(f1)(1), 9)
        self.assertEqual(g1_applied(f2)(1), 12)
        self.assertEqual(g2_applied(f1)(1), 12)
        self.assertEqual(g2_applied(f2)(1), 16)


    def test_constants_are_shared(self):
        self.assertIs(curried_compose(), curried_compose())
        self.assertIs(higher_compose(), higher_compose())


class TestPredicates(TestCase):

    def test_negate(self):
        is_even = lambda x: x % 2 == 0  # noqa
        is_odd = negate(is_even)

        self.assertTrue(is_odd(3))
        self.assertFalse(is_odd(4))


    def test_is_not_empty(self):
        self.assertFalse(is_not_empty(None))
        self.assertFalse(is_not_empty(""))
        self.assertTrue(is_not_empty(" "))
        self.assertTrue(is_not_empty("tacos"))


#
# The end.
