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
unittest for tramp.cli

license: LGPL v.3
"""


from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from os.path import join
from tempfile import TemporaryDirectory
from unittest import TestCase

from tramp.cli import CLIException, load_config, main, range_sum


class CLITest(TestCase):

    def setUp(self):
        self._tmpdir = TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        self.config = join(self._tmpdir.name, "tramp.conf")


    def write_config(self, strategy):
        with open(self.config, "wt") as out:
            out.write("[tramp]\nstrategy = %s\n" % strategy)


    def run_main(self, *args):
        out = StringIO()
        err = StringIO()

        argv = ["tramp", "--config", self.config]
        argv.extend(args)

        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)

        return code, out.getvalue(), err.getvalue()


    def test_factorial(self):
        code, out, err = self.run_main("factorial", "5")
        self.assertEqual(code, 0)
        self.assertEqual(out, "120\n")
        self.assertEqual(err, "")


    def test_strategies_agree(self):
        for strategy in ("iterative", "recursive", "trampoline", "tailcall"):
            code, out, _err = self.run_main("fibonacci", "100",
                                            "--strategy", strategy)
            self.assertEqual(code, 0)
            self.assertEqual(out, "354224848179261915075\n")


    def test_even_odd(self):
        code, out, _err = self.run_main("even", "10")
        self.assertEqual((code, out), (0, "True\n"))

        code, out, _err = self.run_main("odd", "10")
        self.assertEqual((code, out), (0, "False\n"))


    def test_digits(self):
        code, out, _err = self.run_main("factorial", "20000", "-d", "10")
        self.assertEqual(code, 0)
        self.assertEqual(out, "1819206320\n")


    def test_range_sum(self):
        code, out, _err = self.run_main("range-sum", "100000")
        self.assertEqual(code, 0)
        self.assertEqual(out, "%i\n" % sum(range(100000)))

        self.assertEqual(range_sum(10, "iterative"), 45)
        self.assertEqual(range_sum(10, "recursive"), 45)
        self.assertEqual(range_sum(0, "tailcall"), 0)


    def test_recursion_limit(self):
        code, out, err = self.run_main("factorial", "100000",
                                       "--strategy", "recursive")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("recursion limit exceeded", err)

        code, out, err = self.run_main("range-sum", "100000",
                                       "--strategy", "recursive")
        self.assertEqual(code, 1)
        self.assertIn("recursion limit exceeded", err)


    def test_config(self):
        # a missing config file falls back to the default
        self.assertEqual(load_config(self.config), "trampoline")

        self.write_config("recursive")
        self.assertEqual(load_config(self.config), "recursive")

        code, _out, err = self.run_main("factorial", "100000")
        self.assertEqual(code, 1)
        self.assertIn("recursion limit exceeded", err)

        # the command line wins over the config file
        code, out, _err = self.run_main("factorial", "20000",
                                        "-s", "iterative", "-d", "5")
        self.assertEqual(code, 0)
        self.assertEqual(out, "18192\n")


    def test_bad_config(self):
        self.write_config("quantum")
        self.assertRaises(CLIException, load_config, self.config)

        code, out, err = self.run_main("factorial", "5")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("quantum", err)


    def test_malformed_config(self):
        malformed = (
            "strategy = trampoline\n",
            "[tramp]\nstrategy = trampoline\nstrategy = iterative\n",
        )

        for text in malformed:
            with open(self.config, "wt") as conf:
                conf.write(text)

            self.assertRaises(CLIException, load_config, self.config)

            code, out, err = self.run_main("factorial", "5")
            self.assertEqual(code, 1)
            self.assertEqual(out, "")
            self.assertIn(self.config, err)


    def test_bad_arguments(self):
        bad = (
            ("ackermann", "5"),
            ("factorial", "five"),
            ("factorial", "-1"),
            ("factorial", "5", "--strategy", "quantum"),
            ("factorial", "5", "--digits", "0"),
        )

        for args in bad:
            with self.assertRaises(SystemExit) as caught:
                self.run_main(*args)
            self.assertEqual(caught.exception.code, 2)


#
# The end.
