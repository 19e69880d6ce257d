"""
FlagSet behavioral tests (single-dash grammar on top of argparse).

Scope
- Termination rules: first positional, `--`, lone `-`.
- Boolean flags, value flags, inline values and conversion.
- Faults and their diagnostics, usage hooks, EXIT policy.
- print_defaults() layout.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import argparse
import io
import unittest
from unittest import TestCase

from subcommands import (
    BadFlagSyntaxError,
    ErrorHandling,
    FlagSet,
    HelpRequested,
    InvalidFlagValueError,
    MissingFlagValueError,
    UnknownFlagError,
    parse_bool,
)


def make_flags(error_handling=ErrorHandling.CONTINUE):
    flags = FlagSet("tool", error_handling)
    flags.set_output(io.StringIO())
    flags.flag("verbose", False, "talk more")
    flags.flag("count", 1, "how many")
    flags.flag("name", "", "who")
    flags.flag("ratio", 0.5, "how much")
    return flags


class TestParse(TestCase):
    """Token scanning."""

    def setUp(self):
        self.flags = make_flags()

    def testDefaults(self):
        namespace = self.flags.parse([])
        self.assertEqual((namespace.verbose, namespace.count, namespace.name, namespace.ratio), (False, 1, "", 0.5))
        self.assertEqual(self.flags.args, [])
        self.assertTrue(self.flags.parsed)

    def testStopsAtFirstPositional(self):
        namespace = self.flags.parse(["-count", "3", "file", "-verbose"])
        self.assertEqual(namespace.count, 3)
        self.assertFalse(namespace.verbose)
        self.assertEqual(self.flags.args, ["file", "-verbose"])

    def testDoubleDash(self):
        self.flags.parse(["-verbose", "--", "-count", "2"])
        self.assertTrue(self.flags.namespace.verbose)
        self.assertEqual(self.flags.args, ["-count", "2"])

    def testLoneDashIsPositional(self):
        self.flags.parse(["-", "-verbose"])
        self.assertEqual(self.flags.args, ["-", "-verbose"])
        self.assertFalse(self.flags.namespace.verbose)

    def testDoubleDashPrefix(self):
        namespace = self.flags.parse(["--count=4", "--name", "bob"])
        self.assertEqual((namespace.count, namespace.name), (4, "bob"))

    def testInlineValue(self):
        namespace = self.flags.parse(["-name=a=b", "-ratio=2.5"])
        self.assertEqual((namespace.name, namespace.ratio), ("a=b", 2.5))

    def testValueMayStartWithDash(self):
        namespace = self.flags.parse(["-count", "-2", "-name", "-x"])
        self.assertEqual((namespace.count, namespace.name), (-2, "-x"))

    def testBooleanForms(self):
        self.assertTrue(make_flags().parse(["-verbose"]).verbose)
        self.assertTrue(make_flags().parse(["-verbose=true"]).verbose)
        self.assertTrue(make_flags().parse(["-verbose=1"]).verbose)
        self.assertFalse(make_flags().parse(["-verbose=false"]).verbose)
        self.assertFalse(make_flags().parse(["-verbose=F"]).verbose)

    def testBooleanDoesNotTakeNextToken(self):
        self.flags.parse(["-verbose", "false"])
        self.assertTrue(self.flags.namespace.verbose)
        self.assertEqual(self.flags.args, ["false"])

    def testStoreTrueAction(self):
        flags = FlagSet("tool")
        flags.add_argument("-force", action="store_true")
        self.assertTrue(flags.parse(["-force"]).force)

    def testStoreTrueActionExplicitFalse(self):
        flags = FlagSet("tool")
        flags.add_argument("-force", action="store_true")
        self.assertFalse(flags.parse(["-force=false"]).force)

    def testNamespaceObject(self):
        class Target:
            pass

        target = Target()
        flags = FlagSet("tool", namespace=target)
        flags.flag("dry-run", False, "do nothing")
        flags.parse(["-dry-run"])
        self.assertTrue(target.dry_run)

    def testDoubleDashAsValue(self):
        namespace = self.flags.parse(["-name", "--", "rest"])
        self.assertEqual(namespace.name, "--")
        self.assertEqual(self.flags.args, ["rest"])

    def testDoubleDashAsInlineValue(self):
        namespace = self.flags.parse(["-name=--", "-count", "2"])
        self.assertEqual((namespace.name, namespace.count), ("--", 2))
        self.assertEqual(self.flags.args, [])

    def testFlagLikeValue(self):
        namespace = self.flags.parse(["-name", "-count", "-verbose"])
        self.assertEqual((namespace.name, namespace.count, namespace.verbose), ("-count", 1, True))

    def testIntegerLiterals(self):
        for text, expected in (("0x10", 16), ("0o7", 7), ("0b101", 5), ("010", 8), ("1_000", 1000), ("-0x1f", -31), ("0", 0)):
            with self.subTest(text=text):
                self.assertEqual(make_flags().parse(["-count", text]).count, expected)

    def testChoices(self):
        flags = FlagSet("tool")
        flags.set_output(io.StringIO())
        flags.add_argument("-mode", choices=["fast", "slow"], default="fast")
        self.assertEqual(flags.parse([]).mode, "fast")
        self.assertEqual(flags.parse(["-mode", "slow"]).mode, "slow")

    def testRequiredFlagGiven(self):
        flags = FlagSet("tool")
        flags.add_argument("-token", required=True)
        self.assertEqual(flags.parse(["-token", "abc"]).token, "abc")


class TestFaults(TestCase):
    """Failures are raised in CONTINUE mode after the diagnostic."""

    def setUp(self):
        self.flags = make_flags()

    def output(self):
        return self.flags.output.getvalue()

    def testUnknownFlag(self):
        with self.assertRaises(UnknownFlagError) as context:
            self.flags.parse(["-bogus"])
        self.assertEqual(context.exception.flag, "bogus")
        self.assertTrue(self.output().startswith("flag provided but not defined: -bogus\nUsage of tool:\n"))

    def testBadSyntax(self):
        for token in ("---x", "-=x"):
            with self.subTest(token=token), self.assertRaises(BadFlagSyntaxError):
                make_flags().parse([token])

    def testMissingValue(self):
        with self.assertRaises(MissingFlagValueError):
            self.flags.parse(["-count"])
        self.assertTrue(self.output().startswith("flag needs an argument: -count\n"))

    def testInvalidValue(self):
        with self.assertRaises(InvalidFlagValueError):
            self.flags.parse(["-count", "many"])
        self.assertIn("invalid int value: 'many'", self.output())

    def testInvalidBoolean(self):
        with self.assertRaises(InvalidFlagValueError):
            self.flags.parse(["-verbose=maybe"])
        self.assertIn("invalid bool value: 'maybe'", self.output())

    def testInvalidChoice(self):
        flags = FlagSet("tool")
        flags.set_output(io.StringIO())
        flags.add_argument("-mode", choices=["fast", "slow"], default="fast")
        with self.assertRaises(InvalidFlagValueError) as context:
            flags.parse(["-mode", "warp"])
        self.assertEqual(context.exception.flag, "mode")
        self.assertIn("invalid choice: 'warp'", flags.output.getvalue())

    def testRequiredFlagMissing(self):
        flags = FlagSet("tool")
        flags.set_output(io.StringIO())
        flags.add_argument("-token", required=True)
        with self.assertRaises(InvalidFlagValueError):
            flags.parse([])
        self.assertIn("the following arguments are required: -token", flags.output.getvalue())

    def testInvalidOctal(self):
        with self.assertRaises(InvalidFlagValueError):
            self.flags.parse(["-count", "09"])
        self.assertIn("invalid int value: '09'", self.output())

    def testHelpRendersUsageOnly(self):
        for token in ("-help", "-h", "--help"):
            with self.subTest(token=token):
                flags = make_flags()
                with self.assertRaises(HelpRequested) as context:
                    flags.parse([token, "-count", "2"])
                self.assertEqual(str(context.exception), "flag: help requested")
                self.assertTrue(flags.output.getvalue().startswith("Usage of tool:\n"))

    def testUsageHook(self):
        calls = []
        self.flags.usage_hook = lambda: calls.append("usage")
        with self.assertRaises(HelpRequested):
            self.flags.parse(["-help"])
        self.assertEqual(calls, ["usage"])
        self.assertEqual(self.output(), "")

    def testExitPolicy(self):
        flags = make_flags(ErrorHandling.EXIT)
        with self.assertRaises(SystemExit) as context:
            flags.parse(["-bogus"])
        self.assertEqual(context.exception.code, 2)

        flags = make_flags(ErrorHandling.EXIT)
        with self.assertRaises(SystemExit) as context:
            flags.parse(["-help"])
        self.assertEqual(context.exception.code, 0)

    def testInitChangesPolicyAndName(self):
        self.flags.init("renamed", ErrorHandling.EXIT)
        with self.assertRaises(SystemExit):
            self.flags.parse(["-bogus"])
        self.assertIn("Usage of renamed:\n", self.output())


class TestPrintDefaults(TestCase):
    """Flag listing layout."""

    def testLayout(self):
        flags = make_flags()
        flags.flag("x", False, "one letter")
        flags.flag("file", "out.txt", "write to `path`")
        flags.flag("mode", "fast", "speed", metavar="speed")
        flags.print_defaults()
        self.assertEqual(
            flags.output.getvalue(),
            "  -count int\n"
            "    \thow many (default 1)\n"
            "  -file path\n"
            "    \twrite to path (default \"out.txt\")\n"
            "  -mode speed\n"
            "    \tspeed (default \"fast\")\n"
            "  -name string\n"
            "    \twho\n"
            "  -ratio float\n"
            "    \thow much (default 0.5)\n"
            "  -verbose\n"
            "    \ttalk more\n"
            "  -x\tone letter\n",
        )

    def testTrueDefault(self):
        flags = FlagSet("tool")
        flags.set_output(io.StringIO())
        flags.flag("color", True, "use colors")
        flags.print_defaults()
        self.assertEqual(flags.output.getvalue(), "  -color\n    \tuse colors (default true)\n")

    def testSuppressedFlagsAreHidden(self):
        flags = FlagSet("tool")
        flags.set_output(io.StringIO())
        flags.add_argument("-secret", help=argparse.SUPPRESS)
        flags.print_defaults()
        self.assertEqual(flags.output.getvalue(), "")

    def testDefaultUsageWithoutName(self):
        flags = FlagSet()
        flags.set_output(io.StringIO())
        flags.print_usage()
        self.assertEqual(flags.output.getvalue(), "Usage:\n")


class TestParseBool(TestCase):
    def testValues(self):
        self.assertTrue(parse_bool("TRUE"))
        self.assertFalse(parse_bool("0"))
        with self.assertRaises(ValueError):
            parse_bool("yes")


class TestDeclaration(TestCase):
    def testRejectsDashedNames(self):
        with self.assertRaises(ValueError):
            FlagSet().flag("-x")
        with self.assertRaises(ValueError):
            FlagSet().flag("a=b")


if __name__ == "__main__":
    unittest.main()
