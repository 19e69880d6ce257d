"""
Resolver behavioral tests (strict lookup and the forgiving cascade).

Scope
- find_command(): exact names only, declared order.
- find_nearest_command(): exact, unique prefix, unique case-insensitive
  prefix, then close-and-unambiguous edit distance.
- distance(): insertions and deletions cost 1, substitutions 2.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from subcommands import Application, Command, find_command, find_nearest_command, section
from subcommands.resolver import distance


def make_app(*usage_lines, sections=()):
    commands = [Command(line) for line in usage_lines]
    commands.extend(section(title) for title in sections)
    return Application("App", "Title", commands), commands


class TestFindCommand(TestCase):
    """find_command() is a strict, exact lookup."""

    def setUp(self):
        self.app, self.commands = make_app("Fo", "Foo bar", "LongCommand")

    def testExactNames(self):
        self.assertIs(find_command(self.app, "Fo"), self.commands[0])
        self.assertIs(find_command(self.app, "Foo"), self.commands[1])
        self.assertIs(find_command(self.app, "LongCommand"), self.commands[2])

    def testPrefixIsNotEnough(self):
        self.assertIsNone(find_command(self.app, "F"))
        self.assertIsNone(find_command(self.app, "LongC"))

    def testCaseMatters(self):
        self.assertIsNone(find_command(self.app, "fo"))
        self.assertIsNone(find_command(self.app, "foo"))

    def testSectionsAreScanned(self):
        app = Application("App", "Title", [section("Title.")])
        # a section has an empty name; only an empty token matches it
        self.assertIs(find_command(app, ""), app.commands[0])


class TestFindNearestCommand(TestCase):
    """find_nearest_command() cascade."""

    def setUp(self):
        self.app, self.commands = make_app("Fo", "Foo", "LongCommand", "LargCommand", sections=("bar",))
        self.fo, self.foo, self.long, self.larg, _ = self.commands

    def testExactNames(self):
        self.assertIs(find_nearest_command(self.app, "Fo"), self.fo)
        self.assertIs(find_nearest_command(self.app, "Foo"), self.foo)
        self.assertIs(find_nearest_command(self.app, "LongCommand"), self.long)

    def testExactWinsOverPrefix(self):
        # "Fo" is also a prefix of "Foo"
        self.assertIs(find_nearest_command(self.app, "Fo"), self.fo)

    def testUniquePrefix(self):
        self.assertIs(find_nearest_command(self.app, "Lo"), self.long)
        self.assertIs(find_nearest_command(self.app, "La"), self.larg)

    def testAmbiguousPrefix(self):
        self.assertIsNone(find_nearest_command(self.app, "F"))
        self.assertIsNone(find_nearest_command(self.app, "L"))

    def testCaseInsensitivePrefix(self):
        self.assertIsNone(find_nearest_command(self.app, "fo"))
        self.assertIs(find_nearest_command(self.app, "foo"), self.foo)
        self.assertIs(find_nearest_command(self.app, "longcommand"), self.long)
        self.assertIs(find_nearest_command(self.app, "longc"), self.long)

    def testDistanceTooCloseBetweenCandidates(self):
        self.assertIsNone(find_nearest_command(self.app, "Fof"))
        self.assertIsNone(find_nearest_command(self.app, "LangCommand"))

    def testDistanceUnambiguous(self):
        self.assertIs(find_nearest_command(self.app, "LongCommandd"), self.long)
        self.assertIs(find_nearest_command(self.app, "LongCmomand"), self.long)
        self.assertIs(find_nearest_command(self.app, "ongCommand"), self.long)

    def testDistanceTooFar(self):
        self.assertIsNone(find_nearest_command(self.app, "Unrelated"))

    def testSectionsNeverResolve(self):
        self.assertIsNone(find_nearest_command(self.app, "bar"))
        self.assertIsNone(find_nearest_command(self.app, ""))

    def testSingleCommandWithinReach(self):
        app, (only,) = make_app("status")
        self.assertIs(find_nearest_command(app, "statsu"), only)
        self.assertIsNone(find_nearest_command(app, "commit"))

    def testEmptyApplication(self):
        app, _ = make_app()
        self.assertIsNone(find_nearest_command(app, "anything"))


class TestDistance(TestCase):
    """Weighted edit distance."""

    def testIdentity(self):
        self.assertEqual(distance("LongCommand", "LongCommand"), 0)

    def testInsertionAndDeletion(self):
        self.assertEqual(distance("Fo", "Foo"), 1)
        self.assertEqual(distance("Foo", "Fo"), 1)

    def testSubstitutionCountsTwo(self):
        self.assertEqual(distance("Foo", "Fof"), 2)
        self.assertEqual(distance("LongCommand", "LangCommand"), 2)

    def testTransposition(self):
        self.assertEqual(distance("LongCommand", "LongCmomand"), 2)


if __name__ == "__main__":
    unittest.main()
