"""
Call-state tracker behavioral tests.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from ytbuilder import AlreadyUsedError, CallTracker


class TestCallTracker(TestCase):

    def setUp(self):
        self.tracker = CallTracker()

    def testFreshTrackerIsEmpty(self):
        self.assertEqual(len(self.tracker), 0)
        self.assertFalse(self.tracker.used("url"))
        self.assertNotIn("url", self.tracker)

    def testCheckAndMarkOnce(self):
        self.tracker.check_and_mark("url")
        self.assertTrue(self.tracker.used("url"))
        self.assertIn("url", self.tracker)

    def testSecondCheckAndMarkRaises(self):
        self.tracker.check_and_mark("version")
        with self.assertRaises(AlreadyUsedError) as context:
            self.tracker.check_and_mark("version")
        self.assertEqual(context.exception.option, "version")
        self.assertEqual(str(context.exception), "cannot call version more than once")

    def testFailedCheckDoesNotMutate(self):
        self.tracker.check_and_mark("help")
        before = dict(self.tracker.usage)
        with self.assertRaises(AlreadyUsedError):
            self.tracker.check_and_mark("help")
        self.assertEqual(dict(self.tracker.usage), before)

    def testCheckNeverMarks(self):
        self.tracker.check("format")
        self.tracker.check("format")
        self.assertFalse(self.tracker.used("format"))

    def testOptionsAreIndependent(self):
        self.tracker.check_and_mark("format")
        self.tracker.check_and_mark("output_na_placeholder")
        self.assertEqual(set(self.tracker.usage), {"format", "output_na_placeholder"})

    def testUsageIsReadOnlySnapshot(self):
        self.tracker.mark("url")
        usage = self.tracker.usage
        with self.assertRaises(TypeError):
            usage["other"] = True  # type: ignore[index]
        self.tracker.mark("format")
        self.assertNotIn("format", usage)

    def testIdentifierMustBeString(self):
        with self.assertRaises(TypeError):
            self.tracker.check_and_mark(42)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            self.tracker.mark(None)  # type: ignore[arg-type]


if __name__ == '__main__':
    unittest.main()
