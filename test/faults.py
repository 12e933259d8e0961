"""
Faults module behavioral tests (codes, messages, context, rendering, Outcome).

Conventions
- Test method names follow CamelCase per project convention.
- Rendering is checked through a recording rich Console, never by printing to a terminal.
"""

from __future__ import annotations

import copy
import unittest
from unittest import TestCase

from rich.console import Console

from ytbuilder.faults import *


def render(renderable, /):
    console = Console(record=True, width=120, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestFaultCode(TestCase):
    """Stable codes and host normalization."""

    def testCodesAreUnique(self):
        values = [code.value for code in FaultCode]
        self.assertEqual(len(values), len(set(values)))

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.ALREADY_USED.normalize(), "21101")

    def testNormalizeUsesHostMapping(self):
        main = __import__("__main__")
        previous = getattr(main, "__codes__", missing := object())
        main.__codes__ = {FaultCode.INVALID_CHOICE: "E-CHOICE"}
        try:
            self.assertEqual(FaultCode.INVALID_CHOICE.normalize(), "E-CHOICE")
        finally:
            if previous is missing:
                del main.__codes__
            else:
                main.__codes__ = previous


class TestAlreadyUsedError(TestCase):

    def testDefaultMessageNamesOption(self):
        fault = AlreadyUsedError(option="version")
        self.assertEqual(str(fault), "cannot call version more than once")
        self.assertEqual(fault.option, "version")
        self.assertEqual(fault.code, FaultCode.ALREADY_USED)

    def testExplicitMessageWins(self):
        fault = AlreadyUsedError("custom", option="url")
        self.assertEqual(str(fault), "custom")

    def testIsBuilderException(self):
        self.assertIsInstance(AlreadyUsedError(option="url"), BuilderException)
        self.assertNotIsInstance(AlreadyUsedError(option="url"), InputError)

    def testOptionsAreReadOnly(self):
        fault = AlreadyUsedError(option="url")
        with self.assertRaises(TypeError):
            fault.options["option"] = "other"  # type: ignore[index]


class TestInputError(TestCase):

    def testContextFreeMessage(self):
        fault = EmptyValueError("value cannot be empty")
        self.assertEqual(str(fault), "value cannot be empty")
        self.assertIsNone(fault.option)

    def testContextPrefixes(self):
        fault = EmptyValueError("value cannot be empty", option="js_runtime", param="path")
        self.assertEqual(str(fault), "js_runtime(path): value cannot be empty")
        fault = EmptyValueError("value cannot be empty", option="url")
        self.assertEqual(str(fault), "url: value cannot be empty")

    def testReplaceKeepsTypeAndAddsContext(self):
        fault = InvalidChoiceError("'lynx' is not one of ...", hint="choose from firefox")
        enriched = copy.replace(fault, option="cookies_from_browser", param="browser")
        self.assertIsInstance(enriched, InvalidChoiceError)
        self.assertEqual(enriched.message, fault.message)
        self.assertEqual(enriched.options["hint"], "choose from firefox")
        self.assertEqual(enriched.options["param"], "browser")
        self.assertIsNone(fault.option)

    def testRefinementsShareBase(self):
        for kind in (
                MissingValueError,
                EmptyValueError,
                InvalidTypeError,
                InvalidNumberError,
                InvalidRangeError,
                InvalidChoiceError,
        ):
            with self.subTest(kind=kind.__name__):
                self.assertTrue(issubclass(kind, InputError))
                self.assertIsInstance(kind.code, FaultCode)


class TestRendering(TestCase):

    def testHeaderMessageAndHint(self):
        output = render(AlreadyUsedError(option="help", prog="yt-dlp"))
        self.assertIn("yt-dlp", output)
        self.assertIn("21101", output)
        self.assertIn("Already Used", output)
        self.assertIn("cannot call help more than once", output)
        self.assertIn("single-use options", output)

    def testFancyPanel(self):
        output = render(InvalidRangeError("range minimum must not exceed its maximum", fancy=True))
        self.assertIn("Invalid Range", output)
        self.assertIn("range minimum must not exceed its maximum", output)

    def testPlainRenderingWithoutColors(self):
        output = render(EmptyValueError("value cannot be empty", colorful=False))
        self.assertIn("value cannot be empty", output)


class TestOutcome(TestCase):

    def testSuccess(self):
        outcome = Outcome()
        self.assertTrue(outcome.ok)
        self.assertIsNone(outcome.fault)
        self.assertIsNone(outcome.unwrap())

    def testFailureUnwrapRaises(self):
        fault = AlreadyUsedError(option="url")
        outcome = Outcome(fault)
        self.assertFalse(outcome.ok)
        with self.assertRaises(AlreadyUsedError) as context:
            outcome.unwrap()
        self.assertIs(context.exception, fault)


if __name__ == '__main__':
    unittest.main()
