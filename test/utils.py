"""
Tests for the internal helpers.

This module verifies:
- The Unset sentinel: singleton identity, falsy semantics, copying and pickling,
  finality, and PEP 604 unions in isinstance checks.
- coalesce(), rename(), mirror() and stringify().
"""
import copy
import pickle
import unittest
from threading import Thread, Lock
from unittest import TestCase

from ytbuilder.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `UnsetType` singleton.
    """

    def testSingleton(self) -> None:
        """
        The constructor returns the same object reference on every call.
        """
        self.assertIs(UnsetType(), UnsetType())
        self.assertIs(Unset, UnsetType())

    def testFalsyButDistinct(self) -> None:
        """
        Unset is falsy but never equal to other falsy values.
        """
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertNotEqual(Unset, None)
        self.assertNotEqual(Unset, 0)
        self.assertNotEqual(Unset, "")

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testCopyAndPickleKeepIdentity(self) -> None:
        """
        Copy/deepcopy/pickle round-trips preserve identity.
        """
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testUnionInIsinstance(self) -> None:
        """
        `str | Unset` can be used directly in isinstance checks.
        """
        self.assertTrue(isinstance("x", str | Unset))
        self.assertTrue(isinstance(Unset, str | Unset))
        self.assertFalse(isinstance(3, str | Unset))

    def testThreadSafety(self) -> None:
        """
        Concurrent constructions all observe the same instance.
        """
        results = []
        lock = Lock()

        def worker():
            instance = UnsetType()
            with lock:
                results.append(instance)

        threads = [Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(results), 16)
        for instance in results:
            self.assertIs(instance, Unset)

    def testFinalClass(self) -> None:
        """
        The class is final: attempts to subclass must fail with TypeError.
        """
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})


class HelpersTest(TestCase):
    """Behavioral tests for coalesce, rename, mirror and stringify."""

    def testCoalesceReplacesOnlyUnset(self):
        self.assertEqual(coalesce(Unset, "yt-dlp"), "yt-dlp")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "yt-dlp"))
        self.assertEqual(coalesce("", "yt-dlp"), "")
        self.assertEqual(coalesce(0, 5), 0)

    def testRenameDirectForm(self):
        def function():
            pass

        self.assertIs(rename(function, "renamed"), function)
        self.assertEqual(function.__name__, "renamed")
        self.assertEqual(function.__qualname__, "renamed")

    def testRenameDecoratorForm(self):
        @rename("cookies_from_browser")
        def function():
            pass

        self.assertEqual(function.__name__, "cookies_from_browser")

    def testRenameRejectsBadArguments(self):
        with self.assertRaises(TypeError):
            rename(42, "name")
        with self.assertRaises(TypeError):
            rename(lambda: None, 42)
        with self.assertRaises(TypeError):
            rename()
        with self.assertRaises(TypeError):
            rename("a")(42)

    def testMirrorReturnsCopies(self):
        class Holder:
            tokens = mirror("tokens")
            pair = mirror("pair")

            def __init__(self):
                self._tokens = ["--flag"]
                self._pair = ("a", "b")

        holder = Holder()
        tokens = holder.tokens
        tokens.append("mutated")
        self.assertEqual(holder.tokens, ["--flag"])
        self.assertIsNot(holder.tokens, holder._tokens)
        self.assertEqual(holder.pair, ("a", "b"))
        self.assertIsInstance(holder.pair, tuple)

    def testMirrorIsReadOnly(self):
        class Holder:
            tokens = mirror("tokens")

            def __init__(self):
                self._tokens = []

        with self.assertRaises(AttributeError):
            Holder().tokens = ["x"]

    def testMirrorRejectsNonString(self):
        with self.assertRaises(TypeError):
            mirror(1)

    def testStringifyIntegralFloats(self):
        self.assertEqual(stringify(5.0), "5")
        self.assertEqual(stringify(10), "10")
        self.assertEqual(stringify(2.5), "2.5")
        self.assertEqual(stringify(0), "0")

    def testStringifyRejects(self):
        with self.assertRaises(TypeError):
            stringify(True)
        with self.assertRaises(TypeError):
            stringify("5")
        with self.assertRaises(ValueError):
            stringify(float("inf"))
        with self.assertRaises(ValueError):
            stringify(float("nan"))


if __name__ == '__main__':
    unittest.main()
