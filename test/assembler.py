"""
Argument assembler behavioral tests (compound encoding, ordering, views).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import shlex
import unittest
from unittest import TestCase

from rich.console import Console
from rich.text import Text

from ytbuilder import Assembler, Command, encode_compound, encode_list
from ytbuilder.utils import Unset


class TestEncodeCompound(TestCase):

    def testPrimaryOnly(self):
        self.assertEqual(encode_compound("deno", [None], [":"]), "deno")
        self.assertEqual(encode_compound("deno"), "deno")

    def testRuntimeAndPath(self):
        self.assertEqual(encode_compound("quickjs", ["/opt/qjs"], [":"]), "quickjs:/opt/qjs")

    def testCookieSegments(self):
        separators = ["+", ":", "::"]
        self.assertEqual(encode_compound("firefox", [None, "Profile 1", None], separators), "firefox:Profile 1")
        self.assertEqual(
            encode_compound("firefox", ["gnomekeyring", "Profile 1", "work"], separators),
            "firefox+gnomekeyring:Profile 1::work",
        )
        self.assertEqual(encode_compound("chrome", ["kwallet", None, None], separators), "chrome+kwallet")
        self.assertEqual(encode_compound("firefox", [None, None, "work"], separators), "firefox::work")

    def testSeparatorBelongsToItsPart(self):
        self.assertEqual(encode_compound("firefox", [None, "Profile 1"], [":", "::"]), "firefox::Profile 1")
        self.assertEqual(encode_compound("firefox", ["Profile 1", None], [":", "::"]), "firefox:Profile 1")

    def testUnsetIsAbsent(self):
        self.assertEqual(encode_compound("stable", [Unset], ["@"]), "stable")

    def testAbsentPrimaryOpensWithFirstPart(self):
        self.assertEqual(encode_compound(None, ["%(title)s"], [":"]), "%(title)s")
        self.assertEqual(encode_compound("after_move", ["%(title)s"], [":"]), "after_move:%(title)s")

    def testLengthMismatchRaises(self):
        with self.assertRaises(ValueError):
            encode_compound("firefox", ["a", "b"], [":"])

    def testAllAbsentRaises(self):
        with self.assertRaises(ValueError):
            encode_compound(None, [None], [":"])

    def testNonStringSegmentRaises(self):
        with self.assertRaises(TypeError):
            encode_compound(5, [], [])
        with self.assertRaises(TypeError):
            encode_compound("a", [5], [":"])


class TestEncodeList(TestCase):

    def testSequenceJoined(self):
        self.assertEqual(encode_list(["en", "ja"]), "en,ja")
        self.assertEqual(encode_list(("sponsor",)), "sponsor")

    def testStringPassesThrough(self):
        self.assertEqual(encode_list("en,ja"), "en,ja")

    def testCustomJoiner(self):
        self.assertEqual(encode_list(["a", "b"], "+"), "a+b")

    def testRejectsNonStrings(self):
        with self.assertRaises(TypeError):
            encode_list(["a", 1])
        with self.assertRaises(TypeError):
            encode_list(42)


class TestAssembler(TestCase):

    def setUp(self):
        self.assembler = Assembler("yt-dlp")

    def testEmptyCommandLineIsExecutableOnly(self):
        self.assertEqual(self.assembler.materialize_command_line(), "yt-dlp")
        self.assertEqual(self.assembler.materialize_tokens(), [])

    def testOrderIsCallOrder(self):
        self.assembler.append("--js-runtimes", "quickjs:/opt/qjs")
        self.assembler.append("--ffmpeg-location", "/opt/ffmpeg")
        self.assertEqual(
            self.assembler.materialize_tokens(),
            ["--js-runtimes", "quickjs:/opt/qjs", "--ffmpeg-location", "/opt/ffmpeg"],
        )

    def testCommandLineIsUnquoted(self):
        self.assembler.append("--cookies-from-browser", "firefox:Profile 1")
        self.assertEqual(
            self.assembler.materialize_command_line(),
            "yt-dlp --cookies-from-browser firefox:Profile 1",
        )

    def testShellLineIsQuoted(self):
        self.assembler.append("--cookies-from-browser", "firefox:Profile 1")
        line = self.assembler.materialize_shell_line()
        self.assertEqual(line, "yt-dlp --cookies-from-browser 'firefox:Profile 1'")
        self.assertEqual(shlex.split(line)[1:], self.assembler.materialize_tokens())

    def testStructuredRecord(self):
        self.assembler.append("--version")
        record = self.assembler.materialize_structured()
        self.assertIsInstance(record, Command)
        self.assertEqual(record.base_command, "yt-dlp")
        self.assertEqual(record.args, ("--version",))
        self.assertEqual(record.complete_command, "yt-dlp --version")

    def testRecordRendersThroughRich(self):
        record = self.assembler.append("--format", "best").append("https://example.com/v").materialize_structured()
        rendered = record.__rich__()
        self.assertIsInstance(rendered, Text)
        self.assertEqual(rendered.plain, "yt-dlp --format best https://example.com/v")
        console = Console(record=True, width=120, color_system=None)
        console.print(record)
        self.assertIn("yt-dlp --format best https://example.com/v", console.export_text())

    def testEmptyRecordRendersExecutableOnly(self):
        self.assertEqual(self.assembler.materialize_structured().__rich__().plain, "yt-dlp")

    def testSnapshotsAreIndependent(self):
        self.assembler.append("--help")
        tokens = self.assembler.materialize_tokens()
        tokens.append("--mutated")
        record = self.assembler.materialize_structured()
        self.assembler.append("--verbose")
        self.assertEqual(self.assembler.materialize_tokens(), ["--help", "--verbose"])
        self.assertEqual(record.args, ("--help",))

    def testMaterializingIsIdempotent(self):
        self.assembler.append("--format", "95+ba")
        self.assertEqual(self.assembler.materialize_command_line(), self.assembler.materialize_command_line())
        self.assertEqual(self.assembler.materialize_structured(), self.assembler.materialize_structured())

    def testNonStringTokenRejectedAtomically(self):
        with self.assertRaises(TypeError):
            self.assembler.append("--retries", 10)  # type: ignore[arg-type]
        self.assertEqual(self.assembler.materialize_tokens(), [])

    def testEmptyStringTokenKept(self):
        self.assembler.append("--proxy", "")
        self.assertEqual(self.assembler.materialize_tokens(), ["--proxy", ""])
        self.assertEqual(self.assembler.materialize_command_line(), "yt-dlp --proxy ")

    def testReadOnlyViews(self):
        self.assembler.append("--help")
        self.assertEqual(self.assembler.executable, "yt-dlp")
        self.assertEqual(self.assembler.tokens, ["--help"])
        self.assertEqual(len(self.assembler), 1)
        with self.assertRaises(AttributeError):
            self.assembler.tokens = []  # type: ignore[misc]

    def testExecutableMustBeString(self):
        with self.assertRaises(TypeError):
            Assembler(None)  # type: ignore[arg-type]


if __name__ == '__main__':
    unittest.main()
