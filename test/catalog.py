"""
Option catalog consistency tests.

Conventions
- Test method names follow CamelCase per project convention.
- These tests pin the single-use/repeatable partition; changing it is a behavior change.
"""

from __future__ import annotations

import keyword
import unittest
from unittest import TestCase

from ytbuilder import Cardinal, Flag, Option
from ytbuilder.catalog import *

REPEATABLE = {
    "use_extractors",
    "config_locations",
    "plugin_dirs",
    "js_runtime",
    "remote_component",
    "color",
    "alias",
    "preset_alias",
    "match_filters",
    "break_match_filters",
    "retry_sleep",
    "download_sections",
    "downloader",
    "downloader_args",
    "paths",
    "output",
    "print",
    "print_to_file",
    "progress_template",
    "add_headers",
    "postprocessor_args",
    "parse_metadata",
    "replace_in_metadata",
    "exec",
    "remove_chapters",
    "use_postprocessor",
    "extractor_args",
}


class TestCatalogShape(TestCase):

    def testEntryCounts(self):
        self.assertEqual(len(CATALOG), 249)
        self.assertEqual(sum(isinstance(spec, Flag) for spec in CATALOG.values()), 150)
        self.assertEqual(sum(isinstance(spec, Option) for spec in CATALOG.values()), 98)

    def testUrlIsTheOnlyPositional(self):
        positional = [name for name, spec in CATALOG.items() if isinstance(spec, Cardinal)]
        self.assertEqual(positional, ["url"])
        self.assertFalse(CATALOG["url"].repeatable)

    def testCatalogIsReadOnly(self):
        with self.assertRaises(TypeError):
            CATALOG["bogus"] = Flag("--bogus")  # type: ignore[index]

    def testMethodNamesAreUsable(self):
        for name in CATALOG:
            with self.subTest(name=name):
                self.assertTrue(name.isidentifier())
                self.assertFalse(keyword.iskeyword(name))
                self.assertFalse(name.startswith("_"))

    def testFlagTextsAreUnique(self):
        flags = [spec.flag for spec in CATALOG.values() if spec.flag is not None]
        self.assertEqual(len(flags), len(set(flags)))

    def testGroupsAreKnownAndUsed(self):
        used = {spec.group for spec in CATALOG.values()}
        self.assertEqual(used, set(GROUPS))

    def testEveryEntryIsDescribed(self):
        for name, spec in CATALOG.items():
            with self.subTest(name=name):
                self.assertTrue(spec.descr)


class TestSingleUsePolicy(TestCase):

    def testRepeatablePartition(self):
        repeatable = {name for name, spec in CATALOG.items() if spec.repeatable}
        self.assertEqual(repeatable, REPEATABLE)

    def testVersionAndUpdateTargetsAreSingleUse(self):
        for name in ("help", "version", "update", "no_update", "update_to", "format", "output_na_placeholder"):
            with self.subTest(name=name):
                self.assertFalse(CATALOG[name].repeatable)


class TestFlagTexts(TestCase):

    def testRenamedMethods(self):
        self.assertEqual(CATALOG["js_runtime"].flag, "--js-runtimes")
        self.assertEqual(CATALOG["remote_component"].flag, "--remote-components")
        self.assertEqual(CATALOG["continue_"].flag, "--continue")
        self.assertEqual(CATALOG["date_before"].flag, "--datebefore")
        self.assertEqual(CATALOG["date_after"].flag, "--dateafter")

    def testDefaultNamingRule(self):
        for name in ("write_info_json", "no_update", "ffmpeg_location", "cookies_from_browser", "sponsorblock_remove"):
            with self.subTest(name=name):
                self.assertEqual(CATALOG[name].flag, "--" + name.replace("_", "-"))


class TestEnumerations(TestCase):

    def testClosedSets(self):
        self.assertEqual(JS_RUNTIMES, ("deno", "node", "quickjs", "bun"))
        self.assertIn("firefox", COOKIE_BROWSERS)
        self.assertIn("gnomekeyring", KEYRINGS)
        self.assertEqual(RELEASE_CHANNELS, ("stable", "nightly", "master"))
        self.assertIn("after_move", PRINT_WHEN)
        self.assertIn("home", PATH_TYPES)

    def testValuesAreUnique(self):
        for enumeration in (
                JS_RUNTIMES,
                COOKIE_BROWSERS,
                KEYRINGS,
                RELEASE_CHANNELS,
                REMOTE_COMPONENTS,
                RETRY_TYPES,
                DOWNLOADER_PROTOCOLS,
                PATH_TYPES,
                PRINT_WHEN,
                PROGRESS_TEMPLATE_TYPES,
                POSTPROCESSOR_WHEN,
                COLOR_POLICIES,
                COLOR_STREAMS,
                PRESET_ALIASES,
                CONCAT_POLICIES,
                FIXUP_POLICIES,
                SUBTITLE_CONVERSIONS,
        ):
            self.assertEqual(len(enumeration), len(set(enumeration)))

    def testChoicesAreWired(self):
        self.assertEqual(CATALOG["js_runtime"].params[0].choices, JS_RUNTIMES)
        self.assertEqual(CATALOG["cookies_from_browser"].params[1].choices, KEYRINGS)
        self.assertEqual(CATALOG["update_to"].params[0].choices, RELEASE_CHANNELS)


if __name__ == '__main__':
    unittest.main()
