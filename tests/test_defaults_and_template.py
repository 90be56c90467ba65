"""Tests for the defaults merger and the template formatter."""

import unittest

from pyformkit.rendering.defaults import (
    INPUT_ATTRIBUTE_DEFAULTS,
    SELECT_OPTION_DEFAULTS,
    merge_defaults,
)
from pyformkit.rendering.template import format_template


class MergeDefaultsTest(unittest.TestCase):
    """Tests for merge_defaults."""

    def test_missing_keys_take_defaults(self):
        merged = merge_defaults(INPUT_ATTRIBUTE_DEFAULTS, {"id": "x"})
        self.assertEqual(merged, {"type": "text", "id": "x", "value": ""})

    def test_present_but_empty_overrides_win(self):
        merged = merge_defaults({"type": "text", "in": "div"}, {"type": "", "in": None})
        self.assertEqual(merged["type"], "")
        self.assertIsNone(merged["in"])

    def test_merge_is_shallow(self):
        merged = merge_defaults({"options": {"a": 1}}, {"options": {"b": 2}})
        self.assertEqual(merged["options"], {"b": 2})

    def test_defaults_are_not_mutated(self):
        merge_defaults(SELECT_OPTION_DEFAULTS, {"default": "x", "extra": 1})
        self.assertEqual(SELECT_OPTION_DEFAULTS["default"], "")
        self.assertNotIn("extra", SELECT_OPTION_DEFAULTS)


class FormatTemplateTest(unittest.TestCase):
    """Tests for format_template."""

    def test_identity_without_tokens(self):
        self.assertEqual(format_template("plain text", {"input": "x"}), "plain text")

    def test_no_template_returns_element(self):
        self.assertEqual(format_template(None, {"input": "x"}, "<input>"), "<input>")
        self.assertEqual(format_template("", {"input": "x"}, "<input>"), "<input>")

    def test_substitution(self):
        out = format_template("<p>:name=:value</p>", {"name": "n", "value": "v"})
        self.assertEqual(out, "<p>n=v</p>")

    def test_replacements_are_not_rescanned(self):
        out = format_template(":a-:b", {"a": ":b", "b": "B"})
        self.assertEqual(out, ":b-B")

    def test_unknown_tokens_pass_through(self):
        self.assertEqual(format_template(":x :name", {"name": "n"}), ":x n")

    def test_longer_token_wins(self):
        out = format_template(":values/:value", {"value": "V", "values": "VS"})
        self.assertEqual(out, "VS/V")

    def test_prefixed_names_and_none_values(self):
        self.assertEqual(format_template("[:id]", {":id": None}), "[]")

    def test_empty_placeholder_map(self):
        self.assertEqual(format_template(":input", {}), ":input")


if __name__ == "__main__":
    unittest.main()
