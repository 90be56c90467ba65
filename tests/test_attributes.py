"""Tests for attribute serialization and option-set coercion."""

import unittest

from pyformkit.rendering.attributes import (
    coerce_option_set,
    is_empty_value,
    open_tag,
    serialize_attributes,
)


class SerializeAttributesTest(unittest.TestCase):
    """Tests for serialize_attributes."""

    def test_keys_are_sorted(self):
        out = serialize_attributes({"type": "text", "name": "a", "id": "x"})
        self.assertEqual(out, 'id="x" name="a" type="text"')

    def test_insertion_order_does_not_matter(self):
        a = serialize_attributes({"b": "2", "a": "1", "c": "3"})
        b = serialize_attributes({"c": "3", "a": "1", "b": "2"})
        self.assertEqual(a, b)

    def test_empty_values_are_suppressed(self):
        out = serialize_attributes({"a": "", "b": None, "c": False, "d": "x"})
        self.assertEqual(out, 'd="x"')

    def test_zero_and_true_are_rendered(self):
        self.assertEqual(serialize_attributes({"tabindex": 0}), 'tabindex="0"')
        self.assertEqual(serialize_attributes({"data-on": True}), 'data-on="1"')

    def test_boolean_attribute_is_minimized(self):
        out = serialize_attributes({"value": "g", "selected": "selected"})
        self.assertEqual(out, 'selected value="g"')

    def test_only_boolean_attributes_are_minimized(self):
        out = serialize_attributes(
            {"name": "name", "value": "value", "id": "id", "checked": "checked"}
        )
        self.assertEqual(out, 'checked id="id" name="name" value="value"')

    def test_values_are_not_escaped(self):
        out = serialize_attributes({"value": 'a"b<c'})
        self.assertEqual(out, 'value="a"b<c"')

    def test_empty_map(self):
        self.assertEqual(serialize_attributes({}), "")
        self.assertEqual(serialize_attributes(None), "")
        self.assertEqual(serialize_attributes({"id": ""}), "")

    def test_each_key_appears_once(self):
        out = serialize_attributes({"id": "x", "name": "n", "class": "c"})
        for key in ("id", "name", "class"):
            self.assertEqual(out.count(f'{key}="'), 1)
        self.assertEqual(out, out.strip())


class OpenTagTest(unittest.TestCase):
    def test_no_trailing_space_without_attributes(self):
        self.assertEqual(open_tag("select", {"id": ""}), "<select>")

    def test_with_attributes(self):
        self.assertEqual(open_tag("div", {"class": "x"}), '<div class="x">')


class EmptinessTest(unittest.TestCase):
    def test_predicate(self):
        self.assertTrue(is_empty_value(None))
        self.assertTrue(is_empty_value(False))
        self.assertTrue(is_empty_value(""))
        self.assertFalse(is_empty_value(0))
        self.assertFalse(is_empty_value("0"))
        self.assertFalse(is_empty_value(True))


class CoerceOptionSetTest(unittest.TestCase):
    def test_omitted_values_become_empty(self):
        self.assertEqual(coerce_option_set(None), {})
        self.assertEqual(coerce_option_set(""), {})
        self.assertEqual(coerce_option_set([]), {})

    def test_mapping_is_copied(self):
        original = {"a": 1}
        out = coerce_option_set(original)
        self.assertEqual(out, original)
        self.assertIsNot(out, original)

    def test_malformed_value_is_logged_and_replaced(self):
        with self.assertLogs("pyformkit.rendering.attributes", "WARNING") as logs:
            out = coerce_option_set("junk", "attributes")
        self.assertEqual(out, {})
        self.assertIn("formkit.options.malformed", logs.output[0])
        self.assertIn("attributes", logs.output[0])


if __name__ == "__main__":
    unittest.main()
