"""Tests for FormRenderer, sinks, configuration and the module-level API."""

import io
import unittest
from unittest.mock import patch

import pyformkit
from pyformkit import (
    BufferSink,
    ControlDescriptor,
    FormRenderer,
    RenderConfig,
    StreamSink,
    UnknownControlKind,
)


class FormRendererTest(unittest.TestCase):
    """Tests for generic dispatch and the output decision."""

    def test_render_descriptor(self):
        renderer = FormRenderer(sink=BufferSink())
        fragment = renderer.render(
            ControlDescriptor("wrap", "x", {}, {"in": "em", "return": True})
        )
        self.assertEqual(str(fragment), "<em>x</em>")

    def test_render_unknown_kind(self):
        renderer = FormRenderer(sink=BufferSink())
        with self.assertRaises(UnknownControlKind):
            renderer.render(ControlDescriptor("nope", "x"))

    def test_malformed_options_are_tolerated(self):
        sink = BufferSink()
        renderer = FormRenderer(sink=sink)
        with self.assertLogs("pyformkit.rendering.attributes", "WARNING"):
            self.assertIsNone(renderer.input("a", 42, "junk"))
        self.assertEqual(sink.getvalue(), '<input name="a" type="text">')

    def test_stream_sink(self):
        buf = io.StringIO()
        renderer = FormRenderer(sink=StreamSink(buf))
        renderer.wrap("x")
        renderer.wrap("y")
        self.assertEqual(buf.getvalue(), "<div>x</div><div>y</div>")

    def test_default_sink_is_stdout(self):
        renderer = FormRenderer()
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            renderer.input("a")
        self.assertEqual(out.getvalue(), '<input name="a" type="text">')

    def test_debug_logging(self):
        renderer = FormRenderer(RenderConfig(debug=True), BufferSink())
        with self.assertLogs("pyformkit.renderer", "DEBUG") as logs:
            renderer.wrap("x", None, {"return": True})
        self.assertTrue(any("<div>x</div>" in line for line in logs.output))


class BufferSinkTest(unittest.TestCase):
    def test_collect_and_clear(self):
        sink = BufferSink()
        sink.write("a")
        sink.write("b")
        self.assertEqual(sink.getvalue(), "ab")
        sink.clear()
        self.assertEqual(sink.getvalue(), "")


class RenderConfigTest(unittest.TestCase):
    """Tests for RenderConfig."""

    def test_from_mapping(self):
        config = RenderConfig.from_mapping(
            {"editor_rows": 8, "editor_id_suffix_range": [1, 1], "bogus": True}
        )
        self.assertEqual(config.editor_rows, 8)
        self.assertEqual(config.editor_id_suffix_range, (1, 1))
        self.assertFalse(hasattr(config, "bogus"))

    def test_editor_field_id(self):
        config = RenderConfig(editor_id_suffix_range=(7, 7))
        self.assertEqual(config.editor_field_id("a[b][c]"), "a_b__c_7")

    def test_editor_field_id_range(self):
        suffix = RenderConfig().editor_field_id("x")[1:]
        self.assertTrue(100 <= int(suffix) <= 999)

    def test_colorpicker_pattern(self):
        regex = RenderConfig().colorpicker_regex
        self.assertIsNotNone(regex.search("link_color"))
        self.assertIsNotNone(regex.search("opts[link_color]"))
        self.assertIsNone(regex.search("color_scheme"))


class ModuleApiTest(unittest.TestCase):
    """Tests for the module-level helpers."""

    def setUp(self):
        self.sink = BufferSink()
        pyformkit.set_default_renderer(FormRenderer(sink=self.sink))

    def tearDown(self):
        pyformkit.set_default_renderer(None)

    def test_input_returns_string(self):
        out = pyformkit.input("foo", {"type": "text", "id": "x"}, {"return": True})
        self.assertEqual(out, '<input id="x" name="foo" type="text">')

    def test_helpers_print_by_default(self):
        self.assertIsNone(pyformkit.wrap("a"))
        self.assertIsNone(pyformkit.textarea("t"))
        self.assertIsNone(pyformkit.select("s"))
        self.assertIsNone(pyformkit.fieldset("F", [["input", "i"]]))
        self.assertEqual(
            self.sink.getvalue(),
            '<div>a</div><textarea name="t"></textarea><select name="s"></select>'
            '<fieldset><legend>F</legend><input name="i" type="text"></fieldset>',
        )

    def test_default_renderer_is_shared(self):
        pyformkit.set_default_renderer(None)
        self.assertIs(pyformkit.default_renderer(), pyformkit.default_renderer())

    def test_get_var(self):
        self.assertIsNone(pyformkit.get_var("a", {"a": None}, 1))
        self.assertEqual(pyformkit.get_var("b", {"a": 1}, 2), 2)
        self.assertEqual(pyformkit.get_var("a", "not a mapping", 3), 3)


if __name__ == "__main__":
    unittest.main()
