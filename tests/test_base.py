import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tagfield.fields._common_types import FormContext  # noqa: E402
from tagfield.fields.base import FormField, _name_to_label  # noqa: E402
from tagfield.fields.readonly import ReadonlyField  # noqa: E402
from tagfield.records import Record  # noqa: E402


class FormFieldTests(unittest.TestCase):
    def setUp(self) -> None:
        self.field = FormField("BlogTitle", value="Hello")

    def test_title_from_name(self):
        self.assertEqual(self.field.title, "Blog Title")
        self.assertEqual(_name_to_label("blog_title"), "Blog title")
        self.assertEqual(FormField("Name", "Custom").title, "Custom")

    def test_logger_property(self):
        self.assertEqual(self.field._logger.name, "tagfield.fields.base")

    def test_save_into_record_and_mapping(self):
        record = Record()
        self.field.save_into(record)
        self.assertEqual(record.BlogTitle, "Hello")
        data: dict[str, object] = {}
        self.field.save_into(data)
        self.assertEqual(data, {"BlogTitle": "Hello"})

    def test_get_record_from_context(self):
        record = Record()
        self.assertIsNone(self.field.get_record())
        self.assertIs(self.field.get_record(FormContext(record=record)), record)

    def test_link(self):
        self.assertEqual(self.field.link(), "field/BlogTitle")
        context = FormContext(link="/admin/EditForm")
        self.assertEqual(self.field.link(context, "suggest"), "/admin/EditForm/field/BlogTitle/suggest")

    def test_extra_classes_deduplicated(self):
        self.field.add_extra_class("a b", "b").add_extra_class("c")
        self.assertEqual(self.field.extra_class(), "a b c")

    def test_html_id(self):
        self.assertEqual(FormField("Tags[0]").html_id(), "Tags_0_")

    def test_attributes_html(self):
        rendered = FormField.attributes_html(
            {"name": "a&b", "multiple": True, "disabled": False, "class": "", "data-x": '"q"'}
        )
        self.assertEqual(rendered, 'name="a&amp;b" multiple data-x="&quot;q&quot;"')

    def test_schema_defaults(self):
        schema = self.field.to_schema()
        self.assertEqual(schema["name"], "BlogTitle")
        self.assertEqual(schema["holderId"], "BlogTitle_Holder")
        self.assertEqual(schema["title"], "Blog Title")
        self.assertFalse(schema["disabled"])
        self.assertIsNone(schema["component"])

    def test_render_not_implemented(self):
        with self.assertRaises(NotImplementedError):
            self.field.render()

    def test_readonly_view(self):
        self.field.add_extra_class("wide")
        view = self.field.to_readonly_view()
        self.assertIsInstance(view, ReadonlyField)
        self.assertEqual(view.value, "Hello")
        self.assertEqual(view.extra_class(), "wide")


class ReadonlyFieldTests(unittest.TestCase):
    def test_render_escapes_value(self):
        field = ReadonlyField("Tags", value="<b>, c")
        self.assertEqual(field.render(), '<span id="Tags" class="readonly">&lt;b&gt;, c</span>')

    def test_render_empty(self):
        self.assertIn("(none)", ReadonlyField("Tags").render())

    def test_is_readonly(self):
        field = ReadonlyField("Tags", value="x")
        self.assertTrue(field.readonly)
        self.assertIs(field.to_readonly_view(), field)
        self.assertTrue(field.to_schema()["readOnly"])


if __name__ == "__main__":
    unittest.main()
