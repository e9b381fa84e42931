import logging
import sys
import unittest
from pathlib import Path

from fastapi import FastAPI
from fastapi.testclient import TestClient

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from tagfield.config import TagFieldConfig  # noqa: E402
from tagfield.fields._common_types import FormContext  # noqa: E402
from tagfield.fields.string_tag_field import StringTagField  # noqa: E402
from tagfield.web import create_suggest_router  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)

FORM_LINK = "/StringTagFieldTestController/StringTagFieldTestForm"


class SuggestRouteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.field = StringTagField(
            "Tags",
            source=["Tag1", "Tag2"],
            config=TagFieldConfig(should_lazy_load=True),
        )
        app = FastAPI()
        app.include_router(create_suggest_router({"Tags": self.field}, prefix=FORM_LINK))
        self.client = TestClient(app)

    def test_partial_match(self):
        response = self.client.get(f"{FORM_LINK}/field/Tags/suggest", params={"term": "Tag"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["content-type"], "application/json")
        self.assertEqual(
            response.json(),
            {"items": [{"id": "Tag1", "text": "Tag1"}, {"id": "Tag2", "text": "Tag2"}]},
        )

    def test_case_insensitive_match(self):
        response = self.client.get(f"{FORM_LINK}/field/Tags/suggest", params={"term": "TAG1"})
        self.assertEqual(response.json(), {"items": [{"id": "Tag1", "text": "Tag1"}]})

    def test_no_match(self):
        response = self.client.get(f"{FORM_LINK}/field/Tags/suggest", params={"term": "unknown"})
        self.assertEqual(response.json(), {"items": []})

    def test_schema_option_url_is_routed(self):
        option_url = self.field.to_schema(FormContext(link=FORM_LINK))["optionUrl"]
        response = self.client.get(option_url, params={"term": "2"})
        self.assertEqual(response.json(), {"items": [{"id": "Tag2", "text": "Tag2"}]})

    def test_unknown_field(self):
        with self.assertLogs("tagfield.web", level="WARNING"):
            response = self.client.get(f"{FORM_LINK}/field/Missing/suggest")
        self.assertEqual(response.status_code, 404)


class FactoryLookupTests(unittest.TestCase):
    def test_callable_builds_field_per_request(self):
        built = []

        def build(name):
            if name != "Tags":
                return None
            field = StringTagField(name, source=["a", "b"])
            built.append(field)
            return field

        app = FastAPI()
        app.include_router(create_suggest_router(build))
        client = TestClient(app)
        client.get("/field/Tags/suggest")
        response = client.get("/field/Tags/suggest", params={"term": "b"})
        self.assertEqual(response.json(), {"items": [{"id": "b", "text": "b"}]})
        self.assertEqual(len(built), 2)
        self.assertIsNot(built[0], built[1])


if __name__ == "__main__":
    unittest.main()
