"""Demo that edits a record's tags and queries suggestions in-process.

Run with the virtual environment activated::

    python examples/demo_tag_field.py
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from tagfield import FormContext, Record, RecordList, StringTagField, TagFieldConfig

logging.basicConfig(level=logging.INFO)

FORM_LINK = "/admin/posts/EditForm"


def main() -> None:
    post = Record(Title="Release notes", Tags="python,release")
    tags = RecordList(Record, [Record(Title=name) for name in ("python", "release", "packaging", "pytest")])
    context = FormContext(record=post, link=FORM_LINK)

    field = StringTagField(
        "Tags",
        source=tags,
        source_list=tags,
        config=TagFieldConfig(should_lazy_load=True, lazy_load_item_limit=5),
    )
    field.set_value(None, field.get_record(context))
    print(f"Loaded tags: {field.value}")

    print("\nSchema data:")
    pprint(field.to_schema(context))

    print(f"\nSuggest URL: {field.get_suggest_url(context)}")
    print(f"Suggestions for 'py': {field.get_tags('py')}")

    field.get_or_create_tag("docs")
    field.set_value(field.value + ["docs"])
    field.save_into(post)
    post.write()
    print(f"\nSaved column: {post.Tags!r}")
    print(f"Read-only view: {field.to_readonly_view().value}")


if __name__ == "__main__":
    main()
