"""Non-editable presentation of a field value."""

from __future__ import annotations

import html
from typing import Any, Optional

from ._common_types import FormContext
from .base import FormField


class ReadonlyField(FormField):
    schema_component = "ReadonlyField"
    schema_data_type = "Structural"

    def __init__(self, name: str, title: Optional[str] = None, value: Any = None) -> None:
        super().__init__(name, title, value)
        self.readonly = True

    def display_value(self) -> str:
        if self.value is None or self.value == "":
            return "(none)"
        return str(self.value)

    def render(self, context: Optional[FormContext] = None) -> str:
        attributes = {
            "id": self.html_id(),
            "class": " ".join(filter(None, ["readonly", self.extra_class()])),
        }
        return f"<span {self.attributes_html(attributes)}>{html.escape(self.display_value())}</span>"

    def to_readonly_view(self) -> "ReadonlyField":
        return self
