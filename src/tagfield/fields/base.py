"""Base form field helpers."""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, Optional

from ..utils import join_links
from ._common_types import FormContext

if TYPE_CHECKING:  # pragma: no cover
    from .readonly import ReadonlyField


def _name_to_label(name: str) -> str:
    """Turn ``"BlogTags"`` or ``"blog_tags"`` into ``"Blog Tags"`` / ``"Blog tags"``."""
    label = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", name).replace("_", " ").strip()
    return label[:1].upper() + label[1:]


def _assign_column(record: Any, column: str, value: Any) -> None:
    if isinstance(record, MutableMapping):
        record[column] = value
    else:
        setattr(record, column, value)


class FormField:
    """Capability interface shared by form fields.

    Subclasses provide ``render``; everything else has a working default
    built on ``set_value`` and ``data_value``.
    """

    schema_component: Optional[str] = None
    schema_data_type = "Text"
    input_type = "text"

    def __init__(self, name: str, title: Optional[str] = None, value: Any = None) -> None:
        self.name = name
        self.title = title if title is not None else _name_to_label(name)
        self.disabled = False
        self.readonly = False
        self.auto_focus = False
        self._extra_classes: list[str] = []
        self.value: Any = None
        self.set_value(value)

    @property
    def _logger(self) -> logging.Logger:
        return logging.getLogger(type(self).__module__)

    # --- Value --- #
    def set_value(self, value: Any, source: Any = None) -> "FormField":
        self.value = value
        return self

    def data_value(self) -> Any:
        return self.value

    def save_into(self, record: Any) -> None:
        """Assign ``data_value()`` to the record column named after the field.

        The record is not written; persisting it is up to the caller.
        """
        _assign_column(record, self.name, self.data_value())

    def get_record(self, context: Optional[FormContext] = None) -> Optional[Any]:
        if context is not None:
            return context.record
        return None

    # --- Presentation --- #
    def html_id(self) -> str:
        return re.sub(r"[^A-Za-z0-9_-]", "_", self.name)

    def add_extra_class(self, *classes: str) -> "FormField":
        for css_class in " ".join(classes).split():
            if css_class not in self._extra_classes:
                self._extra_classes.append(css_class)
        return self

    def extra_class(self) -> str:
        return " ".join(self._extra_classes)

    def link(self, context: Optional[FormContext] = None, action: Optional[str] = None) -> str:
        """URL of this field within its form, optionally for an action."""
        form_link = context.link if context is not None else ""
        return join_links(form_link, "field", self.name, action)

    def get_attributes(self, context: Optional[FormContext] = None) -> dict[str, Any]:
        return {
            "type": self.input_type,
            "name": self.name,
            "class": self.extra_class(),
            "id": self.html_id(),
            "disabled": self.disabled,
            "readonly": self.readonly,
            "autofocus": self.auto_focus,
        }

    @staticmethod
    def attributes_html(attributes: Mapping[str, Any]) -> str:
        """Render attributes; ``True`` becomes a bare attribute, falsy ones are skipped."""
        parts = []
        for name, value in attributes.items():
            if value is True:
                parts.append(html.escape(name))
            elif value is False or value is None or value == "":
                continue
            else:
                parts.append(f'{html.escape(name)}="{html.escape(str(value), quote=True)}"')
        return " ".join(parts)

    def get_schema_data_defaults(self, context: Optional[FormContext] = None) -> dict[str, Any]:
        field_id = self.html_id()
        return {
            "id": field_id,
            "name": self.name,
            "type": self.input_type,
            "schemaType": self.schema_data_type,
            "component": self.schema_component,
            "holderId": f"{field_id}_Holder",
            "title": self.title,
            "extraClass": self.extra_class(),
            "readOnly": self.readonly,
            "disabled": self.disabled,
            "autoFocus": self.auto_focus,
            "attributes": {},
            "data": {},
        }

    def to_schema(self, context: Optional[FormContext] = None) -> dict[str, Any]:
        return self.get_schema_data_defaults(context)

    def render(self, context: Optional[FormContext] = None) -> str:
        raise NotImplementedError

    def to_readonly_view(self) -> "ReadonlyField":
        from .readonly import ReadonlyField

        view = ReadonlyField(self.name, self.title, self.value)
        view.add_extra_class(self.extra_class())
        return view
