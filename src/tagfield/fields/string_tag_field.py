"""Tag field storing comma-delimited tags in a single string column."""

from __future__ import annotations

import html
import json
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from ..config import TagFieldConfig
from ..records import AppendableCollection, RecordCollection
from ..utils import join_links, unique_in_order
from ._common_types import FormContext, OptionData, SuggestItem, SuggestResponse, _format_option
from .base import FormField
from .readonly import ReadonlyField
from .string_tag_field_types import READONLY_DELIMITER, TAG_DELIMITER, _normalize_tag_value


class StringTagField(FormField):
    """Tagging widget backed by a comma-delimited string column.

    Labels double as values, so a submitted tag need not exist in ``source``.
    Values are serialized with bare commas and no escaping: a tag containing
    a comma does not survive a save/load round trip.
    """

    schema_component = "TagField"
    schema_data_type = "MultiSelect"
    allowed_actions = ("suggest",)

    def __init__(
        self,
        name: str,
        title: Optional[str] = None,
        source: Any = None,
        value: Any = None,
        *,
        config: Optional[TagFieldConfig] = None,
        source_list: Optional[RecordCollection] = None,
        record: Optional[Any] = None,
    ) -> None:
        """Create a tag field.

        Parameters
        ----------
        name
            Field name, also the record column the tags are stored in.
        title
            Label; derived from ``name`` when omitted.
        source
            Available tags: a mapping of value to label, or any iterable of
            tags or records. Iterators are read once on assignment; other
            iterables are materialized on every use.
        value
            Initial value, see ``set_value``.
        config
            Flags and limits; defaults to ``TagFieldConfig()``.
        source_list
            Backing collection used to look up and create tag records.
        record
            Record to prefer over the one supplied by a form context.
        """
        config = config or TagFieldConfig()
        self.should_lazy_load = config.should_lazy_load
        self.lazy_load_item_limit = config.lazy_load_item_limit
        self.can_create = config.can_create
        self.is_multiple = config.is_multiple
        self.title_field = config.title_field
        self.source_list = source_list
        self.record = record
        super().__init__(name, title, value)
        self.source = source

    @property
    def source(self) -> Any:
        return self._source

    @source.setter
    def source(self, source: Any) -> None:
        """Store the option source, reading one-shot iterators into a list once."""
        if source is None:
            source = []
        elif isinstance(source, (str, bytes)):
            self._logger.warning("Unsupported option source for tag field %s: %r", self.name, source)
            source = []
        elif isinstance(source, Iterator):
            source = list(source)
        self._source = source

    def get_record(self, context: Optional[FormContext] = None) -> Optional[Any]:
        if self.record is not None:
            return self.record
        return super().get_record(context)

    # --- Value --- #
    def set_value(self, value: Any, source: Any = None) -> "StringTagField":
        """Set the tags from a delimited string, a sequence, a record or related entities.

        A record, an object or a mapping holding this field's column, or a
        collection of related entities, passed as ``source`` takes precedence
        over ``value``.
        Never raises; unsupported input leaves the field empty.
        """
        self.value = _normalize_tag_value(value, source, column=self.name)
        return self

    def data_value(self) -> str:
        return TAG_DELIMITER.join(str(tag) for tag in self.value)

    # --- Options --- #
    def _option_label(self, item: Any) -> Any:
        if isinstance(item, str):
            return item
        if isinstance(item, Mapping):
            return item.get(self.title_field)
        if isinstance(item, (int, float)):
            return item
        return getattr(item, self.title_field, None)

    def get_options(self) -> list[OptionData]:
        source = self.source
        if isinstance(source, Mapping):
            items: Iterable[Any] = list(source.values())
        else:
            items = list(source)

        options: list[OptionData] = []
        for item in items:
            label = self._option_label(item)
            if label:
                options.append(_format_option(label))
        return options

    @staticmethod
    def format_options(values: Optional[Iterable[Any]]) -> list[OptionData]:
        if not values:
            return []
        return [_format_option(value) for value in values]

    # --- Schema and rendering --- #
    def get_suggest_url(self, context: Optional[FormContext] = None) -> str:
        return join_links(self.link(context), "suggest")

    def get_schema_data_defaults(self, context: Optional[FormContext] = None) -> dict[str, Any]:
        schema = super().get_schema_data_defaults(context)
        schema.update(
            {
                "name": f"{self.name}[]",
                "lazyLoad": self.should_lazy_load,
                "creatable": self.can_create,
                "multi": self.is_multiple,
                "value": self.format_options(self.value),
                "disabled": self.disabled or self.readonly,
            }
        )
        if not self.should_lazy_load:
            schema["options"] = self.get_options()
        else:
            schema["optionUrl"] = self.get_suggest_url(context)
        return schema

    def get_attributes(self, context: Optional[FormContext] = None) -> dict[str, Any]:
        attributes = super().get_attributes(context)
        attributes.pop("type", None)
        attributes.update(
            {
                "name": f"{self.name}[]",
                "multiple": self.is_multiple,
                "disabled": self.disabled or self.readonly,
                "data-schema": json.dumps(self.get_schema_data_defaults(context)),
            }
        )
        return attributes

    def render(self, context: Optional[FormContext] = None) -> str:
        self.add_extra_class("ss-tag-field", "entwine")
        attributes = self.get_attributes(context)

        selected = [str(tag) for tag in self.value]
        choices = list(selected)
        if not self.should_lazy_load:
            choices.extend(option["Value"] for option in self.get_options())

        option_tags = []
        for choice in unique_in_order(choices):
            escaped = html.escape(choice, quote=True)
            marker = " selected" if choice in selected else ""
            option_tags.append(f'<option value="{escaped}"{marker}>{escaped}</option>')
        return f"<select {self.attributes_html(attributes)}>{''.join(option_tags)}</select>"

    def to_readonly_view(self) -> ReadonlyField:
        view = super().to_readonly_view()
        view.set_value(READONLY_DELIMITER.join(str(tag) for tag in self.value))
        return view

    # --- Suggestions --- #
    def get_tags(self, term: Optional[str]) -> list[SuggestItem]:
        """Return options whose value contains ``term``, ignoring case.

        Duplicates are dropped (first occurrence wins), source order is kept
        and at most ``lazy_load_item_limit`` items are returned. An empty or
        ``None`` term matches everything.
        """
        needle = "" if term is None else str(term).lower()
        matches = unique_in_order(
            (option for option in self.get_options() if needle in option["Value"].lower()),
            key=lambda option: option["Value"],
        )
        return [
            {"id": option["Title"], "text": option["Value"]}
            for option in matches[: self.lazy_load_item_limit]
        ]

    def suggest(self, request: Request) -> JSONResponse:
        """Answer an autocomplete request with ``{"items": [...]}``."""
        term = request.query_params.get("term")
        items = self.get_tags(term)
        self._logger.debug("Suggest %s for term %r returned %d item(s)", self.name, term, len(items))
        payload: SuggestResponse = {"items": items}
        return JSONResponse(payload)

    # --- Tag records --- #
    def get_or_create_tag(self, term: Any) -> Optional[Any]:
        """Find the tag record titled ``term``, creating it when allowed.

        Returns
        -------
        object or None
            The existing or newly written record, or ``None`` when there is no
            backing collection, the term is empty, or creation is disabled.

        Notes
        -----
        Lookup and creation are not atomic; two concurrent requests for the
        same new tag can both create a record.
        """
        source = self.source_list
        if source is None:
            return None

        if isinstance(term, Mapping):
            term = term.get("Value")
        if not term:
            return None

        record = source.find(self.title_field, term)
        if record is not None:
            return record

        if not self.can_create:
            self._logger.debug("Tag %r not found and creation is disabled for %s", term, self.name)
            return None

        record = source.data_class()
        setattr(record, self.title_field, term)
        record.write()
        if isinstance(source, AppendableCollection):
            source.add(record)
        self._logger.info("Created tag %r for field %s", term, self.name)
        return record
