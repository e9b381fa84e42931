"""Tag field settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_LAZY_LOAD_ITEM_LIMIT = int(os.environ.get("TAGFIELD_LAZY_LOAD_ITEM_LIMIT", "10"))
DEFAULT_TITLE_FIELD = "Title"


@dataclass(frozen=True)
class TagFieldConfig:
    """Settings shared by tag field instances.

    Parameters
    ----------
    lazy_load_item_limit
        Maximum number of suggestions returned per query.
    can_create
        Whether unknown tags may be created in the backing collection.
    should_lazy_load
        Fetch options from the suggest endpoint instead of embedding them.
    is_multiple
        Whether the widget accepts more than one tag.
    title_field
        Record attribute holding a tag's title in the backing collection.
    """

    lazy_load_item_limit: int = DEFAULT_LAZY_LOAD_ITEM_LIMIT
    can_create: bool = True
    should_lazy_load: bool = False
    is_multiple: bool = True
    title_field: str = DEFAULT_TITLE_FIELD

    def __post_init__(self) -> None:
        limit = self.lazy_load_item_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"Invalid lazy_load_item_limit: {limit}")
        if not isinstance(self.title_field, str) or not self.title_field.strip():
            raise ValueError(f"Invalid title_field: {self.title_field}")


__all__ = ["DEFAULT_LAZY_LOAD_ITEM_LIMIT", "DEFAULT_TITLE_FIELD", "TagFieldConfig"]
