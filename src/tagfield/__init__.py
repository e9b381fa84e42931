"""Public package surface for tagfield."""

from .client import TagFieldClient
from .config import TagFieldConfig
from .fields import FormContext, FormField, ReadonlyField, StringTagField
from .records import Record, RecordList
from .web import create_suggest_router

__all__ = [
    "FormContext",
    "FormField",
    "ReadonlyField",
    "Record",
    "RecordList",
    "StringTagField",
    "TagFieldClient",
    "TagFieldConfig",
    "create_suggest_router",
]
