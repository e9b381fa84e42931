"""Field module exports."""

from ._common_types import FormContext
from .base import FormField
from .readonly import ReadonlyField
from .string_tag_field import StringTagField

__all__ = [
    "FormContext",
    "FormField",
    "ReadonlyField",
    "StringTagField",
]
