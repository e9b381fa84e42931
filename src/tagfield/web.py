"""HTTP routes for tag field actions.

Fields answer actions under ``<form link>/field/<name>/<action>``. Mount the
router with the form link as ``prefix`` so the ``optionUrl`` a field puts in
its schema resolves to the route below.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable, Optional, Union

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from .fields.string_tag_field import StringTagField

logger = logging.getLogger(__name__)

FieldLookup = Callable[[str], Optional[StringTagField]]


def create_suggest_router(
    fields: Union[Mapping[str, StringTagField], FieldLookup],
    *,
    prefix: str = "",
) -> APIRouter:
    """Build a router serving ``GET {prefix}/field/{name}/suggest?term=...``.

    Parameters
    ----------
    fields
        Mapping of field name to field, or a callable building the field for a
        name (return ``None`` for unknown names) so each request gets a fresh
        instance.
    prefix
        Form link the field routes hang off.
    """
    lookup: FieldLookup = fields.get if isinstance(fields, Mapping) else fields
    router = APIRouter(prefix=prefix.rstrip("/"), tags=["tagfield"])

    @router.get("/field/{field_name}/suggest")
    def suggest(field_name: str, request: Request) -> JSONResponse:
        field = lookup(field_name)
        if field is None or "suggest" not in field.allowed_actions:
            logger.warning("Suggest requested for unknown field %s", field_name)
            raise HTTPException(status_code=404, detail=f"Unknown field: {field_name}")
        return field.suggest(request)

    return router


__all__ = ["create_suggest_router"]
