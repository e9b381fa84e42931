"""Client for tag field suggestion endpoints."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional, cast

import requests

from .fields._common_types import SuggestItem, ValidationMode

DEFAULT_BASE_URL = os.environ.get("TAGFIELD_BASE_URL", "http://localhost:8000")


class TagFieldClient:
    """Fetch tag suggestions from a form served over HTTP."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
        raise_on_error: bool = False,
    ) -> None:
        """Create a client bound to a site.

        Parameters
        ----------
        base_url
            Scheme and host the form links are relative to.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        raise_on_error
            If True, raise HTTP errors instead of returning None.
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.default_timeout = default_timeout
        self.raise_on_error = raise_on_error
        self._logger = logging.getLogger(__name__)
        self._session = session

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get_json(
        self,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any]]:
        """GET ``url`` and return its JSON object, or None on any failure."""
        requester = self._session or requests
        try:
            response = requester.get(url, params=params, timeout=timeout or self.default_timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            if self.raise_on_error:
                raise
            self._logger.warning("Suggest request to %s failed: %s", url, exc)
            return None
        if not isinstance(payload, dict):
            self._logger.warning("Suggest response from %s was not a JSON object", url)
            return None
        return payload

    def suggest(
        self,
        option_url: str,
        term: Optional[str] = None,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> list[SuggestItem] | None:
        """Query a field's suggest endpoint.

        Parameters
        ----------
        option_url
            The ``optionUrl`` from the field's schema data.
        term
            Search term; ``None`` asks for all tags up to the field's limit.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.

        Returns
        -------
        list[SuggestItem] or None
            Suggested tags, or ``None`` on error.
        """
        if term is not None and not isinstance(term, str):
            if validation == "strict":
                raise ValueError(f"Invalid term: {term!r}")
            if validation == "warn":
                self._logger.warning("Invalid term for suggest: %r", term)
                return None

        params = {"term": term} if term is not None else None
        response = self._get_json(self._url(option_url), params=params, timeout=timeout)
        if response is None:
            return None

        items = response.get("items")
        if not isinstance(items, list):
            self._logger.warning("Suggest response missing expected items list.")
            return None
        return [
            cast(SuggestItem, item)
            for item in items
            if isinstance(item, dict) and "id" in item and "text" in item
        ]


__all__ = ["DEFAULT_BASE_URL", "TagFieldClient"]
