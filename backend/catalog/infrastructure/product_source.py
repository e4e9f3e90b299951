"""Product Source: fetches and validates the full record set once per session.

Invariants:
    - load() returns the payload rows in order, one per element of the JSON array
    - A payload that is not a JSON array raises LoadError
    - Transport failures, HTTP error statuses, and undecodable JSON raise LoadError
    - A structurally invalid row is warned about and still returned (never dropped)
"""

import logging

import httpx
from pydantic import ValidationError

from catalog.core.errors import LoadError
from catalog.core.repository_protocols import EventLogger
from catalog.schemas.product import Product, missing_required_fields

logger = logging.getLogger(__name__)


class HttpProductSource:
    """Loads products.json over HTTP."""

    def __init__(self, client: httpx.AsyncClient, url: str, events: EventLogger):
        self.client = client
        self.url = url
        self.events = events

    async def load(self) -> list[dict]:
        self.events.info("Loading products...")
        payload = await self._fetch()
        if not isinstance(payload, list):
            raise LoadError(
                f"Invalid data format received: expected list, "
                f"got {type(payload).__name__}",
            )
        for index, row in enumerate(payload):
            self._validate_row(index, row)
        self.events.info(f"Successfully loaded {len(payload)} products")
        return payload

    async def _fetch(self):
        try:
            response = await self.client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LoadError(
                f"Products endpoint returned {e.response.status_code}", cause=e,
            )
        except httpx.HTTPError as e:
            raise LoadError(f"Products request failed: {e}", cause=e)
        try:
            return response.json()
        except ValueError as e:
            raise LoadError("Products response is not valid JSON", cause=e)

    def _validate_row(self, index: int, row: object) -> None:
        """Advisory check: warn on a bad row, never raise."""
        missing = missing_required_fields(row)
        if missing:
            self.events.warn(f"Invalid product data at index {index}")
            logger.debug(
                f"Row missing fields: {', '.join(missing)}",
                extra={"record_index": index},
            )
            return
        try:
            Product.model_validate(row)
        except ValidationError as e:
            self.events.warn(f"Invalid product data at index {index}")
            logger.debug(
                f"Row failed schema validation: {e.error_count()} error(s)",
                extra={"record_index": index},
            )
