from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
from graphql import get_introspection_query

from hasura_schemas.config import settings
from hasura_schemas.core.errors import SchemaLoadError

logger = logging.getLogger(__name__)

INTROSPECTION_QUERY = {
    "query": get_introspection_query(descriptions=True),
    "operationName": "IntrospectionQuery",
    "variables": {},
}


class GraphQLClient:
    def __init__(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.headers = headers or {}
        self.timeout = timeout or settings.introspection_timeout
        self._transport = transport

    async def fetch_introspection(self) -> Dict[str, Any]:
        """POST the introspection query and return the ``data`` payload."""
        logger.info("Sending introspection query to %s", self.endpoint)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.post(self.endpoint, json=INTROSPECTION_QUERY, headers=self.headers)
                resp.raise_for_status()
                result = resp.json()
            except httpx.HTTPError as exc:
                raise SchemaLoadError(f"Introspection request to {self.endpoint} failed: {exc}") from exc
            except ValueError as exc:
                raise SchemaLoadError(f"Introspection response from {self.endpoint} is not JSON") from exc

        if not isinstance(result, dict):
            raise SchemaLoadError(f"Unexpected introspection response from {self.endpoint}")
        if result.get("errors"):
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in result["errors"]
            )
            raise SchemaLoadError(f"Introspection failed: {messages}")
        data = result.get("data")
        if not isinstance(data, dict) or "__schema" not in data:
            raise SchemaLoadError(f"Introspection response from {self.endpoint} has no __schema")
        return data
