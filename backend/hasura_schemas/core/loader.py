from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
from graphql import GraphQLError, GraphQLSchema, build_client_schema, build_schema

from hasura_schemas.core.errors import SchemaLoadError
from hasura_schemas.core.graphql_client import GraphQLClient
from hasura_schemas.core.utils import is_http_url

logger = logging.getLogger(__name__)

SDL_SUFFIXES = {".graphql", ".graphqls", ".gql"}


def schema_from_sdl(sdl: str) -> GraphQLSchema:
    try:
        return build_schema(sdl)
    except (GraphQLError, TypeError) as exc:
        raise SchemaLoadError(f"Invalid schema SDL: {exc}") from exc


def schema_from_introspection(result: Dict[str, Any]) -> GraphQLSchema:
    """Accepts a full ``{"data": {"__schema": ...}}`` response or its ``data`` part."""
    data = result.get("data", result) if isinstance(result, dict) else None
    if not isinstance(data, dict) or "__schema" not in data:
        raise SchemaLoadError("Introspection result has no __schema")
    try:
        return build_client_schema(data)
    except (GraphQLError, TypeError, KeyError) as exc:
        raise SchemaLoadError(f"Invalid introspection result: {exc}") from exc


def load_schema_file(path: Path) -> GraphQLSchema:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Cannot read schema file {path}: {exc}") from exc

    if path.suffix.lower() in SDL_SUFFIXES:
        return schema_from_sdl(text)
    if path.suffix.lower() == ".json":
        try:
            introspection = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(f"Invalid introspection JSON in {path}: {exc}") from exc
        return schema_from_introspection(introspection)
    raise SchemaLoadError(f"Unsupported schema file type: {path.suffix or path.name}")


async def load_schema(
    source: str,
    headers: Optional[Dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> GraphQLSchema:
    """Load a schema from an http(s) endpoint, an SDL file or an introspection JSON file."""
    if is_http_url(source):
        client = GraphQLClient(source, headers=headers, transport=transport)
        data = await client.fetch_introspection()
        return schema_from_introspection(data)
    logger.info("Loading schema from %s", source)
    return load_schema_file(Path(source))
