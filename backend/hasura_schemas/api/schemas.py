from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException

from hasura_schemas.core.errors import ConfigurationError, ModelNotFoundError, SchemaLoadError
from hasura_schemas.core.loader import load_schema, schema_from_sdl
from hasura_schemas.core.models import SchemasRequest
from hasura_schemas.core.utils import validate_http_url
from hasura_schemas.plugin import generate, parse_config

router = APIRouter(prefix="/api/schemas")


async def get_transport() -> Optional[httpx.AsyncBaseTransport]:
    # Tests swap in a mock transport on the router object
    return getattr(router, "transport", None)


@router.post("")
async def create_schemas(
    request: SchemasRequest, transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport)
) -> Dict[str, Any]:
    try:
        options = parse_config(request.config)
    except ConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    try:
        if request.sdl:
            schema = schema_from_sdl(request.sdl)
        else:
            validate_http_url(request.endpoint_url)
            schema = await load_schema(request.endpoint_url, headers=request.headers, transport=transport)
    except SchemaLoadError as exc:
        status = 400 if request.sdl else 502
        raise HTTPException(status_code=status, detail=str(exc))

    try:
        return generate(schema, options)
    except ModelNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
