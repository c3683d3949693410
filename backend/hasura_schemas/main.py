from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hasura_schemas import __version__
from hasura_schemas.api.schemas import router as schemas_router
from hasura_schemas.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="Hasura Schemas", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schemas_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
