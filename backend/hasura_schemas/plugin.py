"""
Codegen plugin entry points.

The host calls ``validate`` before generation and ``plugin`` to render the
output text. Both are coroutines to match the host's calling convention;
the transform itself never awaits anything.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from graphql import GraphQLSchema
from pydantic import ValidationError

from hasura_schemas.core.builder import build_model_schemas, render_model_schemas
from hasura_schemas.core.errors import ConfigurationError
from hasura_schemas.core.models import PluginConfig

logger = logging.getLogger(__name__)

ConfigInput = Union[PluginConfig, Mapping[str, Any], None]


def parse_config(config: ConfigInput) -> PluginConfig:
    if isinstance(config, PluginConfig):
        return config
    try:
        return PluginConfig.model_validate(dict(config or {}))
    except ValidationError as exc:
        messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in exc.errors())
        raise ConfigurationError(messages) from exc


async def validate(schema: GraphQLSchema, documents: Optional[Sequence[Any]], config: ConfigInput) -> None:
    options = parse_config(config)
    if options.comment_descriptions:
        logger.warning("commentDescriptions is accepted but has no effect on the output")


async def plugin(schema: GraphQLSchema, documents: Optional[Sequence[Any]], config: ConfigInput) -> str:
    options = parse_config(config)
    return json.dumps(generate(schema, options))


def generate(schema: GraphQLSchema, options: PluginConfig) -> Dict[str, dict]:
    if not options.models:
        logger.warning("No models configured; output will be empty")
    return render_model_schemas(build_model_schemas(options.models, schema, options))
