from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from graphql import GraphQLSchema

from hasura_schemas.core.flattener import flatten_fields
from hasura_schemas.core.models import (
    FieldCollection,
    ModelFieldSchema,
    ModelSchemas,
    Permissions,
    PluginConfig,
    Variant,
)
from hasura_schemas.core.resolver import ResolvedModelTypes, resolve_model_types

logger = logging.getLogger(__name__)


def _empty(options: PluginConfig) -> FieldCollection:
    return {} if options.variant == Variant.map else []


def _flatten_or_empty(gql_type, options: PluginConfig) -> FieldCollection:
    if gql_type is None:
        return _empty(options)
    return flatten_fields(gql_type, options)


def _primary_keys(
    resolved: ResolvedModelTypes, model_fields: List[ModelFieldSchema], options: PluginConfig
) -> List[ModelFieldSchema]:
    # Roles without mutation permissions don't see *_pk_columns_input,
    # so fall back to picking the key columns out of the model itself.
    if resolved.pk_input_type is not None:
        return flatten_fields(resolved.pk_input_type, options)
    return [f for f in model_fields if f.name in options.primary_key_names]


def build_model_schema(model_name: str, schema: GraphQLSchema, options: PluginConfig) -> ModelSchemas:
    resolved = resolve_model_types(model_name, schema)

    model = _flatten_or_empty(resolved.model_type, options)
    insert_input = _flatten_or_empty(resolved.insert_input_type, options)
    set_input = _flatten_or_empty(resolved.set_input_type, options)

    primary_keys: Optional[List[ModelFieldSchema]] = None
    if options.variant == Variant.list:
        primary_keys = _primary_keys(resolved, model, options)

    permissions = Permissions(
        get=len(model) > 0,
        insert=len(insert_input) > 0,
        update=len(set_input) > 0,
        delete=resolved.can_delete,
    )
    logger.info("Model %s: %s", model_name, permissions.model_dump())
    return ModelSchemas(
        primaryKeys=primary_keys,
        model=model,
        insertInput=insert_input,
        setInput=set_input,
        permissions=permissions,
    )


def build_model_schemas(
    models: Iterable[str], schema: GraphQLSchema, options: PluginConfig
) -> Dict[str, ModelSchemas]:
    """Build schemas for every model, in order. The first unresolvable model aborts the batch."""
    return {model_name: build_model_schema(model_name, schema, options) for model_name in models}


def render_model_schemas(model_schemas: Dict[str, ModelSchemas]) -> Dict[str, dict]:
    return {name: item.to_output() for name, item in model_schemas.items()}
