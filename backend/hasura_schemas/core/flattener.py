from __future__ import annotations

import logging
from typing import Dict, List, Optional, Union

from graphql import (
    GraphQLInputObjectType,
    GraphQLObjectType,
    GraphQLType,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
)

from hasura_schemas.core.models import FieldCollection, FieldSchema, ModelFieldSchema, PluginConfig, Variant

logger = logging.getLogger(__name__)

AGGREGATE_MARKER = "_aggregate"

FlattenableType = Union[GraphQLObjectType, GraphQLInputObjectType]


def unwrap_field_type(gql_type: GraphQLType) -> Optional[FieldSchema]:
    """
    Walk NON_NULL and LIST wrappers down to the named type.

    Returns None when the named type is an object or input object, since
    nested structures are not flattened. ``nullable`` describes the field
    value itself, so a NON_NULL inside a LIST (``[String!]``) leaves it
    True.
    """
    nullable = True
    array = False
    current = gql_type
    while True:
        if is_non_null_type(current):
            if not array:
                nullable = False
            current = current.of_type
            continue
        if is_object_type(current) or is_input_object_type(current):
            return None
        if is_list_type(current):
            array = True
            current = current.of_type
            continue
        return FieldSchema(type=current.name, array=array, nullable=nullable)


def is_field_disabled(field_name: str, options: PluginConfig) -> bool:
    if options.variant == Variant.map:
        if field_name in options.disable_fields:
            return True
        return options.disable_aggregate_fields and AGGREGATE_MARKER in field_name
    return any(term in field_name for term in options.disable_fields)


def flatten_fields(gql_type: FlattenableType, options: PluginConfig) -> FieldCollection:
    """
    Flatten the fields of an OBJECT or INPUT_OBJECT type.

    list variant:
        [ { name: fieldName, type: String, array: false, nullable: true }, ... ]
    map variant:
        { fieldName: { type: String, array: false, nullable: true }, ... }

    Fields keep their declaration order; disabled fields and fields whose
    type is an object or input object are left out.
    """
    as_list: List[ModelFieldSchema] = []
    as_map: Dict[str, FieldSchema] = {}
    for field_name, field in gql_type.fields.items():
        if is_field_disabled(field_name, options):
            logger.debug("Skipping disabled field %s.%s", gql_type.name, field_name)
            continue
        flat = unwrap_field_type(field.type)
        if flat is None:
            continue
        if options.variant == Variant.map:
            as_map[field_name] = flat
        else:
            as_list.append(ModelFieldSchema(name=field_name, **flat.model_dump()))
    return as_map if options.variant == Variant.map else as_list
