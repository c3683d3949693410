from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from graphql import (
    GraphQLInputObjectType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    is_input_object_type,
    is_object_type,
)

from hasura_schemas.core.errors import ModelNotFoundError
from hasura_schemas.core.naming import candidate_names, snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedModelTypes:
    model_name: str
    model_type: Optional[GraphQLObjectType] = None
    insert_input_type: Optional[GraphQLInputObjectType] = None
    set_input_type: Optional[GraphQLInputObjectType] = None
    pk_input_type: Optional[GraphQLInputObjectType] = None
    can_delete: bool = False

    @property
    def is_empty(self) -> bool:
        return self.model_type is None and self.insert_input_type is None and self.set_input_type is None


def find_type(
    schema: GraphQLSchema, name: str, predicate: Callable[[GraphQLNamedType], bool]
) -> Optional[GraphQLNamedType]:
    """Return the first convention-named type that exists and passes ``predicate``."""
    for candidate in candidate_names(name):
        gql_type = schema.get_type(candidate)
        if gql_type is not None and predicate(gql_type):
            logger.debug("Resolved %s as %s", name, candidate)
            return gql_type
    return None


def has_mutation_field(schema: GraphQLSchema, name: str) -> bool:
    mutation_type = schema.mutation_type
    if mutation_type is None:
        return False
    return any(candidate in mutation_type.fields for candidate in candidate_names(name))


def resolve_model_types(model_name: str, schema: GraphQLSchema) -> ResolvedModelTypes:
    """
    Locate the Hasura-generated types for ``model_name``.

    Names are derived from the snake_case model name (``user``,
    ``user_insert_input``, ``user_set_input``, ``user_pk_columns_input``,
    ``delete_user``) and each slot is tried snake_case first, then
    camelCase. Raises ModelNotFoundError when the model, insert and set
    types are all missing.
    """
    base = snake(model_name)
    resolved = ResolvedModelTypes(
        model_name=model_name,
        model_type=find_type(schema, base, is_object_type),
        insert_input_type=find_type(schema, f"{base}_insert_input", is_input_object_type),
        set_input_type=find_type(schema, f"{base}_set_input", is_input_object_type),
        pk_input_type=find_type(schema, f"{base}_pk_columns_input", is_input_object_type),
        can_delete=has_mutation_field(schema, f"delete_{base}"),
    )
    if resolved.is_empty:
        raise ModelNotFoundError(model_name)
    return resolved
