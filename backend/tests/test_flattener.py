import pytest
from graphql import (
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
    build_schema,
)

from hasura_schemas.core.flattener import flatten_fields, is_field_disabled, unwrap_field_type
from hasura_schemas.core.models import PluginConfig, Variant

NESTED_OBJECT = GraphQLObjectType("profiles", {"bio": GraphQLField(GraphQLString)})
NESTED_INPUT = GraphQLInputObjectType("profiles_insert_input", {"bio": GraphQLInputField(GraphQLString)})


@pytest.mark.parametrize(
    "gql_type, array, nullable",
    [
        (GraphQLString, False, True),
        (GraphQLNonNull(GraphQLString), False, False),
        (GraphQLList(GraphQLString), True, True),
        (GraphQLNonNull(GraphQLList(GraphQLString)), True, False),
        (GraphQLList(GraphQLNonNull(GraphQLString)), True, True),
        (GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLString))), True, False),
        (GraphQLList(GraphQLList(GraphQLString)), True, True),
    ],
)
def test_unwrap_field_type(gql_type, array, nullable):
    flat = unwrap_field_type(gql_type)
    assert flat.type == "String"
    assert flat.array is array
    assert flat.nullable is nullable


@pytest.mark.parametrize(
    "gql_type",
    [
        NESTED_OBJECT,
        GraphQLNonNull(NESTED_OBJECT),
        GraphQLList(NESTED_OBJECT),
        GraphQLNonNull(GraphQLList(GraphQLNonNull(NESTED_OBJECT))),
        NESTED_INPUT,
        GraphQLList(NESTED_INPUT),
    ],
)
def test_unwrap_drops_nested_types(gql_type):
    assert unwrap_field_type(gql_type) is None


def test_unwrap_keeps_enum_name(hasura_schema):
    flat = unwrap_field_type(hasura_schema.get_type("users").fields["role"].type)
    assert flat.type == "role_enum"
    assert flat.nullable is False


def test_flatten_list_variant_keeps_declaration_order(hasura_schema):
    fields = flatten_fields(hasura_schema.get_type("users"), PluginConfig())
    assert [f.model_dump() for f in fields] == [
        {"name": "id", "type": "uuid", "array": False, "nullable": False},
        {"name": "email", "type": "String", "array": False, "nullable": False},
        {"name": "nickname", "type": "String", "array": False, "nullable": True},
        {"name": "role", "type": "role_enum", "array": False, "nullable": False},
        {"name": "tags", "type": "String", "array": True, "nullable": True},
        {"name": "scores", "type": "Int", "array": True, "nullable": False},
        {"name": "created_by", "type": "String", "array": False, "nullable": True},
        {"name": "votes_aggregate_total", "type": "Int", "array": False, "nullable": True},
    ]


def test_flatten_input_type_drops_relationship_inputs(hasura_schema):
    fields = flatten_fields(hasura_schema.get_type("users_insert_input"), PluginConfig())
    assert [f.name for f in fields] == ["email", "nickname", "role", "created_by"]


def test_flatten_list_variant_matches_substrings(hasura_schema):
    options = PluginConfig(disableFields=["created", "_aggregate"])
    names = [f.name for f in flatten_fields(hasura_schema.get_type("users"), options)]
    assert "created_by" not in names
    assert "votes_aggregate_total" not in names
    assert "email" in names


def test_flatten_map_variant_keys_by_name(hasura_schema):
    options = PluginConfig(variant="map")
    fields = flatten_fields(hasura_schema.get_type("users_set_input"), options)
    assert {k: v.model_dump() for k, v in fields.items()} == {
        "email": {"type": "String", "array": False, "nullable": True},
        "nickname": {"type": "String", "array": False, "nullable": True},
    }


def test_flatten_map_variant_matches_exact_names(hasura_schema):
    options = PluginConfig(variant="map", disableFields=["created", "nickname"])
    fields = flatten_fields(hasura_schema.get_type("users"), options)
    assert "created_by" in fields
    assert "nickname" not in fields


def test_flatten_map_variant_disables_aggregate_fields(hasura_schema):
    users = hasura_schema.get_type("users")
    assert "votes_aggregate_total" in flatten_fields(users, PluginConfig(variant="map"))
    options = PluginConfig(variant="map", disableAggregateFields=True)
    assert "votes_aggregate_total" not in flatten_fields(users, options)


@pytest.mark.parametrize("variant", [Variant.list, Variant.map])
def test_disabled_created_by_never_appears(hasura_schema, variant):
    options = PluginConfig(variant=variant, disableFields=["created_by"])
    for type_name in ("users", "users_insert_input"):
        fields = flatten_fields(hasura_schema.get_type(type_name), options)
        names = list(fields) if variant == Variant.map else [f.name for f in fields]
        assert "created_by" not in names


def test_is_field_disabled_ignores_aggregate_flag_in_list_variant():
    options = PluginConfig(disableAggregateFields=True)
    assert is_field_disabled("posts_aggregate", options) is False


def test_flatten_is_idempotent(hasura_schema):
    fields = flatten_fields(hasura_schema.get_type("users"), PluginConfig())

    def render(field):
        type_ref = f"[{field.type}]" if field.array else field.type
        return f"{field.name}: {type_ref}{'' if field.nullable else '!'}"

    scalars = {f.type for f in fields} - {"String", "Int"}
    sdl = "\n".join(
        [f"scalar {name}" for name in sorted(scalars - {"role_enum"})]
        + ["enum role_enum { admin member }"]
        + ["type Query { flat: flat }", "type flat {"]
        + [f"  {render(f)}" for f in fields]
        + ["}"]
    )
    again = flatten_fields(build_schema(sdl).get_type("flat"), PluginConfig())
    assert again == fields


def test_flatten_empty_type_returns_empty_collection():
    empty_input = GraphQLInputObjectType("empty_input", {"x": GraphQLInputField(NESTED_INPUT)})
    assert flatten_fields(empty_input, PluginConfig()) == []
    assert flatten_fields(empty_input, PluginConfig(variant="map")) == {}


def test_flatten_object_built_in_code():
    gql_type = GraphQLObjectType(
        "counter",
        {"value": GraphQLField(GraphQLNonNull(GraphQLInt)), "owner": GraphQLField(NESTED_OBJECT)},
    )
    fields = flatten_fields(gql_type, PluginConfig())
    assert [f.model_dump() for f in fields] == [{"name": "value", "type": "Int", "array": False, "nullable": False}]
