from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict


class Variant(str, Enum):
    """Shape of the flattened field collections.

    ``list`` keeps ordered descriptors carrying their own name, matches
    ``disableFields`` as substrings and reports primary keys. ``map`` keys
    descriptors by field name, matches ``disableFields`` exactly and can
    drop ``_aggregate`` relationship fields.
    """

    list = "list"
    map = "map"


class PluginConfig(BaseModel):
    models: List[str] = Field(default_factory=list, validation_alias=AliasChoices("models", "tables"))
    max_depth: Optional[int] = Field(1, alias="maxDepth")
    disable_fields: List[str] = Field(default_factory=list, alias="disableFields")
    primary_key_names: List[str] = Field(default_factory=lambda: ["id"], alias="primaryKeyNames")
    disable_aggregate_fields: bool = Field(False, alias="disableAggregateFields")
    comment_descriptions: bool = Field(False, alias="commentDescriptions")
    variant: Variant = Variant.list

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("max_depth")
    def validate_max_depth(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("maxDepth must be larger than 0")
        return v

    # YAML keys left empty come through as None
    @field_validator("models", "disable_fields", mode="before")
    def coerce_none(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("primary_key_names", mode="before")
    def default_primary_keys(cls, v: Any) -> Any:
        return ["id"] if v is None else v


class FieldSchema(BaseModel):
    type: Optional[str] = None
    array: bool = False
    nullable: bool = True


class ModelFieldSchema(BaseModel):
    name: str
    type: Optional[str] = None
    array: bool = False
    nullable: bool = True


FieldCollection = Union[List[ModelFieldSchema], Dict[str, FieldSchema]]


class Permissions(BaseModel):
    get: bool = False
    insert: bool = False
    update: bool = False
    delete: bool = False


class ModelSchemas(BaseModel):
    primary_keys: Optional[List[ModelFieldSchema]] = Field(None, alias="primaryKeys")
    model: FieldCollection
    insert_input: FieldCollection = Field(..., alias="insertInput")
    set_input: FieldCollection = Field(..., alias="setInput")
    permissions: Permissions

    model_config = ConfigDict(populate_by_name=True)

    def to_output(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SchemasRequest(BaseModel):
    sdl: Optional[str] = Field(None, alias="schema")
    endpoint_url: Optional[str] = Field(None, alias="endpointUrl")
    headers: Optional[Dict[str, str]] = None
    # parsed by the route so bad options surface as 400, not 422
    config: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def require_schema_source(self) -> "SchemasRequest":
        if not self.sdl and not self.endpoint_url:
            raise ValueError("either schema or endpointUrl is required")
        return self


class CodegenTarget(BaseModel):
    plugins: List[str] = Field(default_factory=list)
    config: Dict[str, Any] = Field(default_factory=dict)


class CodegenConfig(BaseModel):
    schema_source: str = Field(..., alias="schema")
    headers: Dict[str, str] = Field(default_factory=dict)
    config: Dict[str, Any] = Field(default_factory=dict)
    generates: Dict[str, CodegenTarget] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)

    def target_config(self, target: CodegenTarget) -> Dict[str, Any]:
        """Root-level config applies to every target; target config wins."""
        return {**self.config, **target.config}
