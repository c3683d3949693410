from __future__ import annotations


class HasuraSchemasError(Exception):
    """Base class for errors raised while building model schemas."""


class ConfigurationError(HasuraSchemasError):
    """Raised when plugin or codegen configuration is invalid."""


class SchemaLoadError(HasuraSchemasError):
    """Raised when a GraphQL schema cannot be read or fetched."""


class ModelNotFoundError(HasuraSchemasError):
    """Raised when none of a model's object, insert or set types resolve.

    A naming mismatch, a missing table and a role without permissions all
    look the same from the schema, so the message cannot tell them apart.
    """

    def __init__(self, model_name: str) -> None:
        self.model_name = model_name
        super().__init__(f"model {model_name} doesn't exist, or maybe the role doesn't have any permission")
