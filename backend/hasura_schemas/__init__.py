from hasura_schemas.core.builder import build_model_schemas
from hasura_schemas.core.errors import ConfigurationError, ModelNotFoundError, SchemaLoadError
from hasura_schemas.core.models import ModelSchemas, PluginConfig
from hasura_schemas.plugin import plugin, validate

__version__ = "0.1.0"

__all__ = [
    "build_model_schemas",
    "plugin",
    "validate",
    "ModelSchemas",
    "PluginConfig",
    "ConfigurationError",
    "ModelNotFoundError",
    "SchemaLoadError",
]
