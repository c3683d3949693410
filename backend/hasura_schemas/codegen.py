from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import httpx
import yaml
from pydantic import ValidationError

from hasura_schemas.core.errors import ConfigurationError
from hasura_schemas.core.loader import load_schema
from hasura_schemas.core.models import CodegenConfig
from hasura_schemas.core.utils import is_http_url
from hasura_schemas.plugin import generate, parse_config, plugin, validate

logger = logging.getLogger(__name__)

PLUGIN_NAMES = {"hasura-schemas", "graphql-codegen-hasura-schemas"}
YAML_SUFFIXES = {".yml", ".yaml"}


def load_codegen_config(path: Path) -> CodegenConfig:
    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path} must contain a mapping")
    try:
        return CodegenConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid codegen config {path}: {exc}") from exc


def _resolve_source(source: str, base_dir: Path) -> str:
    if is_http_url(source):
        return source
    return str(base_dir / source)


async def run_codegen(
    config: CodegenConfig,
    base_dir: Path,
    schema_source: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Path]:
    """Render every target that uses this plugin. Returns the written paths."""
    targets = {
        name: target
        for name, target in config.generates.items()
        if PLUGIN_NAMES.intersection(target.plugins)
    }
    for name, target in config.generates.items():
        if name not in targets:
            logger.warning("Skipping %s: plugins %s don't include hasura-schemas", name, target.plugins)
    if not targets:
        return []

    # validate every target before touching the schema
    options = {name: parse_config(config.target_config(target)) for name, target in targets.items()}

    # a --schema override is relative to the working directory, the file's own
    # schema entry to the directory holding the codegen file
    source = schema_source or _resolve_source(config.schema_source, base_dir)
    schema = await load_schema(source, headers=config.headers, transport=transport)

    written: List[Path] = []
    for name, target_options in options.items():
        await validate(schema, None, target_options)
        output_path = base_dir / name
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if output_path.suffix.lower() in YAML_SUFFIXES:
            with output_path.open("w", encoding="utf-8") as f:
                yaml.dump(generate(schema, target_options), f, sort_keys=False, allow_unicode=True)
        else:
            output_path.write_text(await plugin(schema, None, target_options), encoding="utf-8")
        logger.info("Saved %s", output_path)
        written.append(output_path)
    return written
