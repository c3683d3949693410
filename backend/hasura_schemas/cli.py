from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from hasura_schemas.codegen import load_codegen_config, run_codegen
from hasura_schemas.config import settings
from hasura_schemas.core.errors import HasuraSchemasError

logger = logging.getLogger("hasura_schemas")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hasura-schemas",
        description="Generate model field schemas and CRUD permissions from a Hasura GraphQL schema.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=settings.default_config_path,
        help="codegen YAML file (default: %(default)s)",
    )
    parser.add_argument("--schema", help="override the schema source: endpoint URL, SDL file or introspection JSON")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help="logging level (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_codegen_config(args.config)
        written = asyncio.run(run_codegen(config, args.config.resolve().parent, schema_source=args.schema))
    except HasuraSchemasError as exc:
        logger.error("%s", exc)
        return 1

    if not written:
        logger.warning("Nothing generated from %s", args.config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
