"""
Command line entry point.

Serves a GraphQL schema file over the JSON POST transport with uvicorn. An
optional JSON document is used as the root value, which lets the default
resolvers answer queries straight from static data.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import uvicorn
from fastapi import FastAPI

from gqltransport.core.app.application_factory import build_app
from gqltransport.core.common.exceptions import GraphQLTransportError
from gqltransport.core.common.logging_utils import (
    configure_logging_with_environment_tagging,
)
from gqltransport.core.config.app_config import AppConfig, LogLevel, load_config
from gqltransport.core.services.graphql_core_schema import (
    GraphQLCoreExecutableSchema,
)


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve a GraphQL schema over JSON POST"
    )
    parser.add_argument("--config", dest="config_file", help="YAML configuration file")
    parser.add_argument("--host", help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to listen on")
    parser.add_argument(
        "--path", dest="graphql_path", help="URL path of the GraphQL endpoint"
    )
    parser.add_argument("--schema", dest="schema_path", help="GraphQL SDL file")
    parser.add_argument(
        "--root-value",
        dest="root_value_path",
        help="JSON file used as the root value for execution",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Logging level",
    )
    return parser


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_cli_parser().parse_args(argv)


def apply_cli_args(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides on top of it."""
    cfg = load_config(args.config_file)
    updates: dict[str, Any] = {
        name: value
        for name in ("host", "port", "graphql_path", "schema_path", "root_value_path")
        if (value := getattr(args, name, None)) is not None
    }
    if args.log_level:
        updates["logging"] = cfg.logging.model_copy(
            update={"level": LogLevel(args.log_level)}
        )
    return AppConfig.model_validate({**cfg.model_dump(), **updates})


def load_root_value(path: str | None) -> Any:
    if not path:
        return None
    with Path(path).open(encoding="utf-8") as f:
        return json.load(f)


def build_executable_schema(cfg: AppConfig) -> GraphQLCoreExecutableSchema:
    if not cfg.schema_path:
        raise GraphQLTransportError(
            "No schema configured; pass --schema or set GRAPHQL_SCHEMA_PATH"
        )
    return GraphQLCoreExecutableSchema.from_file(
        cfg.schema_path, root_value=load_root_value(cfg.root_value_path)
    )


def _configure_logging(cfg: AppConfig) -> None:
    configure_logging_with_environment_tagging(
        level=getattr(logging, cfg.logging.level.value),
        log_file=cfg.logging.log_file,
    )


def main(
    argv: list[str] | None = None,
    run_server: Callable[[FastAPI, AppConfig], None] | None = None,
) -> None:
    args = parse_cli_args(argv)
    try:
        cfg = apply_cli_args(args)
        _configure_logging(cfg)
        app = build_app(build_executable_schema(cfg), cfg)
    except (GraphQLTransportError, OSError, ValueError) as e:
        sys.stderr.write(f"\nERROR: Failed to start GraphQL server: {e}\n")
        sys.exit(1)

    logging.info("Starting uvicorn on %s:%s", cfg.host, cfg.port)
    if run_server is not None:
        run_server(app, cfg)
        return
    uvicorn.run(app, host=cfg.host, port=cfg.port)


if __name__ == "__main__":
    main()
