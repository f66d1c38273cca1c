"""
Application factory for creating the FastAPI application.

The executable schema is built by the caller and shared, read-only, by every
request the application serves.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI

from gqltransport import __version__
from gqltransport.core.app.exception_handlers import register_exception_handlers
from gqltransport.core.app.middleware.logging_middleware import LoggingMiddleware
from gqltransport.core.config.app_config import AppConfig
from gqltransport.core.interfaces.executable_schema_interface import (
    IExecutableSchema,
)
from gqltransport.core.services.execution_dispatcher import ExecutionDispatcher
from gqltransport.core.transport.fastapi.json_post_transport import JsonPostTransport

logger = logging.getLogger(__name__)

# Every method is routed to the transport so that unsupported ones get the
# GraphQL "transport not supported" body instead of a bare 405.
GRAPHQL_ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def build_app(
    executable_schema: IExecutableSchema,
    config: AppConfig | dict[str, Any] | None = None,
) -> FastAPI:
    """Build the FastAPI application serving the GraphQL endpoint.

    Args:
        executable_schema: Schema and operation handlers shared by all requests
        config: The application configuration (AppConfig object or dict)

    Returns:
        The FastAPI ASGI application instance.
    """
    if config is None:
        config = AppConfig.from_env()
    elif isinstance(config, dict):
        config = AppConfig(**config)

    transport = JsonPostTransport(ExecutionDispatcher(executable_schema))

    app = FastAPI(title="GraphQL JSON transport", version=__version__)
    app.state.app_config = config
    app.state.transport = transport

    app.add_route(
        config.graphql_path,
        transport.handle,
        methods=GRAPHQL_ROUTE_METHODS,
        include_in_schema=False,
    )

    if config.logging.request_logging or config.logging.response_logging:
        app.add_middleware(
            LoggingMiddleware,
            log_requests=config.logging.request_logging,
            log_responses=config.logging.response_logging,
        )

    register_exception_handlers(app)

    logger.info("GraphQL endpoint mounted at %s", config.graphql_path)
    return app
