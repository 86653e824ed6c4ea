"""
Exception handlers for the Accountability AI server.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from fastapi import FastAPI

from accountability_ai.core.errors import AuthenticationError, NotFoundError
from accountability_ai.core.logging_config import get_logger

from .domain_handler import authentication_handler, not_found_handler
from .global_handler import global_exception_handler

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    This function should be called during application initialization to set up
    all custom exception handlers.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(AuthenticationError, authentication_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = [
    "authentication_handler",
    "global_exception_handler",
    "not_found_handler",
    "setup_exception_handlers",
]
