"""
Domain Exception Handlers.

Maps the service layer's domain errors onto HTTP responses.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from accountability_ai.core.errors import AuthenticationError, NotFoundError
from accountability_ai.core.logging_config import get_logger

logger = get_logger(__name__)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)})
