"""Map data-store failures to "operation failed" responses.

Constraint violations (duplicate username, liking a share twice) answer 409;
any other store error answers 503. Both carry the store's message and are
never retried.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


def _store_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc).splitlines()[0]


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    message = _store_message(exc)
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=409, content={"detail": f"Operation failed: {message}"})


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    message = _store_message(exc)
    logger.error("Data store error on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=503, content={"detail": f"Operation failed: {message}"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
