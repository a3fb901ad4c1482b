from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from treino.core.logging import get_logger


class ConfigurationError(RuntimeError):
    """Credencial/variável de ambiente ausente para falar com o banco ou o storage."""


class ConflictError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def store_message(exc: SQLAlchemyError) -> str:
    # repassa a mensagem do driver sem reescrever
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc).strip()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(
            {"error": "Method not allowed"},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {"error": "Dados inválidos", "details": jsonable_encoder(exc.errors())},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError):
    get_logger().error("config.missing", error=str(exc))
    return JSONResponse(
        {"error": "Server configuration error", "details": str(exc)},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def conflict_error_handler(request: Request, exc: ConflictError):
    return JSONResponse({"error": exc.message}, status_code=status.HTTP_409_CONFLICT)


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    get_logger().exception("store.error", error=store_message(exc))
    return JSONResponse(
        {"error": store_message(exc) or "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    get_logger().exception("request.unhandled", error=str(exc))
    return JSONResponse(
        {"error": str(exc) or "Internal server error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
