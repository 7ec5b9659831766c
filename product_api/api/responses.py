# product_api/api/responses.py
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_PAYLOAD = "Invalid request payload"


def respond_with_json(status_code: int, payload: Any, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(payload),
        headers=headers,
    )


def respond_with_error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return respond_with_json(status_code, {"error": message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    #HTTPException z handlerow i 404/405 z routera -> {"error": ...}
    return respond_with_error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Odrzucono body {request.method} {request.url.path}: {exc.errors()}")
    return respond_with_error(400, INVALID_PAYLOAD)


async def response_validation_handler(request: Request, exc: ResponseValidationError):
    # nie udalo sie zserializowac odpowiedzi, klient dostaje 500 zamiast pustego body
    logger.error(f"Response serialization failed for {request.method} {request.url.path}: {exc.errors()}")
    return respond_with_error(500, "Response serialization failed")


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ResponseValidationError, response_validation_handler)
