from __future__ import annotations

import logging
import uuid
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from coinprice.pricing import PriceError

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


def build_error_payload(
    code: str, message: str, details: dict[str, Any] | None = None
) -> dict[str, Any]:
    return {
        "error": {"code": code, "message": message, "details": details or {}}
    }


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    exc: Exception | None = None,
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    logger.log(
        logging.ERROR if status_code >= 500 else logging.INFO,
        "request_failed",
        exc_info=exc,
        extra={
            "event": "request_failed",
            "status_code": status_code,
            "error_code": code,
            "request_id": request_id,
        },
    )
    headers = {REQUEST_ID_HEADER: request_id} if request_id else None
    return JSONResponse(
        status_code=status_code,
        content=build_error_payload(code, message, details),
        headers=headers,
    )


async def _on_price_error(request: Request, exc: PriceError) -> JSONResponse:
    return _error_response(
        request, exc.status_code, exc.code, exc.message, exc.details
    )


async def _on_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": str(err.get("msg", ""))}
        for err in exc.errors()
    ]
    return _error_response(
        request,
        400,
        "INVALID_REQUEST",
        "Request validation failed",
        {"validation_errors": errors},
    )


async def _on_http_error(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # 404/405 from routing and body-parse failures raised by FastAPI
    code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
    return _error_response(request, exc.status_code, code, str(exc.detail))


async def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(
        request, 500, "INTERNAL_ERROR", "Internal server error", exc=exc
    )


def install_error_handling(app: FastAPI) -> None:
    """Tag requests with an ID and answer failures with an error envelope."""

    @app.middleware("http")
    async def request_id(request: Request, call_next: Any) -> Response:
        request.state.request_id = (
            request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        )
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        return response

    handlers: dict[Any, Any] = {
        PriceError: _on_price_error,
        RequestValidationError: _on_validation_error,
        StarletteHTTPException: _on_http_error,
        Exception: _on_unhandled,
    }
    for exc_class, handler in handlers.items():
        app.add_exception_handler(exc_class, handler)
