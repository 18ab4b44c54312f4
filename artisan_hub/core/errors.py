# artisan_hub/core/errors.py
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from artisan_hub.core.config import get_settings

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "/health",
    "/api/products",
    "/api/artisans",
    "/api/orders",
    "/api/dashboard",
    "/api/images/upload",
    "/api/marketing/description",
    "/api/social/generate",
    "/api/social/share",
    "/api/ai/content",
]


def upstream_failure(message: str, exc: Exception) -> HTTPException:
    """500 for a failed upstream/internal step; raw error text only in development."""
    detail = {"error": message}
    if get_settings().is_development:
        detail["details"] = str(exc)
    return HTTPException(status_code=500, detail=detail)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched route: starlette raises 404 with its default detail
    if exc.status_code == 404 and exc.detail == "Not Found":
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"Route {request.url.path} not found",
                "availableEndpoints": AVAILABLE_ENDPOINTS,
            },
        )
    if isinstance(exc.detail, dict):
        content = {"success": False, **{k: v for k, v in exc.detail.items() if v is not None}}
    else:
        content = {"success": False, "error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(content),
                        headers=getattr(exc, "headers", None))


async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Invalid request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


async def _unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().is_development else "Something went wrong!"
    return JSONResponse(status_code=500, content={"error": "Internal Server Error", "message": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
