# app/api/__init__.py
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routers import (
    auth,
    cart_items,
    carts,
    categories,
    health,
    images,
    orders,
    products,
    users,
)
from app.domain.exceptions import ShopError
from app.domain.schemas import ApiResponse
from app.utils.settings import API_PREFIX
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _envelope(status_code: int, message: str, data=None) -> JSONResponse:
    body = ApiResponse(message=message, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(ShopError)
    async def shop_error_handler(request: Request, exc: ShopError):
        return _envelope(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return _envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _envelope(422, "Invalid request", exc.errors())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
        return _envelope(500, "Internal server error")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Dreamshops",
        version="1.0.0",
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    for module in (auth, categories, products, images, carts, cart_items, orders, users):
        app.include_router(module.router, prefix=API_PREFIX)

    return app
