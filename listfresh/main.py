from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from listfresh.api.responses import error_response
from listfresh.api.routes import health, list_info
from listfresh.config import configure_logging, get_settings
from listfresh.constants import MISSING_URI_MESSAGE, SECURITY_HEADERS
from listfresh.enums import ErrorCode


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging(get_settings())
    yield


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in {404, 405}:
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


async def request_validation_handler(_: Request, exc: RequestValidationError):
    missing = any(error.get("type") == "missing" for error in exc.errors())
    message = MISSING_URI_MESSAGE if missing else "Invalid request body"
    return error_response(ErrorCode.bad_request, message, 400)


def create_app() -> FastAPI:
    app = FastAPI(
        title="List Fresh",
        version="0.1.0",
        description="Reports when a Bluesky list last gained a member.",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response

    app.include_router(health.router)
    app.include_router(list_info.router)

    return app


app = create_app()
