"""FastAPI application entrypoint. No business logic; only wiring, middleware and error shaping."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from app.api import router as api_router
from app.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

app = FastAPI(
    title="REM Waste API",
    version="0.1.0",
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as {"error": <message>}, keeping auth headers."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON is an internal error; any other schema violation is a 400."""
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        logger.warning("Malformed JSON body", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback, return a generic message."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


app.include_router(api_router, prefix=settings.API_PREFIX)


# Registered last so it only sees requests no other route matched (including wrong methods).
@app.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
def route_not_found(request: Request, path: str) -> RedirectResponse:
    """404 for unknown routes; a trailing slash on a known route redirects to the bare path."""
    url_path = request.url.path
    if url_path != "/" and url_path.endswith("/"):
        trimmed = url_path.rstrip("/")
        scope = {**request.scope, "path": trimmed}
        for route in request.app.router.routes:
            if getattr(route, "endpoint", None) is route_not_found:
                continue
            match, _ = route.matches(scope)
            if match == Match.FULL:
                return RedirectResponse(url=str(request.url.replace(path=trimmed)), status_code=307)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Route not found")
