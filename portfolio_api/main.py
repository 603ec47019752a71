"""FastAPI application factory. No business logic; only wiring, lifecycle and middleware."""

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio_api import __version__
from portfolio_api.api import health
from portfolio_api.api import router as api_router
from portfolio_api.api.deps import client_ip
from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.database import Database
from portfolio_api.core.errors import RateLimited
from portfolio_api.core.exception_handlers import register_exception_handlers
from portfolio_api.core.rate_limit import FixedWindowRateLimiter
from portfolio_api.core.responses import error_response
from portfolio_api.core.security import TokenService
from portfolio_api.services.media import MediaHost

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Baseline hardening headers added to every response unless a route sets its own.
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
}


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the process-wide clients at startup and release them on shutdown."""
    settings: Settings = app.state.settings
    database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    if settings.DATABASE_CREATE_TABLES:
        database.create_tables()
    app.state.database = database
    app.state.token_service = TokenService(
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )
    app.state.media_host = MediaHost(settings, httpx.AsyncClient())
    logger.info("Portfolio API started (environment=%s)", settings.APP_ENV)
    try:
        yield
    finally:
        await app.state.media_host.aclose()
        database.dispose()
        logger.info("Portfolio API stopped")


def _rate_limit_middleware(app: FastAPI, settings: Settings) -> None:
    general = FixedWindowRateLimiter(settings.RATE_LIMIT_MAX, settings.RATE_LIMIT_WINDOW_SEC)
    auth = FixedWindowRateLimiter(settings.AUTH_RATE_LIMIT_MAX, settings.RATE_LIMIT_WINDOW_SEC)
    app.state.rate_limiters = {"general": general, "auth": auth}
    api_prefix = settings.API_PREFIX + "/"
    auth_prefix = settings.API_PREFIX + "/auth"

    def _limited(limiter: FixedWindowRateLimiter, key: str, message: str | None = None) -> JSONResponse:
        exc = RateLimited(message)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message),
            headers={"Retry-After": str(limiter.retry_after(key))},
        )

    @app.middleware("http")
    async def rate_limit(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        path = request.url.path
        if not path.startswith(api_prefix) or request.method == "OPTIONS":
            return await call_next(request)
        key = client_ip(request) or "unknown"
        if general.hit(key):
            return _limited(general, key)
        if path.startswith(auth_prefix):
            # Only failed auth attempts count against the stricter limit.
            if auth.is_limited(key):
                return _limited(auth, key, "Too many login attempts, please try again later.")
            response = await call_next(request)
            if response.status_code >= 400:
                auth.hit(key)
            return response
        return await call_next(request)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application. Run with:

      uvicorn portfolio_api.main:create_app --factory
    """
    if settings is None:
        load_dotenv()
        settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Portfolio API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    if settings.RATE_LIMIT_ENABLED:
        _rate_limit_middleware(app, settings)

    @app.middleware("http")
    async def security_headers(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            logger.info(
                "%s %s %s %.2fms",
                request.method,
                request.url.path,
                status_code,
                (time.perf_counter() - started) * 1000.0,
            )

    # Middleware added later wraps earlier ones; CORS is outermost.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, Any]:
        """Root route; minimal payload for discovery."""
        prefix = settings.API_PREFIX
        return {
            "success": True,
            "message": "Welcome to Portfolio Backend API",
            "version": __version__,
            "documentation": "/docs",
            "endpoints": {
                name: f"{prefix}/{name}"
                for name in ("auth", "projects", "about", "skills", "contact", "upload")
            },
        }

    return app


def run() -> None:
    """Serve the app with uvicorn on PORT."""
    load_dotenv()
    settings = get_settings()
    uvicorn.run(
        "portfolio_api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        proxy_headers=True,
        forwarded_allow_ips=settings.FORWARDED_ALLOW_IPS,
    )


if __name__ == "__main__":
    run()
