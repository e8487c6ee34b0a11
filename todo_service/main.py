# todo_service/main.py
"""
Todo Service - FastAPI application.
"""
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

# Rate limiting
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from todo_service.api import health, todos
from todo_service.api.deps import enforce_rate_limit
from todo_service.core.config import Settings, get_settings
from todo_service.core.exceptions import TodoServiceError
from todo_service.core.logging import log, log_section, set_debug
from todo_service.db.store import TodoStore
from todo_service.lib.monitoring import register_monitoring


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the store once; it is shared by every request until shutdown."""
    settings = app.state.settings
    log_section("STARTUP", f"🚀 {settings.PROJECT_NAME} v{settings.VERSION} starting...",
                f"MongoDB: {settings.MONGO_URL} / {settings.DB_NAME}")

    store = TodoStore.from_settings(settings)
    await store.connect()
    app.state.store = store

    log("STARTUP", f"Server running on port {settings.PORT}")
    try:
        yield
    finally:
        log("STARTUP", "🔌 Shutting down...")
        store.close()


# ---------------------------------------------------------------------------
# ERROR HANDLERS
# ---------------------------------------------------------------------------

async def todo_service_error_handler(request: Request, exc: TodoServiceError):
    if exc.status_code >= 500:
        log("DB", f"❌ {request.method} {request.url.path} failed: {exc.message}", exc.details)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Keep the {"error": ...} shape for malformed bodies instead of FastAPI's 422 detail list
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_error_handler(request: Request, exc: Exception):
    # Anything the store did not classify, e.g. a stored document that no longer validates
    log("DB", f"❌ {request.method} {request.url.path} failed: {exc!r}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


# ---------------------------------------------------------------------------
# APP INITIALIZATION
# ---------------------------------------------------------------------------

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    set_debug(settings.DEBUG)

    docs = settings.DOCS_ENABLED
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Simple todo list API: create, list, toggle and delete todos.",
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url=settings.DOCS_URL if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.settings = settings

    app.add_exception_handler(TodoServiceError, todo_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    if settings.METRICS_ENABLED:
        register_monitoring(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate Limiting - default limit applies per client IP and route, enforced as a router dependency
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.RATE_LIMIT],
        enabled=settings.RATE_LIMIT_ENABLED,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    if settings.RATE_LIMIT_ENABLED:
        log("HTTP", f"🛡️ Rate limiting enabled: {settings.RATE_LIMIT}")

    rate_limited = [Depends(enforce_rate_limit)]
    app.include_router(health.router, dependencies=rate_limited)
    app.include_router(todos.router, dependencies=rate_limited)

    for route in app.routes:
        if hasattr(route, "path") and hasattr(route, "methods"):
            log("ROUTES", f"{', '.join(sorted(route.methods))} {route.path}")

    return app


app = create_app()


# ---------------------------------------------------------------------------
# RUN
# ---------------------------------------------------------------------------

def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
