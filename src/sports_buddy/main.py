"""
# Sports Buddy API Entry Point

Builds the FastAPI application: lifespan, middleware, routers, metrics and error
handlers.

## Startup

The lifespan connects to MongoDB before the first request is served. A missing
connection string fails settings validation at import time, and a failed
connection raises out of the lifespan; both stop the process. Nothing is retried.

## Error Handling

Three handler layers, all answering ``{"success": false, "message": ...}``:

1. `SportsBuddyError` subclasses map to their own status (400/401/404/500).
2. `RequestValidationError` (malformed JSON or wrongly-typed fields) maps to 400.
3. Any other exception maps to 500 without leaking internals.

## Running

```bash
uvicorn sports_buddy.main:app --port 5678
# or
sports-buddy
```
"""

import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.middleware.cors import CORSMiddleware
import uvicorn

from sports_buddy import __version__
from sports_buddy.config import settings
from sports_buddy.database import db_manager
from sports_buddy.managers.logging_manager import get_logger
from sports_buddy.routes import accounts_router, health_router, posts_router
from sports_buddy.utils.errors import SportsBuddyError
from sports_buddy.utils.logging_utils import (
    RequestLoggingMiddleware,
    log_application_lifecycle,
    log_error_with_context,
)

logger = get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Connect to MongoDB on startup and disconnect on shutdown.

    Raises:
        PyMongoError: The initial connection failed; startup is aborted.
    """
    startup_start_time = time.time()
    log_application_lifecycle(
        "startup_initiated",
        {"app_name": "Sports Buddy API", "version": __version__, "debug_mode": settings.DEBUG},
    )

    try:
        await db_manager.connect()
    except Exception as e:
        log_error_with_context(e, {"operation": "database_connection"})
        logger.critical("Cannot serve requests without a database connection, aborting startup")
        raise

    log_application_lifecycle(
        "database_connected",
        {
            "database_name": settings.MONGODB_DATABASE,
            "connection_url": (
                settings.MONGODB_URL.split("@")[-1] if "@" in settings.MONGODB_URL else settings.MONGODB_URL
            ),
        },
    )

    try:
        await db_manager.create_indexes()
    except Exception as e:
        log_error_with_context(e, {"operation": "index_creation"})

    log_application_lifecycle("startup_completed", {"startup_duration": f"{time.time() - startup_start_time:.3f}s"})

    yield

    shutdown_start_time = time.time()
    try:
        await db_manager.disconnect()
    except Exception as e:
        log_error_with_context(e, {"operation": "database_disconnection"})

    log_application_lifecycle("shutdown_completed", {"shutdown_duration": f"{time.time() - shutdown_start_time:.3f}s"})


app = FastAPI(
    title="Sports Buddy API",
    description="Publish and discover sport meetup posts by location, sport and date.",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "accounts", "description": "Registration, account lookup and login"},
        {"name": "posts", "description": "Sport meetup posts and search"},
        {"name": "health", "description": "Health probe"},
    ],
)

cors_origins = settings.cors_origins_list
logger.info(f"Configuring CORS with origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

routers_config = [
    ("accounts", accounts_router, "Registration, account lookup and login endpoints"),
    ("posts", posts_router, "Sport meetup post endpoints"),
    ("health", health_router, "Health probe"),
]

for router_name, router, description in routers_config:
    app.include_router(router)
    logger.info(f"Included {router_name} router: {description}")


# ─── ERROR HANDLERS ─────────────────────────────────────────────


@app.exception_handler(SportsBuddyError)
async def sports_buddy_error_handler(request: Request, exc: SportsBuddyError):
    """Render domain and store errors as ``{success: false, message}``."""
    if exc.http_status >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject malformed request data with 400 instead of FastAPI's default 422."""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid request data"},
    )


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all that never leaks internal details."""
    log_error_with_context(exc, {"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Internal server error"},
    )


logger.info("Setting up Prometheus metrics instrumentation...")
try:
    Instrumentator(should_group_status_codes=True, should_ignore_untemplated=True).instrument(app).expose(
        app, include_in_schema=False, endpoint="/metrics"
    )
except Exception as e:
    log_error_with_context(e, {"operation": "prometheus_setup"})

# Built web client, mounted last so API routes take precedence
if settings.STATIC_DIR and os.path.isdir(settings.STATIC_DIR):
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    logger.info(f"Serving static client from {settings.STATIC_DIR}")


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run("sports_buddy.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG, log_level="info")


if __name__ == "__main__":
    run()
