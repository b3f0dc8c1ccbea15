# backend/main.py
import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from config.logging_config import setup_logging
from config.settings import APP_VERSION, CORS_ORIGINS, DEBUG
from database.session import engine, init_db
from gateway.gateway_router import gateway_router
from services.errors import AppError, Messages

log = logging.getLogger(__name__)

API_PREFIX = "/api"


def _error_body(request: Request, status_code: int, message: str, error: str, **extra) -> dict:
    body = {
        "statusCode": status_code,
        "message": message,
        "error": error,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
        "requestId": request.headers.get("x-request-id") or str(uuid.uuid4()),
    }
    body.update(extra)
    return body


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.status_code, exc.message, exc.error),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(p) for p in e.get("loc", ()) if p != "body"), "message": e.get("msg")}
        for e in exc.errors()
    ]
    log.warning(f"[HTTP] {request.method} {request.url.path} rejected: {errors}")
    return JSONResponse(
        status_code=400,
        content=_error_body(request, 400, Messages.VALIDATION_ERROR, "Bad Request", validationErrors=errors),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    log.error(f"[HTTP] unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=_error_body(request, 500, Messages.INTERNAL_SERVER_ERROR, "Internal Server Error"),
    )


def _database_ok() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        log.error(f"Database connection failed: {e}")
        return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    log.info("FastAPI is starting")
    init_db()
    if _database_ok():
        log.info("Database connected")

    yield
    # Shutdown
    log.info("Shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Food Ordering API",
        description="Restaurants, menus, orders and payments with role and country based access",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/health")
    async def health():
        status = {
            "status": "healthy",
            "service": "food-ordering-api",
            "version": APP_VERSION,
        }
        if _database_ok():
            status["database"] = "connected"
        else:
            status["database"] = "error"
            status["status"] = "degraded"
        return status

    @app.get("/")
    async def root():
        return {
            "message": "Food Ordering API",
            "version": APP_VERSION,
            "api_base": API_PREFIX,
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "auth": f"{API_PREFIX}/auth",
                "restaurants": f"{API_PREFIX}/restaurants",
                "orders": f"{API_PREFIX}/orders",
                "payment_methods": f"{API_PREFIX}/payment-methods",
                "users": f"{API_PREFIX}/users",
            },
        }

    app.include_router(gateway_router, prefix=API_PREFIX)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    log_level = "debug" if DEBUG else "info"

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=log_level
    )
