"""
FastAPI Application Entry Point - Application initialization and configuration
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError
import logging
import sys
import time

from taskdesk.core.config import get_settings, settings, validate_config, is_production
from taskdesk.core.dependencies import check_request_token
from taskdesk.core.exceptions import TaskDeskError, ValidationError
from taskdesk.database import check_db_connection, close_db_connections, get_pool_stats, init_db

# Configure application logging with timestamp and log level
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: validate config, check the database and create missing tables.
    Fail fast: if any check fails, the process exits.
    """
    logger.info("🚀 Starting TaskDesk API...")

    try:
        validate_config()
    except ValueError as e:
        logger.error(f"❌ Configuration validation failed: {e}")
        sys.exit(1)

    if not check_db_connection():
        logger.error("❌ Cannot connect to database. Exiting.")
        sys.exit(1)

    init_db()
    logger.info(f"📊 Database pool: {get_pool_stats()}")
    logger.info(f"✅ Application started - environment: {settings.ENVIRONMENT}, debug: {settings.DEBUG}")

    yield

    logger.info("🛑 Shutting down TaskDesk API...")
    close_db_connections()
    logger.info("✅ Shutdown complete")


def create_application() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        docs_url="/api/docs" if not is_production() else None,  # Hide Swagger docs in production
        redoc_url="/api/redoc" if not is_production() else None,
        description="Task tracking API: authentication, tasks and comments",
        lifespan=lifespan,
    )

    setup_middleware(app)
    setup_exception_handlers(app)
    setup_routers(app)

    return app


def setup_middleware(app: FastAPI) -> None:
    """Configure application middleware - runs on every request/response"""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every request with method, path, status, and processing time"""
        start_time = time.time()
        logger.info(f"➡️  {request.method} {request.url.path}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"⬅️  {request.method} {request.url.path} "
            f"- Status: {response.status_code} - Time: {process_time:.2f}s"
        )
        response.headers["X-Process-Time"] = str(process_time)
        return response


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Configure global exception handlers.
    Every failure is rendered as JSON {"message": ...} with the mapped status.
    """

    @app.exception_handler(TaskDeskError)
    async def domain_exception_handler(request: Request, exc: TaskDeskError):
        """Expected failures raised by services and the authorization gate"""
        logger.warning(f"⚠️  {type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Handle request validation errors (missing or malformed fields).
        Returns field-level error details alongside the summary message.
        Protected endpoints report a missing or bad token first.
        """
        try:
            await check_request_token(request, get_settings())
        except TaskDeskError as auth_error:
            return await domain_exception_handler(request, auth_error)

        errors = []
        for error in exc.errors():
            errors.append({
                "field": ".".join(str(x) for x in error["loc"]),  # e.g. "body.title"
                "message": error["msg"],
                "type": error["type"]
            })

        logger.warning(f"❌ Validation error on {request.url.path}: {errors}")
        summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors) or "Validation failed"
        return JSONResponse(
            status_code=ValidationError.status_code,
            content={"message": summary, "errors": errors}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Framework errors such as unknown routes or unsupported methods"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        """Database errors are logged with a stack trace and reported as 500"""
        logger.error(
            f"❌ Database error on {request.method} {request.url.path}: {str(exc)}",
            exc_info=True
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Catch-all for unexpected exceptions - the raw message is returned to the client"""
        logger.error(
            f"❌ Unhandled exception on {request.method} {request.url.path}: {str(exc)}",
            exc_info=True
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)}
        )


def setup_routers(app: FastAPI) -> None:
    """Mount API routers and the health endpoint"""

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health check endpoint for monitoring and load balancers.
        Returns application status, database connectivity, and version info.
        """
        db_healthy = check_db_connection()

        return {
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected",
            "pool_stats": get_pool_stats(),
            "timestamp": time.time(),
            "version": settings.APP_VERSION
        }

    from taskdesk.api import auth, tasks, users
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(tasks.router, prefix="/api/tasks", tags=["Tasks"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])


# Create application instance
app = create_application()


def run() -> None:
    """
    Development server entry point.
    Production: `uvicorn taskdesk.main:app --host 0.0.0.0 --port 5000`
    """
    import uvicorn
    uvicorn.run(
        "taskdesk.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,  # Auto-reload on code changes (development only)
        log_level="debug" if settings.DEBUG else "info"
    )


if __name__ == "__main__":
    run()
