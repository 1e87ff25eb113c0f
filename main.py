import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException

from job_board.core.config import settings
from job_board.core.database import create_session_factory, init_db
from job_board.core.exceptions import JobBoardError, ValidationError
from job_board.core.logging_config import setup_logging
from job_board.api.endpoints import health, jobs

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Missing database configuration raises here and stops the process.
    """
    # Startup
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS, service=settings.PROJECT_NAME)
    logger.info("Starting up Job Board API...")
    session_factory = create_session_factory(settings)
    init_db(session_factory, create_tables=settings.DATABASE_CREATE_TABLES)
    app.state.session_factory = session_factory
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down Job Board API...")
    session_factory.kw["bind"].dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Job posting board: list, create, approve and delete job postings",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(JobBoardError)
async def job_board_error_handler(request: Request, exc: JobBoardError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Router 404/405s use the same {"error": ...} body as the job routes"""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON bodies get the same 400 shape as schema failures"""
    violations = [
        {"path": [str(part) for part in err.get("loc", ())], "message": err.get("msg", ""), "code": err.get("type", "")}
        for err in exc.errors()
    ]
    return await job_board_error_handler(request, ValidationError(violations))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Include routers
app.include_router(health.router)
app.include_router(jobs.router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
