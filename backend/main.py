from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from contextlib import asynccontextmanager
from config.settings import get_settings
from constants import ErrorReason, HTTPStatus
from database import init_database, close_client
from api import vehicles
from utils.logging_utils import configure_logging, set_logging_context, clear_logging_context
import logging
import uuid

# Configure logging (console, plus rotating file when LOG_DIR is set)
configure_logging(get_settings())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Starting Vehicle Rental API...")

    try:
        init_database()
        logger.info("✅ Database indexes ensured")
    except Exception as e:
        # The API still starts; requests will surface the storage failure as 503
        logger.error(f"❌ Failed to initialize database indexes: {e}", exc_info=True)

    yield

    logger.info("Shutting down...")
    close_client()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Vehicle Rental API",
    description="Fleet rental service enforcing one active rental per customer",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Attach a request id to every log line emitted while handling the request"""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request fields are client errors (400, not 422)"""
    logger.warning(f"{request.method} {request.url.path} - invalid request: {exc.errors()}")
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={
            "detail": {
                "message": "Invalid request",
                "reason": ErrorReason.INVALID_INPUT.value,
                "errors": jsonable_encoder(exc.errors()),
            }
        },
    )


# Include API routers
app.include_router(vehicles.router, prefix="/api/vehicle", tags=["vehicles"])


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": "Vehicle Rental API",
        "version": "1.0.0"
    }


@app.get("/")
def root():
    """Root endpoint - API only"""
    return {
        "message": "Vehicle Rental API",
        "docs": "/docs",
        "health": "/api/health"
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"🚀 Starting Vehicle Rental API on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port)
