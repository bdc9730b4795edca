"""
Modular FastAPI application simulating an AI content-generation backend.

Features:
- File upload held in memory (no storage)
- Simulated image, short video and avatar generation with configurable latency
- Asynchronous long video jobs that run detached from the request
- Settings update endpoint that echoes the submitted settings
"""
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import json
from typing import Any

from config import Config
from assets.routes import router as assets_router
from image.routes import router as image_router
from videos.routes import router as videos_router
from avatars.routes import router as avatars_router
from settings.routes import router as settings_router
from videos.services import cancel_background_jobs
from utils.logger import get_logger
from common.error_messages import ApiError, ErrorCode, error_body, format_error_detail, get_error_response

# Initialize logger
logger = get_logger("main")

HEALTH_MESSAGE = "Horizons backend server is running. Ready to accept API requests!"
MAX_LOGGED_BODY = 2000

# Sensitive fields that should be masked in logs
SENSITIVE_FIELDS = {
    'token', 'password', 'api_key', 'secret', 'authorization', 'access_token'
}


def mask_sensitive_data(data: Any, mask_value: str = "***MASKED***") -> Any:
    """
    Recursively mask sensitive fields in data structures.

    Args:
        data: Data to mask (dict, list, or string)
        mask_value: Value to replace sensitive data with

    Returns:
        Data with sensitive fields masked
    """
    if isinstance(data, dict):
        return {
            key: mask_value if str(key).lower() in SENSITIVE_FIELDS else mask_sensitive_data(value, mask_value)
            for key, value in data.items()
        }
    elif isinstance(data, list):
        return [mask_sensitive_data(item, mask_value) for item in data]
    elif isinstance(data, str):
        # Try to parse as JSON and mask if successful
        try:
            parsed = json.loads(data)
            if isinstance(parsed, (dict, list)):
                return json.dumps(mask_sensitive_data(parsed, mask_value))
        except (json.JSONDecodeError, ValueError):
            pass
        return data
    else:
        return data


def _loggable_body(raw: bytes) -> str:
    """Decode, mask and truncate a body for the request log."""
    text = mask_sensitive_data(raw.decode("utf-8", errors="replace"))
    if len(text) > MAX_LOGGED_BODY:
        text = text[:MAX_LOGGED_BODY] + "... [truncated]"
    return text


# Validate configuration on startup
try:
    Config.validate()
    logger.info("Configuration validated successfully")
except ValueError as e:
    logger.error(f"Configuration error: {e}")
    logger.error("Please check the environment variables in your .env file")

# Create FastAPI app
app = FastAPI(
    title="Horizons Backend",
    description="Mock content-generation API: uploads, simulated image/video/avatar generation and settings.",
    version="1.0.0"
)


# CORS middleware - any origin may call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    """Render application errors as {success: false, message}."""
    logger.warning(f"{request.method} {request.url.path} failed: {format_error_detail(exc.error_code, exc.detail)}")
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are rejected with a structured 400 instead of FastAPI's 422."""
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    message, status_code = get_error_response(ErrorCode.INVALID_FORMAT)
    return JSONResponse(status_code=status_code, content=error_body(message))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Routing errors (404, 405, ...) in the same shape as every other failure."""
    if exc.status_code == 404:
        message, _ = get_error_response(ErrorCode.RESOURCE_NOT_FOUND)
    elif exc.status_code == 405:
        message, _ = get_error_response(ErrorCode.METHOD_NOT_ALLOWED)
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions globally."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    message, status_code = get_error_response(ErrorCode.UNKNOWN_ERROR)
    return JSONResponse(status_code=status_code, content=error_body(message))


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests with timing and JSON request/response bodies."""
    start_time = time.time()
    full_url = str(request.url)

    log_msg = f"→ {request.method} {full_url} - Client: {request.client.host if request.client else 'unknown'}"
    content_type = request.headers.get("content-type", "")
    # Multipart uploads are binary; only JSON bodies are logged
    if request.method in ("POST", "PUT", "PATCH") and content_type.startswith("application/json"):
        body_bytes = await request.body()
        if body_bytes:
            log_msg += f"\n  Request Body: {_loggable_body(body_bytes)}"
    logger.info(log_msg)

    response = await call_next(request)

    process_time = (time.time() - start_time) * 1000
    log_msg = f"← {request.method} {full_url} - Status: {response.status_code} - Time: {process_time:.2f}ms"

    if response.headers.get("content-type", "").startswith("application/json"):
        response_body = b""
        async for chunk in response.body_iterator:
            response_body += chunk
        if response_body:
            log_msg += f"\n  Response Body: {_loggable_body(response_body)}"
        response = Response(
            content=response_body,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type
        )

    logger.info(log_msg)
    return response

logger.info("CORS middleware configured")

# Include routers
app.include_router(assets_router)
logger.info("Assets router included")

app.include_router(image_router)
logger.info("Image router included")

app.include_router(videos_router)
logger.info("Videos router included")

app.include_router(avatars_router)
logger.info("Avatars router included")

app.include_router(settings_router)
logger.info("Settings router included")


@app.on_event("startup")
async def startup_event():
    """Log startup event."""
    logger.info("=" * 80)
    logger.info("Horizons backend starting up")
    logger.info(f"Host: {Config.HOST}:{Config.PORT}")
    logger.info(f"Backend URL: http://localhost:{Config.PORT}")
    logger.info(f"Simulated delays (s): {Config.delays()}")
    logger.info("=" * 80)


@app.on_event("shutdown")
async def shutdown_event():
    """Cancel detached jobs and log shutdown."""
    await cancel_background_jobs()
    logger.info("=" * 80)
    logger.info("Horizons backend shutting down")
    logger.info("=" * 80)


@app.get("/", response_class=PlainTextResponse)
def root():
    """Availability message."""
    return HEALTH_MESSAGE


@app.get("/healthz")
def health():
    """Health check endpoint."""
    logger.debug("Health check requested")
    return {"status": "ok"}


# Run server directly
if __name__ == "__main__":
    logger.info(f"Starting server on {Config.HOST}:{Config.PORT}")
    uvicorn.run(
        "app:app",
        host=Config.HOST,
        port=Config.PORT,
        log_level="info"
    )
