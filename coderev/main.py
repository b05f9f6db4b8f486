"""CodeRev review service - FastAPI entry point."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from coderev.config import settings
from coderev.core.exceptions import ApiException
from coderev.core.logging import get_logger
from coderev.core.schemas.responses import ErrorResponse, HealthResponse
from coderev.services.reviewer.routes import router as review_router

logger = get_logger("main")

app = FastAPI(
    title="CodeRev",
    description="AI-powered code review for snippets and public repositories",
    version="0.1.0",
)


@app.exception_handler(ApiException)
async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    """Handle custom API exceptions and return structured error response."""
    logger.warning(f"API error: {exc.message} (status={exc.status_code})")
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.message,
            details=exc.details if exc.details else None,
        ).model_dump(exclude_none=True),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies keep the error envelope and a server-error status."""
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        fields = [part for part in first.get("loc", ()) if isinstance(part, str) and part != "body"]
        if fields:
            message = f"{message}: {'.'.join(fields)}"
        message = f"{message}: {first.get('msg', 'invalid')}"
    logger.warning(f"Request validation failed on {request.url.path}: {message}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=message).model_dump(exclude_none=True),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so every failure keeps the error envelope."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal Server Error").model_dump(exclude_none=True),
    )


# Include routes
app.include_router(review_router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "coderev",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting CodeRev on {settings.host}:{settings.port}")
    uvicorn.run(
        "coderev.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
