from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from unravel.api.v1.router import api_router
from unravel.core.config import get_settings
from unravel.core.exceptions import DecoderNotFoundError, UnravelError, ValidationError
from unravel.core.logging_config import configure_logging
from unravel.models.schemas import ErrorResponse
from unravel.services.storage import get_dictionaries

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup: a corpus that fails to load must stop the process here
    configure_logging()
    get_dictionaries()
    yield
    # Shutdown


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Automatic decoding API. Paste an unknown blob and every known "
            "keyless encoding is tried in parallel until one yields text that "
            "looks like plaintext."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(UnravelError)
    async def unravel_error_handler(request: Request, exc: UnravelError) -> JSONResponse:
        """Render domain errors as ErrorResponse bodies."""
        if isinstance(exc, ValidationError):
            status_code = status.HTTP_400_BAD_REQUEST
        elif isinstance(exc, DecoderNotFoundError):
            status_code = status.HTTP_404_NOT_FOUND
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        body = ErrorResponse(
            error=type(exc).__name__,
            message=exc.message,
            details=exc.details,
        )
        return JSONResponse(status_code=status_code, content=body.model_dump())

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "unravel.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
