from __future__ import annotations

from fastapi import FastAPI

from nano_studio.application.dtos.common_dto import HealthResponse, RootResponse
from nano_studio.infrastructure.api.middlewares import add_default_middlewares
from nano_studio.infrastructure.api.routes.preset_routes import router as preset_router
from nano_studio.infrastructure.api.routes.session_routes import router as session_router
from nano_studio.infrastructure.logging_config import configure_logging


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Nano Studio Backend",
        version="0.1.0",
        description="""
        ## Nano Studio Backend API

        Product-photo studio backed by a generative image model. Upload one
        product image, describe an edit in plain language, and step through the
        results with undo/redo.

        ### Features
        - **Edit Session**: Upload, generate, undo, redo and reset on a single linear history
        - **Comparison**: Original and current versions served separately for a before/after slider
        - **Export**: PNG, JPEG (flattened on white) or WEBP at 100%, 75% or 50% scale
        - **Presets**: Ready-made instructions and slider-driven instruction templates

        ### Concurrency
        Only one generation runs at a time. While it runs, every other session
        intent is answered with `409 Conflict`.

        ### Error Responses
        - **400 Bad Request**: The uploaded file could not be read as an image
        - **404 Not Found**: No image loaded or unknown history index / preset
        - **409 Conflict**: A generation is in progress, or no image is loaded
        - **415 Unsupported Media Type**: Upload is not PNG, JPEG or WEBP
        - **422 Unprocessable Entity**: Blank instruction or invalid parameters
        - **502 Bad Gateway**: The image service failed or returned unusable data
        """,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )
    add_default_middlewares(app)

    @app.get(
        "/",
        response_model=RootResponse,
        summary="API Root",
        description="Get basic information about the Nano Studio API",
    )
    def root():
        """Get API root information."""
        return {"status": "ok", "service": "nano-studio-backend", "version": app.version}

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check if the API service is running and healthy",
    )
    def health():
        """Check API health status."""
        return {"status": "healthy"}

    app.include_router(session_router)
    app.include_router(preset_router)
    return app


app = create_app()
