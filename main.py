from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from teamboard.config import get_settings
from teamboard.domain.exceptions import StoreError
from teamboard.infrastructure.database import engine, initialize_database
from teamboard.interfaces.api.routes import register_routes
from teamboard.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare logging and the database on startup; release the pool on shutdown."""

    setup_logging()
    initialize_database()
    yield
    engine.dispose()


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc), "retryable": exc.retryable},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Teamboard", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreError, store_error_handler)

    register_routes(app)
    return app


app = create_app()
