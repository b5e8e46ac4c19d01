from fastapi import FastAPI

from .members import router as members_router
from .notes import router as notes_router
from .notifications import router as notifications_router
from .task_comments import router as task_comments_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(members_router)
    app.include_router(notes_router)
    app.include_router(task_comments_router)
    app.include_router(notifications_router)
