"""FastAPI application for the simple task API."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from simple_task_api import __version__
from simple_task_api.exceptions import StorageError
from simple_task_api.rest.routes import router as tasks_router

logger = logging.getLogger(__name__)

ENDPOINTS = {
    "GET /tasks": "List all tasks",
    "POST /tasks": "Create a task",
    "GET /tasks/{id}": "Get a single task",
    "PATCH /tasks/{id}/complete": "Mark task as completed",
    "DELETE /tasks/{id}": "Delete a task",
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def create_app() -> FastAPI:
    """Build the REST application with the task routes and error envelope handlers."""
    app = FastAPI(
        title="Simple Task API",
        description="Create, list, complete and delete tasks",
        version=__version__,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Storage error: {exc}")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/")
    async def root():
        """Service name, version and the available endpoints."""
        return {
            "name": "simple-task-api",
            "version": __version__,
            "endpoints": ENDPOINTS,
            "docs": "/docs",
            "health": "/health",
        }

    app.include_router(tasks_router)
    return app


app = create_app()
