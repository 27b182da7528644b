import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from taskhub.modules.config import Settings, load_settings
from taskhub.modules.database import ConnectionManager, init_db
from taskhub.modules.errors import InternalError, TaskHubError
from taskhub.modules.report_endpoints import router as reports_router
from taskhub.modules.system_endpoints import router as system_router
from taskhub.modules.tasks.api import task_router
from taskhub.modules.users.api import auth_router, user_router
from taskhub.modules.users.auth.tokens import TokenService

logger = logging.getLogger("taskhub.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    manager: ConnectionManager = app.state.connection_manager
    await manager.connect()
    await init_db(manager.database)
    yield
    # Shutdown
    await manager.disconnect()
    for handler in logging.getLogger().handlers:
        handler.flush()


async def handle_taskhub_error(request: Request, exc: TaskHubError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error(f"Internal error at {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": "Internal server error."})
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": errors})


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception at {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Unexpected error occurred."})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an immutable Settings value."""
    settings = settings or load_settings()

    app = FastAPI(title="TaskHub", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.connection_manager = ConnectionManager(settings.database_url)
    app.state.token_service = TokenService(settings)

    app.add_exception_handler(TaskHubError, handle_taskhub_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Include Surface Routers
    app.include_router(system_router)
    app.include_router(auth_router)
    app.include_router(user_router)
    app.include_router(task_router)
    app.include_router(reports_router)

    return app
