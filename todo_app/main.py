# todo_app/main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_app.core.config import ENV, HOST, IDENTITY_COOKIE_NAME, LOG_LEVEL, PORT
from todo_app.core.errors import NotAuthenticatedError, TodoAppError
from todo_app.core.identity import decode_identity
from todo_app.core.logging_setup import setup_logging
from todo_app.core.method_override import MethodOverrideMiddleware
from todo_app.core.views import render
from todo_app.db.session import check_connection, create_all_tables
from todo_app.routers import auth, health, task

logger = logging.getLogger(__name__)

ERROR_VIEW = "pages/error-view.html"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # a database that cannot be reached keeps the app from starting
    check_connection()
    logger.info("Database is reachable")
    if ENV == "dev":
        create_all_tables()
    yield


app = FastAPI(title="Todo App", version="0.1.0", lifespan=lifespan)

app.add_middleware(MethodOverrideMiddleware)


@app.middleware("http")
async def resolve_identity(request: Request, call_next):
    request.state.identity = decode_identity(request.cookies.get(IDENTITY_COOKIE_NAME))
    return await call_next(request)


app.include_router(task.router)
app.include_router(auth.auth_router)
app.include_router(health.router)


# ──────────────────────────────────────────────────────────────────────────────
# Error handlers
# ──────────────────────────────────────────────────────────────────────────────
@app.exception_handler(NotAuthenticatedError)
async def redirect_to_login(request: Request, exc: NotAuthenticatedError):
    return RedirectResponse("/login", status_code=303)


@app.exception_handler(TodoAppError)
async def render_app_error(request: Request, exc: TodoAppError):
    return render(request, ERROR_VIEW, {"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def render_validation_error(request: Request, exc: RequestValidationError):
    logger.info("Rejected request %s %s | %s", request.method, request.url.path, exc.errors())
    return render(request, ERROR_VIEW, {"error": "Invalid request"}, status_code=400)


@app.exception_handler(SQLAlchemyError)
async def render_database_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return render(request, ERROR_VIEW, {"error": TodoAppError.default_message}, status_code=500)


@app.exception_handler(Exception)
async def render_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return render(request, ERROR_VIEW, {"error": TodoAppError.default_message}, status_code=500)


@app.exception_handler(StarletteHTTPException)
async def route_not_found(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse("This route does not exist", status_code=404)
    return await http_exception_handler(request, exc)


def run():
    setup_logging(LOG_LEVEL)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
