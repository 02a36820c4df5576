"""
Error handling

Every failure raised while serving a request ends up in one place: the
handlers registered by `register_error_handlers`, which render the
`error.html` view with the error's status code.
"""
import functools
import inspect
import logging

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Oh no something went wrong!"


class AppError(Exception):
    """An error carrying the HTTP status it should be rendered with."""

    def __init__(self, message: str = "", status_code: int = 500):
        super().__init__(message)
        self.message = message or DEFAULT_MESSAGE
        self.status_code = status_code

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r}, {self.status_code})"


class NotFoundError(AppError):
    def __init__(self, message: str = "Page Not Found"):
        super().__init__(message, 404)


def catch_async(handler):
    """
    Wrap a route handler so anything it raises reaches the error pipeline
    as an AppError. Works for both coroutine and plain handlers.
    """
    if inspect.iscoroutinefunction(handler):
        @functools.wraps(handler)
        async def async_wrapper(*args, **kwargs):
            try:
                return await handler(*args, **kwargs)
            except AppError:
                raise
            except Exception as e:
                raise _wrap(e) from e
        return async_wrapper

    @functools.wraps(handler)
    def wrapper(*args, **kwargs):
        try:
            return handler(*args, **kwargs)
        except AppError:
            raise
        except Exception as e:
            raise _wrap(e) from e
    return wrapper


def _wrap(exc: Exception) -> AppError:
    return AppError(str(exc), getattr(exc, "status_code", 500))


def render_error(templates: Jinja2Templates, request: Request, err: AppError):
    return templates.TemplateResponse(
        request,
        "error.html",
        {"err": err},
        status_code=err.status_code,
    )


def register_error_handlers(app: FastAPI, templates: Jinja2Templates):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message,
                         exc_info=exc)
        else:
            logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return render_error(templates, request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            err = NotFoundError()
        else:
            err = AppError(str(exc.detail or ""), exc.status_code)
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, err.status_code, err.message)
        return render_error(templates, request, err)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return render_error(templates, request, AppError(str(exc)))
