"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from sqla_admin_api.exceptions import ConfigurationError, ForbiddenError, NotFoundError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for sqla-admin-api errors on a FastAPI app.

    Converts admin API exceptions into proper HTTP responses:

    - ``NotFoundError`` -> 404 Not Found
    - ``ForbiddenError`` -> 403 Forbidden
    - ``ConfigurationError`` -> 500 Internal Server Error

    Other exceptions raised by handlers are left to the application.

    Args:
        app: The FastAPI application instance.

    Example::

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(NotFoundError)
    async def not_found_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: NotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ForbiddenError)
    async def forbidden_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: ForbiddenError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=403,
            content={
                "detail": str(exc),
                "action": exc.action_name,
                "resource": exc.resource_id,
            },
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: ConfigurationError
    ) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})
