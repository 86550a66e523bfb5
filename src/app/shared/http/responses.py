from typing import TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.core.result import NotFound, Ok, Result
from app.shared import Logger

__all__ = ["register_error_handlers", "unwrap"]

logger = Logger(__name__).get_logger()

T = TypeVar("T")


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` result.

    Raises HTTPException(404) carrying the record id when the result is
    ``NotFound``.
    """
    match result:
        case Ok(value=value):
            return value
        case NotFound() as missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=missing.message
            )

    raise TypeError(f"Unexpected result: {result!r}")


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Failed to process request %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(Exception, server_error_handler)
