"""Translate the exceptions raised by the lower layers into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.core.exceptions import (
    AlreadyJoinedError,
    GameError,
    GameNotFoundError,
    GameStateError,
    IllegalMoveError,
    IncorrectTurnError,
    InvalidPlayerError,
    InvalidRequestError,
    RepositoryError,
)

logger = logging.getLogger(__name__)

# Most specific class first: lookup walks the exception's MRO
ERROR_STATUS_CODES: dict[type[GameError], int] = {
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    GameNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidPlayerError: status.HTTP_404_NOT_FOUND,
    AlreadyJoinedError: status.HTTP_410_GONE,
    IncorrectTurnError: 422,
    IllegalMoveError: 422,
    GameStateError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: GameError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return status.HTTP_400_BAD_REQUEST


def _error_response(status_code: int, reason: str, detail: str) -> JSONResponse:
    body = ErrorResponse(reason=reason, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error_response(status_code, exc.code, str(exc))


async def handle_repository_error(
    request: Request, exc: RepositoryError
) -> JSONResponse:
    logger.error("%s %s: repository unavailable: %s", request.method, request.url.path, exc)
    return _error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE, exc.code, str(exc)
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameError, handle_game_error)
    app.add_exception_handler(RepositoryError, handle_repository_error)
