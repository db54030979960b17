"""Article errors and the handlers that turn them into JSON responses.

Every client-visible failure has the shape ``{"error": {"message": ...}}``.
Unexpected exceptions answer 500 with a fixed message and are logged with
their traceback; nothing from the exception itself reaches the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ArticleError(Exception):
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return error_body(self.message)


class ArticleNotFound(ArticleError):
    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, article_id: int):
        super().__init__("Article doesn't exist")
        self.article_id = article_id


class MissingField(ArticleError):
    def __init__(self, field: str):
        super().__init__(f"Missing {field} in request body")
        self.field = field


class NoFieldsProvided(ArticleError):
    def __init__(self):
        super().__init__("Please input at least one field for updating")


def error_body(message: str) -> dict:
    return {"error": {"message": message}}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ArticleError)
    async def article_error_handler(request: Request, exc: ArticleError):
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.http_status, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid request data"),
        )

    @app.exception_handler(ValidationError)
    async def body_validation_handler(request: Request, exc: ValidationError):
        logger.warning("Invalid article payload on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid request data"),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("server error"),
        )
