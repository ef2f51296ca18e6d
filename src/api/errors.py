"""
Error handlers - Map failures to HTTP status codes and JSON error bodies.

Every error leaves the API as `{"error": "<message>"}`. The mapping from
error kind to status and message lives in `error_status` so all routes
answer identically:

- body validation failure     -> 400
- invalid path id, not found  -> 404
- storage or unexpected error -> 500, message names the operation only

Storage details are logged here and never sent to the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import InscriptionNotFound, StorageError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Inscription non trouvée"
MISSING_FIELDS_MESSAGE = "Tous les champs (name, contact, email) sont requis"
INVALID_JSON_MESSAGE = "Corps de requête JSON invalide"

_OPERATION_BY_METHOD = {
    "POST": "la création",
    "GET": "la récupération",
    "PUT": "la mise à jour",
    "DELETE": "la suppression",
}


def server_error_message(method: str) -> str:
    """Generic 500 message for the operation an HTTP method performs."""
    operation = _OPERATION_BY_METHOD.get(method.upper())
    if operation is None:
        return "Erreur serveur"
    return f"Erreur serveur lors de {operation}"


def error_status(exc: Exception, method: str) -> tuple[int, str]:
    """
    Map an exception raised while serving a request to (status, message).

    The body is judged first. A path parameter that fails validation is an
    id that cannot exist, so on its own it is reported as not found rather
    than as a bad request.
    """
    if isinstance(exc, RequestValidationError):
        errors = exc.errors()
        locations = {error["loc"][0] for error in errors if error["loc"]}
        if any(error["type"] == "json_invalid" for error in errors):
            return status.HTTP_400_BAD_REQUEST, INVALID_JSON_MESSAGE
        if "body" in locations or "path" not in locations:
            return status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_MESSAGE
        return status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE

    if isinstance(exc, InscriptionNotFound):
        return status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE

    return status.HTTP_500_INTERNAL_SERVER_ERROR, server_error_message(method)


def error_response(exc: Exception, method: str) -> JSONResponse:
    """Build the JSON error response for an exception."""
    status_code, message = error_status(exc, method)
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
        return error_response(exc, request.method)

    @app.exception_handler(InscriptionNotFound)
    async def not_found_handler(request: Request, exc: InscriptionNotFound) -> JSONResponse:
        return error_response(exc, request.method)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            f"Storage failure on {request.method} {request.url.path}: {exc.__cause__ or exc}",
            exc_info=exc,
        )
        return error_response(exc, request.method)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        # Starlette re-raises after this response is sent and the server logs the traceback.
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc!r}")
        return error_response(exc, request.method)
