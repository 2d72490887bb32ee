"""
HTTP rendering of failures.

Every error leaving the API uses the ``{"Message": ..., "Details": ...}``
body. Store failures map to 500 on every route.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from authors_api.core.result import ErrorKind, Failure, describe_validation_errors
from authors_api.schemas.errors import ErrorResponse

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(failure: Failure) -> JSONResponse:
    headers = None
    if failure.kind is ErrorKind.UNAUTHORIZED:
        headers = {'WWW-Authenticate': 'Bearer'}
    body = ErrorResponse(Message=failure.message, Details=failure.details)
    return JSONResponse(
        status_code=STATUS_BY_KIND[failure.kind],
        content=body.to_body(),
        headers=headers,
    )


async def handle_request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    body = ErrorResponse(Message='Invalid request.', Details=describe_validation_errors(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.to_body())


async def handle_http_exception(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, str):
        body = ErrorResponse(Message=exc.detail)
    else:
        body = ErrorResponse(Message='Request failed.', Details=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.to_body(),
        headers=getattr(exc, 'headers', None),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
