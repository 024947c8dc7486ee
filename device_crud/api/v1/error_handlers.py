# Standard library imports
import logging
from http import HTTPStatus
from typing import Dict

# External package imports
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Local application imports
from ...domain.exceptions import DeviceError, ErrorKind
from ...utils.datetime_utils import to_iso, utc_now

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."

# Every ErrorKind must appear here
STATUS_BY_KIND: Dict[ErrorKind, HTTPStatus] = {
    ErrorKind.INVALID_CREATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_UPDATE: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_ID: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_DELETION: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_STATE: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_ARGUMENT: HTTPStatus.BAD_REQUEST,
    ErrorKind.DUPLICATE_DEVICE: HTTPStatus.CONFLICT,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.STORAGE_FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.UNHANDLED: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def build_error_response(status: HTTPStatus, message: str) -> JSONResponse:
    """Error body shared by every failure: timestamp, status, error, message"""
    return JSONResponse(
        status_code=status.value,
        content={
            "timestamp": to_iso(utc_now()),
            "status": status.value,
            "error": status.phrase,
            "message": message,
        },
    )


def _client_message(error: DeviceError) -> str:
    if error.kind is ErrorKind.UNHANDLED:
        return GENERIC_ERROR_MESSAGE
    if error.kind is ErrorKind.STORAGE_FAILURE and error.cause:
        return f"{error.message}: {error.cause}"
    return error.message


async def device_error_handler(request: Request, exc: DeviceError) -> JSONResponse:
    status = STATUS_BY_KIND[exc.kind]
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(f"{exc.kind.value} on {request.method} {request.url.path}: {exc.message} ({exc.cause})")
    else:
        logger.warning(f"{exc.kind.value} on {request.method} {request.url.path}: {exc.message}")
    return build_error_response(status, _client_message(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return build_error_response(STATUS_BY_KIND[ErrorKind.UNHANDLED], GENERIC_ERROR_MESSAGE)


def register_error_handlers(application: FastAPI) -> None:
    """Map DeviceError kinds, and any other exception, to JSON error responses"""
    application.add_exception_handler(DeviceError, device_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)
