import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

log = logging.getLogger(__name__)


async def general_exception_handler(
    request: Request, exception: Exception
) -> JSONResponse:
    if isinstance(exception, RequestValidationError):
        errors = [
            {
                "type": error["type"],
                "loc": [str(location) for location in error["loc"]],
                "msg": error["msg"],
            }
            for error in exception.errors()
        ]
        return JSONResponse(
            content={"error": "invalid_request", "errors": errors},
            status_code=400,
        )

    log.exception(
        "Unexpected error handling %s %s",
        request.method,
        request.url.path,
        exc_info=exception,
    )
    return JSONResponse(
        content={
            "error": "server_error",
            "error_description": "Something went wrong",
        },
        status_code=500,
    )
