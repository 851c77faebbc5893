# student_api/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from student_api.core.exceptions import BaseAPIException, ValidationException
from student_api.core.logging import logger


def error_response(exc: BaseAPIException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details
            }
        },
    )


def field_errors(errors) -> list:
    """
    Collapse Pydantic errors into one {field, message} pair per field.

    The field is the first name in the error location after its source, so ("path", "id")
    becomes "id" and ("body", "email") becomes "email". A missing or
    unparsable body is reported under "body".
    """
    details = []
    seen = set()
    for error in errors:
        names = [x for x in error["loc"] if isinstance(x, str) and x not in ("body", "path", "query")]
        field = names[0] if names else "body"
        if field in seen:
            continue
        seen.add(field)
        details.append({"field": field, "message": error["msg"]})
    return details


# 1. Custom logic errors (raised by our own code)
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return error_response(exc)

# 2. Validation errors (raised by FastAPI/Pydantic before the handler runs)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(ValidationException(field_errors(exc.errors())))

# 3. Standard HTTP errors (unknown URL, method not allowed, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": "HTTP_ERROR",
                "message": str(exc.detail),
                "details": None
            }
        },
        headers=getattr(exc, "headers", None),
    )

# 4. General system errors (bugs, library failures)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred. Please contact support.",
                "details": None
            }
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
