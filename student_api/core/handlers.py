# student_api/core/handlers.py
from typing import Dict, List

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from student_api.core.exceptions import BaseAPIException
from student_api.core.logging import logger
from student_api.schemas.student import STUDENT_FIELDS

# Error type -> message template, in the wording clients of the API already parse
MESSAGES = {
    "missing": "The {field} field is required.",
    "string_too_short": "The {field} field is required.",
    "string_type": "The {field} must be a string.",
    "string_too_long": "The {field} may not be greater than {max_length} characters.",
    "string_pattern_mismatch": "The {field} format is invalid.",
    "email_invalid": "The {field} must be a valid email address.",
    "int_parsing": "The {field} must be an integer.",
    "int_type": "The {field} must be an integer.",
}

FIELD_MESSAGES = {
    ("phone", "string_pattern_mismatch"): "The phone must be 10 digits.",
}


def format_validation_errors(errors: List[dict]) -> Dict[str, List[str]]:
    """
    Turn Pydantic/FastAPI error dicts into a `field -> [messages]` map.

    A body that is missing or is not an object reports every student field as required.
    """
    details: Dict[str, List[str]] = {}
    for error in errors:
        loc = tuple(error.get("loc", ()))
        error_type = error.get("type", "")

        if error_type == "json_invalid":
            details.setdefault("body", []).append("The request body must be valid JSON.")
            continue

        if loc == ("body",):
            for field in STUDENT_FIELDS:
                details.setdefault(field, []).append(MESSAGES["missing"].format(field=field))
            continue

        # Drop the "body"/"path"/"query" prefix
        field = ".".join(str(x) for x in loc[1:]) or "body"
        template = FIELD_MESSAGES.get((field, error_type)) or MESSAGES.get(error_type)
        if template is None:
            message = error.get("msg", "The value is invalid.")
        else:
            ctx = error.get("ctx") or {}
            message = template.format(field=field.replace("_", " "), **ctx)
        details.setdefault(field, []).append(message)
    return details


# 1. Custom domain errors raised by endpoints and services
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status_code, "message": exc.message},
    )


# 2. Validation errors raised by Pydantic before the endpoint runs
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = format_validation_errors(exc.errors())
    logger.info(f"Validation failed for {request.method} {request.url.path}: {sorted(errors)}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"status": status.HTTP_422_UNPROCESSABLE_ENTITY, "errors": errors},
    )


# 3. Standard HTTP errors (unknown URL, wrong method...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status_code, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# 4. Anything else (bugs, driver errors outside the write paths)
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": status.HTTP_500_INTERNAL_SERVER_ERROR, "message": "Something Went Wrong"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
