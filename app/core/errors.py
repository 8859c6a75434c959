"""
Error Responses - Partner Conversion Score Service
app/core/errors.py

Shared JSON error envelope and the RequestValidationError handler.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse



#  Validation Error Messages


FIELD_MESSAGES = {
    "conversion_rate": {
        "missing": "Conversion rate is required",
        "finite_number": "Conversion rate must be a finite number",
        "float_type": "Conversion rate must be a number",
        "float_parsing": "Conversion rate must be a valid number",
    },
    "rate": {
        "missing": "Query parameter 'rate' is required",
        "finite_number": "Query parameter 'rate' must be a finite number",
        "float_parsing": "Query parameter 'rate' must be a valid number",
    },
    "partners": {
        "missing": "Partners mapping is required",
        "dict_type": "Partners must be a mapping of partner ID to conversion rate",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "finite_number": "Field '{field}' must be a finite number",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "dict_type": "Field '{field}' must be an object",
    "json_invalid": "Malformed JSON request body",
}

# Request locations stripped from the reported field path
_LOCATION_PREFIXES = ("body", "query")


def get_validation_message(field: str, error_type: str) -> str:
    if field in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[field]:
            if key in error_type:
                return FIELD_MESSAGES[field][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


def error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[dict] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed"
        )

    err = errors[0]
    error_type = err.get("type", "")
    if "json_invalid" in error_type:
        return error_response(
            status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", "Malformed JSON request body"
        )

    field = ".".join(str(part) for part in err.get("loc", []) if part not in _LOCATION_PREFIXES)
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        get_validation_message(field, error_type),
        {"field": field, "type": error_type} if field else None,
    )
