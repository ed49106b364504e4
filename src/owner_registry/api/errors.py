"""
owner_registry.api.errors

Exception handlers translating failures into HTTP responses.

Responsibilities:
- `OwnerNotFound` -> 404 with an empty body.
- `OwnerConflict` -> 409 with `{"erro": <message>}`.
- Request validation failures -> 400 with per-field messages.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND, HTTP_409_CONFLICT

from owner_registry.api.schemas import BLANK_MESSAGES
from owner_registry.observability.logging import get_logger
from owner_registry.services.errors import OwnerConflict, OwnerNotFound

log = get_logger(__name__)

INVALID_REQUEST_MESSAGE = "Dados inválidos."


def _field_of(loc: tuple[Any, ...]) -> str:
    # ("body", "name") -> "name"; ("path", "owner_id") -> "owner_id"; ("body",) -> "body"
    if len(loc) >= 2 and isinstance(loc[1], str):
        return loc[1]
    return str(loc[0]) if loc else "body"


def _message_of(field: str, error: dict[str, Any]) -> str:
    missing = error["type"] == "missing" or (
        error["type"] == "string_type" and error.get("input") is None
    )
    if missing and field in BLANK_MESSAGES:
        return BLANK_MESSAGES[field]
    return str(error["msg"])


def validation_errors_by_field(errors: list[dict[str, Any]]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for error in errors:
        field = _field_of(tuple(error.get("loc", ())))
        # First error per field wins.
        fields.setdefault(field, _message_of(field, error))
    return fields


async def _validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    fields = validation_errors_by_field(list(exc.errors()))
    log.info("request_invalid", fields=sorted(fields))
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"erro": INVALID_REQUEST_MESSAGE, "campos": fields},
    )


async def _not_found_handler(_: Request, exc: OwnerNotFound) -> Response:
    return Response(status_code=HTTP_404_NOT_FOUND)


async def _conflict_handler(_: Request, exc: OwnerConflict) -> JSONResponse:
    return JSONResponse(status_code=HTTP_409_CONFLICT, content={"erro": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_handler)
    app.add_exception_handler(OwnerNotFound, _not_found_handler)
    app.add_exception_handler(OwnerConflict, _conflict_handler)


# --- Module Notes -----------------------------------------------------------
# Validation messages come from `api.schemas`; only missing/null fields are rewritten here
# so that they carry the same Portuguese blank message as an empty string.
