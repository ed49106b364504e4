"""
owner_registry.api.schemas

Request/response models for the owner endpoints.

Responsibilities:
- Validate owner input (blank, length, email syntax, phone digits) before any
  service logic runs.
- Serialize `Owner` rows for responses.

Within one field only the first violated rule is reported; violations on
different fields are all reported together.
"""

from __future__ import annotations

import re

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from owner_registry.db.models import NAME_MAX_LENGTH

NAME_MIN_LENGTH = 3

# Unformatted Brazilian landline (10) or mobile (11) number.
PHONE_PATTERN = re.compile(r"\d{10,11}", re.ASCII)

# Error type used for every rule below; the handler passes its message through.
FIELD_ERROR_TYPE = "owner_field"

BLANK_MESSAGES = {
    "name": "O nome não pode estar em branco.",
    "email": "O e-mail não pode estar em branco.",
    "phone": "O telefone não pode estar em branco.",
}
NAME_LENGTH_MESSAGE = "O nome deve ter entre 3 e 100 caracteres."
EMAIL_FORMAT_MESSAGE = "O formato do e-mail é inválido."
PHONE_FORMAT_MESSAGE = "O telefone deve conter 10 ou 11 dígitos, sem formatação."


def _field_error(message: str) -> PydanticCustomError:
    return PydanticCustomError(FIELD_ERROR_TYPE, message)


def _require_not_blank(value: str, field: str) -> str:
    if not value.strip():
        raise _field_error(BLANK_MESSAGES[field])
    return value


class OwnerRequest(BaseModel):
    """
    Body of `insert` and `edit`. Any `id` sent by the client is ignored.
    """

    name: str
    email: str
    phone: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        _require_not_blank(value, "name")
        if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
            raise _field_error(NAME_LENGTH_MESSAGE)
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        _require_not_blank(value, "email")
        try:
            # Syntax only: intranet hosts like `localhost` and dotless domains are accepted.
            validate_email(value, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError as e:
            raise _field_error(EMAIL_FORMAT_MESSAGE) from e
        # Stored as submitted so uniqueness compares what the client sent.
        return value

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        _require_not_blank(value, "phone")
        if PHONE_PATTERN.fullmatch(value) is None:
            raise _field_error(PHONE_FORMAT_MESSAGE)
        return value


class OwnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str


# --- Module Notes -----------------------------------------------------------
# Length/pattern limits mirror the `proprietario` column sizes in `db.models`.
