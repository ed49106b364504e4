"""
owner_registry.db.models

Persistence schema for owner records.

Responsibilities:
- Map `Owner` onto the `proprietario` table.
- Declare UNIQUE constraints on name, email and phone so the store itself
  rejects duplicates that slip past the service checks. Their names
  (`uq_proprietario_<column>`) come from the naming convention on `Base`.
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from owner_registry.db.base import Base

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 320
PHONE_MAX_LENGTH = 11


class Owner(Base):
    __tablename__ = "proprietario"

    # Attribute names are English; column names match the existing schema.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        "nome", String(NAME_MAX_LENGTH), nullable=False, unique=True
    )
    email: Mapped[str] = mapped_column(
        "email", String(EMAIL_MAX_LENGTH), nullable=False, unique=True
    )
    phone: Mapped[str] = mapped_column(
        "telefone", String(PHONE_MAX_LENGTH), nullable=False, unique=True
    )

    def __repr__(self) -> str:
        return f"Owner(id={self.id!r}, name={self.name!r})"


# --- Module Notes -----------------------------------------------------------
# Column names are Portuguese to stay compatible with databases created by the
# previous owner service; Python attributes are English.
