"""create proprietario table

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "proprietario",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nome", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("telefone", sa.String(length=11), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_proprietario"),
        sa.UniqueConstraint("nome", name="uq_proprietario_nome"),
        sa.UniqueConstraint("email", name="uq_proprietario_email"),
        sa.UniqueConstraint("telefone", name="uq_proprietario_telefone"),
    )


def downgrade() -> None:
    op.drop_table("proprietario")
