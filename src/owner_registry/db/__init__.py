"""
owner_registry.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the ORM model, engine/session setup, and the owner repository.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Schema changes go through Alembic (`alembic/versions`); `init_db` is dev/test only.
