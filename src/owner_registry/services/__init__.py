"""
owner_registry.services

Service-layer package.

Responsibilities:
- Own transaction boundaries and persistence decisions.
- Enforce owner uniqueness rules before writing.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services take an AsyncSession and raise domain errors; HTTP mapping lives in `api.errors`.
