"""
owner_registry.services.errors

Domain errors raised by the service layer and translated to HTTP responses
by the handlers registered in `owner_registry.api.errors`.
"""

from __future__ import annotations


class OwnerError(Exception):
    pass


class OwnerNotFound(OwnerError):
    def __init__(self, owner_id: int) -> None:
        super().__init__(f"owner {owner_id} not found")
        self.owner_id = owner_id


class OwnerConflict(OwnerError):
    """
    A uniqueness violation. `field` is one of "name", "email", "phone", or
    None when the store rejected the write without telling us which column.
    """

    def __init__(self, field: str | None, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
