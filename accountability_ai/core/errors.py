"""Domain error types raised by the service layer.

The API layer maps these onto HTTP status codes; integration failures have
their own hierarchy in ``accountability_ai.integrations.errors``.
"""

from __future__ import annotations

from typing import Optional


class AccountabilityError(Exception):
    """Base error for all domain failures."""


class NotFoundError(AccountabilityError):
    """Raised when a record is missing or not owned by the acting user.

    Both cases surface the same way so callers cannot probe for other users' records.
    """

    def __init__(self, entity: str, entity_id: Optional[int | str] = None, message: Optional[str] = None) -> None:
        super().__init__(message or f"{entity} not found or access denied")
        self.entity = entity
        self.entity_id = entity_id


class AuthenticationError(AccountabilityError):
    """Raised when the acting user cannot be resolved."""

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message)
