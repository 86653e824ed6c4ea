"""
User repository.

Data access for accounts and their preference fields.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import utc_now
from ..entities.users import User
from .base import AsyncBaseRepository


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address.

        Args:
            email: Email to look up

        Returns:
            User instance or None
        """
        result = await self.session.exec(select(User).where(User.email == email))
        return result.first()

    async def get_or_create(self, email: str, name: Optional[str] = None) -> User:
        """Return the user with ``email``, creating it when absent.

        When a concurrent request inserts the same email first, the unique
        constraint rejects this insert and the existing row is returned.
        """
        user = await self.get_by_email(email)
        if user is not None:
            return user
        try:
            return await self.create(User(email=email, name=name))
        except IntegrityError:
            await self.session.rollback()
            user = await self.get_by_email(email)
            if user is None:
                raise
            return user

    async def patch(self, user: User, updates: Dict[str, Any]) -> User:
        """Apply a partial update to a user.

        Args:
            user: The user to modify
            updates: Field values to set; keys that are not user fields are ignored

        Returns:
            The refreshed user
        """
        for key, value in updates.items():
            if key in User.model_fields:
                setattr(user, key, value)
        user.updated_at = utc_now()
        return await self.update(user)
