"""
User service.

Resolves the acting user and applies preference patches.
"""

from __future__ import annotations

from typing import Optional

from accountability_ai.core.database.entities import User
from accountability_ai.core.database.repositories import UserRepository
from accountability_ai.core.errors import AuthenticationError
from accountability_ai.core.logging_config import get_logger
from accountability_ai.core.models.io import CheckinPreferencesUpdate, UserPreferencesUpdate
from accountability_ai.server.core.config import SingleUserConfig

logger = get_logger(__name__)


class UserService:
    """Account lookup and preference updates."""

    def __init__(self, users: UserRepository, single_user: Optional[SingleUserConfig] = None) -> None:
        self.users = users
        self.single_user = single_user or SingleUserConfig()

    async def current_user(self, user_id: Optional[int] = None) -> User:
        """Resolve the acting user.

        Args:
            user_id: Explicit user id from the request; when absent the default
                single-user account is used, and created on first use

        Returns:
            The acting User

        Raises:
            AuthenticationError: If ``user_id`` does not match an existing user
        """
        if user_id is not None:
            user = await self.users.get_by_id(user_id)
            if user is None:
                raise AuthenticationError(f"Unknown user id {user_id}")
            return user
        user = await self.users.get_by_email(self.single_user.email)
        if user is None:
            logger.info(f"Provisioning default user {self.single_user.email}")
            user = await self.users.get_or_create(self.single_user.email, self.single_user.name)
        return user

    async def update_user_preferences(self, user: User, update: UserPreferencesUpdate) -> User:
        """Patch only the preference fields present in ``update``."""
        changes = update.model_dump(include=update.model_fields_set)
        logger.debug(f"Updating preferences for user {user.id}: {sorted(changes)}")
        return await self.users.patch(user, changes)

    async def update_checkin_preferences(self, user: User, update: CheckinPreferencesUpdate) -> User:
        """Patch check-in frequency, voice toggle, preferred voice and timezone."""
        return await self.users.patch(user, update.model_dump(include=update.model_fields_set))
