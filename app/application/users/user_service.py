"""
Service: user operations.

Email uniqueness is never checked here; the store rejects duplicates
with DuplicateKeyError, which propagates to the caller.
"""

import logging
from typing import Optional

from app.application.users.dtos import CreateUserCommand, UpdateUserCommand
from app.domain.users.entities import User
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user reads and writes against the UserRepository port."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    async def list_users(self) -> list[User]:
        return await self._repository.list_all()

    async def create_user(self, command: CreateUserCommand) -> User:
        user = await self._repository.add(name=command.name, email=command.email)
        logger.debug("Created user id=%s", user.id)
        return user

    async def get_user(self, user_id: str) -> Optional[User]:
        return await self._repository.get(user_id)

    async def update_user(
        self, user_id: str, command: UpdateUserCommand
    ) -> Optional[User]:
        return await self._repository.update(user_id, command.changes())

    async def delete_user(self, user_id: str) -> Optional[User]:
        return await self._repository.delete(user_id)
