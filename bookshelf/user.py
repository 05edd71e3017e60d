"""User domain model and an in-memory user repository."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """Identifier of a user."""

    value: uuid.UUID


@dataclass(frozen=True)
class Username:
    """Name of a user."""

    value: str


@dataclass(frozen=True)
class User:
    """A user with an id and a name."""

    id: UserId
    name: Username


class UserRepository(ABC):
    """Storage for users."""

    @abstractmethod
    def get_users(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def get_user(self, user_id: UserId) -> User:
        """Return the user with this id or raise LookupError."""


class UserRepositoryOnMemory(UserRepository):
    """Repository holding users in a list."""

    def __init__(self, users: Iterable[User] | None = None) -> None:
        self._users = list(users or ())

    def get_users(self) -> list[User]:
        return list(self._users)

    def get_user(self, user_id: UserId) -> User:
        for user in self._users:
            if user.id == user_id:
                return user
        raise LookupError(f"User not found: {user_id.value}")