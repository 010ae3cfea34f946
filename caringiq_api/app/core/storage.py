"""
In‑memory submission store.

This module replaces a database for the landing page: users, waitlist
signups and contact messages live in plain dictionaries keyed by an
integer ID that the store assigns itself.  Each collection has its own
counter starting at 1.  Nothing is persisted, so restarting the process
empties every collection and resets every counter.

All operations are coroutines so the in‑memory store can later be
replaced by a database‑backed implementation of ``IStorage`` without
touching the services or routes.  The store performs no validation and
raises no domain errors; lookups that find nothing return ``None``.

The store is created by ``create_app`` and kept on ``app.state``.
Routes receive it through the ``get_storage`` dependency, which lets
tests build a fresh instance per test.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import Request

from ..schemas.contact import ContactMessage, ContactMessageCreate
from ..schemas.user import User, UserCreate
from ..schemas.waitlist import WaitlistSignup, WaitlistSignupCreate

logger = logging.getLogger(__name__)


class IStorage(ABC):
    """Data access contract shared by every store implementation."""

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User:
        ...

    @abstractmethod
    async def create_waitlist_signup(self, data: WaitlistSignupCreate) -> WaitlistSignup:
        ...

    @abstractmethod
    async def create_contact_message(self, data: ContactMessageCreate) -> ContactMessage:
        ...

    @abstractmethod
    async def get_waitlist_signups(self) -> List[WaitlistSignup]:
        ...

    @abstractmethod
    async def get_contact_messages(self) -> List[ContactMessage]:
        ...


class MemStorage(IStorage):
    """Process‑local implementation of ``IStorage``.

    Python dictionaries preserve insertion order, so listing a
    collection returns records in the order they were created.  None of
    the methods awaits anything, which means a create runs to
    completion on the event loop before any other request is served.
    """

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._waitlist_signups: Dict[int, WaitlistSignup] = {}
        self._contact_messages: Dict[int, ContactMessage] = {}
        self._current_user_id = 1
        self._current_waitlist_id = 1
        self._current_contact_id = 1

    async def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Return the first user whose username matches exactly, if any."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, data: UserCreate) -> User:
        user_id = self._current_user_id
        self._current_user_id += 1
        user = User(id=user_id, **data.model_dump())
        self._users[user_id] = user
        logger.debug("Stored user %s", user_id)
        return user

    async def create_waitlist_signup(self, data: WaitlistSignupCreate) -> WaitlistSignup:
        signup_id = self._current_waitlist_id
        self._current_waitlist_id += 1
        signup = WaitlistSignup(
            id=signup_id,
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._waitlist_signups[signup_id] = signup
        logger.debug("Stored waitlist signup %s", signup_id)
        return signup

    async def create_contact_message(self, data: ContactMessageCreate) -> ContactMessage:
        message_id = self._current_contact_id
        self._current_contact_id += 1
        message = ContactMessage(
            id=message_id,
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._contact_messages[message_id] = message
        logger.debug("Stored contact message %s", message_id)
        return message

    async def get_waitlist_signups(self) -> List[WaitlistSignup]:
        return list(self._waitlist_signups.values())

    async def get_contact_messages(self) -> List[ContactMessage]:
        return list(self._contact_messages.values())


def get_storage(request: Request) -> IStorage:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.storage
