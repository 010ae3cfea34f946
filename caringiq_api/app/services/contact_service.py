"""
Business logic for contact form messages.

Contact messages have no uniqueness rule; every valid submission is
stored.
"""

import logging
from typing import List

from ..core.storage import IStorage
from ..schemas.contact import ContactMessage, ContactMessageCreate


class ContactService:
    """Service class for contact form messages."""

    @classmethod
    async def submit(cls, storage: IStorage, data: ContactMessageCreate) -> ContactMessage:
        """Store a contact message and return it."""
        logger = logging.getLogger(__name__)
        message = await storage.create_contact_message(data)
        logger.info("Created contact message %s", message.id)
        return message

    @classmethod
    async def list_messages(cls, storage: IStorage) -> List[ContactMessage]:
        """Return every contact message in the order it was created."""
        return await storage.get_contact_messages()
