"""
Business logic for waitlist signups.

The only rule enforced here is that an email may join the waitlist
once.  Emails are compared exactly as submitted: no case folding and
no whitespace trimming.
"""

import logging
from typing import List

from ..core.exceptions import DuplicateEmailError
from ..core.storage import IStorage
from ..schemas.waitlist import WaitlistSignup, WaitlistSignupCreate


class WaitlistService:
    """Service class for the product waitlist."""

    @classmethod
    async def signup(cls, storage: IStorage, data: WaitlistSignupCreate) -> WaitlistSignup:
        """Add a visitor to the waitlist and return the stored signup.

        Raises ``DuplicateEmailError`` if a signup with the same email
        already exists.  With ``MemStorage`` the check and the insert
        never yield to the event loop, so two concurrent requests cannot
        both pass the check.
        """
        logger = logging.getLogger(__name__)
        existing = await storage.get_waitlist_signups()
        if any(signup.email == data.email for signup in existing):
            logger.info("Rejected duplicate waitlist signup")
            raise DuplicateEmailError(data.email)
        signup = await storage.create_waitlist_signup(data)
        logger.info("Created waitlist signup %s", signup.id)
        return signup

    @classmethod
    async def list_signups(cls, storage: IStorage) -> List[WaitlistSignup]:
        """Return every signup in the order it was created."""
        return await storage.get_waitlist_signups()
