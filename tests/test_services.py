"""Tests for the waitlist and contact services."""

from __future__ import annotations

import pytest

from caringiq_api.app.core.exceptions import DuplicateEmailError, SubmissionError
from caringiq_api.app.core.storage import MemStorage
from caringiq_api.app.schemas.contact import ContactMessageCreate
from caringiq_api.app.schemas.waitlist import WaitlistSignupCreate
from caringiq_api.app.services.contact_service import ContactService
from caringiq_api.app.services.waitlist_service import WaitlistService


async def test_signup_rejects_duplicate_email(storage: MemStorage) -> None:
    await WaitlistService.signup(storage, WaitlistSignupCreate(name="Ada", email="ada@x.com"))

    with pytest.raises(DuplicateEmailError) as exc_info:
        await WaitlistService.signup(storage, WaitlistSignupCreate(name="Someone", email="ada@x.com"))

    assert exc_info.value.email == "ada@x.com"
    assert isinstance(exc_info.value, SubmissionError)
    assert len(await WaitlistService.list_signups(storage)) == 1


async def test_signup_email_match_is_exact(storage: MemStorage) -> None:
    await WaitlistService.signup(storage, WaitlistSignupCreate(name="Ada", email="ada@x.com"))

    upper = await WaitlistService.signup(storage, WaitlistSignupCreate(name="Ada", email="ADA@x.com"))
    padded = await WaitlistService.signup(storage, WaitlistSignupCreate(name="Ada", email=" ada@x.com"))

    assert (upper.id, padded.id) == (2, 3)


async def test_rejected_signup_does_not_consume_an_id(storage: MemStorage) -> None:
    await WaitlistService.signup(storage, WaitlistSignupCreate(name="Ada", email="ada@x.com"))
    with pytest.raises(DuplicateEmailError):
        await WaitlistService.signup(storage, WaitlistSignupCreate(name="Ada", email="ada@x.com"))

    grace = await WaitlistService.signup(storage, WaitlistSignupCreate(name="Grace", email="grace@x.com"))

    assert grace.id == 2


async def test_contact_submit_and_list(storage: MemStorage) -> None:
    message = await ContactService.submit(
        storage, ContactMessageCreate(name="Ada", email="ada@x.com", reason="Hello")
    )

    assert message.id == 1
    assert await ContactService.list_messages(storage) == [message]
