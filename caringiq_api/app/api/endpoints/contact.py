"""
Contact form endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from caringiq_api.app.core.storage import IStorage, get_storage
from caringiq_api.app.schemas.contact import ContactMessage, ContactMessageCreate
from caringiq_api.app.services.contact_service import ContactService

router = APIRouter()


@router.post("", response_model=ContactMessage, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    message_in: ContactMessageCreate,
    storage: IStorage = Depends(get_storage),
) -> ContactMessage:
    """Submit the contact form.

    No uniqueness check is made; the same visitor may write as often
    as they like.
    """
    return await ContactService.submit(storage, message_in)


@router.get("", response_model=List[ContactMessage])
async def list_contact_messages(storage: IStorage = Depends(get_storage)) -> List[ContactMessage]:
    return await ContactService.list_messages(storage)
