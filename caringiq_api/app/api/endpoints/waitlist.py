"""
Waitlist endpoints.

``POST`` adds a visitor to the waitlist; ``GET`` lists every signup
for admin and testing purposes.  An email can join only once; repeat
submissions are rejected with HTTP 400.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from caringiq_api.app.core.exceptions import DuplicateEmailError
from caringiq_api.app.core.storage import IStorage, get_storage
from caringiq_api.app.schemas.waitlist import WaitlistSignup, WaitlistSignupCreate
from caringiq_api.app.services.waitlist_service import WaitlistService

router = APIRouter()


@router.post("", response_model=WaitlistSignup, status_code=status.HTTP_201_CREATED)
async def join_waitlist(
    signup_in: WaitlistSignupCreate,
    storage: IStorage = Depends(get_storage),
) -> WaitlistSignup:
    """Join the waitlist."""
    try:
        return await WaitlistService.signup(storage, signup_in)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=List[WaitlistSignup])
async def list_waitlist(storage: IStorage = Depends(get_storage)) -> List[WaitlistSignup]:
    """Return all waitlist signups in the order they were created."""
    return await WaitlistService.list_signups(storage)
