# ========================================
# app/routes/offer_letters.py
# ========================================

from typing import List

from fastapi import APIRouter, Depends

from app.database import get_db
from app.schemas.common import CreatedResponse, MessageResponse
from app.schemas.offer_letter import OfferLetterCreate, OfferLetterResponse, OfferLetterRevision
from app.services import offer_letters as offer_letter_service

router = APIRouter(prefix="/api/offer-letters", tags=["Offer Letters"])


# ✅ 1. LIST OFFER LETTERS
@router.get("", response_model=List[OfferLetterResponse])
async def list_offer_letters(db=Depends(get_db)):
    return await offer_letter_service.list_offer_letters(db)


# ✅ 2. CREATE OFFER LETTER (Draft)
@router.post("", response_model=CreatedResponse, status_code=201)
async def create_offer_letter(letter: OfferLetterCreate, db=Depends(get_db)):
    insert_id = await offer_letter_service.create_offer_letter(db, letter.model_dump())
    return {"message": "Offer letter created successfully!", "insert_id": insert_id}


# ✅ 3. ACCEPT OFFER LETTER
@router.put("/{letter_id}/accept", response_model=MessageResponse)
async def accept_offer_letter(letter_id: str, db=Depends(get_db)):
    await offer_letter_service.accept_offer_letter(db, letter_id)
    return {"message": "Offer letter accepted successfully!"}


# ✅ 4. REVISE OFFER LETTER
@router.put("/{letter_id}", response_model=MessageResponse)
async def revise_offer_letter(letter_id: str, revision: OfferLetterRevision, db=Depends(get_db)):
    await offer_letter_service.revise_offer_letter(db, letter_id, revision.model_dump())
    return {"message": "Offer letter revised successfully!"}
