# ========================================
# app/routes/applicants.py
# ========================================

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.database import get_db, get_fs_bucket
from app.schemas.applicant import (
    ApplicantFeedbackCreate,
    ApplicantResponse,
    ApplicantStatus,
    ApplicantStatusUpdate,
)
from app.schemas.common import CreatedResponse, MessageResponse
from app.services import applicants as applicant_service
from app.utils.storage import discard_uploads, save_uploads

router = APIRouter(prefix="/api/applicants", tags=["Applicants"])


# ✅ 1. LIST APPLICANTS
@router.get("", response_model=List[ApplicantResponse])
async def list_applicants(db=Depends(get_db)):
    """All applicants, newest first."""
    return await applicant_service.list_applicants(db)


# ✅ 2. CREATE APPLICANT (multipart, optional CV)
@router.post("", response_model=CreatedResponse, status_code=201)
async def create_applicant(
    name: str = Form(..., min_length=1, pattern=r"\S"),
    job_id: str = Form(..., min_length=1, pattern=r"\S"),
    title: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    total_experience: Optional[str] = Form(None),
    current_ctc: Optional[str] = Form(None),
    expected_ctc: Optional[str] = Form(None),
    agreed_ctc: Optional[str] = Form(None),
    join_date: Optional[date] = Form(None),
    status: Optional[ApplicantStatus] = Form(None),
    passport: Optional[str] = Form(None),
    aadhaar: Optional[str] = Form(None),
    pan: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    reporting_manager: Optional[str] = Form(None),
    cv_file: Optional[UploadFile] = File(None),
    db=Depends(get_db),
    fs_bucket=Depends(get_fs_bucket),
):
    """Create an applicant. Status defaults to Pending and feedback starts empty."""
    fields = {
        "name": name.strip(),
        "job_id": job_id.strip(),
        "title": title,
        "email": email,
        "phone": phone,
        "address": address,
        "total_experience": total_experience,
        "current_ctc": current_ctc,
        "expected_ctc": expected_ctc,
        "agreed_ctc": agreed_ctc,
        "join_date": join_date,
        "status": status,
        "passport": passport,
        "aadhaar": aadhaar,
        "pan": pan,
        "location": location,
        "reporting_manager": reporting_manager,
    }

    cv_refs = []
    if cv_file is not None and cv_file.filename:
        cv_refs = await save_uploads(fs_bucket, [cv_file], "cv_file")

    try:
        insert_id = await applicant_service.create_applicant(
            db, fields, cv_file_path=cv_refs[0]["path"] if cv_refs else None
        )
    except Exception:
        await discard_uploads(fs_bucket, cv_refs)
        raise
    return {"message": "Applicant created successfully!", "insert_id": insert_id}


# ✅ 3. GET APPLICANT
@router.get("/{applicant_id}", response_model=ApplicantResponse)
async def get_applicant(applicant_id: str, db=Depends(get_db)):
    return await applicant_service.get_applicant(db, applicant_id)


# ✅ 4. UPDATE STATUS
@router.put("/{applicant_id}/status", response_model=MessageResponse)
async def update_applicant_status(
    applicant_id: str,
    status_update: ApplicantStatusUpdate,
    db=Depends(get_db),
):
    """Set the applicant's status; a reason is kept for Rejected/Withdrawn."""
    await applicant_service.update_status(db, applicant_id, status_update.status, status_update.reason)
    return {"message": "Applicant status updated successfully"}


# ✅ 5. APPEND FEEDBACK
@router.post("/{applicant_id}/feedback", response_model=MessageResponse)
async def add_applicant_feedback(
    applicant_id: str,
    feedback: ApplicantFeedbackCreate,
    db=Depends(get_db),
):
    await applicant_service.append_feedback(db, applicant_id, feedback.feedback)
    return {"message": "Feedback added successfully"}
