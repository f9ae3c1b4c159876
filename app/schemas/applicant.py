# ========================================
# app/schemas/applicant.py
# ========================================

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, field_validator


class ApplicantStatus(str, Enum):
    PENDING = "Pending"
    REVIEWED = "Reviewed"
    SHORTLISTED = "Shortlisted"
    INTERVIEW = "Interview"
    OFFERED = "Offered"
    HIRED = "Hired"
    REJECTED = "Rejected"
    WITHDRAWN = "Withdrawn"


# Statuses that carry a reason alongside them
REASONED_STATUSES = {ApplicantStatus.REJECTED, ApplicantStatus.WITHDRAWN}


# 1. Input: Update Status
class ApplicantStatusUpdate(BaseModel):
    status: ApplicantStatus
    reason: Optional[str] = None


# 2. Input: Append Feedback
class ApplicantFeedbackCreate(BaseModel):
    """A feedback entry is either free text or a structured record (round, rating, ...)."""
    feedback: Union[str, Dict[str, Any]]

    @field_validator("feedback")
    @classmethod
    def not_empty(cls, v):
        if not v or (isinstance(v, str) and not v.strip()):
            raise ValueError("feedback must not be empty")
        return v


# 3. Output
class ApplicantResponse(BaseModel):
    id: str
    name: str
    job_id: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    total_experience: Optional[str] = None
    current_ctc: Optional[str] = None
    expected_ctc: Optional[str] = None
    agreed_ctc: Optional[str] = None
    join_date: Optional[str] = None
    status: str
    rejection_reason: Optional[str] = None
    passport: Optional[str] = None
    aadhaar: Optional[str] = None
    pan: Optional[str] = None
    location: Optional[str] = None
    reporting_manager: Optional[str] = None
    cv_file_path: Optional[str] = None
    feedback: List[Any] = []
    created_at: Optional[datetime] = None
