import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OfferLetterStatus(str, Enum):
    DRAFT = "Draft"
    ACCEPTED = "Accepted"


class OfferLetterCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    candidate_name: str
    position: str
    salary: Optional[str] = None
    join_date: Optional[dt.date] = None
    probation_period: Optional[str] = None
    probation_reduction: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    applicant_id: Optional[str] = None
    variable_pay: Optional[str] = None
    current_ctc: Optional[str] = None
    date: Optional[dt.date] = None


# Only these fields are revisable
class OfferLetterRevision(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    candidate_name: str
    position: str
    salary: Optional[str] = None
    join_date: Optional[dt.date] = None
    probation_period: Optional[str] = None
    probation_reduction: Optional[str] = None
    variable_pay: Optional[str] = None


class OfferLetterResponse(BaseModel):
    id: str
    candidate_name: str
    position: str
    salary: Optional[str] = None
    join_date: Optional[str] = None
    probation_period: Optional[str] = None
    probation_reduction: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    applicant_id: Optional[str] = None
    variable_pay: Optional[str] = None
    current_ctc: Optional[str] = None
    date: Optional[str] = None
    status: OfferLetterStatus
    created_at: Optional[dt.datetime] = None
