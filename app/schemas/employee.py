# ========================================
# app/schemas/employee.py
# ========================================

from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.schemas.common import DocumentReference


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class EmployeeCreate(BaseModel):
    # clients send ctc, variable pay and probation as numbers or text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    employee_id: str
    department: Optional[str] = None
    position: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    join_date: Optional[date] = None
    ctc: Optional[str] = None
    location: Optional[str] = None
    market_segment: Optional[str] = None
    variable_pay: Optional[str] = None
    probation_period: Optional[str] = None
    probation_reduction: Optional[str] = None
    documents: List[DocumentReference] = []

    @field_validator("name", "employee_id")
    @classmethod
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class EmployeeArchive(BaseModel):
    reason: str
    last_working_date: date


class EmployeeResponse(BaseModel):
    id: str
    name: str
    employee_id: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    join_date: Optional[str] = None
    ctc: Optional[str] = None
    location: Optional[str] = None
    market_segment: Optional[str] = None
    bank_account_number: Optional[str] = None
    pf_number: Optional[str] = None
    uan: Optional[str] = None
    service_line: Optional[str] = None
    variable_pay: Optional[str] = None
    probation_period: Optional[str] = None
    probation_reduction: Optional[str] = None
    last_variable_pay_date: Optional[str] = None
    documents: List[DocumentReference] = []
    status: EmployeeStatus
    termination_reason: Optional[str] = None
    last_working_date: Optional[str] = None
    created_at: Optional[datetime] = None
