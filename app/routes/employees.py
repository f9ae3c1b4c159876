# ========================================
# app/routes/employees.py
# ========================================

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.database import get_db, get_fs_bucket
from app.schemas.common import CreatedResponse, MessageResponse
from app.schemas.employee import EmployeeArchive, EmployeeCreate, EmployeeResponse
from app.services import employees as employee_service
from app.utils.storage import discard_uploads, save_uploads

router = APIRouter(prefix="/api/employees", tags=["Employees"])

MAX_NEW_DOCUMENTS = 10


# ✅ 1. LIST ACTIVE EMPLOYEES
@router.get("", response_model=List[EmployeeResponse])
async def list_employees(db=Depends(get_db)):
    return await employee_service.list_active(db)


# ✅ 2. LIST ARCHIVED EMPLOYEES
@router.get("/archived", response_model=List[EmployeeResponse])
async def list_archived_employees(db=Depends(get_db)):
    return await employee_service.list_archived(db)


# ✅ 3. CREATE EMPLOYEE
@router.post("", response_model=CreatedResponse, status_code=201)
async def create_employee(employee: EmployeeCreate, db=Depends(get_db)):
    insert_id = await employee_service.create_employee(db, employee.model_dump())
    return {"message": "Employee created successfully!", "insert_id": insert_id}


# ✅ 4. UPDATE EMPLOYEE + APPEND UPLOADED DOCUMENTS
@router.put("/{employee_id}", response_model=MessageResponse)
async def update_employee(
    employee_id: str,
    name: str = Form(..., min_length=1, pattern=r"\S"),
    department: Optional[str] = Form(None),
    position: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    join_date: Optional[date] = Form(None),
    ctc: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    bank_account_number: Optional[str] = Form(None),
    pf_number: Optional[str] = Form(None),
    uan: Optional[str] = Form(None),
    service_line: Optional[str] = Form(None),
    variable_pay: Optional[str] = Form(None),
    probation_period: Optional[str] = Form(None),
    probation_reduction: Optional[str] = Form(None),
    last_variable_pay_date: Optional[date] = Form(None),
    new_documents: Optional[List[UploadFile]] = File(None),
    db=Depends(get_db),
    fs_bucket=Depends(get_fs_bucket),
):
    """
    Replace the employee's editable fields (all of them are resent each time)
    and add any uploaded files after the documents already on record.
    """
    fields = {
        "name": name.strip(),
        "department": department,
        "position": position,
        "email": email,
        "phone": phone,
        "join_date": join_date,
        "ctc": ctc,
        "location": location,
        "bank_account_number": bank_account_number,
        "pf_number": pf_number,
        "uan": uan,
        "service_line": service_line,
        "variable_pay": variable_pay,
        "probation_period": probation_period,
        "probation_reduction": probation_reduction,
        "last_variable_pay_date": last_variable_pay_date,
    }

    uploads = [upload for upload in (new_documents or []) if upload.filename][:MAX_NEW_DOCUMENTS]
    # 404 before anything is written to storage
    await employee_service.get_employee(db, employee_id)
    document_refs = await save_uploads(fs_bucket, uploads, "new_documents")

    try:
        await employee_service.update_employee(db, employee_id, fields, document_refs)
    except Exception:
        await discard_uploads(fs_bucket, document_refs)
        raise
    return {"message": "Employee updated successfully!"}


# ✅ 5. ARCHIVE EMPLOYEE
@router.put("/{employee_id}/delete", response_model=MessageResponse)
async def archive_employee(employee_id: str, archive: EmployeeArchive, db=Depends(get_db)):
    """Move the employee to Inactive. There is no way back."""
    await employee_service.archive_employee(db, employee_id, archive.reason, archive.last_working_date)
    return {"message": "Employee archived successfully"}
