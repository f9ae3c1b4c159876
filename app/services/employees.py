"""
Employee lifecycle: Active -> Inactive archival and document merging.
"""

import logging
from datetime import datetime

from app.schemas.employee import EmployeeStatus
from app.services.common import object_id, serialize
from app.utils.dates import format_date_fields, to_storage_date
from app.utils.errors import NotFound

logger = logging.getLogger(__name__)

DATE_FIELDS = ("join_date", "last_working_date", "last_variable_pay_date")


def _to_response(document):
    row = serialize(document)
    row.setdefault("documents", [])
    return format_date_fields(row, *DATE_FIELDS)


def _storage_fields(fields: dict) -> dict:
    document = dict(fields)
    for field in DATE_FIELDS:
        if field in document:
            document[field] = to_storage_date(document[field])
    return document


async def create_employee(db, fields: dict) -> str:
    document = _storage_fields(fields)
    document["documents"] = list(document.get("documents") or [])
    document["status"] = EmployeeStatus.ACTIVE.value
    document["termination_reason"] = None
    document["last_working_date"] = None
    document["created_at"] = datetime.utcnow()

    result = await db.employees.insert_one(document)
    logger.info("Employee %s created", result.inserted_id)
    return str(result.inserted_id)


async def get_employee(db, employee_id: str):
    employee = await db.employees.find_one({"_id": object_id(employee_id, "employee")})
    if not employee:
        raise NotFound("Employee not found")
    return _to_response(employee)


async def _list_by_status(db, status: EmployeeStatus):
    employees = await db.employees.find({"status": status.value}).sort("_id", -1).to_list(None)
    return [_to_response(employee) for employee in employees]


async def list_active(db):
    return await _list_by_status(db, EmployeeStatus.ACTIVE)


async def list_archived(db):
    return await _list_by_status(db, EmployeeStatus.INACTIVE)


async def update_employee(db, employee_id: str, fields: dict, new_documents=()):
    """Overwrite the editable fields and append newly uploaded documents.

    New documents go after the persisted ones in the same update, so
    nothing already stored is dropped or reordered.
    """
    update = {"$set": _storage_fields(fields)}
    if new_documents:
        update["$push"] = {"documents": {"$each": list(new_documents)}}

    result = await db.employees.update_one({"_id": object_id(employee_id, "employee")}, update)
    if result.matched_count == 0:
        raise NotFound("Employee not found")


async def archive_employee(db, employee_id: str, reason: str, last_working_date):
    result = await db.employees.update_one(
        {"_id": object_id(employee_id, "employee")},
        {"$set": {
            "status": EmployeeStatus.INACTIVE.value,
            "termination_reason": reason,
            "last_working_date": to_storage_date(last_working_date),
        }},
    )
    if result.matched_count == 0:
        raise NotFound("Employee not found")
    logger.info("Employee %s archived", employee_id)
