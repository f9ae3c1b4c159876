"""
Applicant lifecycle: status changes and the append-only feedback log.
"""

import logging
from datetime import datetime

from app.schemas.applicant import ApplicantStatus, REASONED_STATUSES
from app.services.common import object_id, serialize
from app.utils.dates import format_date_fields, to_storage_date
from app.utils.errors import NotFound

logger = logging.getLogger(__name__)


def _to_response(document):
    row = serialize(document)
    row.setdefault("feedback", [])
    return format_date_fields(row, "join_date")


async def create_applicant(db, fields: dict, cv_file_path: str = None) -> str:
    document = dict(fields)
    document["status"] = (document.get("status") or ApplicantStatus.PENDING).value
    document["join_date"] = to_storage_date(document.get("join_date"))
    document["cv_file_path"] = cv_file_path
    document["rejection_reason"] = None
    document["feedback"] = []
    document["created_at"] = datetime.utcnow()

    result = await db.applicants.insert_one(document)
    logger.info("Applicant %s created for job %s", result.inserted_id, document.get("job_id"))
    return str(result.inserted_id)


async def list_applicants(db):
    applicants = await db.applicants.find().sort("_id", -1).to_list(None)
    return [_to_response(applicant) for applicant in applicants]


async def get_applicant(db, applicant_id: str):
    applicant = await db.applicants.find_one({"_id": object_id(applicant_id, "applicant")})
    if not applicant:
        raise NotFound("Applicant not found")
    return _to_response(applicant)


async def update_status(db, applicant_id: str, status: ApplicantStatus, reason: str = None):
    """Overwrite the applicant's status.

    Any status may follow any other. The reason is kept only for statuses
    that carry one (Rejected, Withdrawn) and cleared otherwise.
    """
    status = ApplicantStatus(status)
    rejection_reason = reason if status in REASONED_STATUSES else None

    result = await db.applicants.update_one(
        {"_id": object_id(applicant_id, "applicant")},
        {"$set": {
            "status": status.value,
            "rejection_reason": rejection_reason,
            "status_updated_at": datetime.utcnow(),
        }},
    )
    if result.matched_count == 0:
        raise NotFound("Applicant not found")


async def append_feedback(db, applicant_id: str, entry):
    """Append one feedback entry to the end of the applicant's log.

    ``$push`` runs inside a single document update, so concurrent appends
    to the same applicant are all kept.
    """
    result = await db.applicants.update_one(
        {"_id": object_id(applicant_id, "applicant")},
        {"$push": {"feedback": entry}},
    )
    if result.matched_count == 0:
        raise NotFound("Applicant not found")
