import logging
from datetime import datetime

from app.schemas.offer_letter import OfferLetterStatus
from app.services.common import object_id, serialize
from app.utils.dates import format_date_fields, to_storage_date
from app.utils.errors import NotFound

logger = logging.getLogger(__name__)

REVISABLE_FIELDS = (
    "candidate_name",
    "position",
    "salary",
    "join_date",
    "probation_period",
    "probation_reduction",
    "variable_pay",
)


async def create_offer_letter(db, fields: dict) -> str:
    document = dict(fields)
    document["join_date"] = to_storage_date(document.get("join_date"))
    document["date"] = to_storage_date(document.get("date"))
    document["status"] = OfferLetterStatus.DRAFT.value
    document["created_at"] = datetime.utcnow()

    result = await db.offer_letters.insert_one(document)
    return str(result.inserted_id)


async def list_offer_letters(db):
    letters = await db.offer_letters.find().sort("_id", -1).to_list(None)
    return [format_date_fields(serialize(letter), "join_date", "date") for letter in letters]


async def accept_offer_letter(db, letter_id: str):
    """Mark the letter Accepted. Accepting twice is a no-op."""
    result = await db.offer_letters.update_one(
        {"_id": object_id(letter_id, "offer letter")},
        {"$set": {"status": OfferLetterStatus.ACCEPTED.value}},
    )
    if result.matched_count == 0:
        raise NotFound("Offer letter not found")
    logger.info("Offer letter %s accepted", letter_id)


async def revise_offer_letter(db, letter_id: str, fields: dict):
    """Overwrite the revisable terms. Accepted letters may be revised too."""
    revision = {field: fields.get(field) for field in REVISABLE_FIELDS}
    revision["join_date"] = to_storage_date(revision["join_date"])
    revision["revised_at"] = datetime.utcnow()

    result = await db.offer_letters.update_one(
        {"_id": object_id(letter_id, "offer letter")},
        {"$set": revision},
    )
    if result.matched_count == 0:
        raise NotFound("Offer letter not found")
