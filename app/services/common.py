from bson import ObjectId

from app.utils.errors import InvalidInput


def object_id(value: str, entity: str) -> ObjectId:
    """Parse a path id, rejecting anything that is not an ObjectId."""
    if not ObjectId.is_valid(value):
        raise InvalidInput(f"Invalid {entity} ID")
    return ObjectId(value)


def serialize(document: dict) -> dict:
    """Swap Mongo's ``_id`` for a string ``id``."""
    row = dict(document)
    row["id"] = str(row.pop("_id"))
    return row
