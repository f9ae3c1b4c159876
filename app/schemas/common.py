from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(BaseModel):
    message: str
    insert_id: str


class DocumentReference(BaseModel):
    """One stored file attached to a record."""
    name: str
    path: str
