"""
File storage on MongoDB GridFS.

Uploaded blobs are referenced by a stable public path, ``/uploads/<file id>``,
which is what applicants and employees persist.
"""

import io
import logging
import os
import time
from datetime import datetime
from pathlib import PurePath

from bson import ObjectId
from fastapi import UploadFile
from gridfs.errors import NoFile

from app.utils.errors import InvalidInput, NotFound

logger = logging.getLogger(__name__)

UPLOADS_PREFIX = "/uploads"
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_MB", 10)) * 1024 * 1024


def reference_for(file_id) -> str:
    return f"{UPLOADS_PREFIX}/{file_id}"


def stored_filename(field_name: str, original_filename: str) -> str:
    """``<field>-<epoch millis><ext>``, so two uploads never collide by name."""
    extension = PurePath(original_filename or "").suffix
    return f"{field_name}-{int(time.time() * 1000)}{extension}"


async def save_upload(fs_bucket, upload: UploadFile, field_name: str) -> dict:
    """Store one uploaded file and return its document entry ``{name, path}``."""
    too_large = InvalidInput(f"File {upload.filename} exceeds {MAX_UPLOAD_BYTES // (1024 * 1024)}MB limit")
    if upload.size is not None and upload.size > MAX_UPLOAD_BYTES:
        raise too_large

    # never buffer more than one byte past the limit
    contents = await upload.read(MAX_UPLOAD_BYTES + 1)
    if len(contents) > MAX_UPLOAD_BYTES:
        raise too_large

    file_id = await fs_bucket.upload_from_stream(
        stored_filename(field_name, upload.filename),
        io.BytesIO(contents),
        metadata={
            "content_type": upload.content_type,
            "original_filename": upload.filename,
            "uploaded_at": datetime.utcnow(),
        },
    )
    return {"name": upload.filename, "path": reference_for(file_id)}


async def save_uploads(fs_bucket, uploads, field_name: str) -> list:
    """Store several files; if any one fails, the ones already stored are removed."""
    stored = []
    try:
        for upload in uploads:
            stored.append(await save_upload(fs_bucket, upload, field_name))
    except Exception:
        await discard_uploads(fs_bucket, stored)
        raise
    return stored


async def discard_uploads(fs_bucket, references) -> None:
    """Delete stored files by their ``/uploads/<id>`` references."""
    for reference in references:
        file_id = reference["path"].rsplit("/", 1)[-1]
        try:
            await fs_bucket.delete(ObjectId(file_id))
        except NoFile:
            logger.warning("Upload %s already gone", file_id)


async def open_upload(fs_bucket, file_id: str):
    """Return (contents, content_type, filename) for a stored file."""
    if not ObjectId.is_valid(file_id):
        raise NotFound("File not found")

    try:
        grid_out = await fs_bucket.open_download_stream(ObjectId(file_id))
    except NoFile:
        raise NotFound("File not found")

    contents = await grid_out.read()
    metadata = grid_out.metadata or {}
    return (
        contents,
        metadata.get("content_type") or "application/octet-stream",
        metadata.get("original_filename") or grid_out.filename,
    )
