import io

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from app.database import get_fs_bucket
from app.utils.storage import UPLOADS_PREFIX, open_upload

router = APIRouter(prefix=UPLOADS_PREFIX, tags=["Uploads"])


# Public, read-only
@router.get("/{file_id}")
async def download_upload(file_id: str, fs_bucket=Depends(get_fs_bucket)):
    contents, content_type, filename = await open_upload(fs_bucket, file_id)
    return StreamingResponse(
        io.BytesIO(contents),
        media_type=content_type,
        headers={"Content-Disposition": f'inline; filename="{filename}"'},
    )
