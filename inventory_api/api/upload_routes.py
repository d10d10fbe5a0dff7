from __future__ import annotations

import mimetypes

from fastapi import APIRouter, Depends, HTTPException, Response, status

from inventory_api.core.config import settings
from inventory_api.infra.blobs.contracts import BlobStore
from inventory_api.infra.blobs.local import get_blob_store


router = APIRouter(tags=["uploads"])


@router.get(settings.UPLOADS_URL_PREFIX + "/{filename}")
def get_upload(filename: str, blobs: BlobStore = Depends(get_blob_store)):
    """Serve an uploaded image through the blob store."""
    data = blobs.get(filename)
    if data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    media_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
    return Response(content=data, media_type=media_type)
