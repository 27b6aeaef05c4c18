from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from ...core.errors import ObjectNotFoundError
from ...schemas.resume import MessageResponse
from ..deps import get_object_store, store_upload

router = APIRouter(tags=["Files"])


@router.post("/upload", response_model=MessageResponse)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    object_store=Depends(get_object_store),
):
    location = await store_upload(object_store, file, "file")
    return MessageResponse(message=location)


@router.delete("/remove/{key}", response_model=MessageResponse)
async def remove_file(key: str, object_store=Depends(get_object_store)):
    if not await object_store.exists(key):
        raise ObjectNotFoundError("File not found")

    await object_store.delete(key)
    return MessageResponse(message="File deleted")
