import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Request, UploadFile

from ..core.errors import ObjectStoreError, ResumeMailerError, UploadError
from ..services.cover_letter_service import CoverLetterAssembler
from ..services.resume_service import ResumeAssembler

logger = logging.getLogger(__name__)


def get_object_store(request: Request):
    return request.app.state.object_store


def get_resume_assembler(request: Request) -> ResumeAssembler:
    return request.app.state.resume_assembler


def get_cover_letter_assembler(request: Request) -> CoverLetterAssembler:
    return request.app.state.cover_letter_assembler


async def store_upload(object_store, upload: Optional[UploadFile], field_name: str) -> str:
    if upload is None or not upload.filename:
        raise UploadError(f"A file is required in the '{field_name}' field")
    return await object_store.upload(
        upload.file,
        filename=upload.filename,
        content_type=upload.content_type,
        field_name=field_name,
    )


@asynccontextmanager
async def stored_upload(object_store, upload: Optional[UploadFile], field_name: str) -> AsyncIterator[str]:
    """
    Store the upload for the duration of a request.
    The object is deleted again if the request fails with a domain error.
    """
    location = await store_upload(object_store, upload, field_name)
    try:
        yield location
    except ResumeMailerError:
        key = location.rsplit("/", 1)[-1]
        try:
            await object_store.delete(key)
            logger.info(f"Removed upload {key} after failed request")
        except ObjectStoreError as e:
            logger.warning(f"Could not remove upload {key} after failed request: {e.message}")
        raise
