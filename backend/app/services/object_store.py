import logging
import mimetypes
from typing import BinaryIO, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from ..core.config import Settings
from ..core.errors import ObjectStoreError
from ..utils.identifiers import make_object_key

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


def create_s3_client(settings: Settings):
    return boto3.client(
        "s3",
        endpoint_url=settings.s3_bucket_endpoint,
        aws_access_key_id=settings.s3_access_key_id,
        aws_secret_access_key=settings.s3_secret_access_key,
        use_ssl=settings.s3_use_ssl,
        config=Config(s3={"addressing_style": "path"}),
    )


class S3ObjectStore:
    """
    Uploaded files in one S3-compatible bucket.
    boto3 is blocking, so every call is pushed to the threadpool.
    """

    def __init__(self, client, bucket: str, endpoint: str):
        self.client = client
        self.bucket = bucket
        self.endpoint = endpoint.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3ObjectStore":
        return cls(create_s3_client(settings), settings.s3_bucket, settings.s3_bucket_endpoint)

    def location(self, key: str) -> str:
        return f"{self.endpoint}/{self.bucket}/{key}"

    async def upload(
        self,
        fileobj: BinaryIO,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
        field_name: Optional[str] = None,
    ) -> str:
        key = make_object_key()
        content_type = content_type or mimetypes.guess_type(filename or "")[0] or "application/octet-stream"
        extra_args = {"ContentType": content_type}
        if field_name:
            extra_args["Metadata"] = {"fieldName": field_name}

        try:
            await run_in_threadpool(
                self.client.upload_fileobj, fileobj, self.bucket, key, ExtraArgs=extra_args
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Upload of {filename!r} failed: {e}")
            raise ObjectStoreError("Could not upload file") from e

        logger.info(f"Stored upload {filename!r} as {key}")
        return self.location(key)

    async def exists(self, key: str) -> bool:
        try:
            await run_in_threadpool(self.client.head_object, Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in NOT_FOUND_CODES:
                return False
            logger.error(f"HEAD {key} failed: {e}")
            raise ObjectStoreError("Could not look up file") from e
        except BotoCoreError as e:
            logger.error(f"HEAD {key} failed: {e}")
            raise ObjectStoreError("Could not look up file") from e
        return True

    async def delete(self, key: str) -> None:
        try:
            await run_in_threadpool(self.client.delete_object, Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"DELETE {key} failed: {e}")
            raise ObjectStoreError("Could not delete file") from e
        logger.info(f"Deleted object {key}")
