"""Photo uploads to S3. Objects get random names and public URLs."""
import logging
import mimetypes
import os
import uuid
from functools import lru_cache
from typing import BinaryIO, Iterable

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.config import Settings, get_settings
from app.errors import StorageError, UploadError

log = logging.getLogger("uvicorn.error")

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _extension_for(original_name: str, mime_type: str | None) -> str:
    ext = mimetypes.guess_extension(mime_type) if mime_type else None
    if not ext:
        ext = os.path.splitext(original_name or "")[1]
    return (ext or "").lower()


class UploadGateway:
    def __init__(self, client, bucket: str, public_base_url: str = "", acl: str = "public-read"):
        if not bucket:
            raise ValueError("An S3 bucket name is required (set S3_BUCKET_NAME)")
        self._client = client
        self.bucket = bucket
        self.public_base_url = (public_base_url or f"https://{bucket}.s3.amazonaws.com").rstrip("/")
        self.acl = acl

    def object_name(self, original_name: str, mime_type: str | None) -> str:
        return f"{uuid.uuid4().hex}{_extension_for(original_name, mime_type)}"

    def store(self, fileobj: BinaryIO, original_name: str, mime_type: str | None) -> str:
        """Upload one file and return its public URL. The file handle is closed either way."""
        name = self.object_name(original_name, mime_type)
        content_type = mime_type or mimetypes.guess_type(original_name or "")[0] or DEFAULT_CONTENT_TYPE
        extra_args = {"ContentType": content_type}
        if self.acl:
            extra_args["ACL"] = self.acl
        try:
            self._client.upload_fileobj(fileobj, self.bucket, name, ExtraArgs=extra_args)
        except (BotoCoreError, ClientError) as e:
            log.error("S3 upload of %r to bucket %s failed: %s", original_name, self.bucket, e)
            raise UploadError() from e
        finally:
            fileobj.close()
        return f"{self.public_base_url}/{name}"

    def store_many(self, files: Iterable[tuple[BinaryIO, str, str | None]]) -> list[str]:
        """Upload each file independently, in order. On the first failure the
        UploadError carries the URLs already stored; nothing is rolled back."""
        pending = list(files)
        urls: list[str] = []
        try:
            for fileobj, original_name, mime_type in pending:
                try:
                    urls.append(self.store(fileobj, original_name, mime_type))
                except UploadError as e:
                    raise UploadError(uploaded=urls) from e
        finally:
            for fileobj, _, _ in pending[len(urls):]:
                if not fileobj.closed:
                    fileobj.close()
        return urls


def create_s3_client(settings: Settings):
    config = Config(
        connect_timeout=settings.s3_connect_timeout,
        read_timeout=settings.s3_read_timeout,
        retries={"total_max_attempts": 1},
    )
    return boto3.client(
        "s3",
        region_name=settings.s3_region,
        aws_access_key_id=settings.s3_access_key or None,
        aws_secret_access_key=settings.s3_secret_access_key or None,
        config=config,
    )


@lru_cache
def _gateway_from_settings() -> UploadGateway:
    settings = get_settings()
    return UploadGateway(
        create_s3_client(settings),
        settings.s3_bucket_name,
        public_base_url=settings.s3_public_base_url,
        acl=settings.s3_object_acl,
    )


def get_upload_gateway() -> UploadGateway:
    """FastAPI dependency. The client is built on first use and shared afterwards."""
    if not get_settings().s3_bucket_name:
        log.error("Upload storage is not configured; set S3_BUCKET_NAME")
        raise StorageError()
    return _gateway_from_settings()
