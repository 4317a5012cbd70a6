"""StoreHandle backed by a boto3 S3 client.

boto3 is blocking, so every call runs in a worker thread and the event loop
stays free while the request is in flight.
"""

import asyncio
from typing import Any, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from bucketfs.core import get_logger
from bucketfs.core.exceptions import InvalidInput, StoreUnavailable, WriteRejected
from bucketfs.objectstorage.models import ObjectEntry, Page
from bucketfs.objectstorage.store import MAX_DELETE_KEYS, Body

from .s3_client import S3ClientConfig, S3ClientManager

logger = get_logger(__name__)

# Error codes that mean the store understood and refused the write.
_REJECTION_CODES = {
    "AccessDenied",
    "EntityTooLarge",
    "InvalidArgument",
    "InvalidRequest",
    "InvalidObjectName",
    "KeyTooLongError",
    "MissingContentLength",
    "NoSuchBucket",
}


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "Unknown")


class S3StoreHandle:
    """Lists, writes and deletes objects in one S3-compatible bucket."""

    def __init__(
        self,
        bucket: str,
        config: Optional[S3ClientConfig] = None,
        client: Any = None,
    ):
        """Initialize the handle.

        Args:
            bucket: Bucket name
            config: Client configuration, used when ``client`` is not given
            client: Pre-built boto3 S3 client
        """
        if not bucket:
            raise InvalidInput("Bucket name must not be empty")
        self.bucket = bucket
        self._client = client
        self._manager = None if client is not None else S3ClientManager(
            config or S3ClientConfig()
        )

    @property
    def client(self):
        if self._client is None:
            self._client = self._manager.client
        return self._client

    async def list(
        self,
        prefix: str,
        cursor: Optional[str] = None,
        delimiter: Optional[str] = None,
        limit: int = 1000,
    ) -> Page:
        kwargs: dict[str, Any] = {
            "Bucket": self.bucket,
            "Prefix": prefix,
            "MaxKeys": limit,
        }
        if cursor:
            kwargs["ContinuationToken"] = cursor
        if delimiter:
            kwargs["Delimiter"] = delimiter

        try:
            response = await asyncio.to_thread(self.client.list_objects_v2, **kwargs)
        except (ClientError, BotoCoreError) as e:
            error_msg = f"Failed to list s3://{self.bucket}/{prefix}: {e}"
            logger.error(error_msg, error=str(e))
            raise StoreUnavailable(error_msg) from e

        objects = tuple(
            ObjectEntry(
                key=obj["Key"],
                size=obj.get("Size", 0),
                uploaded_at=obj.get("LastModified"),
                etag=obj.get("ETag"),
            )
            for obj in response.get("Contents", [])
        )
        prefixes = tuple(p["Prefix"] for p in response.get("CommonPrefixes", []))
        truncated = bool(response.get("IsTruncated"))

        return Page(
            objects=objects,
            delimited_prefixes=prefixes,
            cursor=response.get("NextContinuationToken") if truncated else None,
            truncated=truncated,
        )

    async def put(self, key: str, body: Body, content_type: str) -> None:
        try:
            if isinstance(body, (bytes, bytearray)):
                await asyncio.to_thread(
                    self.client.put_object,
                    Bucket=self.bucket,
                    Key=key,
                    Body=bytes(body),
                    ContentType=content_type,
                )
            else:
                # Streams go through the managed transfer (multipart when large).
                await asyncio.to_thread(
                    self.client.upload_fileobj,
                    body,
                    self.bucket,
                    key,
                    ExtraArgs={"ContentType": content_type},
                )
        except ClientError as e:
            code = _error_code(e)
            error_msg = f"Failed to write s3://{self.bucket}/{key}: {e}"
            logger.error(error_msg, error=str(e), code=code)
            if code in _REJECTION_CODES:
                raise WriteRejected(error_msg) from e
            raise StoreUnavailable(error_msg) from e
        except BotoCoreError as e:
            error_msg = f"Failed to write s3://{self.bucket}/{key}: {e}"
            logger.error(error_msg, error=str(e))
            raise StoreUnavailable(error_msg) from e

    async def delete(self, keys: List[str]) -> None:
        if not keys:
            raise InvalidInput("Delete requires at least one key")
        if len(keys) > MAX_DELETE_KEYS:
            raise InvalidInput(
                f"Delete accepts at most {MAX_DELETE_KEYS} keys per call, got {len(keys)}"
            )

        try:
            response = await asyncio.to_thread(
                self.client.delete_objects,
                Bucket=self.bucket,
                Delete={"Objects": [{"Key": key} for key in keys], "Quiet": True},
            )
        except (ClientError, BotoCoreError) as e:
            error_msg = f"Failed to delete {len(keys)} key(s) from {self.bucket}: {e}"
            logger.error(error_msg, error=str(e))
            raise StoreUnavailable(error_msg) from e

        errors = response.get("Errors", [])
        if errors:
            first = errors[0]
            error_msg = (
                f"Store refused {len(errors)} of {len(keys)} key(s) in {self.bucket}: "
                f"{first.get('Key')} ({first.get('Code')})"
            )
            logger.error(error_msg, failed=len(errors))
            raise StoreUnavailable(error_msg)
