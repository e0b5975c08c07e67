"""
S3 client for data file storage.

Stores uploaded and cleaned CSV files under "{session_id}/{version}/{file_name}"
and hands out their public URLs. The blocking boto3 calls run in a thread
pool so they never stall the event loop.

Dependencies: boto3, fastapi.concurrency
System role: Object storage for data versions
"""

import logging
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from backend.core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    """Location of an object written to storage."""

    file_url: str
    file_key: str


def build_file_key(session_id: str, version: str, file_name: str) -> str:
    """Object key for one file of one data version."""
    return f"{session_id}/{version}/{file_name}"


class S3StorageClient:
    """S3 client for the data file bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        public_base_url: str | None = None,
        s3_client=None,
    ) -> None:
        """
        Initialize S3 client for the data bucket.

        Args:
            bucket: S3 bucket name for data files
            region: AWS region for the bucket
            endpoint_url: Custom endpoint for S3-compatible stores
            public_base_url: Base URL for public links (virtual-hosted S3 URL if unset)
            s3_client: Pre-built boto3 client, mainly for tests
        """
        self._bucket = bucket
        self._region = region
        self._public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self._s3_client = s3_client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def public_url(self, file_key: str) -> str:
        """
        Public URL of an object.

        Args:
            file_key: S3 object key

        Returns:
            str: URL a browser can fetch the object from
        """
        if self._public_base_url:
            return f"{self._public_base_url}/{file_key}"
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{file_key}"

    async def upload(
        self,
        session_id: str,
        file_name: str,
        data: bytes,
        version: str,
    ) -> StoredFile:
        """
        Upload a CSV file for a data version, overwriting any existing object.

        Args:
            session_id: Owning session
            file_name: Name of the file within the version folder
            data: File bytes
            version: Version label (v0, v1, ...)

        Returns:
            StoredFile: Public URL and object key

        Raises:
            StorageError: If the upload fails
        """
        file_key = build_file_key(session_id, version, file_name)
        try:
            await run_in_threadpool(
                self._s3_client.put_object,
                Bucket=self._bucket,
                Key=file_key,
                Body=data,
                ContentType="text/csv",
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:upload - Upload failed for {file_key}: {e}")
            raise StorageError(f"Upload failed: {e}", file_key=file_key) from e

        logger.info(
            f"{__name__}:upload - Stored {len(data)} bytes at s3://{self._bucket}/{file_key}"
        )
        return StoredFile(file_url=self.public_url(file_key), file_key=file_key)

    async def download(self, file_key: str) -> bytes:
        """
        Download an object's bytes.

        Args:
            file_key: S3 object key

        Returns:
            bytes: Object content

        Raises:
            StorageError: If the object is missing or the download fails
        """
        try:
            response = await run_in_threadpool(
                self._s3_client.get_object,
                Bucket=self._bucket,
                Key=file_key,
            )
            return await run_in_threadpool(response["Body"].read)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:download - Download failed for {file_key}: {e}")
            raise StorageError(f"Download failed: {e}", file_key=file_key) from e
