"""
Upload service.

Stores a raw CSV upload as version v0 of a session.

Dependencies: backend.application.services.persistence
System role: Data upload use case
"""

import logging

from pydantic import BaseModel

from backend.application.services.persistence import PersistenceClient

logger = logging.getLogger(__name__)

INITIAL_VERSION = "v0"
DEFAULT_FILE_NAME = "data.csv"


class UploadResult(BaseModel):
    """Stored raw upload."""

    file_name: str
    file_size: int
    file_url: str
    version: str


class UploadService:
    """Upload use case."""

    def __init__(self, persistence: PersistenceClient) -> None:
        self.persistence = persistence

    async def upload_raw_data(
        self,
        session_id: str,
        file_name: str | None,
        data: bytes,
    ) -> UploadResult:
        """
        Store uploaded bytes and record them as data version v0.

        Args:
            session_id: Target session
            file_name: Original file name (data.csv when missing)
            data: File bytes

        Returns:
            UploadResult: Name, size, public URL and version label
        """
        name = file_name or DEFAULT_FILE_NAME
        stored = await self.persistence.upload_file(session_id, name, data, INITIAL_VERSION)
        await self.persistence.create_data_version(
            session_id,
            INITIAL_VERSION,
            name,
            stored.file_url,
            file_size=len(data),
            description="Raw uploaded data",
        )
        logger.info(f"{__name__}:upload_raw_data - Stored {name} ({len(data)} bytes) for {session_id}")
        return UploadResult(
            file_name=name,
            file_size=len(data),
            file_url=stored.file_url,
            version=INITIAL_VERSION,
        )
