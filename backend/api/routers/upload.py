"""
Upload API endpoint.

Routes:
- POST /api/upload - Store a CSV as data version v0 of a session

Dependencies: backend.application.services.upload_service
System role: Data intake HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from backend.api.deps import get_current_user, get_upload_service
from backend.api.routers.router_utils import ERROR_RESPONSES, handle_service_errors
from backend.application.services.upload_service import UploadService
from backend.boundary.auth import AuthenticatedUser
from backend.models.upload import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"], responses=ERROR_RESPONSES)

MAX_UPLOAD_BYTES = 50 * 1024 * 1024
MISSING_FIELDS = "Missing required fields: sessionId, file"


@router.post("", response_model=UploadResponse, response_model_by_alias=True)
@handle_service_errors
async def upload_file(
    session_id: str | None = Form(default=None, alias="sessionId"),
    file: UploadFile | None = File(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    upload_service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """
    Upload a CSV file.

    Args:
        session_id: Target session (form field sessionId)
        file: CSV file
        user: Authenticated caller
        upload_service: Injected UploadService

    Returns:
        UploadResponse: {success, fileName, fileSize, fileUrl, version: "v0"}

    Raises:
        HTTPException(400): sessionId or file missing
        HTTPException(413): File larger than 50 MB
    """
    if not session_id or file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)

    if file.size is not None and file.size > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="File too large")

    data = await file.read()
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="File too large")

    logger.info(f"{__name__}:upload_file - user={user.user_id} session={session_id} size={len(data)}")
    result = await upload_service.upload_raw_data(session_id, file.filename, data)
    return UploadResponse(
        success=True,
        file_name=result.file_name,
        file_size=result.file_size,
        file_url=result.file_url,
        version=result.version,
    )
