"""Logo upload endpoint.

- POST /api/upload - Store an image (multipart field ``logo``) and return its URL
"""

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import JSONResponse

from brandkit.api.deps import error_example, error_response, get_request_id
from brandkit.core.auth import UserInfo, get_current_user
from brandkit.core.logging import get_logger
from brandkit.schemas.upload import UploadResponse
from brandkit.services.upload import (
    UploadStorage,
    UploadValidationError,
    get_upload_storage,
)

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload a logo",
    description="Accepts jpeg, jpg, png, svg or webp images up to the configured size.",
    responses={
        400: error_example("Missing or invalid file", "No file uploaded", "VALIDATION_ERROR"),
    },
)
async def upload_logo(
    request: Request,
    logo: UploadFile | None = File(default=None),
    user: UserInfo = Depends(get_current_user),
    storage: UploadStorage = Depends(get_upload_storage),
) -> UploadResponse | JSONResponse:
    """Store an uploaded logo."""
    request_id = get_request_id(request)
    if logo is None:
        return error_response(request, status.HTTP_400_BAD_REQUEST, "No file uploaded")

    # One byte past the limit is enough to reject oversize files
    content = await logo.read(storage.max_bytes + 1)
    try:
        url = await storage.save(logo.filename, logo.content_type, content)
    except UploadValidationError as e:
        logger.warning(
            "Upload rejected",
            extra={
                "request_id": request_id,
                "user_id": user.id,
                "upload_filename": (logo.filename or "")[:100],
                "content_type": logo.content_type,
                "reason": e.message,
            },
        )
        return error_response(request, status.HTTP_400_BAD_REQUEST, e.message)
    finally:
        await logo.close()

    return UploadResponse(url=url)
