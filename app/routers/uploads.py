"""Photo upload to object storage."""
from fastapi import APIRouter, Depends, File, UploadFile

from app.config import get_settings
from app.dependencies import get_current_user
from app.errors import ValidationError
from app.models.user import User
from app.services.uploads import UploadGateway, get_upload_gateway

router = APIRouter(tags=["uploads"])


@router.post("/upload", response_model=list[str])
def upload_photos(
    photos: list[UploadFile] = File(...),
    current_user: User = Depends(get_current_user),
    gateway: UploadGateway = Depends(get_upload_gateway),
):
    max_files = get_settings().upload_max_files
    if len(photos) > max_files:
        for photo in photos:
            photo.file.close()
        raise ValidationError(f"At most {max_files} files per upload")
    return gateway.store_many((photo.file, photo.filename or "", photo.content_type) for photo in photos)
