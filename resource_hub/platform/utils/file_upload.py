import uuid
from pathlib import Path
from typing import Optional

from fastapi import HTTPException, UploadFile, status

from resource_hub.platform.config import settings
from resource_hub.platform.logger import get_logger

logger = get_logger("file_upload")

UPLOAD_DIR = Path(settings.UPLOAD_DIR)
MAX_FILE_SIZE = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024
ALLOWED_EXTENSIONS = {
    ".pdf", ".doc", ".docx", ".ppt", ".pptx", ".xls", ".xlsx",
    ".txt", ".zip", ".rar", ".jpg", ".jpeg", ".png", ".gif", ".mp4",
}


def validate_resource_file(file: UploadFile) -> None:
    """
    Validate an uploaded resource's name and type.

    Raises:
        HTTPException: If validation fails
    """
    if not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    file_ext = Path(file.filename).suffix.lower()
    if file_ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="File type not allowed",
        )


async def save_resource_file(file: UploadFile, user_id: str, upload_dir: Optional[Path] = None) -> tuple[str, int]:
    """
    Save an uploaded resource to disk.

    Args:
        file: The uploaded file
        user_id: The ID of the uploading user
        upload_dir: Target directory, defaults to the configured upload dir

    Returns:
        tuple: (path of the stored file, size in bytes)

    Raises:
        HTTPException: If file validation or save fails
    """
    validate_resource_file(file)

    target_dir = upload_dir or UPLOAD_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    file_ext = Path(file.filename).suffix.lower()
    unique_filename = f"{user_id}_{uuid.uuid4().hex}{file_ext}"
    file_path = target_dir / unique_filename

    contents = await file.read()
    if len(contents) > MAX_FILE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File too large. Maximum size is {MAX_FILE_SIZE // (1024 * 1024)}MB",
        )

    try:
        with open(file_path, "wb") as f:
            f.write(contents)
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save file: {str(e)}",
        )

    return str(file_path), len(contents)


def delete_resource_file(file_path: Optional[str]) -> None:
    """Delete a stored resource file, logging instead of raising."""
    if not file_path:
        return

    try:
        path = Path(file_path)
        if path.exists():
            path.unlink()
            logger.info(f"Cleaned up stored file {file_path}")
    except OSError as e:
        logger.error(f"Error cleaning up file {file_path}: {e}")
