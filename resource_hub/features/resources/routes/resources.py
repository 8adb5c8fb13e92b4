from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.auth.dependencies import get_current_admin, get_current_user
from resource_hub.features.auth.models.user import User
from resource_hub.features.resources.models.resource import ResourceCategory
from resource_hub.features.resources.schemas.resource import (
    ApprovalUpdate,
    ResourceFilters,
    ResourceOut,
)
from resource_hub.features.resources.services.resource import (
    create_resource,
    get_resource,
    list_resources,
    list_user_uploads,
    record_download,
    set_approval,
)
from resource_hub.platform.db.session import get_db
from resource_hub.platform.logger import get_logger
from resource_hub.platform.response import api_response
from resource_hub.platform.utils.file_upload import save_resource_file

logger = get_logger("resources")

router = APIRouter(prefix="/resources", tags=["Resources"])


@router.post(
    "/upload",
    response_model=dict,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a resource",
)
async def upload_resource(
    file: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    subject: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    category: Optional[ResourceCategory] = Form(None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    if not title or not subject or not department or not category:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields: title, subject, department, category",
        )

    file_path, file_size = await save_resource_file(file, user.id)
    logger.info(f"Upload by user {user.id}: {file.filename} ({file_size} bytes, {file.content_type})")

    resource = await create_resource(
        db,
        title=title,
        description=description,
        file_name=file.filename,
        file_path=file_path,
        file_size=file_size,
        file_type=file.content_type,
        subject=subject,
        department=department,
        category=category,
        uploaded_by=user.id,
    )
    resource.uploader = user

    return api_response(
        data=ResourceOut.from_resource(resource),
        message="Resource uploaded successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("", response_model=dict, summary="List approved resources")
async def get_resources(
    department: Optional[str] = Query(None),
    subject: Optional[str] = Query(None),
    category: Optional[ResourceCategory] = Query(None),
    search: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    filters = ResourceFilters(department=department, subject=subject, category=category, search=search)
    resources = await list_resources(db, filters)

    return api_response(
        data=[ResourceOut.from_resource(r) for r in resources],
        message="Resources retrieved successfully",
    )


@router.get("/user/my-uploads", response_model=dict, summary="List my uploads")
async def get_my_uploads(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    resources = await list_user_uploads(db, user.id)

    return api_response(
        data=[ResourceOut.from_resource(r) for r in resources],
        message="Uploads retrieved successfully",
    )


@router.get("/{resource_id}", response_model=dict, summary="Get a resource")
async def get_resource_detail(resource_id: str, db: AsyncSession = Depends(get_db)):
    resource = await get_resource(db, resource_id)

    return api_response(
        data=ResourceOut.from_resource(resource),
        message="Resource retrieved successfully",
    )


@router.get("/{resource_id}/download", summary="Download a resource file")
async def download_resource(resource_id: str, db: AsyncSession = Depends(get_db)):
    resource = await get_resource(db, resource_id)

    file_path = Path(resource.file_path).resolve()
    if not file_path.exists():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")

    await record_download(db, resource_id)

    return FileResponse(
        file_path,
        filename=resource.file_name,
        media_type=resource.file_type or "application/octet-stream",
    )


@router.patch("/{resource_id}/approve", response_model=dict, summary="Approve or reject a resource")
async def approve_resource(
    resource_id: str,
    request: ApprovalUpdate,
    admin: User = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
):
    resource = await set_approval(db, resource_id, request.is_approved)
    logger.info(f"Resource {resource_id} approval set to {request.is_approved} by {admin.id}")

    return api_response(
        data=ResourceOut.from_resource(resource),
        message="Resource approval status updated",
    )
