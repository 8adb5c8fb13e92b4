import logging

from fastapi import HTTPException, status
from sqlalchemy import or_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from resource_hub.features.resources.models.resource import Resource, ResourceCategory
from resource_hub.features.resources.schemas.resource import ResourceFilters
from resource_hub.platform.utils.file_upload import delete_resource_file

logger = logging.getLogger(__name__)


async def create_resource(
    db: AsyncSession,
    *,
    title: str,
    description: str | None,
    file_name: str,
    file_path: str,
    file_size: int,
    file_type: str | None,
    subject: str,
    department: str,
    category: ResourceCategory,
    uploaded_by: str,
) -> Resource:
    """
    Insert an uploaded resource. Uploads are auto-approved.
    The stored file is removed when the insert fails.
    """
    resource = Resource(
        title=title,
        description=description,
        file_name=file_name,
        file_path=file_path,
        file_size=file_size,
        file_type=file_type,
        subject=subject,
        department=department,
        category=category,
        uploaded_by=uploaded_by,
        is_approved=True,
        download_count=0,
    )
    db.add(resource)
    try:
        await db.commit()
        await db.refresh(resource)
    except SQLAlchemyError:
        await db.rollback()
        delete_resource_file(file_path)
        raise

    logger.info(f"Resource created - id: {resource.id}, uploaded_by: {uploaded_by}")
    return resource


async def list_resources(db: AsyncSession, filters: ResourceFilters) -> list[Resource]:
    query = select(Resource).where(Resource.is_approved.is_(True))

    if filters.department:
        query = query.where(Resource.department == filters.department)
    if filters.subject:
        query = query.where(Resource.subject == filters.subject)
    if filters.category:
        query = query.where(Resource.category == filters.category)
    if filters.search:
        pattern = f"%{filters.search}%"
        query = query.where(or_(Resource.title.like(pattern), Resource.description.like(pattern)))

    query = query.order_by(Resource.created_at.desc(), Resource.id.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_resource(db: AsyncSession, resource_id: str) -> Resource:
    result = await db.execute(select(Resource).where(Resource.id == resource_id))
    resource = result.scalar_one_or_none()
    if not resource:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
    return resource


async def record_download(db: AsyncSession, resource_id: str) -> None:
    await db.execute(
        update(Resource)
        .where(Resource.id == resource_id)
        .values(download_count=Resource.download_count + 1)
    )
    await db.commit()


async def list_user_uploads(db: AsyncSession, user_id: str) -> list[Resource]:
    result = await db.execute(
        select(Resource)
        .where(Resource.uploaded_by == user_id)
        .order_by(Resource.created_at.desc(), Resource.id.desc())
    )
    return list(result.scalars().all())


async def set_approval(db: AsyncSession, resource_id: str, is_approved: bool) -> Resource:
    resource = await get_resource(db, resource_id)
    resource.is_approved = is_approved
    await db.commit()
    await db.refresh(resource)
    return resource
