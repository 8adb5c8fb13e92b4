from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from resource_hub.features.auth.models.user import UserRole
from resource_hub.features.resources.models.resource import Resource, ResourceCategory


class ResourceOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    file_name: str
    file_size: Optional[int] = None
    file_type: Optional[str] = None
    subject: Optional[str] = None
    department: Optional[str] = None
    category: ResourceCategory
    uploaded_by: str
    uploader_name: Optional[str] = None
    uploader_role: Optional[UserRole] = None
    is_approved: bool
    download_count: int
    created_at: Optional[datetime] = None

    @classmethod
    def from_resource(cls, resource: Resource) -> "ResourceOut":
        uploader = resource.uploader
        return cls(
            id=resource.id,
            title=resource.title,
            description=resource.description,
            file_name=resource.file_name,
            file_size=resource.file_size,
            file_type=resource.file_type,
            subject=resource.subject,
            department=resource.department,
            category=resource.category,
            uploaded_by=resource.uploaded_by,
            uploader_name=uploader.name if uploader else None,
            uploader_role=uploader.role if uploader else None,
            is_approved=resource.is_approved,
            download_count=resource.download_count,
            created_at=resource.created_at,
        )


class ResourceFilters(BaseModel):
    department: Optional[str] = None
    subject: Optional[str] = None
    category: Optional[ResourceCategory] = None
    search: Optional[str] = None


class ApprovalUpdate(BaseModel):
    is_approved: bool
