from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from resource_hub.features.bookmarks.models.bookmark import Bookmark
from resource_hub.features.resources.models.resource import ResourceCategory


class BookmarkCreate(BaseModel):
    resource_id: str


class BookmarkOut(BaseModel):
    id: str
    resource_id: str
    title: str
    description: Optional[str] = None
    file_name: str
    subject: Optional[str] = None
    department: Optional[str] = None
    category: ResourceCategory
    uploader_name: Optional[str] = None
    resource_created_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_bookmark(cls, bookmark: Bookmark) -> "BookmarkOut":
        resource = bookmark.resource
        return cls(
            id=bookmark.id,
            resource_id=bookmark.resource_id,
            title=resource.title,
            description=resource.description,
            file_name=resource.file_name,
            subject=resource.subject,
            department=resource.department,
            category=resource.category,
            uploader_name=resource.uploader.name if resource.uploader else None,
            resource_created_at=resource.created_at,
            created_at=bookmark.created_at,
        )
