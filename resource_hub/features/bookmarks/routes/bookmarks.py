from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.auth.dependencies import get_current_user
from resource_hub.features.auth.models.user import User
from resource_hub.features.bookmarks.schemas.bookmark import BookmarkCreate, BookmarkOut
from resource_hub.features.bookmarks.services.bookmark import (
    add_bookmark,
    list_bookmarks,
    remove_bookmark,
)
from resource_hub.platform.db.session import get_db
from resource_hub.platform.response import api_response

router = APIRouter(prefix="/bookmarks", tags=["Bookmarks"])


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    request: BookmarkCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    bookmark = await add_bookmark(db, user.id, request.resource_id)

    return api_response(
        data={"id": bookmark.id, "resource_id": bookmark.resource_id},
        message="Bookmark added successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("", response_model=dict)
async def get_bookmarks(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    bookmarks = await list_bookmarks(db, user.id)

    return api_response(
        data=[BookmarkOut.from_bookmark(b) for b in bookmarks],
        message="Bookmarks retrieved successfully",
    )


@router.delete("/{resource_id}", response_model=dict)
async def delete_bookmark(
    resource_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await remove_bookmark(db, user.id, resource_id)

    return api_response(message="Bookmark removed successfully")
