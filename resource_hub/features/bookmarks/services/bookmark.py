from fastapi import HTTPException, status
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from resource_hub.features.bookmarks.models.bookmark import Bookmark
from resource_hub.features.resources.models.resource import Resource


async def add_bookmark(db: AsyncSession, user_id: str, resource_id: str) -> Bookmark:
    result = await db.execute(select(Resource.id).where(Resource.id == resource_id))
    if result.scalar_one_or_none() is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")

    bookmark = Bookmark(user_id=user_id, resource_id=resource_id)
    db.add(bookmark)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Resource already bookmarked"
        )
    await db.refresh(bookmark)
    return bookmark


async def list_bookmarks(db: AsyncSession, user_id: str) -> list[Bookmark]:
    result = await db.execute(
        select(Bookmark)
        .where(Bookmark.user_id == user_id)
        .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
    )
    return list(result.scalars().all())


async def remove_bookmark(db: AsyncSession, user_id: str, resource_id: str) -> None:
    result = await db.execute(
        delete(Bookmark).where(Bookmark.user_id == user_id, Bookmark.resource_id == resource_id)
    )
    await db.commit()
    if result.rowcount == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bookmark not found")
