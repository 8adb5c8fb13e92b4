from fastapi import HTTPException, status
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from resource_hub.features.feedback.models.feedback import Feedback
from resource_hub.features.feedback.schemas.feedback import FeedbackOut, ResourceFeedbackSummary
from resource_hub.features.resources.models.resource import Resource


def validate_rating(rating: int) -> None:
    if rating < 1 or rating > 5:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Rating must be between 1 and 5"
        )


def average_rating(ratings: list[int]) -> float:
    """Mean rating rounded to one decimal, 0 when there are none."""
    if not ratings:
        return 0.0
    return round(sum(ratings) / len(ratings), 1)


async def add_feedback(
    db: AsyncSession, user_id: str, resource_id: str, rating: int, comment: str | None
) -> Feedback:
    validate_rating(rating)

    result = await db.execute(select(Resource.id).where(Resource.id == resource_id))
    if result.scalar_one_or_none() is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")

    feedback = Feedback(user_id=user_id, resource_id=resource_id, rating=rating, comment=comment)
    db.add(feedback)
    await db.commit()
    await db.refresh(feedback)
    return feedback


async def get_resource_feedback(db: AsyncSession, resource_id: str) -> ResourceFeedbackSummary:
    result = await db.execute(
        select(Feedback)
        .where(Feedback.resource_id == resource_id)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
    )
    entries = list(result.scalars().all())

    return ResourceFeedbackSummary(
        feedback=[FeedbackOut.from_feedback(f) for f in entries],
        average_rating=average_rating([f.rating for f in entries]),
        total_feedback=len(entries),
    )


async def list_user_feedback(db: AsyncSession, user_id: str) -> list[Feedback]:
    result = await db.execute(
        select(Feedback)
        .where(Feedback.user_id == user_id)
        .order_by(Feedback.created_at.desc(), Feedback.id.desc())
    )
    return list(result.scalars().all())


async def _get_owned_feedback(db: AsyncSession, feedback_id: str, user_id: str) -> Feedback:
    result = await db.execute(
        select(Feedback).where(Feedback.id == feedback_id, Feedback.user_id == user_id)
    )
    feedback = result.scalar_one_or_none()
    if not feedback:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Feedback not found or not authorized"
        )
    return feedback


async def update_feedback(
    db: AsyncSession, feedback_id: str, user_id: str, rating: int, comment: str | None
) -> Feedback:
    validate_rating(rating)

    feedback = await _get_owned_feedback(db, feedback_id, user_id)
    feedback.rating = rating
    feedback.comment = comment
    await db.commit()
    await db.refresh(feedback)
    return feedback


async def delete_feedback(db: AsyncSession, feedback_id: str, user_id: str) -> None:
    result = await db.execute(
        delete(Feedback).where(Feedback.id == feedback_id, Feedback.user_id == user_id)
    )
    await db.commit()
    if result.rowcount == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Feedback not found or not authorized"
        )
