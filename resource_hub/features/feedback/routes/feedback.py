from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.auth.dependencies import get_current_user
from resource_hub.features.auth.models.user import User
from resource_hub.features.feedback.schemas.feedback import (
    FeedbackCreate,
    FeedbackOut,
    FeedbackUpdate,
)
from resource_hub.features.feedback.services.feedback import (
    add_feedback,
    delete_feedback,
    get_resource_feedback,
    list_user_feedback,
    update_feedback,
)
from resource_hub.platform.db.session import get_db
from resource_hub.platform.response import api_response

router = APIRouter(prefix="/feedback", tags=["Feedback"])


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_feedback(
    request: FeedbackCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    feedback = await add_feedback(db, user.id, request.resource_id, request.rating, request.comment)

    return api_response(
        data=FeedbackOut.from_feedback(feedback),
        message="Feedback added successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/resource/{resource_id}", response_model=dict)
async def get_feedback_for_resource(resource_id: str, db: AsyncSession = Depends(get_db)):
    summary = await get_resource_feedback(db, resource_id)

    return api_response(data=summary, message="Feedback retrieved successfully")


@router.get("/user/my-feedback", response_model=dict)
async def get_my_feedback(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    entries = await list_user_feedback(db, user.id)

    return api_response(
        data=[FeedbackOut.from_feedback(f) for f in entries],
        message="Feedback retrieved successfully",
    )


@router.put("/{feedback_id}", response_model=dict)
async def edit_feedback(
    feedback_id: str,
    request: FeedbackUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    feedback = await update_feedback(db, feedback_id, user.id, request.rating, request.comment)

    return api_response(
        data=FeedbackOut.from_feedback(feedback),
        message="Feedback updated successfully",
    )


@router.delete("/{feedback_id}", response_model=dict)
async def remove_feedback(
    feedback_id: str,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await delete_feedback(db, feedback_id, user.id)

    return api_response(message="Feedback deleted successfully")
