from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from resource_hub.features.feedback.models.feedback import Feedback


class FeedbackCreate(BaseModel):
    resource_id: str
    rating: int
    comment: Optional[str] = Field(None, max_length=2000)


class FeedbackUpdate(BaseModel):
    rating: int
    comment: Optional[str] = Field(None, max_length=2000)


class FeedbackOut(BaseModel):
    id: str
    resource_id: str
    user_id: str
    rating: int
    comment: Optional[str] = None
    user_name: Optional[str] = None
    resource_title: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_feedback(cls, feedback: Feedback) -> "FeedbackOut":
        return cls(
            id=feedback.id,
            resource_id=feedback.resource_id,
            user_id=feedback.user_id,
            rating=feedback.rating,
            comment=feedback.comment,
            user_name=feedback.user.name if feedback.user else None,
            resource_title=feedback.resource.title if feedback.resource else None,
            created_at=feedback.created_at,
        )


class ResourceFeedbackSummary(BaseModel):
    feedback: list[FeedbackOut]
    average_rating: float
    total_feedback: int
