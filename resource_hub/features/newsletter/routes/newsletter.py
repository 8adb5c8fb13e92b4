from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.newsletter.schemas.subscription import SubscriptionRequest
from resource_hub.features.newsletter.services.subscription import subscribe, unsubscribe
from resource_hub.platform.db.session import get_db
from resource_hub.platform.response import api_response

router = APIRouter(tags=["Newsletter"])


@router.post("/subscribe", response_model=dict, status_code=status.HTTP_201_CREATED)
async def subscribe_to_newsletter(request: SubscriptionRequest, db: AsyncSession = Depends(get_db)):
    await subscribe(db, request.email)

    return api_response(
        data={"email": request.email},
        message="Subscribed to newsletter successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.post("/unsubscribe", response_model=dict)
async def unsubscribe_from_newsletter(request: SubscriptionRequest, db: AsyncSession = Depends(get_db)):
    await unsubscribe(db, request.email)

    return api_response(message="Unsubscribed successfully")
