from fastapi import HTTPException, status
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.newsletter.models.subscription import NewsletterSubscription


async def subscribe(db: AsyncSession, email: str) -> NewsletterSubscription:
    entry = NewsletterSubscription(email=email, is_active=True)
    db.add(entry)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already subscribed")
    await db.refresh(entry)
    return entry


async def unsubscribe(db: AsyncSession, email: str) -> None:
    await db.execute(
        update(NewsletterSubscription)
        .where(NewsletterSubscription.email == email)
        .values(is_active=False)
    )
    await db.commit()
