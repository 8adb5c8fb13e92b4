from sqlalchemy import Boolean, Column, String

from resource_hub.platform.db.base import BaseModel


class NewsletterSubscription(BaseModel):
    __tablename__ = "newsletter_subscriptions"
    email = Column(String(255), unique=True, nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False)
