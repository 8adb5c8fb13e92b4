"""Registers every table on ``Base.metadata``."""

from resource_hub.features.auth.models.otp import OtpVerification  # noqa: F401
from resource_hub.features.auth.models.user import User  # noqa: F401
from resource_hub.features.bookmarks.models.bookmark import Bookmark  # noqa: F401
from resource_hub.features.calendar.models.event import CalendarEvent  # noqa: F401
from resource_hub.features.feedback.models.feedback import Feedback  # noqa: F401
from resource_hub.features.newsletter.models.subscription import NewsletterSubscription  # noqa: F401
from resource_hub.features.resources.models.resource import Resource  # noqa: F401
from resource_hub.platform.db.base import Base

__all__ = ["Base"]
