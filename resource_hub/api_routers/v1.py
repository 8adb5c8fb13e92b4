from fastapi import APIRouter

from resource_hub.features.auth.routes.auth import router as auth_router
from resource_hub.features.bookmarks.routes.bookmarks import router as bookmarks_router
from resource_hub.features.calendar.routes.calendar import router as calendar_router
from resource_hub.features.feedback.routes.feedback import router as feedback_router
from resource_hub.features.health.routes.health import router as health_router
from resource_hub.features.newsletter.routes.newsletter import router as newsletter_router
from resource_hub.features.resources.routes.resources import router as resources_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(auth_router)
api_router.include_router(resources_router)
api_router.include_router(bookmarks_router)
api_router.include_router(feedback_router)
api_router.include_router(calendar_router)
api_router.include_router(newsletter_router)
api_router.include_router(health_router)
