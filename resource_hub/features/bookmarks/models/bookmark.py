from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from resource_hub.platform.db.base import BaseModel


class Bookmark(BaseModel):
    __tablename__ = "bookmarks"
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    resource_id = Column(String, ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True)

    resource = relationship("Resource", lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "resource_id", name="uq_bookmark_user_resource"),
    )
