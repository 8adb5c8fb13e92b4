import enum

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from resource_hub.platform.db.base import BaseModel


class ResourceCategory(str, enum.Enum):
    notes = "notes"
    assignment = "assignment"
    webinar = "webinar"
    workshop = "workshop"
    placement = "placement"
    internship = "internship"
    other = "other"


class Resource(BaseModel):
    __tablename__ = "resources"
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    file_name = Column(String(255), nullable=False)
    file_path = Column(String(500), nullable=False)
    file_size = Column(Integer, nullable=True)
    file_type = Column(String(100), nullable=True)
    subject = Column(String(100), nullable=True, index=True)
    department = Column(String(100), nullable=True, index=True)
    uploaded_by = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(Enum(ResourceCategory, name="resource_category"), default=ResourceCategory.other, nullable=False)
    is_approved = Column(Boolean, default=False, nullable=False)
    download_count = Column(Integer, default=0, nullable=False)

    uploader = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<Resource(id={self.id}, title={self.title})>"
