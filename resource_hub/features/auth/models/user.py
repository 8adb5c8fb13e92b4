import enum

from sqlalchemy import Boolean, Column, Enum, String

from resource_hub.platform.db.base import BaseModel


class UserRole(str, enum.Enum):
    student = "student"
    faculty = "faculty"
    admin = "admin"


class User(BaseModel):
    __tablename__ = "users"
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(UserRole, name="user_role"), default=UserRole.student, nullable=False)
    department = Column(String(100), nullable=True)
    is_verified = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
