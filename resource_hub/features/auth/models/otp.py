from sqlalchemy import Boolean, Column, DateTime, String

from resource_hub.platform.db.base import BaseModel


class OtpVerification(BaseModel):
    __tablename__ = "otp_verifications"
    # Not unique: prior rows for an email are deleted before each insert.
    email = Column(String(255), nullable=False, index=True)
    otp = Column(String(6), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False, index=True)
    used = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<OtpVerification(id={self.id}, email={self.email}, used={self.used})>"
