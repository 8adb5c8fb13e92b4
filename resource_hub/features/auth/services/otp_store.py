from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.auth.models.otp import OtpVerification


class OtpStore:
    """One-time code rows keyed by email. Every write commits or rolls back."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def delete_all_for_email(self, email: str) -> int:
        return await self._write(delete(OtpVerification).where(OtpVerification.email == email))

    async def insert(self, email: str, code: str, expires_at: datetime) -> OtpVerification:
        record = OtpVerification(email=email, otp=code, expires_at=expires_at, used=False)
        try:
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return record

    async def find_latest_matching(self, email: str, code: str) -> Optional[OtpVerification]:
        # ids are uuid7, so they break created_at ties in insertion order
        result = await self.db.execute(
            select(OtpVerification)
            .where(OtpVerification.email == email, OtpVerification.otp == code)
            .order_by(OtpVerification.created_at.desc(), OtpVerification.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def mark_consumed(self, otp_id: str) -> int:
        return await self._write(
            update(OtpVerification).where(OtpVerification.id == otp_id).values(used=True)
        )

    async def _write(self, statement) -> int:
        try:
            result = await self.db.execute(statement)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return result.rowcount
