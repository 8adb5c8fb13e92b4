from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_hub.features.auth.models.user import User, UserRole


class CredentialStore:
    """
    User rows, accessed through the request's session. Every write commits,
    and a failed write rolls the session back so later calls can still use it.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def insert_unverified(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole,
        department: Optional[str] = None,
    ) -> User:
        user = User(
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            department=department,
            is_verified=False,
        )
        try:
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return user

    async def delete_unverified(self, email: str) -> int:
        return await self._write(
            delete(User).where(User.email == email, User.is_verified.is_(False))
        )

    async def delete_by_id(self, user_id: str) -> int:
        return await self._write(delete(User).where(User.id == user_id))

    async def set_verified(self, email: str) -> int:
        return await self._write(update(User).where(User.email == email).values(is_verified=True))

    async def _write(self, statement) -> int:
        try:
            result = await self.db.execute(statement)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return result.rowcount
