"""In-memory collaborators for exercising the registration flow without a database or mail server."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from uuid6 import uuid7

from resource_hub.features.auth.models.user import UserRole
from resource_hub.features.auth.services.notifier import NotificationResult


@dataclass
class FakeUser:
    id: str
    name: str
    email: str
    password_hash: str
    role: UserRole
    department: Optional[str] = None
    is_verified: bool = False


@dataclass
class FakeOtp:
    id: str
    email: str
    otp: str
    expires_at: datetime
    used: bool = False
    seq: int = 0


class FakeCredentialStore:
    def __init__(self):
        self.users: Dict[str, FakeUser] = {}
        self.fail_deletes = None

    async def find_by_email(self, email: str) -> Optional[FakeUser]:
        return self.users.get(email)

    async def find_by_id(self, user_id: str) -> Optional[FakeUser]:
        return next((u for u in self.users.values() if u.id == user_id), None)

    async def insert_unverified(self, *, name, email, password_hash, role, department=None) -> FakeUser:
        user = FakeUser(
            id=str(uuid7()),
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            department=department,
        )
        self.users[email] = user
        return user

    async def delete_unverified(self, email: str) -> int:
        user = self.users.get(email)
        if user is None or user.is_verified:
            return 0
        del self.users[email]
        return 1

    async def delete_by_id(self, user_id: str) -> int:
        if self.fail_deletes is not None:
            raise self.fail_deletes
        user = await self.find_by_id(user_id)
        if user is None:
            return 0
        del self.users[user.email]
        return 1

    async def set_verified(self, email: str) -> int:
        user = self.users.get(email)
        if user is None:
            return 0
        user.is_verified = True
        return 1


class FakeOtpStore:
    def __init__(self):
        self.records: List[FakeOtp] = []
        self._seq = 0

    async def delete_all_for_email(self, email: str) -> int:
        before = len(self.records)
        self.records = [r for r in self.records if r.email != email]
        return before - len(self.records)

    async def insert(self, email: str, code: str, expires_at: datetime) -> FakeOtp:
        self._seq += 1
        record = FakeOtp(id=str(uuid7()), email=email, otp=code, expires_at=expires_at, seq=self._seq)
        self.records.append(record)
        return record

    async def find_latest_matching(self, email: str, code: str) -> Optional[FakeOtp]:
        matches = [r for r in self.records if r.email == email and r.otp == code]
        return max(matches, key=lambda r: r.seq) if matches else None

    async def mark_consumed(self, otp_id: str) -> int:
        for record in self.records:
            if record.id == otp_id:
                record.used = True
                return 1
        return 0

    def for_email(self, email: str) -> List[FakeOtp]:
        return [r for r in self.records if r.email == email]


@dataclass
class FakeNotifier:
    """Records every message instead of sending it."""

    fail_codes: bool = False
    fail_welcome: bool = False
    raise_on_welcome: bool = False
    codes: List[tuple] = field(default_factory=list)
    welcomes: List[tuple] = field(default_factory=list)

    async def send_code(self, email: str, code: str, name: str) -> NotificationResult:
        if self.fail_codes:
            return NotificationResult(success=False, error="SMTP connection refused")
        self.codes.append((email, code, name))
        return NotificationResult(success=True)

    async def send_welcome(self, email: str, name: str) -> NotificationResult:
        if self.raise_on_welcome:
            raise RuntimeError("template exploded")
        if self.fail_welcome:
            return NotificationResult(success=False, error="mailbox full")
        self.welcomes.append((email, name))
        return NotificationResult(success=True)

    def last_code_for(self, email: str) -> str:
        return [code for to, code, _ in self.codes if to == email][-1]


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2026, 1, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)
