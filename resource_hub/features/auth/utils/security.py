import hashlib
import secrets

import bcrypt

OTP_MIN = 100000
OTP_MAX = 999999


def hash_password(password: str) -> str:
    password_hash = hashlib.sha256(password.encode('utf-8')).digest()

    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password_hash, salt)

    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.
    Uses SHA-256 pre-hashing to match the hashing method.
    """
    password_hash = hashlib.sha256(plain_password.encode('utf-8')).digest()

    return bcrypt.checkpw(password_hash, hashed_password.encode('utf-8'))


def generate_otp() -> str:
    """Generate a 6-digit OTP, uniform over [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))
