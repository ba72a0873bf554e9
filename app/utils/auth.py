"""Password hashing and auth token issuance.

Tokens carry a fixed subset of the user record and are signed with a
caller-supplied secret. No exp, aud or iss claim is set.
"""

from collections.abc import Mapping
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from app.core.config import settings

TOKEN_FIELDS = (
    "_id", "firstName", "lastName", "email", "phone",
    "countryCode", "cnic", "address", "role",
)


def get_password_hash(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def token_payload(record) -> dict:
    """Pick the token fields out of a user record.

    Accepts a mapping or anything with to_document(). Fields the record
    does not have are left out rather than set to null.
    """
    if not isinstance(record, Mapping):
        record = record.to_document()
    return {key: record[key] for key in TOKEN_FIELDS if key in record}


def _require_secret(secret_key: str) -> None:
    if not secret_key:
        raise ValueError("token secret key is not configured")


def generate_auth_token(record, secret_key: str, algorithm: str = "HS256") -> str:
    _require_secret(secret_key)
    return jwt.encode(token_payload(record), secret_key, algorithm=algorithm)


def decode_token(token: str, secret_key: str, algorithm: str = "HS256") -> Optional[dict]:
    _require_secret(secret_key)
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        return None
