from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError
from typing import Optional, List
from uuid import UUID
from datetime import datetime
import re

from app.models.user import UserRole
from app.schemas.validation import (
    WireModel, ResponseModel, ValidationResult, validate_with, register_multi_rule,
)

DIGITS = r'^[0-9]+$'
COUNTRY_CODE = r'^\+[0-9]+$'

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 30
PASSWORD_CLASSES = (
    (re.compile(r'[A-Z]'), 'uppercase letter'),
    (re.compile(r'[0-9]'), 'number'),
    (re.compile(r'[!@#$%^&*]'), 'special character'),
)

MESSAGES = {
    ('password', 'missing'): 'Password is required',
}


def password_violations(password) -> List[str]:
    """Every complexity rule the raw (pre-hash) password breaks, in rule order."""
    if not isinstance(password, str):
        return ['Password is required']
    problems = []
    if len(password) < PASSWORD_MIN_LENGTH:
        problems.append(f'Password must be at least {PASSWORD_MIN_LENGTH} characters long')
    if len(password) > PASSWORD_MAX_LENGTH:
        problems.append(f'Password cannot be longer than {PASSWORD_MAX_LENGTH} characters')
    for pattern, name in PASSWORD_CLASSES:
        if not pattern.search(password):
            problems.append(f'Password must contain at least one {name}')
    return problems


register_multi_rule('password_rules', password_violations)


class AddressCreate(WireModel):
    country: str = Field(..., min_length=1, max_length=50)
    state: str = Field(..., min_length=1, max_length=50)
    city: str = Field(..., min_length=1, max_length=50)
    street_address: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., max_length=10, pattern=DIGITS)


class UserCreate(WireModel):
    first_name: str = Field(..., min_length=1, max_length=20)
    last_name: str = Field(..., min_length=1, max_length=20)
    email: EmailStr
    password: str
    phone: str = Field(..., min_length=10, max_length=10, pattern=DIGITS)
    country_code: str = Field(..., min_length=5, max_length=5, pattern=COUNTRY_CODE)
    cnic: str = Field(..., min_length=13, max_length=13, pattern=DIGITS)
    address: AddressCreate
    # Free text here; only the users table restricts it to UserRole
    role: Optional[str] = Field(None, min_length=1)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v):
        problems = password_violations(v)
        if problems:
            raise PydanticCustomError('password_rules', problems[0])
        return v

    @field_validator('email', mode='wrap')
    @classmethod
    def keep_email_as_given(cls, v, handler):
        # checked by email-validator, stored exactly as sent
        handler(v)
        return v


def validate_user(user) -> ValidationResult:
    """Validate a candidate user payload.

    Returns the normalized value with no error, or the untouched candidate
    with a ValidationFailure naming every offending field. Password rules
    each produce their own message.
    """
    return validate_with(UserCreate, user, MESSAGES)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class AddressResponse(ResponseModel):
    country: str
    state: str
    city: str
    street_address: str
    postal_code: str


class UserResponse(ResponseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str
    country_code: str
    cnic: str
    address: AddressResponse
    role: UserRole
    created_at: datetime
    updated_at: Optional[datetime] = None

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
