"""Token issuance and password hashing."""

import uuid

import pytest

from jose import jwt

from app.models.user import User, Address, UserRole
from app.utils.auth import (
    TOKEN_FIELDS, token_payload, generate_auth_token, decode_token,
    get_password_hash, verify_password,
)

SECRET = "unit-test-secret"

RECORD = {
    "_id": "64b7f0c2e1d3a9f1c2b3a4d5",
    "firstName": "Ayesha",
    "lastName": "Khan",
    "email": "ayesha.khan@gmail.com",
    "password": "$2b$12$" + "x" * 53,
    "phone": "3001234567",
    "countryCode": "+9230",
    "cnic": "3520212345671",
    "address": {
        "country": "Pakistan",
        "state": "Punjab",
        "city": "Lahore",
        "streetAddress": "12 Main Boulevard",
        "postalCode": "54000",
    },
    "role": "manager",
    "createdAt": "2024-01-01T00:00:00Z",
    "__v": 0,
}


def make_user() -> User:
    return User(
        id=uuid.UUID("6f1c2a7e-1b2c-4d3e-8f90-123456789abc"),
        first_name="Bilal",
        last_name="Ahmed",
        email="bilal.ahmed@gmail.com",
        password=get_password_hash("Abcdefg1!"),
        phone="3219876543",
        country_code="+9231",
        cnic="3520298765432",
        address=Address("Pakistan", "Sindh", "Karachi", "7 Clifton Block 5", "75600"),
    )


def test_payload_keeps_only_token_fields():
    payload = token_payload(RECORD)
    assert set(payload) == set(TOKEN_FIELDS)
    assert "password" not in payload
    assert "createdAt" not in payload
    assert "__v" not in payload


def test_payload_skips_fields_the_record_lacks():
    payload = token_payload({"_id": "abc", "email": "a@b.co", "password": "secret"})
    assert payload == {"_id": "abc", "email": "a@b.co"}


def test_token_is_signed_with_the_given_secret():
    token = generate_auth_token(RECORD, SECRET)
    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert claims == token_payload(RECORD)


def test_token_has_no_registered_claims():
    claims = decode_token(generate_auth_token(RECORD, SECRET), SECRET)
    for claim in ("exp", "aud", "iss", "iat", "sub"):
        assert claim not in claims


def test_decode_with_wrong_secret_returns_none():
    token = generate_auth_token(RECORD, SECRET)
    assert decode_token(token, "another-secret") is None
    assert decode_token("not-a-token", SECRET) is None


def test_user_model_token_uses_wire_names():
    user = make_user()
    claims = decode_token(user.generate_auth_token(SECRET), SECRET)
    assert claims["_id"] == "6f1c2a7e-1b2c-4d3e-8f90-123456789abc"
    assert claims["countryCode"] == "+9231"
    assert claims["address"]["streetAddress"] == "7 Clifton Block 5"
    assert claims["role"] == UserRole.DEVELOPER.value
    assert "password" not in claims


def test_password_hash_is_sixty_chars_and_verifies():
    hashed = get_password_hash("Abcdefg1!")
    assert len(hashed) == 60
    assert verify_password("Abcdefg1!", hashed)
    assert not verify_password("Abcdefg1?", hashed)


def test_verify_against_non_hash_is_false():
    assert not verify_password("Abcdefg1!", "plain-text")


def test_signing_without_a_secret_fails():
    with pytest.raises(ValueError):
        generate_auth_token({"_id": "1", "role": "admin"}, "")


def test_decoding_without_a_secret_fails():
    forged = jwt.encode({"_id": "x"}, "", algorithm="HS256")
    with pytest.raises(ValueError):
        decode_token(forged, "")
