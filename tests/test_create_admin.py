"""Admin bootstrap script: prompted answers go through validate_user."""

from app.models.user import User, UserRole
from app.schemas.user import validate_user
from app.utils.auth import get_password_hash
from scripts.create_admin import collect_admin

ANSWERS = [
    "  Sana ", "Malik", "sana.malik@gmail.com", "3331234567", "+9233",
    "3520211112223", "Admin123!",
    "Pakistan", "Punjab", "Lahore", "45 Canal Road", "54000",
]


def test_prompts_build_a_valid_admin_payload():
    answers = iter(ANSWERS)
    candidate = collect_admin(read=lambda _label: next(answers))
    value, error = validate_user(candidate)
    assert error is None
    assert value["firstName"] == "Sana"
    assert value["role"] == "admin"

    admin = User.from_validated(value, get_password_hash(value["password"]))
    assert admin.role == UserRole.ADMIN


def test_bad_answer_is_reported_by_field():
    answers = iter(ANSWERS[:3] + ["12345"] + ANSWERS[4:])
    _, error = validate_user(collect_admin(read=lambda _label: next(answers)))
    assert error.fields == ["phone"]
