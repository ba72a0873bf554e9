"""
scripts/create_admin.py

Run this once from your project root to create the first admin user:

    python -m scripts.create_admin

You will be prompted for every user field. Input goes through the same
validator as the /auth/register endpoint before anything is written.
"""

import sys
import os

# Make sure app is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.database import SessionLocal, init_db
from app.models.user import User, UserRole
from app.schemas.user import validate_user
from app.utils.auth import get_password_hash

PROMPTS = [
    ("firstName",   "First name:         "),
    ("lastName",    "Last name:          "),
    ("email",       "Email:              "),
    ("phone",       "Phone (10 digits):  "),
    ("countryCode", "Country code (+92..): "),
    ("cnic",        "CNIC (13 digits):   "),
    ("password",    "Password:           "),
]

ADDRESS_PROMPTS = [
    ("country",       "Country:            "),
    ("state",         "State:              "),
    ("city",          "City:               "),
    ("streetAddress", "Street address:     "),
    ("postalCode",    "Postal code:        "),
]


def collect_admin(read=input) -> dict:
    candidate = {key: read(label).strip() for key, label in PROMPTS}
    candidate["address"] = {key: read(label).strip() for key, label in ADDRESS_PROMPTS}
    candidate["role"] = UserRole.ADMIN.value
    return candidate


def create_admin():
    print("\n── Create Admin User ─────────────────────")

    value, error = validate_user(collect_admin())
    if error:
        for detail in error.details:
            print(f"❌ {detail.field}: {detail.message}")
        sys.exit(1)

    init_db()
    db = SessionLocal()
    try:
        # Check for duplicates
        for field, column in (
            ("email", User.email),
            ("phone", User.phone),
            ("countryCode", User.country_code),
            ("cnic", User.cnic),
        ):
            if db.query(User).filter(column == value[field]).first():
                print(f"❌ {field} '{value[field]}' is already registered.")
                sys.exit(1)

        admin = User.from_validated(value, get_password_hash(value["password"]))

        db.add(admin)
        db.commit()
        db.refresh(admin)

        print(f"\n✅ Admin user created successfully!")
        print(f"   ID:    {admin.id}")
        print(f"   Name:  {admin.first_name} {admin.last_name}")
        print(f"   Email: {admin.email}")
        print(f"   Role:  {admin.role.value}")
        print(f"\nYou can now log in at /api/v1/auth/login.\n")

    except Exception as e:
        db.rollback()
        print(f"❌ Failed: {e}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    create_admin()
