from dataclasses import dataclass
import enum
import re
from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship, composite, validates
from app.core.errors import SchemaViolation
from app.models.base import BaseModel, check_text, DIGITS

EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
COUNTRY_CODE = re.compile(r"^\+[0-9]+$")


class UserRole(str, enum.Enum):
    DEVELOPER = "developer"
    MANAGER = "manager"
    ADMIN = "admin"


@dataclass
class Address:
    country: str
    state: str
    city: str
    street_address: str
    postal_code: str

    def to_document(self) -> dict:
        return {
            "country": self.country,
            "state": self.state,
            "city": self.city,
            "streetAddress": self.street_address,
            "postalCode": self.postal_code,
        }


class User(BaseModel):
    __tablename__ = "users"
    
    first_name = Column(String(20), nullable=False)
    last_name = Column(String(20), nullable=False)
    email = Column(String(254), unique=True, index=True, nullable=False)
    # bcrypt hash, never the raw password
    password = Column(String(60), nullable=False)
    
    phone = Column(String(10), unique=True, index=True, nullable=False)
    country_code = Column(String(5), unique=True, nullable=False)
    cnic = Column(String(13), unique=True, index=True, nullable=False)
    
    address_country = Column(String(50), nullable=False)
    address_state = Column(String(50), nullable=False)
    address_city = Column(String(50), nullable=False)
    address_street = Column(String(100), nullable=False)
    address_postal_code = Column(String(10), nullable=False)
    address = composite(
        Address,
        address_country,
        address_state,
        address_city,
        address_street,
        address_postal_code,
    )
    
    role = Column(
        Enum(UserRole, values_callable=lambda roles: [r.value for r in roles]),
        default=UserRole.DEVELOPER,
        nullable=False,
    )
    
    projects = relationship("Project", back_populates="creator")

    @validates("first_name", "last_name")
    def _validate_name(self, key, value):
        return check_text(key, value, max_length=20)

    @validates("email")
    def _validate_email(self, key, value):
        return check_text(key, value, pattern=EMAIL)

    @validates("password")
    def _validate_password(self, key, value):
        return check_text(key, value, length=60)

    @validates("phone")
    def _validate_phone(self, key, value):
        return check_text(key, value, length=10, pattern=DIGITS)

    @validates("country_code")
    def _validate_country_code(self, key, value):
        return check_text(key, value, length=5, pattern=COUNTRY_CODE)

    @validates("cnic")
    def _validate_cnic(self, key, value):
        return check_text(key, value, length=13, pattern=DIGITS)

    @validates("address_country", "address_state", "address_city")
    def _validate_region(self, key, value):
        return check_text(key, value, max_length=50)

    @validates("address_street")
    def _validate_street(self, key, value):
        return check_text(key, value, max_length=100)

    @validates("address_postal_code")
    def _validate_postal_code(self, key, value):
        return check_text(key, value, max_length=10, pattern=DIGITS)

    @validates("role")
    def _validate_role(self, key, value):
        if value is None:
            return UserRole.DEVELOPER
        try:
            return UserRole(value)
        except ValueError:
            raise SchemaViolation(key, f"role must be one of: {', '.join(r.value for r in UserRole)}") from None

    @classmethod
    def from_validated(cls, value: dict, password_hash: str) -> "User":
        """Build a user from a validate_user() value; the raw password is replaced by its hash."""
        address = value["address"]
        return cls(
            first_name=value["firstName"],
            last_name=value["lastName"],
            email=value["email"],
            password=password_hash,
            phone=value["phone"],
            country_code=value["countryCode"],
            cnic=value["cnic"],
            address=Address(
                country=address["country"],
                state=address["state"],
                city=address["city"],
                street_address=address["streetAddress"],
                postal_code=address["postalCode"],
            ),
            role=value.get("role"),
        )

    def to_document(self) -> dict:
        """The record under its wire field names."""
        role = self.role if self.role is not None else UserRole.DEVELOPER
        return {
            "_id": str(self.id) if self.id is not None else None,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "password": self.password,
            "phone": self.phone,
            "countryCode": self.country_code,
            "cnic": self.cnic,
            "address": self.address.to_document() if self.address_country is not None else None,
            "role": UserRole(role).value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def generate_auth_token(self, secret_key: str, algorithm: str = "HS256") -> str:
        from app.utils.auth import generate_auth_token
        return generate_auth_token(self, secret_key, algorithm)


from app.models.project import Project  # noqa: E402,F401
