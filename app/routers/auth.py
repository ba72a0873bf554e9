import logging
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import get_db
from app.core.errors import DuplicateRecordError
from app.models.user import User
from app.schemas.user import UserLogin, TokenResponse, UserResponse, validate_user
from app.utils.auth import get_password_hash, verify_password
from app.api.deps import get_authenticated_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

# Columns that must be unique, keyed by their wire name
UNIQUE_FIELDS = (
    ("email", User.email),
    ("phone", User.phone),
    ("countryCode", User.country_code),
    ("cnic", User.cnic),
)


def _issue_token(user: User) -> str:
    return user.generate_auth_token(settings.SECRET_KEY, settings.ALGORITHM)


def _authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    
    if not user or not verify_password(password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: dict = Body(...), db: Session = Depends(get_db)):
    value, error = validate_user(payload)
    if error:
        raise error
    
    for field, column in UNIQUE_FIELDS:
        if db.query(User).filter(column == value[field]).first():
            raise DuplicateRecordError("User", field)
    
    user = User.from_validated(value, get_password_hash(value["password"]))
    
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User registered", extra={"user_id": str(user.id)})
    
    return TokenResponse(
        access_token=_issue_token(user),
        user=UserResponse.model_validate(user)
    )

@router.post("/login", response_model=TokenResponse)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = _authenticate(db, credentials.email, credentials.password)
    
    return TokenResponse(
        access_token=_issue_token(user),
        user=UserResponse.model_validate(user)
    )

@router.post("/token", response_model=dict)
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """OAuth2 compatible token endpoint for Swagger UI"""
    user = _authenticate(db, form_data.username, form_data.password)
    
    return {
        "access_token": _issue_token(user),
        "token_type": "bearer"
    }

@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_authenticated_user)
):
    return current_user
