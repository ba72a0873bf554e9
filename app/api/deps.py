from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import get_db
from app.models.user import User, UserRole
from app.utils.auth import decode_token
from typing import Optional
from uuid import UUID

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)

async def get_current_user(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme)
) -> Optional[User]:
    if not token:
        return None
    
    payload = decode_token(token, settings.SECRET_KEY, settings.ALGORITHM)
    if not payload:
        return None
    
    user_id = payload.get("_id")
    if not user_id:
        return None
    
    try:
        user_uuid = UUID(user_id)
    except (TypeError, ValueError):
        return None
    
    return db.query(User).filter(User.id == user_uuid).first()

async def get_authenticated_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    if not current_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user

def require_role(*roles: UserRole):
    async def role_checker(
        current_user: User = Depends(get_authenticated_user)
    ):
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires one of roles: {', '.join(r.value for r in roles)}"
            )
        return current_user
    return role_checker
