import logging
from typing import Optional

from fastapi import Depends, Header
from jose import JWTError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import AuthError, ForbiddenError
from app.core.security import decode_access_token
from app.crud import user as crud_user
from app.database import get_db
from app.models.user import User, UserRole

logger = logging.getLogger(__name__)


def get_current_user(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the bearer token to the user row it was issued for."""
    parts = (authorization or "").split()
    if len(parts) < 2:
        raise AuthError("Access denied")

    scheme, token = parts[0], parts[1]
    if scheme.lower() != "bearer":
        raise AuthError("Invalid token", status_code=400)

    try:
        payload = decode_access_token(token)
    except JWTError as exc:
        logger.info("Rejected token: %s", exc)
        raise AuthError("Invalid token", status_code=400)

    user_id = payload.get("id")
    if not isinstance(user_id, int):
        raise AuthError("Invalid token")

    try:
        user = crud_user.get_user(db, user_id=user_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("User lookup for token failed: %s", exc)
        user = None

    if user is None:
        raise AuthError("Invalid token")

    return user


def require_role(role: UserRole):
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != role:
            logger.info("User %s with role %s denied %s access", current_user.id, current_user.role.value, role.value)
            raise ForbiddenError(f"{role.value.capitalize()} access required")
        return current_user

    return role_checker
