import logging

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from app.database import get_db, store_operation
from app.schemas.user import AuthResponse, UserCreate, UserLogin, UserResponse
from app.crud import user as crud_user
from app.core.exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError, StoreError, StoreErrorKind
from app.core.security import create_access_token
from app.api.dependencies import get_current_user
from app.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()

def _auth_payload(user: User) -> dict:
    return {
        "user": UserResponse.model_validate(user),
        "token": create_access_token(user.id),
    }

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    """Create an account and sign a token for it"""
    with store_operation(db, StoreErrorKind.WRITE):
        if crud_user.get_user_by_email(db, email=user.email):
            raise EmailAlreadyRegisteredError()
        db_user = crud_user.create_user(db=db, user=user)
    
    logger.info("Registered user %s as %s", db_user.id, db_user.role.value)
    return _auth_payload(db_user)

@router.post("/login", response_model=AuthResponse)
def login(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Exchange email and password for a token"""
    # Malformed bodies fail like any other login, without saying why
    try:
        credentials = UserLogin.model_validate(payload)
    except ValidationError:
        raise InvalidCredentialsError()
    
    try:
        with store_operation(db, StoreErrorKind.READ):
            user = crud_user.authenticate_user(
                db,
                email=credentials.email,
                password=credentials.password
            )
    except StoreError:
        # Store failures look the same as bad credentials to the caller
        user = None
    
    if not user:
        raise InvalidCredentialsError()
    
    return _auth_payload(user)

@router.get("/me", response_model=UserResponse)
def read_users_me(current_user: User = Depends(get_current_user)):
    return current_user
