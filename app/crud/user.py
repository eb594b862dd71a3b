from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.exceptions import EmailAlreadyRegisteredError
from app.models.user import User, UserRole
from app.schemas.user import UserCreate
from app.core.security import get_password_hash, verify_password

def get_user(db: Session, user_id: int):
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, user: UserCreate):
    db_user = User(
        email=user.email,
        name=user.name,
        role=UserRole(user.role),
        hashed_password=get_password_hash(user.password)
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # Unique email taken by a registration that raced this one
        if get_user_by_email(db, email=user.email):
            raise EmailAlreadyRegisteredError()
        raise
    db.refresh(db_user)
    return db_user

def authenticate_user(db: Session, email: str, password: str):
    user = get_user_by_email(db, email=email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user
