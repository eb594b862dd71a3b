from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, field_validator
from app.models.user import UserRole

class UserBase(BaseModel):
    email: EmailStr
    name: str
    role: UserRole = UserRole.STUDENT

class UserCreate(UserBase):
    password: str

class UserLogin(BaseModel):
    email: str
    password: str
    
    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        # Same normalized form EmailStr stores at registration
        try:
            return validate_email(v, check_deliverability=False).normalized
        except EmailNotValidError:
            # Cannot match any stored user; fails as an ordinary bad login
            return v

class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole
    
    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    user: UserResponse
    token: str
