# File: articles_api/schemas/user.py

from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator


def _not_blank(v: Optional[str]) -> Optional[str]:
    if v is not None and not v.strip():
        raise ValueError("must not be empty")
    return v


def _lower_email(v: Optional[str]) -> Optional[str]:
    # Accounts are unique per address regardless of case.
    return v.lower() if v is not None else v


class UserBase(BaseModel):
    username: str
    email: EmailStr

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return _lower_email(v)


class UserCreate(UserBase):
    password: str

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        return _not_blank(v)


class UserReplace(UserCreate):
    """PUT body: every field is required and overwritten."""


class UserPatch(BaseModel):
    """PATCH body: only fields present in the request are applied."""

    username: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None

    @field_validator("username", "password")
    @classmethod
    def fields_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _not_blank(v)

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: Optional[str]) -> Optional[str]:
        return _lower_email(v)


class UserResponse(BaseModel):
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def email_lowercase(cls, v: str) -> str:
        return _lower_email(v)

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        return _not_blank(v)


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    user: UserResponse
    token: str
    token_type: str = "bearer"
