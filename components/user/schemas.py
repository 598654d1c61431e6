"""Pydantic schemas for user data validation."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for registration."""
    uname: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1, max_length=20)


class UserLogin(BaseModel):
    """Schema for login."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    message: str
    redirect: str


class Balance(BaseModel):
    """Schema for balance response."""
    balance: float
    username: str


class TokenClaims(BaseModel):
    """Claims carried by a validated session token."""
    sub: str
    role: str
    uid: int
