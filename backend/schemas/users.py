# backend/schemas/users.py
from datetime import datetime
from typing import Optional, Literal

from pydantic import EmailStr, Field

from schemas.base import CamelModel

Role = Literal["ADMIN", "MANAGER", "MEMBER"]
Country = Literal["IN", "US"]


class SignupPayload(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)
    country: Optional[Country] = None


class LoginPayload(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=100)


class UserOut(CamelModel):
    id: str
    email: str
    role: Role
    country: Country
    is_email_verified: bool
    created_at: datetime
    updated_at: datetime


class LoginResponse(CamelModel):
    ok: bool = True
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserOut


class UpdateUserRole(CamelModel):
    role: Role


class UpdateUserCountry(CamelModel):
    country: Country
