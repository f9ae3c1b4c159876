from typing import Literal

from pydantic import BaseModel, EmailStr, field_validator

Role = Literal["admin", "hr", "manager", "recruiter", "employee"]


# 1. For Onboarding (Input)
class UserCreate(BaseModel):
    name: str
    email: EmailStr
    role: Role


# 2. For Setting a Password from the emailed link (Input)
class SetPasswordRequest(BaseModel):
    token: str
    password: str

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if len(v) < 8:
            raise ValueError("Password must be at least 8 characters")
        return v


# 3. For Login (Input)
class UserLogin(BaseModel):
    email: EmailStr
    password: str


# 4. For Responses (Output)
class UserResponse(BaseModel):
    id: str
    name: str
    email: EmailStr
    role: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str
