from pydantic import BaseModel, Field, field_validator
from typing import Optional

from gymhub.models.user import AccountRole
from gymhub.schemas.common import strip_required


class SignUpRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=6, max_length=128)
    role: Optional[AccountRole] = None

    @field_validator("username")
    @classmethod
    def clean_username(cls, value: str) -> str:
        return strip_required(value)


class SignInRequest(BaseModel):
    username: str
    password: str

    # Signup stores the trimmed username, so look it up the same way
    @field_validator("username")
    @classmethod
    def clean_username(cls, value: str) -> str:
        return strip_required(value)


class AuthResponse(BaseModel):
    """Returned by signup and signin"""
    id: str
    username: str
    role: AccountRole
    token: str
