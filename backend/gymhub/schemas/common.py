from pydantic import BaseModel
from typing import Optional


class MessageResponse(BaseModel):
    message: str


def strip_required(value: Optional[str]) -> Optional[str]:
    """Trim surrounding whitespace; a blank value is rejected"""
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value
