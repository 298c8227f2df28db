"""
Input validation schemas using Pydantic for the HTTP surface.
"""
import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from famealy.domain.User import Status
from famealy.utilities.constants import MIN_SCORE, MAX_SCORE

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


class SignInInput(BaseModel):
    """Schema for login."""
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        """Normalize and sanity-check the email address."""
        v = v.strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError('Invalid email address')
        return v


class SignUpInput(SignInInput):
    """Schema for account creation."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class FamilyCreateInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate family name."""
        if not v.strip():
            raise ValueError('Family name cannot be empty')
        return v.strip()


class JoinFamilyInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    invite_code: str = Field(..., min_length=1, max_length=32, alias='inviteCode')

    @field_validator('invite_code')
    @classmethod
    def normalize_code(cls, v):
        return v.strip().upper()


class StatusUpdateInput(BaseModel):
    status: Status


class MealCreateInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate meal name."""
        if not v.strip():
            raise ValueError('Meal name cannot be empty')
        return v.strip()


class RatingInput(BaseModel):
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    comment: Optional[str] = Field(default="", max_length=1000)

    @field_validator('comment')
    @classmethod
    def strip_comment(cls, v):
        """Remove leading/trailing whitespace."""
        return (v or "").strip()
