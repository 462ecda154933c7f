"""
Pydantic schemas for employees.

The raw PIN is accepted on input only to derive employees.pin_hash; the
services drop it before anything is written.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_email(email: str) -> str:
    """Trim and lowercase an email address (login lookups use the same form)."""
    return email.strip().lower()


class EmployeeCreate(BaseModel):
    """Fields for a new employee. Only pin is mandatory."""
    model_config = ConfigDict(extra="allow")

    pin: str = Field(..., description="Raw PIN, hashed before storage", min_length=1)
    email: Optional[str] = Field(
        None,
        description="Login email, stored trimmed and lowercased",
        examples=["ana@example.com"]
    )
    name: Optional[str] = Field(None, description="Full name")
    role: Optional[str] = Field(None, description="Role label", examples=["admin", "staff"])
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return normalize_email(v) if v is not None else v


class EmployeeUpdate(BaseModel):
    """
    Partial update for an employee.

    pin_hash is only recomputed when a non-empty pin is provided.
    """
    model_config = ConfigDict(extra="allow")

    id: Union[int, str] = Field(..., description="Employee primary key")
    pin: Optional[str] = Field(None, description="New raw PIN, if changing it")
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return normalize_email(v) if v is not None else v
