from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from emlak_crm.core.crypto import is_valid_iban, is_valid_tc

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class OwnerCreate(BaseModel):
    """Schema for creating a property owner"""

    name: str = Field(..., min_length=2, max_length=100)
    tc: str | None = Field(None, description="TC Kimlik No, stored encrypted")
    iban: str | None = Field(None, description="TR + 24 digits, stored encrypted")
    phone: str | None = Field(None, max_length=32)
    email: str | None = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    address: str | None = None
    notes: str | None = Field(None, max_length=2000)

    @field_validator("tc")
    @classmethod
    def validate_tc(cls, v: str | None) -> str | None:
        if v is not None and not is_valid_tc(v):
            raise ValueError("TC Kimlik No must be exactly 11 digits")
        return v

    @field_validator("iban")
    @classmethod
    def validate_iban(cls, v: str | None) -> str | None:
        if v is not None and not is_valid_iban(v):
            raise ValueError("IBAN must be TR followed by 24 digits")
        return v


class OwnerUpdate(OwnerCreate):
    """Schema for updating an owner; every field optional"""

    name: str | None = Field(None, min_length=2, max_length=100)


class OwnerResponse(BaseModel):
    """Owner as returned by the API. TC and IBAN are reported only as present/absent."""

    model_config = {"from_attributes": True}

    id: int
    user_id: int
    name: str
    phone: str | None
    email: str | None
    address: str | None
    notes: str | None
    has_tc: bool = Field(False, validation_alias="tc_hash")
    has_iban: bool = Field(False, validation_alias="iban_encrypted")
    property_count: int = 0
    created_at: datetime
    updated_at: datetime

    @field_validator("has_tc", "has_iban", mode="before")
    @classmethod
    def present(cls, v) -> bool:
        return bool(v)


class OwnerSummary(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    phone: str | None = None


class OwnerListResponse(BaseModel):
    """Schema for list of owners"""

    owners: list[OwnerResponse]
    total: int
