from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

from emlak_crm.core.crypto import is_valid_tc
from emlak_crm.schemas.owner_schemas import EMAIL_PATTERN
from emlak_crm.schemas.property_schemas import PropertySummary


class TenantCreate(BaseModel):
    """Schema for creating a tenant"""

    name: str = Field(..., min_length=2, max_length=100)
    tc: str | None = Field(None, description="TC Kimlik No, stored encrypted")
    phone: str | None = Field(None, max_length=32)
    email: str | None = Field(None, max_length=255, pattern=EMAIL_PATTERN)
    address: str | None = None
    notes: str | None = Field(None, max_length=2000)
    property_id: int | None = Field(None, gt=0)

    @field_validator("tc")
    @classmethod
    def validate_tc(cls, v: str | None) -> str | None:
        if v is not None and not is_valid_tc(v):
            raise ValueError("TC Kimlik No must be exactly 11 digits")
        return v


class TenantUpdate(TenantCreate):
    """Schema for updating a tenant; every field optional"""

    name: str | None = Field(None, min_length=2, max_length=100)


class TenantResponse(BaseModel):
    """Schema for tenant response"""

    model_config = {"from_attributes": True}

    id: int
    user_id: int
    property_id: int | None
    name: str
    phone: str | None
    email: str | None
    address: str | None
    notes: str | None
    has_tc: bool = Field(False, validation_alias="tc_hash")
    property: PropertySummary | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("has_tc", mode="before")
    @classmethod
    def present(cls, v) -> bool:
        return bool(v)


class TenantSummary(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    phone: str | None = None


class TenantListResponse(BaseModel):
    """Schema for list of tenants"""

    tenants: list[TenantResponse]
    total: int


class TenantAssign(BaseModel):
    """Assign a tenant to a property; null unassigns"""

    property_id: int | None = Field(None, gt=0)


class TenantStats(BaseModel):
    total: int
    assigned: int
    unassigned: int


class TenantContractTerms(BaseModel):
    """
    Contract part of a tenant-with-contract request.

    Dates are optional here so the service can report a specific error
    code when either one is missing.
    """

    start_date: date | None = None
    end_date: date | None = None
    rent_amount: float = Field(..., gt=0)
    deposit: float = Field(default=0, ge=0)
    currency: str = Field(default="TRY", min_length=3, max_length=3)
    payment_day_of_month: int | None = Field(None, ge=1, le=31)
    payment_method: str | None = Field(None, max_length=100)
    special_conditions: str | None = Field(None, max_length=1000)
    notes: str | None = Field(None, max_length=2000)


class TenantWithContractCreate(BaseModel):
    """Tenant fields are validated in the service so each problem has its own error code"""

    name: str = ""
    tc: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    notes: str | None = None
    property_id: int | None = None
    contract: TenantContractTerms
