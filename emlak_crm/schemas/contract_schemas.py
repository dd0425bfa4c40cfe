from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator, model_validator

from emlak_crm.core.crypto import is_valid_iban, is_valid_tc
from emlak_crm.models.contract import ContractStatus
from emlak_crm.models.property import PropertyType
from emlak_crm.schemas.owner_schemas import EMAIL_PATTERN, OwnerSummary
from emlak_crm.schemas.property_schemas import PropertySummary
from emlak_crm.schemas.tenant_schemas import TenantResponse, TenantSummary
from emlak_crm.utils.phone import is_valid_phone


class ContractCreate(BaseModel):
    """
    Schema for creating a contract between existing records.

    owner_id defaults to the property's owner when omitted.
    """

    tenant_id: int = Field(..., gt=0)
    property_id: int = Field(..., gt=0)
    owner_id: int | None = Field(None, gt=0)
    start_date: date
    end_date: date
    rent_amount: float = Field(..., gt=0, le=1_000_000_000)
    deposit: float = Field(default=0, ge=0, le=1_000_000_000)
    currency: str = Field(default="TRY", min_length=3, max_length=3)
    status: ContractStatus = ContractStatus.ACTIVE
    payment_day_of_month: int | None = Field(None, ge=1, le=31)
    payment_method: str | None = Field(None, max_length=100)
    special_conditions: str | None = Field(None, max_length=1000)
    notes: str | None = Field(None, max_length=2000)


class ContractUpdate(BaseModel):
    """Schema for updating a contract"""

    start_date: date | None = None
    end_date: date | None = None
    rent_amount: float | None = Field(None, gt=0, le=1_000_000_000)
    deposit: float | None = Field(None, ge=0, le=1_000_000_000)
    currency: str | None = Field(None, min_length=3, max_length=3)
    status: ContractStatus | None = None
    payment_day_of_month: int | None = Field(None, ge=1, le=31)
    payment_method: str | None = Field(None, max_length=100)
    special_conditions: str | None = Field(None, max_length=1000)
    notes: str | None = Field(None, max_length=2000)


class ContractResponse(BaseModel):
    """Schema for contract response"""

    model_config = {"from_attributes": True}

    id: int
    user_id: int
    tenant_id: int
    property_id: int
    owner_id: int
    start_date: date
    end_date: date
    rent_amount: float
    deposit: float
    currency: str
    status: ContractStatus
    payment_day_of_month: int | None
    payment_method: str | None
    special_conditions: str | None
    contract_pdf_path: str | None
    notes: str | None
    tenant: TenantSummary | None = None
    property: PropertySummary | None = None
    owner: OwnerSummary | None = None
    created_at: datetime
    updated_at: datetime


class ContractListResponse(BaseModel):
    """Schema for list of contracts"""

    contracts: list[ContractResponse]
    total: int


class ContractStats(BaseModel):
    total: int
    active: int
    archived: int
    inactive: int
    expiring_soon: int


class ContractForm(BaseModel):
    """
    Full contract entry form: owner, tenant, property address and terms.

    Used both for pre-submission advisories and for creating the contract
    together with any owner/tenant/property that does not exist yet.
    """

    # Owner
    owner_name: str = Field(..., min_length=2, max_length=100)
    owner_tc: str
    owner_iban: str
    owner_phone: str = Field(..., min_length=10)
    owner_email: str | None = Field(None, pattern=EMAIL_PATTERN)

    # Tenant
    tenant_name: str = Field(..., min_length=2, max_length=100)
    tenant_tc: str
    tenant_phone: str = Field(..., min_length=10)
    tenant_email: str | None = Field(None, pattern=EMAIL_PATTERN)
    tenant_address: str = Field(..., min_length=10)

    # Property
    mahalle: str = Field(..., min_length=2, max_length=100)
    cadde_sokak: str = Field(..., min_length=2, max_length=100)
    bina_no: str = Field(..., min_length=1, max_length=20)
    daire_no: str | None = Field(None, max_length=20)
    ilce: str = Field(..., min_length=2, max_length=50)
    il: str = Field(default="İstanbul", min_length=2, max_length=50)
    property_type: PropertyType = PropertyType.APARTMENT
    use_purpose: str | None = Field(None, max_length=100)

    # Contract
    start_date: date
    end_date: date
    rent_amount: float = Field(..., ge=1, le=1_000_000_000)
    deposit: float = Field(..., ge=0, le=1_000_000_000)
    payment_day_of_month: int | None = Field(None, ge=1, le=31)
    payment_method: str | None = Field(None, max_length=100)
    special_conditions: str | None = Field(None, max_length=1000)

    @field_validator("owner_email", "tenant_email", "daire_no", "use_purpose", "payment_method", "special_conditions", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return v or None

    @field_validator("owner_tc", "tenant_tc")
    @classmethod
    def validate_tc(cls, v: str) -> str:
        if not is_valid_tc(v):
            raise ValueError("TC Kimlik No must be exactly 11 digits")
        return v

    @field_validator("owner_iban")
    @classmethod
    def validate_iban(cls, v: str) -> str:
        if not is_valid_iban(v):
            raise ValueError("IBAN must be TR followed by 24 digits")
        return v

    @field_validator("owner_phone", "tenant_phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not is_valid_phone(v):
            raise ValueError("Phone must be a Turkish mobile number (5XX XXX XX XX)")
        return v

    @model_validator(mode="after")
    def check_dates(self) -> "ContractForm":
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class ContractWithEntitiesResponse(BaseModel):
    contract: ContractResponse
    created_owner: bool
    created_tenant: bool
    created_property: bool


class TenantWithContractResponse(BaseModel):
    tenant: TenantResponse
    contract: ContractResponse
