from datetime import datetime
from pydantic import BaseModel, Field

from emlak_crm.models.property import PropertyStatus, PropertyType
from emlak_crm.schemas.owner_schemas import OwnerSummary


class PropertyCreate(BaseModel):
    """Schema for creating a property"""

    owner_id: int = Field(..., gt=0)
    mahalle: str = Field(..., min_length=2, max_length=100)
    cadde_sokak: str = Field(..., min_length=2, max_length=100)
    bina_no: str = Field(..., min_length=1, max_length=20)
    daire_no: str | None = Field(None, max_length=20)
    district: str = Field(..., min_length=2, max_length=50, description="İlçe")
    city: str = Field(..., min_length=2, max_length=50, description="İl")
    property_type: PropertyType = PropertyType.APARTMENT
    use_purpose: str | None = Field(None, max_length=100)
    status: PropertyStatus = PropertyStatus.EMPTY
    rent_amount: float | None = Field(None, ge=0)
    currency: str = Field(default="TRY", min_length=3, max_length=3)
    notes: str | None = Field(None, max_length=2000)


class PropertyUpdate(BaseModel):
    """Schema for updating a property"""

    owner_id: int | None = Field(None, gt=0)
    mahalle: str | None = Field(None, min_length=2, max_length=100)
    cadde_sokak: str | None = Field(None, min_length=2, max_length=100)
    bina_no: str | None = Field(None, min_length=1, max_length=20)
    daire_no: str | None = Field(None, max_length=20)
    district: str | None = Field(None, min_length=2, max_length=50)
    city: str | None = Field(None, min_length=2, max_length=50)
    property_type: PropertyType | None = None
    use_purpose: str | None = Field(None, max_length=100)
    status: PropertyStatus | None = None
    rent_amount: float | None = Field(None, ge=0)
    currency: str | None = Field(None, min_length=3, max_length=3)
    notes: str | None = Field(None, max_length=2000)


class PropertyResponse(BaseModel):
    """Schema for property response"""

    model_config = {"from_attributes": True}

    id: int
    user_id: int
    owner_id: int
    mahalle: str
    cadde_sokak: str
    bina_no: str
    daire_no: str | None
    district: str
    city: str
    full_address: str
    normalized_address: str
    property_type: PropertyType
    use_purpose: str | None
    status: PropertyStatus
    rent_amount: float | None
    currency: str
    notes: str | None
    owner: OwnerSummary | None = None
    created_at: datetime
    updated_at: datetime


class PropertySummary(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    full_address: str
    city: str
    status: PropertyStatus


class PropertyListResponse(BaseModel):
    """Schema for list of properties"""

    properties: list[PropertyResponse]
    total: int


class PropertyStats(BaseModel):
    total: int
    empty: int
    occupied: int
    inactive: int
