from datetime import date
from typing import Any, Literal
from pydantic import BaseModel, Field

EntityType = Literal["owner", "tenant"]


class DuplicateNameResult(BaseModel):
    has_duplicate: bool = False
    count: int = 0
    message: str | None = None


class DataChangesResult(BaseModel):
    has_changes: bool = False
    changes: list[str] = Field(default_factory=list)
    message: str | None = None
    existing_data: dict[str, Any] | None = None


class ActiveContractSummary(BaseModel):
    id: int
    property_address: str
    start_date: date
    end_date: date


class MultipleContractsResult(BaseModel):
    has_multiple: bool = False
    count: int = 0
    contracts: list[ActiveContractSummary] = Field(default_factory=list)
    message: str | None = None


class PreValidationResponse(BaseModel):
    """Advisories for a contract form; none of them blocks submission"""

    owner_duplicate: DuplicateNameResult
    tenant_duplicate: DuplicateNameResult
    owner_changes: DataChangesResult
    tenant_changes: DataChangesResult
    tenant_contracts: MultipleContractsResult
    warnings: list[str]
