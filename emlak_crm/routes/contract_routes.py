from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from emlak_crm.database import get_db
from emlak_crm.dependencies import get_current_user
from emlak_crm.models.contract import ContractStatus
from emlak_crm.models.user import User
from emlak_crm.services.contract_service import ContractService
from emlak_crm.services.duplicate_check_service import DuplicateCheckService
from emlak_crm.schemas.duplicate_check_schemas import PreValidationResponse
from emlak_crm.schemas.contract_schemas import (
    ContractCreate,
    ContractUpdate,
    ContractResponse,
    ContractListResponse,
    ContractStats,
    ContractForm,
    ContractWithEntitiesResponse,
)

router = APIRouter()


@router.post("/", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def create_contract(
    data: ContractCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Create a contract between an existing tenant, property and owner"""
    service = ContractService(db)
    contract = service.create_contract(data, user)
    return contract


@router.post("/pre-validation", response_model=PreValidationResponse)
async def pre_validate_contract(
    form: ContractForm, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """
    Advisory checks for the contract entry form.

    Reports same-name people with a different TC, changed contact data and
    tenants that already hold active contracts. Nothing here blocks submission.
    """
    service = DuplicateCheckService(db)
    return service.run_pre_validation(form, user)


@router.post("/with-entities", response_model=ContractWithEntitiesResponse, status_code=status.HTTP_201_CREATED)
async def create_contract_with_entities(
    form: ContractForm, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Create owner, tenant and property as needed, then the contract, in one transaction"""
    service = ContractService(db)
    contract, created_owner, created_tenant, created_property = service.create_with_entities(form, user)
    return ContractWithEntitiesResponse(
        contract=contract,
        created_owner=created_owner,
        created_tenant=created_tenant,
        created_property=created_property,
    )


@router.get("/", response_model=ContractListResponse)
async def list_contracts(
    search: str = Query("", description="Matches tenant name or property address"),
    status_filter: ContractStatus | None = Query(None, alias="status"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get the user's contracts with optional filters"""
    service = ContractService(db)
    contracts = service.get_user_contracts(user, search=search, status=status_filter)
    return ContractListResponse(contracts=contracts, total=len(contracts))


@router.get("/active", response_model=ContractListResponse)
async def list_active_contracts(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    service = ContractService(db)
    contracts = service.get_active_contracts(user)
    return ContractListResponse(contracts=contracts, total=len(contracts))


@router.get("/expiring", response_model=ContractListResponse)
async def list_expiring_contracts(
    days: int | None = Query(None, ge=0, le=3650),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Active contracts ending within the given number of days"""
    service = ContractService(db)
    contracts = service.get_expiring_contracts(user, days=days)
    return ContractListResponse(contracts=contracts, total=len(contracts))


@router.get("/stats", response_model=ContractStats)
async def contract_stats(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    service = ContractService(db)
    return service.get_stats(user)


@router.get("/{contract_id}", response_model=ContractResponse)
async def get_contract(
    contract_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Get specific contract details"""
    service = ContractService(db)
    contract = service.get_contract(contract_id, user)
    return contract


@router.get("/{contract_id}/pdf")
async def download_contract_pdf(
    contract_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Render the rental contract as a PDF download"""
    service = ContractService(db)
    filename, pdf = service.render_contract_pdf(contract_id, user)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )


@router.post("/{contract_id}/pdf", response_model=ContractResponse)
async def store_contract_pdf(
    contract_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Render the contract PDF and keep it in storage"""
    service = ContractService(db)
    contract = service.store_contract_pdf(contract_id, user)
    return contract


@router.patch("/{contract_id}", response_model=ContractResponse)
async def update_contract(
    contract_id: int,
    data: ContractUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update contract; leaving Active releases the property"""
    service = ContractService(db)
    contract = service.update_contract(contract_id, data, user)
    return contract


@router.delete("/{contract_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contract(
    contract_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    service = ContractService(db)
    service.delete_contract(contract_id, user)
    return None
