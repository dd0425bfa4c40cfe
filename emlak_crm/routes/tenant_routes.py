from typing import Literal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from emlak_crm.database import get_db
from emlak_crm.dependencies import get_current_user
from emlak_crm.models.user import User
from emlak_crm.services.tenant_service import TenantService
from emlak_crm.schemas.contract_schemas import TenantWithContractResponse
from emlak_crm.schemas.tenant_schemas import (
    TenantCreate,
    TenantUpdate,
    TenantResponse,
    TenantListResponse,
    TenantAssign,
    TenantStats,
    TenantWithContractCreate,
)

router = APIRouter()


@router.post("/", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant(
    data: TenantCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Create a tenant, optionally assigned to a property"""
    service = TenantService(db)
    tenant = service.create_tenant(data, user)
    return tenant


@router.post("/with-contract", response_model=TenantWithContractResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant_with_contract(
    data: TenantWithContractCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """
    Create a tenant and an active contract for the chosen property.

    Both rows are written in one transaction; the property becomes Occupied.
    """
    service = TenantService(db)
    tenant, contract = service.create_tenant_with_contract(data, user)
    return TenantWithContractResponse(tenant=tenant, contract=contract)


@router.get("/", response_model=TenantListResponse)
async def list_tenants(
    search: str = Query("", description="Matches name, phone, email or property address"),
    assignment: Literal["all", "assigned", "unassigned"] = Query("all"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get the user's tenants with optional filters"""
    service = TenantService(db)
    tenants = service.get_user_tenants(user, search=search, assignment=assignment)
    return TenantListResponse(tenants=tenants, total=len(tenants))


@router.get("/stats", response_model=TenantStats)
async def tenant_stats(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    service = TenantService(db)
    return service.get_stats(user)


@router.get("/{tenant_id}", response_model=TenantResponse)
async def get_tenant(
    tenant_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Get specific tenant details"""
    service = TenantService(db)
    tenant = service.get_tenant(tenant_id, user)
    return tenant


@router.patch("/{tenant_id}", response_model=TenantResponse)
async def update_tenant(
    tenant_id: int,
    data: TenantUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update tenant details"""
    service = TenantService(db)
    tenant = service.update_tenant(tenant_id, data, user)
    return tenant


@router.put("/{tenant_id}/assign", response_model=TenantResponse)
async def assign_tenant(
    tenant_id: int,
    data: TenantAssign,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Assign the tenant to a property; a null property_id unassigns"""
    service = TenantService(db)
    tenant = service.assign_property(tenant_id, data.property_id, user)
    return tenant


@router.delete("/{tenant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tenant(
    tenant_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Delete tenant and their contracts"""
    service = TenantService(db)
    service.delete_tenant(tenant_id, user)
    return None
