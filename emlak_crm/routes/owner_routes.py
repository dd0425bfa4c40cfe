from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from emlak_crm.database import get_db
from emlak_crm.dependencies import get_current_user
from emlak_crm.models.user import User
from emlak_crm.services.owner_service import OwnerService
from emlak_crm.schemas.owner_schemas import (
    OwnerCreate,
    OwnerUpdate,
    OwnerResponse,
    OwnerListResponse,
)

router = APIRouter()


@router.post("/", response_model=OwnerResponse, status_code=status.HTTP_201_CREATED)
async def create_owner(
    data: OwnerCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Create a new property owner"""
    service = OwnerService(db)
    owner = service.create_owner(data, user)
    return owner


@router.get("/", response_model=OwnerListResponse)
async def list_owners(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get all owners with the number of properties each one has"""
    service = OwnerService(db)
    owners = [
        OwnerResponse.model_validate(owner).model_copy(update={"property_count": count})
        for owner, count in service.get_user_owners(user)
    ]
    return OwnerListResponse(owners=owners, total=len(owners))


@router.get("/{owner_id}", response_model=OwnerResponse)
async def get_owner(
    owner_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    service = OwnerService(db)
    owner = service.get_owner(owner_id, user)
    return OwnerResponse.model_validate(owner).model_copy(update={"property_count": len(owner.properties)})


@router.patch("/{owner_id}", response_model=OwnerResponse)
async def update_owner(
    owner_id: int,
    data: OwnerUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update owner details"""
    service = OwnerService(db)
    owner = service.update_owner(owner_id, data, user)
    return owner


@router.delete("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_owner(
    owner_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Delete an owner that no longer has properties"""
    service = OwnerService(db)
    service.delete_owner(owner_id, user)
    return None
