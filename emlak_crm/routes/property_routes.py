from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from emlak_crm.database import get_db
from emlak_crm.dependencies import get_current_user
from emlak_crm.models.property import PropertyStatus
from emlak_crm.models.user import User
from emlak_crm.services.property_service import PropertyService
from emlak_crm.schemas.property_schemas import (
    PropertyCreate,
    PropertyUpdate,
    PropertyResponse,
    PropertyListResponse,
    PropertyStats,
)

router = APIRouter()


@router.post("/", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
async def create_property(
    data: PropertyCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Create a property for one of the user's owners"""
    service = PropertyService(db)
    prop = service.create_property(data, user)
    return prop


@router.get("/", response_model=PropertyListResponse)
async def list_properties(
    search: str = Query("", description="Matches address, city, district or owner name"),
    status_filter: PropertyStatus | None = Query(None, alias="status"),
    city: str | None = Query(None),
    owner_id: int | None = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get the user's properties with optional filters"""
    service = PropertyService(db)
    properties = service.get_user_properties(user, search=search, status=status_filter, city=city, owner_id=owner_id)
    return PropertyListResponse(properties=properties, total=len(properties))


@router.get("/stats", response_model=PropertyStats)
async def property_stats(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Property counts per status"""
    service = PropertyService(db)
    return service.get_stats(user)


@router.get("/by-owner/{owner_id}", response_model=PropertyListResponse)
async def list_owner_properties(
    owner_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    service = PropertyService(db)
    properties = service.get_owner_properties(owner_id, user)
    return PropertyListResponse(properties=properties, total=len(properties))


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Get specific property details"""
    service = PropertyService(db)
    prop = service.get_property(property_id, user)
    return prop


@router.patch("/{property_id}", response_model=PropertyResponse)
async def update_property(
    property_id: int,
    data: PropertyUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update property details; address changes refresh the derived addresses"""
    service = PropertyService(db)
    prop = service.update_property(property_id, data, user)
    return prop


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property(
    property_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """Delete property and its contracts"""
    service = PropertyService(db)
    service.delete_property(property_id, user)
    return None
