from sqlalchemy.orm import Session

from emlak_crm.core.exceptions import NotFoundException, ValidationException
from emlak_crm.models.property import Property, PropertyStatus
from emlak_crm.models.user import User
from emlak_crm.repositories.contract_repository import ContractRepository
from emlak_crm.repositories.owner_repository import OwnerRepository
from emlak_crm.repositories.property_repository import PropertyRepository
from emlak_crm.schemas.property_schemas import PropertyCreate, PropertyStats, PropertyUpdate
from emlak_crm.services.filters import filter_properties
from emlak_crm.utils.address import AddressComponents, generate_full_address, normalize_address

_ADDRESS_FIELDS = ("mahalle", "cadde_sokak", "bina_no", "daire_no", "district", "city")


def address_components(prop: Property) -> AddressComponents:
    return AddressComponents(
        mahalle=prop.mahalle,
        cadde_sokak=prop.cadde_sokak,
        bina_no=prop.bina_no,
        daire_no=prop.daire_no,
        ilce=prop.district,
        il=prop.city,
    )


def refresh_addresses(prop: Property) -> None:
    """Recompute the display address and the matching key from the components"""
    components = address_components(prop)
    prop.full_address = generate_full_address(components)
    prop.normalized_address = normalize_address(components)


class PropertyService:
    """Service for property business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PropertyRepository(db)
        self.owner_repo = OwnerRepository(db)
        self.contract_repo = ContractRepository(db)

    def _require_owner(self, owner_id: int, user: User) -> None:
        if not self.owner_repo.get_by_id_and_user(owner_id, user.id):
            raise NotFoundException(f"Owner {owner_id} not found", code="ERROR_OWNER_NOT_FOUND")

    def create_property(self, data: PropertyCreate, user: User) -> Property:
        """
        Create property for one of the user's owners.

        Raises:
            NotFoundException: If owner doesn't exist or belongs to another user
        """
        self._require_owner(data.owner_id, user)

        prop = Property(user_id=user.id, **data.model_dump())
        refresh_addresses(prop)
        return self.repo.create(prop)

    def get_user_properties(
        self,
        user: User,
        search: str = "",
        status: PropertyStatus | None = None,
        city: str | None = None,
        owner_id: int | None = None,
    ) -> list[Property]:
        """Get the user's properties narrowed by the list filters"""
        properties = self.repo.get_by_user(user.id)
        return filter_properties(properties, search=search, status=status, city=city, owner_id=owner_id)

    def get_property(self, property_id: int, user: User) -> Property:
        """
        Get specific property ensuring user ownership.

        Raises:
            NotFoundException: If property not found or belongs to another user
        """
        prop = self.repo.get_by_id_and_user(property_id, user.id)
        if not prop:
            raise NotFoundException(f"Property {property_id} not found", code="ERROR_PROPERTY_NOT_FOUND")
        return prop

    def get_owner_properties(self, owner_id: int, user: User) -> list[Property]:
        self._require_owner(owner_id, user)
        return self.repo.get_by_owner(owner_id, user.id)

    def update_property(self, property_id: int, data: PropertyUpdate, user: User) -> Property:
        """Update property; address-derived fields follow the components"""
        prop = self.get_property(property_id, user)
        fields = data.model_dump(exclude_unset=True)

        if fields.get("owner_id") is not None:
            self._require_owner(fields["owner_id"], user)

        for attr, value in fields.items():
            if value is None and attr not in ("daire_no", "use_purpose", "rent_amount", "notes"):
                continue
            setattr(prop, attr, value)

        if any(attr in fields for attr in _ADDRESS_FIELDS):
            refresh_addresses(prop)

        return self.repo.update(prop)

    def delete_property(self, property_id: int, user: User) -> None:
        """
        Delete property and its contracts.

        Raises:
            ValidationException: If the property has an active contract
        """
        prop = self.get_property(property_id, user)
        if self.contract_repo.get_active_by_property(prop.id, user.id):
            raise ValidationException(
                "Property has an active contract", code="ERROR_PROPERTY_HAS_ACTIVE_CONTRACT"
            )
        self.repo.delete(prop)

    def get_stats(self, user: User) -> PropertyStats:
        counts = self.repo.count_by_status(user.id)
        return PropertyStats(
            total=sum(counts.values()),
            empty=counts.get(PropertyStatus.EMPTY, 0),
            occupied=counts.get(PropertyStatus.OCCUPIED, 0),
            inactive=counts.get(PropertyStatus.INACTIVE, 0),
        )
