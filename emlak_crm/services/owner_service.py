from sqlalchemy.orm import Session

from emlak_crm.core.crypto import FieldCipher, get_cipher, hash_tc
from emlak_crm.core.exceptions import NotFoundException, ValidationException
from emlak_crm.core.logging import get_logger
from emlak_crm.models.owner import PropertyOwner
from emlak_crm.models.user import User
from emlak_crm.repositories.contract_repository import ContractRepository
from emlak_crm.repositories.owner_repository import OwnerRepository
from emlak_crm.repositories.property_repository import PropertyRepository
from emlak_crm.schemas.owner_schemas import OwnerCreate, OwnerUpdate
from emlak_crm.utils.phone import normalize_phone

logger = get_logger(__name__)


class OwnerService:
    """Service for property owner business logic"""

    def __init__(self, db: Session, cipher: FieldCipher | None = None):
        self.db = db
        self.repo = OwnerRepository(db)
        self.property_repo = PropertyRepository(db)
        self.contract_repo = ContractRepository(db)
        self.cipher = cipher or get_cipher()

    def create_owner(self, data: OwnerCreate, user: User) -> PropertyOwner:
        """Create owner; TC and IBAN are encrypted, phone is normalised"""
        owner = PropertyOwner(
            user_id=user.id,
            name=data.name,
            phone=normalize_phone(data.phone) or None,
            email=data.email,
            address=data.address,
            notes=data.notes,
        )
        self._set_identity(owner, data.tc, data.iban)
        owner = self.repo.create(owner)
        logger.info("owner_created", owner_id=owner.id, user_id=user.id)
        return owner

    def get_user_owners(self, user: User) -> list[tuple[PropertyOwner, int]]:
        """Get all owners for user with their property counts"""
        owners = self.repo.get_by_user(user.id)
        counts = self.repo.property_counts(user.id)
        return [(owner, counts.get(owner.id, 0)) for owner in owners]

    def get_owner(self, owner_id: int, user: User) -> PropertyOwner:
        """
        Get specific owner ensuring user ownership.

        Raises:
            NotFoundException: If owner not found or belongs to another user
        """
        owner = self.repo.get_by_id_and_user(owner_id, user.id)
        if not owner:
            raise NotFoundException(f"Owner {owner_id} not found", code="ERROR_OWNER_NOT_FOUND")
        return owner

    def update_owner(self, owner_id: int, data: OwnerUpdate, user: User) -> PropertyOwner:
        """Update owner details; only fields present in the request change"""
        owner = self.get_owner(owner_id, user)
        fields = data.model_dump(exclude_unset=True)

        if "name" in fields and fields["name"] is not None:
            owner.name = fields["name"]
        if "phone" in fields:
            owner.phone = normalize_phone(fields["phone"]) or None
        for attr in ("email", "address", "notes"):
            if attr in fields:
                setattr(owner, attr, fields[attr])
        if "tc" in fields or "iban" in fields:
            self._set_identity(owner, fields.get("tc"), fields.get("iban"), partial=True)

        return self.repo.update(owner)

    def delete_owner(self, owner_id: int, user: User) -> None:
        """
        Delete owner.

        Raises:
            ValidationException: If the owner still has properties or is named on a contract
        """
        owner = self.get_owner(owner_id, user)
        if self.property_repo.get_by_owner(owner.id, user.id):
            raise ValidationException(
                "Owner still has properties; reassign or delete them first",
                code="ERROR_OWNER_HAS_PROPERTIES",
            )
        if self.contract_repo.exists_for_owner(owner.id, user.id):
            raise ValidationException(
                "Owner is named on existing contracts; delete those contracts first",
                code="ERROR_OWNER_HAS_CONTRACTS",
            )
        self.repo.delete(owner)

    def decrypt_tc(self, owner: PropertyOwner) -> str | None:
        return self.cipher.decrypt(owner.tc_encrypted) if owner.tc_encrypted else None

    def decrypt_iban(self, owner: PropertyOwner) -> str | None:
        return self.cipher.decrypt(owner.iban_encrypted) if owner.iban_encrypted else None

    def _set_identity(
        self, owner: PropertyOwner, tc: str | None, iban: str | None, partial: bool = False
    ) -> None:
        # partial: leave the field alone when it was not supplied
        if tc is not None or not partial:
            owner.tc_encrypted = self.cipher.encrypt(tc) if tc else None
            owner.tc_hash = hash_tc(tc) if tc else None
        if iban is not None or not partial:
            owner.iban_encrypted = self.cipher.encrypt(iban) if iban else None
