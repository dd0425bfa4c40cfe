from sqlalchemy import func
from sqlalchemy.orm import Session

from emlak_crm.models.owner import PropertyOwner
from emlak_crm.models.property import Property


class OwnerRepository:
    """Repository for PropertyOwner data access, scoped by user"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user(self, user_id: int) -> list[PropertyOwner]:
        """Get all owners for a user, alphabetical"""
        return (
            self.db.query(PropertyOwner)
            .filter(PropertyOwner.user_id == user_id)
            .order_by(PropertyOwner.name)
            .all()
        )

    def get_by_id_and_user(self, owner_id: int, user_id: int) -> PropertyOwner | None:
        """
        Get owner ensuring it belongs to user.

        Returns None if owner doesn't exist or belongs to another user.
        """
        return (
            self.db.query(PropertyOwner)
            .filter(PropertyOwner.id == owner_id, PropertyOwner.user_id == user_id)
            .first()
        )

    def get_by_tc_hash(self, tc_hash: str, user_id: int) -> PropertyOwner | None:
        return (
            self.db.query(PropertyOwner)
            .filter(PropertyOwner.tc_hash == tc_hash, PropertyOwner.user_id == user_id)
            .first()
        )

    def find_same_name_other_identity(
        self, name: str, tc_hash: str, user_id: int
    ) -> list[PropertyOwner]:
        """Owners with the same name (case-insensitive) but a different identity hash"""
        return (
            self.db.query(PropertyOwner)
            .filter(
                PropertyOwner.user_id == user_id,
                PropertyOwner.name.ilike(name),
                PropertyOwner.tc_hash != tc_hash,
            )
            .all()
        )

    def property_counts(self, user_id: int) -> dict[int, int]:
        """Map of owner_id -> number of properties for the user's owners"""
        rows = (
            self.db.query(Property.owner_id, func.count(Property.id))
            .filter(Property.user_id == user_id)
            .group_by(Property.owner_id)
            .all()
        )
        return {owner_id: count for owner_id, count in rows}

    def create(self, owner: PropertyOwner) -> PropertyOwner:
        """Create new owner"""
        self.db.add(owner)
        self.db.commit()
        self.db.refresh(owner)
        return owner

    def create_no_commit(self, owner: PropertyOwner) -> PropertyOwner:
        """Add owner and flush to get an ID; caller commits"""
        self.db.add(owner)
        self.db.flush()
        return owner

    def update(self, owner: PropertyOwner) -> PropertyOwner:
        """Update existing owner"""
        self.db.commit()
        self.db.refresh(owner)
        return owner

    def delete(self, owner: PropertyOwner) -> None:
        self.db.delete(owner)
        self.db.commit()
