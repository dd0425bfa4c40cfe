from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from emlak_crm.models.property import Property, PropertyStatus


class PropertyRepository:
    """Repository for Property data access, scoped by user"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user(self, user_id: int) -> list[Property]:
        """Get all properties for a user with their owner loaded, newest first"""
        return (
            self.db.query(Property)
            .options(joinedload(Property.owner))
            .filter(Property.user_id == user_id)
            .order_by(Property.created_at.desc(), Property.id.desc())
            .all()
        )

    def get_by_id_and_user(self, property_id: int, user_id: int) -> Property | None:
        """
        Get property ensuring it belongs to user.

        Returns None if property doesn't exist or belongs to another user.
        """
        return (
            self.db.query(Property)
            .options(joinedload(Property.owner))
            .filter(Property.id == property_id, Property.user_id == user_id)
            .first()
        )

    def get_by_owner(self, owner_id: int, user_id: int) -> list[Property]:
        return (
            self.db.query(Property)
            .filter(Property.owner_id == owner_id, Property.user_id == user_id)
            .order_by(Property.id)
            .all()
        )

    def get_by_normalized_address(self, normalized_address: str, user_id: int) -> Property | None:
        """Find an existing property by its address matching key"""
        return (
            self.db.query(Property)
            .filter(
                Property.normalized_address == normalized_address,
                Property.user_id == user_id,
            )
            .first()
        )

    def count_by_status(self, user_id: int) -> dict[PropertyStatus, int]:
        rows = (
            self.db.query(Property.status, func.count(Property.id))
            .filter(Property.user_id == user_id)
            .group_by(Property.status)
            .all()
        )
        return {status: count for status, count in rows}

    def create(self, property: Property) -> Property:
        """Create new property"""
        self.db.add(property)
        self.db.commit()
        self.db.refresh(property)
        return property

    def create_no_commit(self, property: Property) -> Property:
        """Add property and flush to get an ID; caller commits"""
        self.db.add(property)
        self.db.flush()
        return property

    def update(self, property: Property) -> Property:
        """Update existing property"""
        self.db.commit()
        self.db.refresh(property)
        return property

    def delete(self, property: Property) -> None:
        """Delete property (cascades to contracts, unassigns tenants)"""
        self.db.delete(property)
        self.db.commit()
