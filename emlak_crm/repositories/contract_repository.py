from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from emlak_crm.models.contract import Contract, ContractStatus


class ContractRepository:
    """Repository for Contract data access, scoped by user"""

    def __init__(self, db: Session):
        self.db = db

    def _query_with_relations(self):
        return self.db.query(Contract).options(
            joinedload(Contract.tenant),
            joinedload(Contract.property),
            joinedload(Contract.owner),
        )

    def get_by_user(self, user_id: int, status: Optional[ContractStatus] = None) -> list[Contract]:
        """
        Get contracts for a user with tenant, property and owner loaded.

        Args:
            user_id: Owning user
            status: Optional status filter

        Returns:
            Contracts ordered by start date, newest first
        """
        query = self._query_with_relations().filter(Contract.user_id == user_id)
        if status is not None:
            query = query.filter(Contract.status == status)
        return query.order_by(Contract.start_date.desc(), Contract.id.desc()).all()

    def get_by_id_and_user(self, contract_id: int, user_id: int) -> Contract | None:
        """
        Get contract ensuring it belongs to user.

        Returns None if contract doesn't exist or belongs to another user.
        """
        return (
            self._query_with_relations()
            .filter(Contract.id == contract_id, Contract.user_id == user_id)
            .first()
        )

    def get_active_by_tenant(self, tenant_id: int, user_id: int) -> list[Contract]:
        return (
            self._query_with_relations()
            .filter(
                Contract.tenant_id == tenant_id,
                Contract.user_id == user_id,
                Contract.status == ContractStatus.ACTIVE,
            )
            .all()
        )

    def get_active_by_property(self, property_id: int, user_id: int) -> list[Contract]:
        return (
            self.db.query(Contract)
            .filter(
                Contract.property_id == property_id,
                Contract.user_id == user_id,
                Contract.status == ContractStatus.ACTIVE,
            )
            .all()
        )

    def get_expiring(self, user_id: int, today: date, until: date) -> list[Contract]:
        """Active contracts whose end date falls within [today, until]"""
        return (
            self._query_with_relations()
            .filter(
                Contract.user_id == user_id,
                Contract.status == ContractStatus.ACTIVE,
                Contract.end_date >= today,
                Contract.end_date <= until,
            )
            .order_by(Contract.end_date.asc())
            .all()
        )

    def exists_for_owner(self, owner_id: int, user_id: int) -> bool:
        """True when any contract, in any status, names the owner"""
        query = self.db.query(Contract.id).filter(Contract.owner_id == owner_id, Contract.user_id == user_id)
        return query.first() is not None

    def count_by_status(self, user_id: int) -> dict[ContractStatus, int]:
        rows = (
            self.db.query(Contract.status, func.count(Contract.id))
            .filter(Contract.user_id == user_id)
            .group_by(Contract.status)
            .all()
        )
        return {status: count for status, count in rows}

    def create(self, contract: Contract) -> Contract:
        """Create new contract"""
        self.db.add(contract)
        self.db.commit()
        self.db.refresh(contract)
        return contract

    def create_no_commit(self, contract: Contract) -> Contract:
        """Add contract and flush to get an ID; caller commits"""
        self.db.add(contract)
        self.db.flush()
        return contract

    def update(self, contract: Contract) -> Contract:
        """Update existing contract"""
        self.db.commit()
        self.db.refresh(contract)
        return contract

    def delete(self, contract: Contract) -> None:
        self.db.delete(contract)
        self.db.commit()
