from sqlalchemy.orm import Session, joinedload

from emlak_crm.models.tenant import Tenant


class TenantRepository:
    """Repository for Tenant data access, scoped by user"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user(self, user_id: int) -> list[Tenant]:
        """Get all tenants for a user with their assigned property loaded"""
        return (
            self.db.query(Tenant)
            .options(joinedload(Tenant.property))
            .filter(Tenant.user_id == user_id)
            .order_by(Tenant.created_at.desc(), Tenant.id.desc())
            .all()
        )

    def get_by_id_and_user(self, tenant_id: int, user_id: int) -> Tenant | None:
        """
        Get tenant ensuring it belongs to user.

        Returns None if tenant doesn't exist or belongs to another user.
        """
        return (
            self.db.query(Tenant)
            .options(joinedload(Tenant.property))
            .filter(Tenant.id == tenant_id, Tenant.user_id == user_id)
            .first()
        )

    def get_by_property(self, property_id: int, user_id: int) -> list[Tenant]:
        return (
            self.db.query(Tenant)
            .filter(Tenant.property_id == property_id, Tenant.user_id == user_id)
            .all()
        )

    def get_by_tc_hash(self, tc_hash: str, user_id: int) -> Tenant | None:
        return (
            self.db.query(Tenant)
            .filter(Tenant.tc_hash == tc_hash, Tenant.user_id == user_id)
            .first()
        )

    def find_same_name_other_identity(self, name: str, tc_hash: str, user_id: int) -> list[Tenant]:
        """Tenants with the same name (case-insensitive) but a different identity hash"""
        return (
            self.db.query(Tenant)
            .filter(
                Tenant.user_id == user_id,
                Tenant.name.ilike(name),
                Tenant.tc_hash != tc_hash,
            )
            .all()
        )

    def create(self, tenant: Tenant) -> Tenant:
        """Create new tenant"""
        self.db.add(tenant)
        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def create_no_commit(self, tenant: Tenant) -> Tenant:
        """Add tenant and flush to get an ID; caller commits"""
        self.db.add(tenant)
        self.db.flush()
        return tenant

    def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        self.db.commit()
        self.db.refresh(tenant)
        return tenant

    def delete(self, tenant: Tenant) -> None:
        """Delete tenant (cascades to contracts)"""
        self.db.delete(tenant)
        self.db.commit()
