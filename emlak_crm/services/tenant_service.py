import re

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from emlak_crm.core.crypto import FieldCipher, get_cipher, hash_tc
from emlak_crm.core.exceptions import NotFoundException, ServerErrorException, ValidationException
from emlak_crm.core.logging import get_logger
from emlak_crm.models.contract import Contract, ContractStatus
from emlak_crm.models.property import Property
from emlak_crm.models.tenant import Tenant
from emlak_crm.models.user import User
from emlak_crm.repositories.contract_repository import ContractRepository
from emlak_crm.repositories.property_repository import PropertyRepository
from emlak_crm.repositories.tenant_repository import TenantRepository
from emlak_crm.schemas.owner_schemas import EMAIL_PATTERN
from emlak_crm.schemas.tenant_schemas import (
    TenantCreate,
    TenantStats,
    TenantUpdate,
    TenantWithContractCreate,
)
from emlak_crm.services.contract_service import occupy_property, release_property, validate_contract_dates
from emlak_crm.services.filters import Assignment, filter_tenants
from emlak_crm.utils.phone import normalize_phone

logger = get_logger(__name__)

_EMAIL = re.compile(EMAIL_PATTERN)


class TenantService:
    """Service for tenant business logic"""

    def __init__(self, db: Session, cipher: FieldCipher | None = None):
        self.db = db
        self.repo = TenantRepository(db)
        self.property_repo = PropertyRepository(db)
        self.contract_repo = ContractRepository(db)
        self.cipher = cipher or get_cipher()

    def _require_property(self, property_id: int, user: User) -> Property:
        prop = self.property_repo.get_by_id_and_user(property_id, user.id)
        if not prop:
            raise NotFoundException(f"Property {property_id} not found", code="ERROR_PROPERTY_NOT_FOUND")
        return prop

    def _build_tenant(self, data: TenantCreate | TenantWithContractCreate, user: User) -> Tenant:
        return Tenant(
            user_id=user.id,
            property_id=data.property_id,
            name=data.name,
            tc_encrypted=self.cipher.encrypt(data.tc) if data.tc else None,
            tc_hash=hash_tc(data.tc) if data.tc else None,
            phone=normalize_phone(data.phone) or None,
            email=data.email or None,
            address=data.address,
            notes=data.notes,
        )

    def create_tenant(self, data: TenantCreate, user: User) -> Tenant:
        """
        Create tenant, optionally assigned to one of the user's properties.

        Raises:
            NotFoundException: If property doesn't exist or belongs to another user
        """
        if data.property_id is not None:
            self._require_property(data.property_id, user)

        tenant = self.repo.create(self._build_tenant(data, user))
        logger.info("tenant_created", tenant_id=tenant.id, user_id=user.id)
        return tenant

    def get_user_tenants(self, user: User, search: str = "", assignment: Assignment = "all") -> list[Tenant]:
        """Get the user's tenants narrowed by search text and assignment status"""
        tenants = self.repo.get_by_user(user.id)
        return filter_tenants(tenants, search=search, assignment=assignment)

    def get_tenant(self, tenant_id: int, user: User) -> Tenant:
        """
        Get specific tenant ensuring user ownership.

        Raises:
            NotFoundException: If tenant not found or belongs to another user
        """
        tenant = self.repo.get_by_id_and_user(tenant_id, user.id)
        if not tenant:
            raise NotFoundException(f"Tenant {tenant_id} not found", code="ERROR_TENANT_NOT_FOUND")
        return tenant

    def update_tenant(self, tenant_id: int, data: TenantUpdate, user: User) -> Tenant:
        """Update tenant details; only fields present in the request change"""
        tenant = self.get_tenant(tenant_id, user)
        fields = data.model_dump(exclude_unset=True)

        if fields.get("name") is not None:
            tenant.name = fields["name"]
        if "phone" in fields:
            tenant.phone = normalize_phone(fields["phone"]) or None
        for attr in ("email", "address", "notes"):
            if attr in fields:
                setattr(tenant, attr, fields[attr])
        if fields.get("tc"):
            tenant.tc_encrypted = self.cipher.encrypt(fields["tc"])
            tenant.tc_hash = hash_tc(fields["tc"])
        if "property_id" in fields:
            if fields["property_id"] is not None:
                self._require_property(fields["property_id"], user)
            tenant.property_id = fields["property_id"]

        return self.repo.update(tenant)

    def delete_tenant(self, tenant_id: int, user: User) -> None:
        """Delete tenant and their contracts; properties held by their active contracts become Empty"""
        tenant = self.get_tenant(tenant_id, user)
        active = self.contract_repo.get_active_by_tenant(tenant.id, user.id)
        leaving = {c.id for c in active}
        for contract in active:
            still_active = [
                c for c in self.contract_repo.get_active_by_property(contract.property_id, user.id) if c.id not in leaving
            ]
            release_property(contract, still_active)
        self.repo.delete(tenant)
        logger.info("tenant_deleted", tenant_id=tenant_id, released_contracts=len(active))

    def assign_property(self, tenant_id: int, property_id: int | None, user: User) -> Tenant:
        """Link the tenant to a property, or unassign when property_id is None"""
        tenant = self.get_tenant(tenant_id, user)
        if property_id is not None:
            self._require_property(property_id, user)
        tenant.property_id = property_id
        tenant = self.repo.update(tenant)
        logger.info("tenant_assignment_changed", tenant_id=tenant.id, property_id=property_id)
        return tenant

    def get_stats(self, user: User) -> TenantStats:
        tenants = self.repo.get_by_user(user.id)
        assigned = sum(1 for tenant in tenants if tenant.property_id is not None)
        return TenantStats(total=len(tenants), assigned=assigned, unassigned=len(tenants) - assigned)

    def create_tenant_with_contract(self, data: TenantWithContractCreate, user: User) -> tuple[Tenant, Contract]:
        """
        Create a tenant and their Active contract atomically.

        The property becomes Occupied and the tenant is assigned to it.

        Raises:
            ValidationException: Missing name/property/dates, bad email or end before start
            NotFoundException: If the property doesn't exist or belongs to another user
            ServerErrorException: If the transaction fails; nothing is persisted
        """
        self._validate_tenant_with_contract(data)
        prop = self._require_property(data.property_id, user)
        terms = data.contract

        try:
            tenant = self.repo.create_no_commit(self._build_tenant(data, user))
            contract = Contract(
                user_id=user.id,
                tenant_id=tenant.id,
                property_id=prop.id,
                owner_id=prop.owner_id,
                start_date=terms.start_date,
                end_date=terms.end_date,
                rent_amount=terms.rent_amount,
                deposit=terms.deposit,
                currency=terms.currency,
                status=ContractStatus.ACTIVE,
                payment_day_of_month=terms.payment_day_of_month,
                payment_method=terms.payment_method,
                special_conditions=terms.special_conditions,
                notes=terms.notes,
            )
            self.contract_repo.create_no_commit(contract)
            occupy_property(prop, tenant)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("tenant_with_contract_failed", user_id=user.id, error=str(e))
            raise ServerErrorException(
                "Tenant and contract could not be created", code="ERROR_TENANT_CONTRACT_CREATION_FAILED"
            ) from e

        logger.info("tenant_created_with_contract", tenant_id=tenant.id, contract_id=contract.id)
        return self.get_tenant(tenant.id, user), self.contract_repo.get_by_id_and_user(contract.id, user.id)

    @staticmethod
    def _validate_tenant_with_contract(data: TenantWithContractCreate) -> None:
        if not data.name or not data.name.strip():
            raise ValidationException("Tenant name is required", code="ERROR_TENANT_NAME_REQUIRED")
        if data.property_id is None:
            raise ValidationException("Property is required", code="ERROR_TENANT_PROPERTY_REQUIRED")
        if data.email and not _EMAIL.match(data.email):
            raise ValidationException("Invalid email address", code="ERROR_TENANT_INVALID_EMAIL")
        validate_contract_dates(data.contract.start_date, data.contract.end_date)
