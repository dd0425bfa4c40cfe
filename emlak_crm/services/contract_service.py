from datetime import date, timedelta
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from emlak_crm.config import settings
from emlak_crm.core.crypto import FieldCipher, get_cipher, hash_tc
from emlak_crm.core.exceptions import NotFoundException, ServerErrorException, ValidationException
from emlak_crm.core.logging import get_logger
from emlak_crm.models.contract import Contract, ContractStatus
from emlak_crm.models.owner import PropertyOwner
from emlak_crm.models.property import Property, PropertyStatus
from emlak_crm.models.tenant import Tenant
from emlak_crm.models.user import User
from emlak_crm.repositories.contract_repository import ContractRepository
from emlak_crm.repositories.owner_repository import OwnerRepository
from emlak_crm.repositories.property_repository import PropertyRepository
from emlak_crm.repositories.tenant_repository import TenantRepository
from emlak_crm.schemas.contract_schemas import ContractCreate, ContractForm, ContractStats, ContractUpdate
from emlak_crm.services.contract_pdf_service import (
    build_contract_pdf_data,
    contract_pdf_filename,
    generate_contract_pdf,
)
from emlak_crm.services.filters import filter_contracts
from emlak_crm.services.property_service import refresh_addresses
from emlak_crm.utils.phone import normalize_phone

logger = get_logger(__name__)


def occupy_property(prop: Property, tenant: Tenant) -> None:
    """An active contract marks the property occupied and assigns the tenant to it"""
    prop.status = PropertyStatus.OCCUPIED
    tenant.property_id = prop.id


def release_property(contract: Contract, still_active: list[Contract]) -> None:
    """Undo occupy_property once the contract stops being active"""
    if not still_active:
        contract.property.status = PropertyStatus.EMPTY
    if contract.tenant.property_id == contract.property_id:
        contract.tenant.property_id = None


class ContractService:
    """Service for contract business logic"""

    def __init__(self, db: Session, cipher: FieldCipher | None = None):
        self.db = db
        self.repo = ContractRepository(db)
        self.tenant_repo = TenantRepository(db)
        self.property_repo = PropertyRepository(db)
        self.owner_repo = OwnerRepository(db)
        self.cipher = cipher or get_cipher()

    def create_contract(self, data: ContractCreate, user: User) -> Contract:
        """
        Create contract between the user's tenant, property and owner.

        An Active contract marks the property Occupied and assigns the tenant.

        Raises:
            NotFoundException: If tenant, property or owner is missing or belongs to another user
            ValidationException: If end_date is not after start_date
        """
        tenant = self._require_tenant(data.tenant_id, user)
        prop = self._require_property(data.property_id, user)
        owner_id = data.owner_id or prop.owner_id
        self._require_owner(owner_id, user)
        validate_contract_dates(data.start_date, data.end_date)

        contract = Contract(
            user_id=user.id,
            **data.model_dump(exclude={"owner_id"}),
            owner_id=owner_id,
        )
        self.repo.create_no_commit(contract)
        if contract.status == ContractStatus.ACTIVE:
            occupy_property(prop, tenant)

        contract = self.repo.update(contract)
        logger.info("contract_created", contract_id=contract.id, user_id=user.id, status=contract.status.value)
        return contract

    def get_user_contracts(
        self, user: User, search: str = "", status: ContractStatus | None = None
    ) -> list[Contract]:
        """Get the user's contracts narrowed by the list filters"""
        contracts = self.repo.get_by_user(user.id)
        return filter_contracts(contracts, search=search, status=status)

    def get_contract(self, contract_id: int, user: User) -> Contract:
        """
        Get specific contract ensuring user ownership.

        Raises:
            NotFoundException: If contract not found or belongs to another user
        """
        contract = self.repo.get_by_id_and_user(contract_id, user.id)
        if not contract:
            raise NotFoundException(f"Contract {contract_id} not found", code="ERROR_CONTRACT_NOT_FOUND")
        return contract

    def update_contract(self, contract_id: int, data: ContractUpdate, user: User) -> Contract:
        """
        Update contract terms or status.

        Leaving Active releases the property (Empty) and unassigns the tenant;
        entering Active occupies it again.
        """
        contract = self.get_contract(contract_id, user)
        fields = data.model_dump(exclude_unset=True)
        was_active = contract.status == ContractStatus.ACTIVE

        validate_contract_dates(
            fields.get("start_date") or contract.start_date,
            fields.get("end_date") or contract.end_date,
        )

        for attr, value in fields.items():
            if value is None and attr in ("start_date", "end_date", "rent_amount", "deposit", "currency", "status"):
                continue
            setattr(contract, attr, value)

        is_active = contract.status == ContractStatus.ACTIVE
        if was_active and not is_active:
            self._release_property(contract, user)
        elif is_active and not was_active:
            occupy_property(contract.property, contract.tenant)

        contract = self.repo.update(contract)
        logger.info("contract_updated", contract_id=contract.id, status=contract.status.value)
        return contract

    def delete_contract(self, contract_id: int, user: User) -> None:
        """Delete contract; deleting an active one releases its property"""
        contract = self.get_contract(contract_id, user)
        if contract.status == ContractStatus.ACTIVE:
            self._release_property(contract, user)
        self.repo.delete(contract)
        logger.info("contract_deleted", contract_id=contract_id)

    def get_active_contracts(self, user: User) -> list[Contract]:
        return self.repo.get_by_user(user.id, status=ContractStatus.ACTIVE)

    def get_expiring_contracts(self, user: User, days: int | None = None, today: date | None = None) -> list[Contract]:
        """Active contracts ending within the next `days` days (default EXPIRING_CONTRACT_DAYS)"""
        today = today or date.today()
        days = settings.EXPIRING_CONTRACT_DAYS if days is None else days
        return self.repo.get_expiring(user.id, today, today + timedelta(days=days))

    def get_stats(self, user: User) -> ContractStats:
        counts = self.repo.count_by_status(user.id)
        return ContractStats(
            total=sum(counts.values()),
            active=counts.get(ContractStatus.ACTIVE, 0),
            archived=counts.get(ContractStatus.ARCHIVED, 0),
            inactive=counts.get(ContractStatus.INACTIVE, 0),
            expiring_soon=len(self.get_expiring_contracts(user)),
        )

    def create_with_entities(self, form: ContractForm, user: User) -> tuple[Contract, bool, bool, bool]:
        """
        Create a contract from the full entry form in one database transaction.

        The owner and tenant are matched by TC identity hash and the property
        by normalised address; whichever does not exist yet is created.
        Existing people get the submitted contact data.

        Returns:
            Tuple of (contract, created_owner, created_tenant, created_property)

        Raises:
            ServerErrorException: If the transaction fails; nothing is persisted
        """
        try:
            owner, created_owner = self._upsert_owner(form, user)
            tenant, created_tenant = self._upsert_tenant(form, user)
            prop, created_property = self._find_or_create_property(form, owner, user)

            contract = Contract(
                user_id=user.id,
                tenant_id=tenant.id,
                property_id=prop.id,
                owner_id=owner.id,
                start_date=form.start_date,
                end_date=form.end_date,
                rent_amount=form.rent_amount,
                deposit=form.deposit,
                status=ContractStatus.ACTIVE,
                payment_day_of_month=form.payment_day_of_month,
                payment_method=form.payment_method,
                special_conditions=form.special_conditions,
            )
            self.repo.create_no_commit(contract)
            occupy_property(prop, tenant)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("contract_with_entities_failed", user_id=user.id, error=str(e))
            raise ServerErrorException(
                "Contract could not be created", code="ERROR_CONTRACT_CREATION_FAILED"
            ) from e

        logger.info(
            "contract_created_with_entities",
            contract_id=contract.id,
            created_owner=created_owner,
            created_tenant=created_tenant,
            created_property=created_property,
        )
        return self.get_contract(contract.id, user), created_owner, created_tenant, created_property

    def render_contract_pdf(self, contract_id: int, user: User) -> tuple[str, bytes]:
        """Render the contract document; returns (filename, pdf bytes)"""
        contract = self.get_contract(contract_id, user)
        data = build_contract_pdf_data(contract, self.cipher)
        pdf = generate_contract_pdf(data)
        return contract_pdf_filename(data.contract_number), pdf

    def store_contract_pdf(self, contract_id: int, user: User) -> Contract:
        """
        Render the contract PDF, write it under PDF_STORAGE_DIR/contracts and
        record its relative path on the contract.

        The file is removed again if the database update fails.
        """
        contract = self.get_contract(contract_id, user)
        filename, pdf = self.render_contract_pdf(contract_id, user)

        relative_path = Path("contracts") / filename
        target = Path(settings.PDF_STORAGE_DIR) / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(pdf)

        contract.contract_pdf_path = relative_path.as_posix()
        try:
            contract = self.repo.update(contract)
        except SQLAlchemyError as e:
            self.db.rollback()
            target.unlink(missing_ok=True)
            logger.error("contract_pdf_persist_failed", contract_id=contract_id, error=str(e))
            raise ServerErrorException(
                "Contract PDF could not be saved", code="ERROR_CONTRACT_PDF_UPLOAD_FAILED"
            ) from e

        logger.info("contract_pdf_stored", contract_id=contract_id, path=contract.contract_pdf_path, size=len(pdf))
        return contract

    def _release_property(self, contract: Contract, user: User) -> None:
        still_active = [
            c for c in self.repo.get_active_by_property(contract.property_id, user.id) if c.id != contract.id
        ]
        release_property(contract, still_active)

    def _require_tenant(self, tenant_id: int, user: User) -> Tenant:
        tenant = self.tenant_repo.get_by_id_and_user(tenant_id, user.id)
        if not tenant:
            raise NotFoundException(f"Tenant {tenant_id} not found", code="ERROR_TENANT_NOT_FOUND")
        return tenant

    def _require_property(self, property_id: int, user: User) -> Property:
        prop = self.property_repo.get_by_id_and_user(property_id, user.id)
        if not prop:
            raise NotFoundException(f"Property {property_id} not found", code="ERROR_PROPERTY_NOT_FOUND")
        return prop

    def _require_owner(self, owner_id: int, user: User) -> PropertyOwner:
        owner = self.owner_repo.get_by_id_and_user(owner_id, user.id)
        if not owner:
            raise NotFoundException(f"Owner {owner_id} not found", code="ERROR_OWNER_NOT_FOUND")
        return owner

    def _upsert_owner(self, form: ContractForm, user: User) -> tuple[PropertyOwner, bool]:
        tc_hash = hash_tc(form.owner_tc)
        owner = self.owner_repo.get_by_tc_hash(tc_hash, user.id)
        created = owner is None
        if owner is None:
            owner = PropertyOwner(
                user_id=user.id,
                name=form.owner_name,
                tc_encrypted=self.cipher.encrypt(form.owner_tc),
                tc_hash=tc_hash,
            )
        owner.phone = normalize_phone(form.owner_phone)
        if form.owner_email:
            owner.email = form.owner_email
        owner.iban_encrypted = self.cipher.encrypt(form.owner_iban)
        if created:
            self.owner_repo.create_no_commit(owner)
        return owner, created

    def _upsert_tenant(self, form: ContractForm, user: User) -> tuple[Tenant, bool]:
        tc_hash = hash_tc(form.tenant_tc)
        tenant = self.tenant_repo.get_by_tc_hash(tc_hash, user.id)
        created = tenant is None
        if tenant is None:
            tenant = Tenant(
                user_id=user.id,
                name=form.tenant_name,
                tc_encrypted=self.cipher.encrypt(form.tenant_tc),
                tc_hash=tc_hash,
            )
        tenant.phone = normalize_phone(form.tenant_phone)
        if form.tenant_email:
            tenant.email = form.tenant_email
        tenant.address = form.tenant_address
        if created:
            self.tenant_repo.create_no_commit(tenant)
        return tenant, created

    def _find_or_create_property(
        self, form: ContractForm, owner: PropertyOwner, user: User
    ) -> tuple[Property, bool]:
        prop = Property(
            user_id=user.id,
            owner_id=owner.id,
            mahalle=form.mahalle,
            cadde_sokak=form.cadde_sokak,
            bina_no=form.bina_no,
            daire_no=form.daire_no,
            district=form.ilce,
            city=form.il,
            property_type=form.property_type,
            use_purpose=form.use_purpose,
            status=PropertyStatus.EMPTY,
            rent_amount=form.rent_amount,
        )
        refresh_addresses(prop)

        existing = self.property_repo.get_by_normalized_address(prop.normalized_address, user.id)
        if existing is not None:
            return existing, False

        self.property_repo.create_no_commit(prop)
        return prop, True


def validate_contract_dates(start_date: date | None, end_date: date | None) -> None:
    """
    Raises:
        ValidationException: If a date is missing or end_date is not after start_date
    """
    if start_date is None:
        raise ValidationException("Start date is required", code="ERROR_CONTRACT_START_DATE_REQUIRED")
    if end_date is None:
        raise ValidationException("End date is required", code="ERROR_CONTRACT_END_DATE_REQUIRED")
    if end_date <= start_date:
        raise ValidationException("End date must be after start date", code="ERROR_CONTRACT_END_BEFORE_START")
