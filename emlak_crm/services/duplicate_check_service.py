"""
Pre-submission advisories for the contract form.

Each check is an independent lookup returning a flag plus a Turkish
message for the user. None of them blocks submission; a failed lookup is
logged and reported as "nothing to report".
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from emlak_crm.core.crypto import hash_tc
from emlak_crm.core.logging import get_logger
from emlak_crm.models.user import User
from emlak_crm.repositories.contract_repository import ContractRepository
from emlak_crm.repositories.owner_repository import OwnerRepository
from emlak_crm.repositories.tenant_repository import TenantRepository
from emlak_crm.schemas.contract_schemas import ContractForm
from emlak_crm.schemas.duplicate_check_schemas import (
    ActiveContractSummary,
    DataChangesResult,
    DuplicateNameResult,
    EntityType,
    MultipleContractsResult,
    PreValidationResponse,
)
from emlak_crm.utils.phone import normalize_phone

logger = get_logger(__name__)


class DuplicateCheckService:
    """Duplicate person, stale contact data and active-contract lookups"""

    def __init__(self, db: Session):
        self.db = db
        self.owner_repo = OwnerRepository(db)
        self.tenant_repo = TenantRepository(db)
        self.contract_repo = ContractRepository(db)

    def _repo(self, entity_type: EntityType):
        return self.owner_repo if entity_type == "owner" else self.tenant_repo

    def check_duplicate_name(
        self, name: str, tc_hash: str, entity_type: EntityType, user: User
    ) -> DuplicateNameResult:
        """
        Warn when the same name exists with a different TC identity hash.

        Example message: ⚠️ "Ali Yılmaz" ismiyle 2 farklı kişi daha var sistemde (farklı TC No)
        """
        try:
            matches = self._repo(entity_type).find_same_name_other_identity(name, tc_hash, user.id)
        except SQLAlchemyError as e:
            logger.error("duplicate_name_check_failed", entity_type=entity_type, error=str(e))
            return DuplicateNameResult()

        if not matches:
            return DuplicateNameResult()

        return DuplicateNameResult(
            has_duplicate=True,
            count=len(matches),
            message=f'⚠️ "{name}" ismiyle {len(matches)} farklı kişi daha var sistemde (farklı TC No)',
        )

    def check_data_changes(
        self,
        tc_hash: str,
        new_data: dict[str, str | None],
        entity_type: EntityType,
        user: User,
    ) -> DataChangesResult:
        """
        Compare submitted contact data with the record stored under tc_hash.

        Args:
            tc_hash: Identity hash of the person
            new_data: Submitted "phone" and optional "email" / "address"
            entity_type: "owner" or "tenant" (address changes only matter for tenants)
            user: Current user

        Returns:
            Changes such as "Telefon: 5392174782 → 5551234567"; empty when no record exists
        """
        try:
            existing = self._repo(entity_type).get_by_tc_hash(tc_hash, user.id)
        except SQLAlchemyError as e:
            logger.error("data_changes_check_failed", entity_type=entity_type, error=str(e))
            return DataChangesResult()

        if existing is None:
            return DataChangesResult()

        new_phone = new_data.get("phone")
        new_email = new_data.get("email")
        new_address = new_data.get("address")

        changes: list[str] = []
        if existing.phone != new_phone:
            changes.append(f"Telefon: {existing.phone} → {new_phone}")
        if new_email and existing.email != new_email:
            changes.append(f"Email: {existing.email or 'yok'} → {new_email}")
        if entity_type == "tenant" and new_address and existing.address != new_address:
            changes.append("Adres değişti")

        message = None
        if changes:
            message = "⚠️ Sistemdeki bilgiler değişti:\n" + "\n".join(changes) + "\n\nGüncellensin mi?"

        return DataChangesResult(
            has_changes=bool(changes),
            changes=changes,
            message=message,
            existing_data={
                "phone": existing.phone,
                "email": existing.email,
                "address": existing.address,
            },
        )

    def check_multiple_contracts(self, tc_hash: str, user: User) -> MultipleContractsResult:
        """Warn when the tenant with this identity hash already holds active contracts."""
        try:
            tenant = self.tenant_repo.get_by_tc_hash(tc_hash, user.id)
            if tenant is None:
                return MultipleContractsResult()
            active = self.contract_repo.get_active_by_tenant(tenant.id, user.id)
        except SQLAlchemyError as e:
            logger.error("multiple_contracts_check_failed", error=str(e))
            return MultipleContractsResult()

        if not active:
            return MultipleContractsResult()

        summaries = [
            ActiveContractSummary(
                id=contract.id,
                property_address=contract.property.full_address if contract.property else "Bilinmeyen adres",
                start_date=contract.start_date,
                end_date=contract.end_date,
            )
            for contract in active
        ]
        addresses = "\n- ".join(summary.property_address for summary in summaries)

        return MultipleContractsResult(
            has_multiple=True,
            count=len(active),
            contracts=summaries,
            message=f"⚠️ Bu kiracının {len(active)} aktif sözleşmesi var:\n- {addresses}\n\nDevam edilsin mi?",
        )

    def run_pre_validation(self, form: ContractForm, user: User) -> PreValidationResponse:
        """Run every advisory for a contract form and collect the warning messages."""
        owner_tc_hash = hash_tc(form.owner_tc)
        tenant_tc_hash = hash_tc(form.tenant_tc)

        owner_duplicate = self.check_duplicate_name(form.owner_name, owner_tc_hash, "owner", user)
        tenant_duplicate = self.check_duplicate_name(form.tenant_name, tenant_tc_hash, "tenant", user)
        owner_changes = self.check_data_changes(
            owner_tc_hash,
            {"phone": normalize_phone(form.owner_phone), "email": form.owner_email},
            "owner",
            user,
        )
        tenant_changes = self.check_data_changes(
            tenant_tc_hash,
            {
                "phone": normalize_phone(form.tenant_phone),
                "email": form.tenant_email,
                "address": form.tenant_address,
            },
            "tenant",
            user,
        )
        tenant_contracts = self.check_multiple_contracts(tenant_tc_hash, user)

        warnings = [
            result.message
            for result in (owner_duplicate, tenant_duplicate, owner_changes, tenant_changes, tenant_contracts)
            if result.message
        ]

        return PreValidationResponse(
            owner_duplicate=owner_duplicate,
            tenant_duplicate=tenant_duplicate,
            owner_changes=owner_changes,
            tenant_changes=tenant_changes,
            tenant_contracts=tenant_contracts,
            warnings=warnings,
        )
