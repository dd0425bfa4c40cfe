from datetime import date

from sqlalchemy.exc import OperationalError

from emlak_crm.core.crypto import hash_tc
from emlak_crm.models.contract import Contract, ContractStatus
from emlak_crm.models.owner import PropertyOwner
from emlak_crm.models.property import Property
from emlak_crm.models.tenant import Tenant
from emlak_crm.schemas.contract_schemas import ContractForm
from emlak_crm.services.duplicate_check_service import DuplicateCheckService
from tests.conftest import contract_form_payload


def _tenant(db, user, name, tc, phone="5392174782", email=None, address=None) -> Tenant:
    tenant = Tenant(user_id=user.id, name=name, tc_hash=hash_tc(tc), phone=phone, email=email, address=address)
    db.add(tenant)
    db.commit()
    return tenant


def _owner(db, user, name, tc, phone="5392174782") -> PropertyOwner:
    owner = PropertyOwner(user_id=user.id, name=name, tc_hash=hash_tc(tc), phone=phone)
    db.add(owner)
    db.commit()
    return owner


def _property(db, user, owner, full_address="Moda Mah No:1, Kadıköy/İstanbul") -> Property:
    prop = Property(
        user_id=user.id,
        owner_id=owner.id,
        mahalle="Moda",
        cadde_sokak="Bahariye",
        bina_no="1",
        district="Kadıköy",
        city="İstanbul",
        full_address=full_address,
        normalized_address=full_address.lower(),
    )
    db.add(prop)
    db.commit()
    return prop


class TestDuplicateName:
    def test_same_name_different_tc_is_reported(self, db_session, test_user):
        _tenant(db_session, test_user, "Ali Yilmaz", "11111111111")
        _tenant(db_session, test_user, "ali yilmaz", "22222222222")

        result = DuplicateCheckService(db_session).check_duplicate_name(
            "Ali Yilmaz", hash_tc("33333333333"), "tenant", test_user
        )

        assert result.has_duplicate is True
        assert result.count == 2
        assert result.message == '⚠️ "Ali Yilmaz" ismiyle 2 farklı kişi daha var sistemde (farklı TC No)'

    def test_same_person_is_not_a_duplicate(self, db_session, test_user):
        _tenant(db_session, test_user, "Ali Yilmaz", "11111111111")

        result = DuplicateCheckService(db_session).check_duplicate_name(
            "Ali Yilmaz", hash_tc("11111111111"), "tenant", test_user
        )

        assert result.has_duplicate is False
        assert result.count == 0
        assert result.message is None

    def test_owner_lookup_is_separate_from_tenants(self, db_session, test_user):
        _tenant(db_session, test_user, "Ali Yilmaz", "11111111111")
        _owner(db_session, test_user, "Ali Yilmaz", "22222222222")

        result = DuplicateCheckService(db_session).check_duplicate_name(
            "Ali Yilmaz", hash_tc("33333333333"), "owner", test_user
        )

        assert result.count == 1


class TestDataChanges:
    def test_phone_change_gives_exactly_one_change(self, db_session, test_user):
        _tenant(db_session, test_user, "Ali Yilmaz", "11111111111", phone="5392174782")

        result = DuplicateCheckService(db_session).check_data_changes(
            hash_tc("11111111111"), {"phone": "5551234567"}, "tenant", test_user
        )

        assert result.has_changes is True
        assert result.changes == ["Telefon: 5392174782 → 5551234567"]
        assert result.existing_data["phone"] == "5392174782"

    def test_email_and_address_changes(self, db_session, test_user):
        _tenant(db_session, test_user, "Ali Yilmaz", "11111111111", address="Eski adres")

        result = DuplicateCheckService(db_session).check_data_changes(
            hash_tc("11111111111"),
            {"phone": "5392174782", "email": "ali@example.com", "address": "Yeni adres"},
            "tenant",
            test_user,
        )

        assert result.changes == ["Email: yok → ali@example.com", "Adres değişti"]

    def test_address_ignored_for_owners(self, db_session, test_user):
        _owner(db_session, test_user, "Ayse Kaya", "44444444444")

        result = DuplicateCheckService(db_session).check_data_changes(
            hash_tc("44444444444"), {"phone": "5392174782", "address": "Yeni adres"}, "owner", test_user
        )

        assert result.has_changes is False
        assert result.changes == []

    def test_unknown_person_has_no_changes(self, db_session, test_user):
        result = DuplicateCheckService(db_session).check_data_changes(
            hash_tc("99999999999"), {"phone": "5551234567"}, "tenant", test_user
        )
        assert result.has_changes is False
        assert result.existing_data is None


class TestMultipleContracts:
    def test_active_contracts_are_listed(self, db_session, test_user):
        tenant = _tenant(db_session, test_user, "Ali Yilmaz", "11111111111")
        owner = _owner(db_session, test_user, "Ayse Kaya", "44444444444")
        prop = _property(db_session, test_user, owner)
        db_session.add(
            Contract(
                user_id=test_user.id,
                tenant_id=tenant.id,
                property_id=prop.id,
                owner_id=owner.id,
                start_date=date(2025, 1, 1),
                end_date=date(2026, 1, 1),
                rent_amount=10000,
                status=ContractStatus.ACTIVE,
            )
        )
        db_session.commit()

        result = DuplicateCheckService(db_session).check_multiple_contracts(hash_tc("11111111111"), test_user)

        assert result.has_multiple is True
        assert result.count == 1
        assert result.contracts[0].property_address == "Moda Mah No:1, Kadıköy/İstanbul"
        assert result.message.startswith("⚠️ Bu kiracının 1 aktif sözleşmesi var:")

    def test_tenant_without_contracts(self, db_session, test_user):
        _tenant(db_session, test_user, "Ali Yilmaz", "11111111111")
        result = DuplicateCheckService(db_session).check_multiple_contracts(hash_tc("11111111111"), test_user)
        assert result.has_multiple is False


def test_lookup_failure_reports_nothing(db_session, test_user, monkeypatch):
    service = DuplicateCheckService(db_session)

    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(service.tenant_repo, "find_same_name_other_identity", broken)

    result = service.check_duplicate_name("Ali", hash_tc("11111111111"), "tenant", test_user)
    assert result.has_duplicate is False


def test_pre_validation_collects_warnings(db_session, test_user):
    form = ContractForm(**contract_form_payload())
    _tenant(db_session, test_user, form.tenant_name, form.tenant_tc, phone="5329998877")

    result = DuplicateCheckService(db_session).run_pre_validation(form, test_user)

    assert result.tenant_changes.has_changes is True
    assert result.tenant_changes.changes[0] == "Telefon: 5329998877 → 5551234567"
    assert result.owner_duplicate.has_duplicate is False
    assert len(result.warnings) == 1
