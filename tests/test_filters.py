from types import SimpleNamespace

from emlak_crm.models.contract import ContractStatus
from emlak_crm.models.property import PropertyStatus
from emlak_crm.services.filters import filter_contracts, filter_properties, filter_tenants


def _property(id, full_address, city="İstanbul", district="Kadıköy", status=PropertyStatus.EMPTY, owner_name="Ahmet"):
    return SimpleNamespace(
        id=id,
        full_address=full_address,
        city=city,
        district=district,
        status=status,
        owner_id=id * 10,
        owner=SimpleNamespace(name=owner_name),
    )


def _tenant(name, phone=None, email=None, prop=None):
    return SimpleNamespace(name=name, phone=phone, email=email, property=prop)


MODA = _property(1, "Moda Mah Bahariye Cad No:12, Kadıköy/İstanbul")
ALSANCAK = _property(2, "Alsancak Mah Kıbrıs Şehitleri Cad No:3, Konak/İzmir", city="İzmir", district="Konak",
                     status=PropertyStatus.OCCUPIED, owner_name="Zeynep")

TENANTS = [
    _tenant("Ali Veli", phone="5551112233", prop=MODA),
    _tenant("Ali Kaya", email="ali.kaya@example.com"),
    _tenant("Ayse Demir", phone="5324445566"),
    _tenant("Can Oz", prop=ALSANCAK),
]


class TestFilterTenants:
    def test_defaults_return_everything(self):
        assert filter_tenants(TENANTS) == TENANTS

    def test_unassigned_combined_with_search_is_intersection(self):
        result = filter_tenants(TENANTS, search="ali", assignment="unassigned")
        assert [t.name for t in result] == ["Ali Kaya"]

    def test_assigned_only(self):
        result = filter_tenants(TENANTS, assignment="assigned")
        assert [t.name for t in result] == ["Ali Veli", "Can Oz"]

    def test_search_matches_phone_email_and_property_address(self):
        assert [t.name for t in filter_tenants(TENANTS, search="532444")] == ["Ayse Demir"]
        assert [t.name for t in filter_tenants(TENANTS, search="EXAMPLE.COM")] == ["Ali Kaya"]
        assert [t.name for t in filter_tenants(TENANTS, search="bahariye")] == ["Ali Veli"]

    def test_blank_search_ignored(self):
        assert len(filter_tenants(TENANTS, search="   ")) == 4


class TestFilterProperties:
    def test_status_filter(self):
        assert filter_properties([MODA, ALSANCAK], status=PropertyStatus.OCCUPIED) == [ALSANCAK]
        assert filter_properties([MODA, ALSANCAK], status="Empty") == [MODA]

    def test_all_disables_filters(self):
        assert filter_properties([MODA, ALSANCAK], status="all", city="all") == [MODA, ALSANCAK]

    def test_city_and_owner(self):
        assert filter_properties([MODA, ALSANCAK], city="İzmir") == [ALSANCAK]
        assert filter_properties([MODA, ALSANCAK], owner_id=10) == [MODA]

    def test_search_matches_owner_name(self):
        assert filter_properties([MODA, ALSANCAK], search="zeynep") == [ALSANCAK]


class TestFilterContracts:
    def test_search_and_status(self):
        active = SimpleNamespace(tenant=_tenant("Ali Veli"), property=MODA, status=ContractStatus.ACTIVE)
        archived = SimpleNamespace(tenant=_tenant("Can Oz"), property=ALSANCAK, status=ContractStatus.ARCHIVED)

        assert filter_contracts([active, archived], search="can") == [archived]
        assert filter_contracts([active, archived], search="moda") == [active]
        assert filter_contracts([active, archived], status=ContractStatus.ACTIVE) == [active]
        assert filter_contracts([active, archived], search="moda", status="Archived") == []
