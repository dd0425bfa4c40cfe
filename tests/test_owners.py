import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from emlak_crm.core.crypto import get_cipher, hash_tc
from emlak_crm.models.owner import PropertyOwner
from tests.conftest import VALID_IBAN, VALID_OWNER_TC, owner_payload


class TestOwnerCRUD:
    """Test owner CRUD operations"""

    def test_create_owner(self, client, auth_headers, db_session):
        """Sensitive fields are stored encrypted and never returned"""
        response = client.post("/api/owners", headers=auth_headers, json=owner_payload())

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Ahmet Yilmaz"
        assert data["phone"] == "5392174782"
        assert data["has_tc"] is True
        assert data["has_iban"] is True
        assert "tc" not in data and "tc_encrypted" not in data and "iban_encrypted" not in data
        assert VALID_OWNER_TC not in response.text

        owner = db_session.query(PropertyOwner).one()
        assert owner.tc_hash == hash_tc(VALID_OWNER_TC)
        assert owner.tc_encrypted != VALID_OWNER_TC
        assert get_cipher().decrypt(owner.iban_encrypted) == VALID_IBAN

    def test_create_owner_without_identity(self, client, auth_headers):
        response = client.post("/api/owners", headers=auth_headers, json={"name": "Zeynep Kaya"})

        assert response.status_code == 201
        assert response.json()["has_tc"] is False
        assert response.json()["has_iban"] is False

    def test_create_owner_invalid_tc(self, client, auth_headers):
        response = client.post("/api/owners", headers=auth_headers, json=owner_payload(tc="123"))
        assert response.status_code == 422

    def test_create_owner_invalid_iban(self, client, auth_headers):
        response = client.post("/api/owners", headers=auth_headers, json=owner_payload(iban="DE123"))
        assert response.status_code == 422

    def test_list_owners_with_property_count(self, client, auth_headers, create_owner, create_property):
        first = create_owner()
        create_owner(name="Zeynep Kaya", tc="22222222222")
        create_property(first["id"])
        create_property(first["id"], bina_no="14")

        response = client.get("/api/owners", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        counts = {owner["name"]: owner["property_count"] for owner in data["owners"]}
        assert counts == {"Ahmet Yilmaz": 2, "Zeynep Kaya": 0}

    def test_get_owner(self, client, auth_headers, create_owner):
        owner = create_owner()
        response = client.get(f"/api/owners/{owner['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == owner["id"]

    def test_get_nonexistent_owner(self, client, auth_headers):
        response = client.get("/api/owners/99999", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["code"] == "ERROR_OWNER_NOT_FOUND"
        assert response.json()["key"] == "errors.owner.notFound"

    def test_update_owner_partial(self, client, auth_headers, create_owner, db_session):
        owner = create_owner()
        response = client.patch(
            f"/api/owners/{owner['id']}", headers=auth_headers, json={"phone": "+90 555 123 45 67"}
        )

        assert response.status_code == 200
        assert response.json()["phone"] == "5551234567"
        assert response.json()["name"] == "Ahmet Yilmaz"
        # Identity untouched when not supplied
        assert response.json()["has_tc"] is True

    def test_delete_owner(self, client, auth_headers, create_owner):
        owner = create_owner()
        response = client.delete(f"/api/owners/{owner['id']}", headers=auth_headers)
        assert response.status_code == 204

        response = client.get(f"/api/owners/{owner['id']}", headers=auth_headers)
        assert response.status_code == 404

    def test_delete_owner_with_properties_blocked(self, client, auth_headers, create_owner, create_property):
        owner = create_owner()
        create_property(owner["id"])

        response = client.delete(f"/api/owners/{owner['id']}", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "ERROR_OWNER_HAS_PROPERTIES"

    def test_delete_owner_named_on_contract_blocked(
        self, client, auth_headers, create_owner, create_property, create_tenant
    ):
        first = create_owner()
        second = create_owner(name="Ayse Kaya", tc="11122233344")
        prop = create_property(first["id"])
        tenant = create_tenant()
        contract = client.post(
            "/api/contracts",
            headers=auth_headers,
            json={
                "tenant_id": tenant["id"],
                "property_id": prop["id"],
                "start_date": "2025-01-01",
                "end_date": "2026-01-01",
                "rent_amount": 15000,
            },
        ).json()
        assert contract["owner_id"] == first["id"]

        # the contract keeps naming the first owner after the property changes hands
        response = client.patch(f"/api/properties/{prop['id']}", headers=auth_headers, json={"owner_id": second["id"]})
        assert response.status_code == 200

        response = client.delete(f"/api/owners/{first['id']}", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "ERROR_OWNER_HAS_CONTRACTS"
        assert client.get(f"/api/contracts/{contract['id']}/pdf", headers=auth_headers).status_code == 200

    def test_database_rejects_deleting_referenced_owner(self, db_session, create_owner, create_property):
        owner = create_owner()
        create_property(owner["id"])

        with pytest.raises(IntegrityError):
            db_session.execute(text("DELETE FROM property_owners WHERE id = :id"), {"id": owner["id"]})
        db_session.rollback()


class TestOwnerIsolation:
    def test_users_cannot_see_each_others_owners(self, client, user_a_headers, user_b_headers, create_owner):
        owner = create_owner(headers=user_a_headers)

        assert client.get("/api/owners", headers=user_b_headers).json()["total"] == 0
        assert client.get(f"/api/owners/{owner['id']}", headers=user_b_headers).status_code == 404
        assert client.delete(f"/api/owners/{owner['id']}", headers=user_b_headers).status_code == 404
