from emlak_crm.models.contract import Contract
from emlak_crm.models.tenant import Tenant


def _with_contract_payload(property_id, **overrides) -> dict:
    data = {
        "name": "Mehmet Demir",
        "tc": "10987654321",
        "phone": "05551234567",
        "email": "mehmet@example.com",
        "property_id": property_id,
        "contract": {
            "start_date": "2025-01-01",
            "end_date": "2026-01-01",
            "rent_amount": 15000,
            "deposit": 30000,
            "payment_day_of_month": 5,
        },
    }
    data.update(overrides)
    return data


class TestTenantCRUD:
    """Test tenant CRUD operations"""

    def test_create_unassigned_tenant(self, client, auth_headers):
        response = client.post("/api/tenants", headers=auth_headers, json={"name": "Mehmet Demir"})

        assert response.status_code == 201
        data = response.json()
        assert data["property_id"] is None
        assert data["property"] is None
        assert data["has_tc"] is False

    def test_create_tenant_for_property(self, client, auth_headers, create_owner, create_property, create_tenant):
        prop = create_property(create_owner()["id"])
        tenant = create_tenant(property_id=prop["id"])

        assert tenant["property"]["id"] == prop["id"]
        assert tenant["phone"] == "5551234567"
        assert tenant["has_tc"] is True

    def test_create_tenant_for_unknown_property(self, client, auth_headers):
        response = client.post("/api/tenants", headers=auth_headers, json={"name": "Mehmet", "property_id": 999})
        assert response.status_code == 404
        assert response.json()["code"] == "ERROR_PROPERTY_NOT_FOUND"

    def test_list_filters(self, client, auth_headers, create_owner, create_property, create_tenant):
        prop = create_property(create_owner()["id"])
        create_tenant(name="Ali Veli", tc="11111111111", property_id=prop["id"])
        create_tenant(name="Ali Kaya", tc="22222222222")
        create_tenant(name="Ayse Demir", tc="33333333333")

        response = client.get(
            "/api/tenants", headers=auth_headers, params={"search": "ali", "assignment": "unassigned"}
        )
        assert [t["name"] for t in response.json()["tenants"]] == ["Ali Kaya"]

        response = client.get("/api/tenants", headers=auth_headers, params={"search": "bahariye"})
        assert [t["name"] for t in response.json()["tenants"]] == ["Ali Veli"]

    def test_invalid_assignment_filter(self, client, auth_headers):
        response = client.get("/api/tenants", headers=auth_headers, params={"assignment": "sometimes"})
        assert response.status_code == 422

    def test_assign_and_unassign(self, client, auth_headers, create_owner, create_property, create_tenant):
        prop = create_property(create_owner()["id"])
        tenant = create_tenant()

        response = client.put(
            f"/api/tenants/{tenant['id']}/assign", headers=auth_headers, json={"property_id": prop["id"]}
        )
        assert response.status_code == 200
        assert response.json()["property_id"] == prop["id"]

        stats = client.get("/api/tenants/stats", headers=auth_headers).json()
        assert stats == {"total": 1, "assigned": 1, "unassigned": 0}

        response = client.put(f"/api/tenants/{tenant['id']}/assign", headers=auth_headers, json={"property_id": None})
        assert response.json()["property_id"] is None

    def test_update_tenant(self, client, auth_headers, create_tenant):
        tenant = create_tenant()
        response = client.patch(
            f"/api/tenants/{tenant['id']}", headers=auth_headers, json={"email": "new@example.com"}
        )
        assert response.status_code == 200
        assert response.json()["email"] == "new@example.com"
        assert response.json()["name"] == "Mehmet Demir"

    def test_delete_tenant(self, client, auth_headers, create_tenant):
        tenant = create_tenant()
        assert client.delete(f"/api/tenants/{tenant['id']}", headers=auth_headers).status_code == 204
        assert client.get(f"/api/tenants/{tenant['id']}", headers=auth_headers).status_code == 404

    def test_delete_tenant_with_active_contract_empties_property(
        self, client, auth_headers, create_owner, create_property
    ):
        prop = create_property(create_owner()["id"])
        created = client.post(
            "/api/tenants/with-contract", headers=auth_headers, json=_with_contract_payload(prop["id"])
        ).json()
        assert client.get(f"/api/properties/{prop['id']}", headers=auth_headers).json()["status"] == "Occupied"

        response = client.delete(f"/api/tenants/{created['tenant']['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert client.get("/api/contracts", headers=auth_headers).json()["total"] == 0
        assert client.get(f"/api/properties/{prop['id']}", headers=auth_headers).json()["status"] == "Empty"


class TestTenantWithContract:
    def test_creates_tenant_and_active_contract(self, client, auth_headers, create_owner, create_property):
        owner = create_owner()
        prop = create_property(owner["id"])

        response = client.post(
            "/api/tenants/with-contract", headers=auth_headers, json=_with_contract_payload(prop["id"])
        )

        assert response.status_code == 201, response.text
        data = response.json()
        assert data["tenant"]["property_id"] == prop["id"]
        assert data["contract"]["status"] == "Active"
        assert data["contract"]["owner_id"] == owner["id"]
        assert data["contract"]["rent_amount"] == 15000

        prop_after = client.get(f"/api/properties/{prop['id']}", headers=auth_headers).json()
        assert prop_after["status"] == "Occupied"

    def test_missing_name(self, client, auth_headers, create_owner, create_property, db_session):
        prop = create_property(create_owner()["id"])

        response = client.post(
            "/api/tenants/with-contract", headers=auth_headers, json=_with_contract_payload(prop["id"], name="  ")
        )

        assert response.status_code == 400
        assert response.json()["code"] == "ERROR_TENANT_NAME_REQUIRED"
        assert db_session.query(Tenant).count() == 0

    def test_missing_property(self, client, auth_headers):
        response = client.post(
            "/api/tenants/with-contract", headers=auth_headers, json=_with_contract_payload(None)
        )
        assert response.status_code == 400
        assert response.json()["code"] == "ERROR_TENANT_PROPERTY_REQUIRED"

    def test_invalid_email(self, client, auth_headers, create_owner, create_property):
        prop = create_property(create_owner()["id"])
        response = client.post(
            "/api/tenants/with-contract",
            headers=auth_headers,
            json=_with_contract_payload(prop["id"], email="not-an-email"),
        )
        assert response.status_code == 400
        assert response.json()["code"] == "ERROR_TENANT_INVALID_EMAIL"

    def test_missing_start_date(self, client, auth_headers, create_owner, create_property):
        prop = create_property(create_owner()["id"])
        payload = _with_contract_payload(prop["id"])
        del payload["contract"]["start_date"]

        response = client.post("/api/tenants/with-contract", headers=auth_headers, json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "ERROR_CONTRACT_START_DATE_REQUIRED"

    def test_end_before_start(self, client, auth_headers, create_owner, create_property, db_session):
        prop = create_property(create_owner()["id"])
        payload = _with_contract_payload(prop["id"])
        payload["contract"]["end_date"] = "2024-06-01"

        response = client.post("/api/tenants/with-contract", headers=auth_headers, json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "ERROR_CONTRACT_END_BEFORE_START"
        assert db_session.query(Contract).count() == 0


class TestTenantIsolation:
    def test_cannot_assign_to_another_users_property(
        self, client, user_a_headers, user_b_headers, create_owner, create_property, create_tenant
    ):
        prop = create_property(create_owner(headers=user_a_headers)["id"], headers=user_a_headers)
        tenant = create_tenant(headers=user_b_headers)

        response = client.put(
            f"/api/tenants/{tenant['id']}/assign", headers=user_b_headers, json={"property_id": prop["id"]}
        )

        assert response.status_code == 404
