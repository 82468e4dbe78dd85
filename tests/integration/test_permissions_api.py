# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for permission catalog and matrix endpoints."""

import uuid

from erp_access.models.enums import UserRole
from erp_access.rbac.permissions import MODULE_CATALOG, MODULE_FEATURE, empty_matrix
from erp_access.rbac.roles import default_matrix


class TestCatalog:
    """Tests for GET /api/v1/permissions/catalog."""

    def test_requires_authentication(self, client):
        assert client.get("/api/v1/permissions/catalog").status_code == 401

    def test_full_catalog(self, admin_client):
        response = admin_client.get("/api/v1/permissions/catalog")

        assert response.status_code == 200
        modules = response.json()
        assert [m["name"] for m in modules] == [m.name for m in MODULE_CATALOG]
        sales = next(m for m in modules if m["name"] == "sales")
        assert sales["feature_granular"] is True
        assert {"key": "myCustomers", "label": "My Customers"} in sales["features"]
        inventory = next(m for m in modules if m["name"] == "inventory")
        assert inventory["feature_granular"] is False
        assert [f["key"] for f in inventory["features"]] == [MODULE_FEATURE]

    def test_catalog_for_role(self, admin_client):
        response = admin_client.get("/api/v1/permissions/catalog", params={"role": "Sales"})
        assert [m["name"] for m in response.json()] == [
            "dashboard",
            "sales",
            "inventory",
            "customers",
        ]


class TestReadPermissions:
    """Tests for GET /api/v1/users/{id}/permissions."""

    def test_read_own(self, client, login, make_user):
        user = make_user("packer", UserRole.PACKING)
        login(user)

        response = client.get(f"/api/v1/users/{user.id}/permissions")

        assert response.status_code == 200
        data = response.json()
        assert data["is_super"] is False
        assert data["permissions"] == default_matrix(UserRole.PACKING)
        assert data["accessible_modules"] == ["dashboard", "packing"]

    def test_read_other_requires_user_management(self, client, login, make_user, company):
        other = make_user("other", UserRole.SALES, company=company)
        login(make_user("packer", UserRole.PACKING, company=company))

        response = client.get(f"/api/v1/users/{other.id}/permissions")

        assert response.status_code == 403

    def test_unit_head_reads_colleague(self, client, login, unit_head, make_user, company):
        colleague = make_user("colleague", UserRole.SALES, company=company)
        login(unit_head)

        response = client.get(f"/api/v1/users/{colleague.id}/permissions")

        assert response.status_code == 200
        assert response.json()["role"] == "Sales"

    def test_backfills_legacy_documents(self, admin_client, make_user):
        user = make_user("legacy", UserRole.SALES, permissions={"sales": {"orders": {"view": True}}})

        data = admin_client.get(f"/api/v1/users/{user.id}/permissions").json()

        assert data["permissions"]["sales"]["orders"]["view"] is True
        assert data["permissions"]["accounts"]["ledgerReport"]["view"] is False

    def test_inactive_user_cannot_read_own(self, client, login, make_user, db_session):
        user = make_user("dormant", UserRole.PACKING)
        login(user)
        user.is_active = False
        db_session.commit()

        response = client.get(f"/api/v1/users/{user.id}/permissions")

        assert response.status_code == 403
        assert response.json()["detail"] == "Forbidden"

    def test_scoped_actor_gets_same_status_for_missing_user(
        self, client, login, unit_head, make_user, other_company
    ):
        stranger = make_user("stranger", UserRole.SALES, company=other_company)
        login(unit_head)

        for user_id in (stranger.id, uuid.uuid4()):
            assert client.get(f"/api/v1/users/{user_id}/permissions").status_code == 403
            response = client.put(
                f"/api/v1/users/{user_id}/permissions", json={"permissions": {}}
            )
            assert response.status_code == 403
            response = client.post(f"/api/v1/users/{user_id}/permissions/reset")
            assert response.status_code == 403

    def test_unknown_user(self, admin_client):
        response = admin_client.get(f"/api/v1/users/{uuid.uuid4()}/permissions")
        assert response.status_code == 404


class TestReplacePermissions:
    """Tests for PUT /api/v1/users/{id}/permissions."""

    def test_replace_round_trips(self, admin_client, make_user):
        user = make_user("seller", UserRole.SALES)
        matrix = empty_matrix()
        matrix["accounts"]["creditNotes"]["view"] = True
        matrix["sales"]["orders"]["edit"] = True

        response = admin_client.put(
            f"/api/v1/users/{user.id}/permissions", json={"permissions": matrix}
        )

        assert response.status_code == 200
        assert response.json()["permissions"] == matrix
        read_back = admin_client.get(f"/api/v1/users/{user.id}/permissions").json()
        assert read_back["permissions"] == matrix
        assert read_back["accessible_modules"] == ["sales", "accounts"]

    def test_unknown_module_is_rejected_and_nothing_changes(self, admin_client, make_user):
        user = make_user("seller", UserRole.SALES)

        response = admin_client.put(
            f"/api/v1/users/{user.id}/permissions",
            json={"permissions": {"sales": {}, "warehouse": {"stock": {"view": True}}}},
        )

        assert response.status_code == 400
        assert "warehouse" in response.json()["detail"]
        read_back = admin_client.get(f"/api/v1/users/{user.id}/permissions").json()
        assert read_back["permissions"] == default_matrix(UserRole.SALES)

    def test_non_boolean_flag_is_rejected(self, admin_client, make_user):
        user = make_user("seller", UserRole.SALES)
        response = admin_client.put(
            f"/api/v1/users/{user.id}/permissions",
            json={"permissions": {"sales": {"orders": {"view": "yes"}}}},
        )
        assert response.status_code == 400
        assert "sales.orders.view" in response.json()["detail"]

    def test_requires_edit_on_user_management(
        self, client, login, make_user, company, db_session
    ):
        target = make_user("target", UserRole.SALES, company=company)
        viewer = make_user("viewer", UserRole.SALES, company=company)
        matrix = empty_matrix()
        matrix["settings"]["users"]["view"] = True
        viewer.permissions = matrix
        db_session.commit()
        login(viewer)

        response = client.put(
            f"/api/v1/users/{target.id}/permissions", json={"permissions": {}}
        )

        assert response.status_code == 403

    def test_unit_head_cannot_edit_own_matrix(self, client, login, unit_head):
        login(unit_head)
        response = client.put(
            f"/api/v1/users/{unit_head.id}/permissions",
            json={"permissions": default_matrix(UserRole.UNIT_HEAD)},
        )
        assert response.status_code == 403

    def test_unit_head_cannot_edit_other_company(
        self, client, login, unit_head, make_user, other_company
    ):
        stranger = make_user("stranger", UserRole.SALES, company=other_company)
        login(unit_head)
        response = client.put(
            f"/api/v1/users/{stranger.id}/permissions", json={"permissions": {}}
        )
        assert response.status_code == 403

    def test_super_admin_matrix_edits_do_not_limit_them(self, admin_client, super_admin):
        response = admin_client.put(
            f"/api/v1/users/{super_admin.id}/permissions",
            json={"permissions": empty_matrix()},
        )
        assert response.status_code == 200
        assert admin_client.get("/api/v1/users").status_code == 200


def test_reset_to_defaults(admin_client, make_user):
    user = make_user("drifted", UserRole.PRODUCTION, permissions=empty_matrix())

    response = admin_client.post(f"/api/v1/users/{user.id}/permissions/reset")

    assert response.status_code == 200
    assert response.json()["permissions"] == default_matrix(UserRole.PRODUCTION)
