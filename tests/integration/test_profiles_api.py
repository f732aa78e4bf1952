"""Integration tests for /api/profiles."""

import uuid

ADMIN_EMAIL = "admin@churchinkomoka.com"


def _create(client, headers, **payload) -> dict:
    resp = client.post("/api/profiles", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["profile"]


class TestAdminManagement:
    def test_list_sorted_by_name(self, client, admin_headers):
        _create(client, admin_headers, email="ruth@example.com", firstName="Ruth", lastName="Boaz")
        profiles = client.get("/api/profiles", headers=admin_headers).json()["profiles"]
        assert [p["lastName"] for p in profiles] == ["Boaz", "Hopper"]

    def test_list_requires_admin(self, client, member_headers):
        assert client.get("/api/profiles", headers=member_headers).status_code == 403

    def test_create_lowercases_email(self, client, admin_headers):
        profile = _create(client, admin_headers, email="Ruth@Example.COM")
        assert profile["email"] == "ruth@example.com"
        assert profile["isAdmin"] is False

    def test_duplicate_email_conflict(self, client, admin_headers):
        resp = client.post(
            "/api/profiles", json={"email": ADMIN_EMAIL.upper()}, headers=admin_headers
        )
        assert resp.status_code == 409
        assert resp.json() == {
            "error": "A profile with this email already exists",
            "code": "conflict",
            "field": "email",
        }

    def test_get(self, client, admin_headers, admin_id):
        resp = client.get(f"/api/profiles/{admin_id}", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["profile"]["email"] == ADMIN_EMAIL

    def test_get_missing(self, client, admin_headers):
        resp = client.get(f"/api/profiles/{uuid.uuid4()}", headers=admin_headers)
        assert resp.status_code == 404
        assert resp.json()["error"] == "Profile not found"

    def test_promote_to_admin(self, client, admin_headers, login):
        profile = _create(client, admin_headers, email="ruth@example.com")
        resp = client.put(
            f"/api/profiles/{profile['id']}", json={"isAdmin": True}, headers=admin_headers
        )
        assert resp.status_code == 200
        assert resp.json()["profile"]["isAdmin"] is True
        # the new session carries the admin flag
        ruth = login("ruth@example.com")
        assert client.get("/api/profiles", headers=ruth).status_code == 200

    def test_update_email_to_taken_address(self, client, admin_headers):
        profile = _create(client, admin_headers, email="ruth@example.com")
        resp = client.put(
            f"/api/profiles/{profile['id']}", json={"email": ADMIN_EMAIL}, headers=admin_headers
        )
        assert resp.status_code == 409

    def test_delete(self, client, admin_headers):
        profile = _create(client, admin_headers, email="ruth@example.com")
        resp = client.delete(f"/api/profiles/{profile['id']}", headers=admin_headers)
        assert resp.json() == {"message": "Profile deleted successfully"}
        assert client.get(f"/api/profiles/{profile['id']}", headers=admin_headers).status_code == 404

    def test_delete_registered_profile_conflicts(self, client, admin_headers):
        profile = _create(client, admin_headers, email="ruth@example.com")
        registration = {
            "type": "individual",
            "profileId": profile["id"],
            "contactName": "Ruth Boaz",
            "contactEmail": "ruth@example.com",
            "registrants": [{"firstName": "Ruth", "lastName": "Boaz"}],
        }
        assert client.post("/api/retreat", json=registration).status_code == 201

        resp = client.delete(f"/api/profiles/{profile['id']}", headers=admin_headers)
        assert resp.status_code == 409
        assert resp.json()["code"] == "conflict"

        # the failed delete left both rows in place
        assert client.get(f"/api/profiles/{profile['id']}", headers=admin_headers).status_code == 200
        registrations = client.get("/api/retreat/all", headers=admin_headers).json()
        assert [r["profileId"] for r in registrations["registrations"]] == [profile["id"]]


class TestMe:
    def test_requires_session(self, client):
        assert client.get("/api/profiles/me").status_code == 401

    def test_get_me(self, client, member_headers):
        resp = client.get("/api/profiles/me", headers=member_headers)
        assert resp.status_code == 200
        assert resp.json()["profile"]["email"] == "ruth@example.com"

    def test_update_me(self, client, member_headers):
        resp = client.put(
            "/api/profiles/me",
            json={"firstName": "Naomi", "phone": "519-555-0100"},
            headers=member_headers,
        )
        assert resp.status_code == 200
        profile = resp.json()["profile"]
        assert profile["firstName"] == "Naomi"
        assert profile["phone"] == "519-555-0100"

    def test_update_me_cannot_self_promote(self, client, member_headers):
        resp = client.put(
            "/api/profiles/me",
            json={"isAdmin": True, "email": "boss@example.com"},
            headers=member_headers,
        )
        assert resp.status_code == 200
        profile = resp.json()["profile"]
        assert profile["isAdmin"] is False
        assert profile["email"] == "ruth@example.com"
