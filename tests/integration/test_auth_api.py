"""Integration tests for the OTP sign-in flow and the session endpoints."""

ADMIN_EMAIL = "admin@churchinkomoka.com"


def _signin(client, identifier, code, type="email"):
    return client.post(
        "/api/auth/signin", json={"identifier": identifier, "code": code, "type": type}
    )


class TestRequestOtp:
    def test_unknown_address_is_404(self, client, email_provider):
        resp = client.post("/api/otp", json={"email": "stranger@example.com"})
        assert resp.status_code == 404
        assert resp.json()["error"] == (
            "Profile not found. Please contact an administrator to create an account."
        )
        assert email_provider.codes == {}

    def test_invalid_email_is_400(self, client):
        resp = client.post("/api/otp", json={"email": "not-an-email"})
        assert resp.status_code == 400
        assert resp.json()["field"] == "email"

    def test_sends_six_digit_code(self, client, email_provider):
        resp = client.post("/api/otp", json={"email": ADMIN_EMAIL})
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "message": "OTP code sent to your email"}
        code = email_provider.last_code(ADMIN_EMAIL)
        assert len(code) == 6
        assert code.isdigit()

    def test_address_is_case_insensitive(self, client, email_provider):
        resp = client.post("/api/otp", json={"email": "Admin@ChurchInKomoka.com"})
        assert resp.status_code == 200
        assert ADMIN_EMAIL in email_provider.codes

    def test_delivery_failure_is_500(self, client, email_provider):
        email_provider.fail = True
        resp = client.post("/api/otp", json={"email": ADMIN_EMAIL})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to send OTP code", "code": "delivery_failed"}

    def test_profile_created_later_can_request(self, client, email_provider, admin_headers):
        assert client.post("/api/otp", json={"email": "ruth@example.com"}).status_code == 404
        created = client.post(
            "/api/profiles", json={"email": "ruth@example.com"}, headers=admin_headers
        )
        assert created.status_code == 201
        assert client.post("/api/otp", json={"email": "ruth@example.com"}).status_code == 200


class TestSignIn:
    def test_success_sets_session_cookie(self, client, email_provider):
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        resp = _signin(client, ADMIN_EMAIL, email_provider.last_code(ADMIN_EMAIL))
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["user"]["email"] == ADMIN_EMAIL
        assert body["user"]["firstName"] == "Grace"
        assert body["user"]["isAdmin"] is True
        cookie = resp.headers["set-cookie"]
        assert cookie.startswith("session_token=")
        assert "HttpOnly" in cookie
        assert "samesite=lax" in cookie.lower()

    def test_code_is_single_use(self, client, email_provider):
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        code = email_provider.last_code(ADMIN_EMAIL)
        assert _signin(client, ADMIN_EMAIL, code).status_code == 200
        resp = _signin(client, ADMIN_EMAIL, code)
        assert resp.status_code == 401
        assert resp.json()["error"] == "Invalid or expired OTP code"

    def test_code_valid_until_expiry(self, client, email_provider, clock):
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        clock.advance(minutes=9)
        assert _signin(client, ADMIN_EMAIL, email_provider.last_code(ADMIN_EMAIL)).status_code == 200

    def test_expired_code_rejected(self, client, email_provider, clock):
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        clock.advance(minutes=11)
        resp = _signin(client, ADMIN_EMAIL, email_provider.last_code(ADMIN_EMAIL))
        assert resp.status_code == 401
        assert resp.json()["error"] == "Invalid or expired OTP code"

    def test_wrong_code_rejected(self, client, email_provider):
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        real = email_provider.last_code(ADMIN_EMAIL)
        wrong = "000000" if real != "000000" else "111111"
        assert _signin(client, ADMIN_EMAIL, wrong).status_code == 401
        # a failed attempt does not burn the real code
        assert _signin(client, ADMIN_EMAIL, real).status_code == 200

    def test_code_bound_to_identifier(self, client, email_provider, admin_headers):
        client.post("/api/profiles", json={"email": "ruth@example.com"}, headers=admin_headers)
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        code = email_provider.last_code(ADMIN_EMAIL)
        assert _signin(client, "ruth@example.com", code).status_code == 401

    def test_earlier_code_still_usable(self, client, email_provider):
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        first = email_provider.last_code(ADMIN_EMAIL)
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        assert _signin(client, ADMIN_EMAIL, first).status_code == 200

    def test_phone_type_has_no_codes(self, client):
        resp = _signin(client, "+15195550100", "123456", type="phone")
        assert resp.status_code == 401

    def test_profile_removed_after_code_sent(self, client, email_provider, admin_headers):
        created = client.post(
            "/api/profiles", json={"email": "ruth@example.com"}, headers=admin_headers
        ).json()
        client.post("/api/otp", json={"email": "ruth@example.com"})
        client.delete(f"/api/profiles/{created['profile']['id']}", headers=admin_headers)
        resp = _signin(client, "ruth@example.com", email_provider.last_code("ruth@example.com"))
        assert resp.status_code == 404
        assert resp.json()["error"] == "Profile not found"


class TestSession:
    def test_anonymous_is_401(self, client):
        resp = client.get("/api/auth/session")
        assert resp.status_code == 401
        assert resp.json()["error"] == "Authentication required"

    def test_cookie_session(self, client, email_provider):
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        _signin(client, ADMIN_EMAIL, email_provider.last_code(ADMIN_EMAIL))
        resp = client.get("/api/auth/session")
        assert resp.status_code == 200
        assert resp.json()["user"]["email"] == ADMIN_EMAIL

    def test_bearer_session(self, client, admin_headers, admin_id):
        resp = client.get("/api/auth/session", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["user"]["id"] == admin_id

    def test_tampered_token_is_anonymous(self, client, admin_headers):
        headers = {"Authorization": admin_headers["Authorization"] + "x"}
        assert client.get("/api/auth/session", headers=headers).status_code == 401

    def test_signout_clears_cookie(self, client, email_provider):
        client.post("/api/otp", json={"email": ADMIN_EMAIL})
        _signin(client, ADMIN_EMAIL, email_provider.last_code(ADMIN_EMAIL))
        resp = client.post("/api/auth/signout")
        assert resp.status_code == 200
        assert resp.json()["success"] is True
        assert client.get("/api/auth/session").status_code == 401
