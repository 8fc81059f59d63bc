"""
Integration tests for the authentication API.
"""

import pytest
from django.core.management import CommandError, call_command

PASSWORD = "secret123"


@pytest.mark.django_db
@pytest.mark.integration
class TestSignUpAPI:
    """Tests for POST /api/v1/auth/signup."""

    def test_client_sign_up(self, sign_up):
        """Test a client account is created with a token."""
        body = sign_up("sara@example.com")

        assert body["user"]["role"] == "client"
        assert body["user"]["email"] == "sara@example.com"
        assert body["brand"] is None
        assert body["token"]
        assert "password" not in body["user"]
        assert "secret_hash" not in body["user"]

    def test_brand_owner_sign_up(self, sign_up):
        """Test a brand owner gets a brand in the same call."""
        body = sign_up(
            "alice@x.tn",
            kind="brand_owner",
            brand_name="Alice Wear",
            brand={"category": "Fashion", "website": "https://alicewear.tn"},
        )

        assert body["user"]["role"] == "brand_owner"
        assert body["brand"]["name"] == "Alice Wear"
        assert body["brand"]["status"] == "approved"
        assert body["brand"]["category"] == "Fashion"
        assert body["user"]["brand_id"] == body["brand"]["id"]

    def test_brand_owner_requires_brand_name(self, api_client):
        """Test the missing brand name."""
        response = api_client.post(
            "/api/v1/auth/signup",
            {"kind": "brand_owner", "email": "alice@x.tn", "password": PASSWORD},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
        assert "brand_name" in response.json()["error"]["message"]

    def test_brand_status_not_accepted(self, api_client):
        """Test sign-up cannot choose the brand status."""
        response = api_client.post(
            "/api/v1/auth/signup",
            {
                "kind": "brand_owner",
                "email": "alice@x.tn",
                "password": PASSWORD,
                "brand_name": "Alice Wear",
                "brand": {"status": "banned"},
            },
            format="json",
        )
        assert response.status_code == 400

    def test_duplicate_email(self, api_client, sign_up):
        """Test the email conflict."""
        sign_up("sara@example.com")
        response = api_client.post(
            "/api/v1/auth/signup",
            {"email": "Sara@Example.com", "password": PASSWORD},
            format="json",
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    def test_duplicate_brand_name(self, api_client, sign_up):
        """Test the brand name conflict."""
        sign_up("alice@x.tn", kind="brand_owner", brand_name="Alice Wear")
        response = api_client.post(
            "/api/v1/auth/signup",
            {
                "kind": "brand_owner",
                "email": "other@x.tn",
                "password": PASSWORD,
                "brand_name": "ALICE WEAR",
            },
            format="json",
        )
        assert response.status_code == 409

    def test_short_password(self, api_client):
        """Test the minimum secret length."""
        response = api_client.post(
            "/api/v1/auth/signup", {"email": "sara@example.com", "password": "123"}, format="json"
        )
        assert response.status_code == 400

    def test_admin_kind_rejected(self, api_client):
        """Test admins cannot sign up."""
        response = api_client.post(
            "/api/v1/auth/signup",
            {"kind": "admin", "email": "root@example.com", "password": PASSWORD},
            format="json",
        )
        assert response.status_code == 400


@pytest.mark.django_db
@pytest.mark.integration
class TestSignInAPI:
    """Tests for sign-in, sign-out and the current account."""

    def test_sign_in_and_me(self, api_client, sign_up, auth_headers):
        """Test a token from sign-in opens /me."""
        sign_up("alice@x.tn", kind="brand_owner", brand_name="Alice Wear")

        response = api_client.post(
            "/api/v1/auth/signin", {"email": "alice@x.tn", "password": PASSWORD}, format="json"
        )
        assert response.status_code == 200
        token = response.json()["token"]

        me = api_client.get("/api/v1/auth/me", **auth_headers(token))
        assert me.status_code == 200
        assert me.json()["user"]["email"] == "alice@x.tn"
        assert me.json()["brand"]["name"] == "Alice Wear"

    def test_wrong_password(self, api_client, sign_up):
        """Test invalid credentials."""
        sign_up("sara@example.com")
        response = api_client.post(
            "/api/v1/auth/signin", {"email": "sara@example.com", "password": "wrong1"}, format="json"
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"

    def test_me_requires_token(self, api_client):
        """Test /me without a token."""
        response = api_client.get("/api/v1/auth/me")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHENTICATED"

    def test_invalid_token(self, api_client, auth_headers):
        """Test a garbage token is rejected by the middleware."""
        response = api_client.get("/api/v1/brands/", **auth_headers("garbage"))
        assert response.status_code == 401

    def test_sign_out(self, api_client):
        """Test sign-out acknowledges."""
        response = api_client.post("/api/v1/auth/signout")
        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_admin_console_refuses_clients(self, api_client, sign_up):
        """Test the admin sign-in is for admins only."""
        sign_up("sara@example.com")
        response = api_client.post(
            "/api/v1/admin/auth/signin",
            {"email": "sara@example.com", "password": PASSWORD},
            format="json",
        )
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "WRONG_ROLE"


@pytest.mark.django_db
@pytest.mark.integration
class TestAccountEditAPI:
    """Tests for PATCH /api/v1/auth/me and /me/password."""

    def test_edit_own_profile(self, api_client, sign_up, auth_headers):
        """Test a client renames themselves and changes email."""
        sara = sign_up("sara@example.com")

        response = api_client.patch(
            "/api/v1/auth/me",
            {"full_name": "Sara B", "email": "Sara.B@Example.com"},
            format="json",
            **auth_headers(sara["token"]),
        )
        me = api_client.get("/api/v1/auth/me", **auth_headers(sara["token"]))

        assert response.status_code == 200
        assert response.json()["full_name"] == "Sara B"
        assert response.json()["email"] == "sara.b@example.com"
        assert me.json()["user"]["email"] == "sara.b@example.com"

    @pytest.mark.parametrize("field,value", [("role", "admin"), ("owned_brand_id", None)])
    def test_role_and_brand_are_refused(self, api_client, sign_up, auth_headers, field, value):
        """Test an owner cannot promote themselves or drop their brand."""
        alice = sign_up("alice@x.tn", kind="brand_owner", brand_name="Alice Wear")

        response = api_client.patch(
            "/api/v1/auth/me", {field: value}, format="json", **auth_headers(alice["token"])
        )
        me = api_client.get("/api/v1/auth/me", **auth_headers(alice["token"]))

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"
        assert me.json()["user"]["role"] == "brand_owner"
        assert me.json()["brand"]["name"] == "Alice Wear"

    def test_duplicate_email(self, api_client, sign_up, auth_headers):
        """Test taking another account's email."""
        sign_up("taken@example.com")
        sara = sign_up("sara@example.com")

        response = api_client.patch(
            "/api/v1/auth/me",
            {"email": "taken@example.com"},
            format="json",
            **auth_headers(sara["token"]),
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    def test_edit_requires_token(self, api_client):
        """Test an anonymous edit."""
        response = api_client.patch("/api/v1/auth/me", {"full_name": "X"}, format="json")
        assert response.status_code == 401

    def test_change_password(self, api_client, sign_up, auth_headers):
        """Test the new password signs in and the old one does not."""
        sara = sign_up("sara@example.com")

        response = api_client.patch(
            "/api/v1/auth/me/password",
            {"current_password": PASSWORD, "new_password": "better456"},
            format="json",
            **auth_headers(sara["token"]),
        )
        old = api_client.post(
            "/api/v1/auth/signin", {"email": "sara@example.com", "password": PASSWORD}, format="json"
        )
        new = api_client.post(
            "/api/v1/auth/signin",
            {"email": "sara@example.com", "password": "better456"},
            format="json",
        )

        assert response.status_code == 200
        assert old.status_code == 401
        assert new.status_code == 200

    def test_wrong_current_password(self, api_client, sign_up, auth_headers):
        """Test the current password must match."""
        sara = sign_up("sara@example.com")
        response = api_client.patch(
            "/api/v1/auth/me/password",
            {"current_password": "guess1", "new_password": "better456"},
            format="json",
            **auth_headers(sara["token"]),
        )
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"

    def test_short_new_password(self, api_client, sign_up, auth_headers):
        """Test the minimum length."""
        sara = sign_up("sara@example.com")
        response = api_client.patch(
            "/api/v1/auth/me/password",
            {"current_password": PASSWORD, "new_password": "abc"},
            format="json",
            **auth_headers(sara["token"]),
        )
        assert response.status_code == 400


@pytest.mark.django_db
@pytest.mark.integration
class TestCreateAdminCommand:
    """Tests for the create_admin management command."""

    def test_duplicate_admin(self):
        """Test the command refuses an existing email."""
        call_command("create_admin", email="root@example.com", password=PASSWORD)
        with pytest.raises(CommandError):
            call_command("create_admin", email="root@example.com", password=PASSWORD)

    def test_short_password(self):
        """Test the command enforces the secret length."""
        with pytest.raises(CommandError):
            call_command("create_admin", email="root@example.com", password="123")
