"""
Fixtures for API tests.
"""

import pytest
from django.core.management import call_command

ADMIN_EMAIL = "admin@directory.tn"
PASSWORD = "secret123"


@pytest.fixture
def sign_up(api_client):
    """Factory fixture signing an account up over HTTP and returning the body."""

    def _sign_up(email, kind="client", brand_name=None, **extra):
        payload = {"kind": kind, "email": email, "password": PASSWORD, **extra}
        if brand_name:
            payload["brand_name"] = brand_name
        response = api_client.post("/api/v1/auth/signup", payload, format="json")
        assert response.status_code == 201, response.content
        return response.json()

    return _sign_up


@pytest.fixture
def auth_headers():
    """Build the bearer header kwargs for the test client."""

    def _headers(token):
        return {"HTTP_AUTHORIZATION": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin_token(api_client):
    """Create an admin with the management command and sign it in."""
    call_command("create_admin", email=ADMIN_EMAIL, password=PASSWORD)
    response = api_client.post(
        "/api/v1/admin/auth/signin", {"email": ADMIN_EMAIL, "password": PASSWORD}, format="json"
    )
    assert response.status_code == 200, response.content
    return response.json()["token"]


@pytest.fixture
def product_payload():
    """Valid product creation body."""
    return {
        "name": "Linen Shirt",
        "description": "Soft linen",
        "price": "49.90",
        "images": [{"public_id": "p/1", "image_url": "https://img.example.com/1.jpg"}],
        "purchase_link": "https://shop.example.com/linen-shirt",
    }
