import pytest
from rest_framework.test import APIClient

from users import services as auth_service


@pytest.fixture()
def api_client():
    return APIClient()


@pytest.fixture()
def alice(db):
    return auth_service.register("alice", "secret1")


@pytest.fixture()
def bob(db):
    return auth_service.register("bob", "hunter22")


@pytest.fixture()
def client_for():
    """Build an APIClient carrying a bearer token for the given credentials."""

    def _client_for(username, password):
        client = APIClient()
        token = auth_service.authenticate(username, password)
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return client

    return _client_for


@pytest.fixture()
def alice_client(alice, client_for):
    return client_for("alice", "secret1")


@pytest.fixture()
def bob_client(bob, client_for):
    return client_for("bob", "hunter22")
