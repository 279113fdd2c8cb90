import pytest

from content import services as content_service
from sharing.models import ShareLink

SHARE_URL = "/api/v1/content/share"


def brain_url(share_hash):
    return f"/api/v1/brain/{share_hash}"


@pytest.mark.django_db
class TestShareToggle:
    def test_enable_then_enable_again(self, alice_client, alice):
        first = alice_client.post(SHARE_URL, {"share": True})
        second = alice_client.post(SHARE_URL, {"share": True})

        assert first.status_code == 201
        assert second.status_code == 200
        assert first.json()["hash"] == second.json()["hash"]
        assert ShareLink.objects.filter(user=alice).count() == 1

    def test_disable_without_link(self, alice_client):
        response = alice_client.post(SHARE_URL, {"share": False})

        assert response.status_code == 200
        assert response.json() == {"msg": "Share link removed"}

    def test_share_flag_is_required(self, alice_client):
        response = alice_client.post(SHARE_URL, {})

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == ["share"]

    def test_requires_token(self, api_client, db):
        response = api_client.post(SHARE_URL, {"share": True})

        assert response.status_code == 401


@pytest.mark.django_db
class TestPublicBrain:
    def test_unknown_hash(self, api_client):
        response = api_client.get(brain_url("deadbeef00"))

        assert response.status_code == 404
        assert response.json() == {"message": "Invalid or expired link"}

    def test_revoked_link(self, alice_client, api_client):
        share_hash = alice_client.post(SHARE_URL, {"share": True}).json()["hash"]
        alice_client.post(SHARE_URL, {"share": False})

        response = api_client.get(brain_url(share_hash))

        assert response.status_code == 404

    def test_is_public_even_with_a_bad_header(self, alice_client, api_client):
        share_hash = alice_client.post(SHARE_URL, {"share": True}).json()["hash"]
        api_client.credentials(HTTP_AUTHORIZATION="Bearer expired-or-garbage")

        response = api_client.get(brain_url(share_hash))

        assert response.status_code == 200

    def test_shows_full_collection_newest_first(self, alice_client, api_client, alice, bob):
        content_service.create_content(alice, title="first", body="b", type="Note")
        content_service.create_content(alice, title="second", body=["x", "y"], type="List")
        content_service.create_content(bob, title="not alices", body="b", type="Note")
        share_hash = alice_client.post(SHARE_URL, {"share": True}).json()["hash"]

        body = api_client.get(brain_url(share_hash)).json()

        assert body["username"] == "alice"
        assert [c["title"] for c in body["content"]] == ["second", "first"]


@pytest.mark.django_db
def test_signup_to_public_brain(api_client):
    signup = api_client.post(
        "/api/v1/users/signup", {"username": "alice", "password": "secret1"}
    )
    assert signup.status_code == 201

    signin = api_client.post(
        "/api/v1/users/signin", {"username": "alice", "password": "secret1"}
    )
    assert signin.status_code == 200
    token = signin.json()["token"]

    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    created = api_client.post(
        "/api/v1/content", {"title": "Note1", "body": "hi", "type": "Note"}
    )
    assert created.status_code == 201

    shared = api_client.post(SHARE_URL, {"share": True})
    assert shared.status_code == 201
    share_hash = shared.json()["hash"]

    api_client.credentials()
    public = api_client.get(brain_url(share_hash))

    assert public.status_code == 200
    body = public.json()
    assert body["username"] == "alice"
    assert len(body["content"]) == 1
    assert body["content"][0]["title"] == "Note1"
    assert body["content"][0]["body"] == "hi"
    assert body["content"][0]["type"] == "Note"
