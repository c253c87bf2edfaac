"""End-to-end tests for the HTTP API."""

import uuid
from datetime import timedelta

import pytest

LANDLORD = {"sub": "landlord-001", "email": "lana@example.com", "name": "Lana Landlord"}
TENANT = {"sub": "tenant-001", "email": "toby@example.com"}
STRANGER = {"sub": "stranger-001", "email": "sam@example.com"}

NEW_PROPERTY = {
    "name": "Maple Court 4B",
    "bedrooms": 2,
    "bathrooms": 1.5,
    "type": "apartment",
}


@pytest.fixture
def as_landlord(auth_headers):
    return auth_headers(**LANDLORD)


@pytest.fixture
def as_tenant(auth_headers):
    return auth_headers(**TENANT)


@pytest.fixture
def as_stranger(auth_headers):
    return auth_headers(**STRANGER)


@pytest.fixture
async def created_property(client, as_landlord) -> dict:
    response = await client.post("/api/properties", json=NEW_PROPERTY, headers=as_landlord)
    assert response.status_code == 201
    return response.json()["data"]


class TestHealthAndAuth:
    """Health check and token handling."""

    async def test_health(self, client) -> None:
        response = await client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_transaction_id_echoed(self, client) -> None:
        response = await client.get("/api/health", headers={"x-transaction-id": "txn-42"})

        assert response.headers["x-transaction-id"] == "txn-42"

    async def test_missing_token(self, client) -> None:
        response = await client.get("/api/profiles/me")

        assert response.status_code == 401

    async def test_expired_token(self, client, make_token) -> None:
        token = make_token("tenant-001", expires_in=timedelta(minutes=-5))

        response = await client.get(
            "/api/profiles/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    async def test_wrong_signature(self, client, make_token) -> None:
        token = make_token("tenant-001", secret="not-the-identity-secret")

        response = await client.get(
            "/api/profiles/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    async def test_profile_created_on_first_visit(self, client, as_landlord) -> None:
        first = await client.get("/api/profiles/me", headers=as_landlord)
        second = await client.get("/api/profiles/me", headers=as_landlord)

        assert first.status_code == 200
        profile = first.json()["data"]
        assert profile["external_id"] == "landlord-001"
        assert profile["name"] == "Lana Landlord"
        assert profile["role"] is None
        assert second.json()["data"]["id"] == profile["id"]


class TestAreaGenerationEndpoints:
    """Generation previews; nothing is stored."""

    async def test_generate(self, client, as_landlord) -> None:
        response = await client.post(
            "/api/property-areas/generate",
            json={"bedrooms": 1, "bathrooms": 1, "type": "house"},
            headers=as_landlord,
        )

        assert response.status_code == 200
        names = [a["name"] for a in response.json()["data"]]
        assert names == [
            "Kitchen",
            "Living Room",
            "Bedroom",
            "Bathroom",
            "Garage",
            "Yard",
            "Basement",
            "Laundry Room",
        ]

    async def test_generate_from_counts(self, client, as_landlord) -> None:
        response = await client.post(
            "/api/property-areas/generate-from-counts",
            json={"property_data": {"bedrooms": 1}, "counts": {"kitchen": 1, "garage": 2}},
            headers=as_landlord,
        )

        assert response.status_code == 200
        ids = [a["id"] for a in response.json()["data"]]
        assert ids == ["bedroom1", "kitchen1", "garage1", "garage2"]

    async def test_negative_bedrooms_rejected(self, client, as_landlord) -> None:
        response = await client.post(
            "/api/property-areas/generate",
            json={"bedrooms": -1, "bathrooms": 1},
            headers=as_landlord,
        )

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "body",
        [
            '{"bedrooms": 1, "bathrooms": Infinity}',
            '{"bedrooms": 1, "bathrooms": NaN}',
            '{"bedrooms": 11, "bathrooms": 1}',
            '{"bedrooms": 1, "bathrooms": 1e12}',
        ],
    )
    async def test_unbounded_room_counts_rejected(
        self, client, as_landlord, body: str
    ) -> None:
        response = await client.post(
            "/api/property-areas/generate",
            content=body,
            headers={**as_landlord, "Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["success"] is False
        assert response.json()["error"][0]["loc"][-1] in ("bedrooms", "bathrooms")

    @pytest.mark.parametrize("counts", [{"garage": -3}, {"garage": 1000000}])
    async def test_out_of_range_area_counts_rejected(
        self, client, as_landlord, counts: dict
    ) -> None:
        response = await client.post(
            "/api/property-areas/generate-from-counts",
            json={"counts": counts},
            headers=as_landlord,
        )

        assert response.status_code == 422

    async def test_requires_token(self, client) -> None:
        response = await client.post("/api/property-areas/generate", json={})

        assert response.status_code == 401


class TestProperties:
    """Property registration and owner views."""

    async def test_create_property(self, client, created_property) -> None:
        assert created_property["name"] == "Maple Court 4B"
        assert created_property["property_type"] == "apartment"
        assert [a["area_key"] for a in created_property["areas"]] == [
            "kitchen",
            "living",
            "bedroom1",
            "bedroom2",
            "bathroom1",
            "half-bathroom",
            "balcony",
            "laundry",
            "storage",
        ]
        assert created_property["invite_url"] == (
            f"https://homebase.test/invite?property={created_property['id']}"
        )

    async def test_creator_becomes_landlord(
        self, client, as_landlord, created_property
    ) -> None:
        response = await client.get("/api/profiles/me", headers=as_landlord)

        assert response.json()["data"]["role"] == "landlord"
        assert response.json()["data"]["id"] == created_property["landlord_id"]

    async def test_create_with_counts(self, client, as_landlord) -> None:
        response = await client.post(
            "/api/properties",
            json={**NEW_PROPERTY, "area_counts": {"kitchen": 1, "living_room": 1}},
            headers=as_landlord,
        )

        assert response.status_code == 201
        keys = [a["area_key"] for a in response.json()["data"]["areas"]]
        assert keys == [
            "bedroom1",
            "bedroom2",
            "bathroom1",
            "half-bathroom",
            "kitchen1",
            "living_room1",
        ]

    async def test_out_of_range_area_counts_rejected(self, client, as_landlord) -> None:
        response = await client.post(
            "/api/properties",
            json={**NEW_PROPERTY, "area_counts": {"kitchen": -1, "garage": 1000000}},
            headers=as_landlord,
        )

        assert response.status_code == 422
        assert response.json()["success"] is False

    async def test_stored_bathrooms_match_areas(self, client, as_landlord) -> None:
        response = await client.post(
            "/api/properties",
            json={**NEW_PROPERTY, "bathrooms": 2.04},
            headers=as_landlord,
        )

        data = response.json()["data"]
        assert data["bathrooms"] == 2.0
        assert "half-bathroom" not in [a["area_key"] for a in data["areas"]]

    async def test_duplicate_area_ids_rejected(self, client, as_landlord) -> None:
        response = await client.post(
            "/api/properties",
            json={**NEW_PROPERTY, "bedrooms": 1, "area_counts": {"bedroom": 1}},
            headers=as_landlord,
        )

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert "bedroom1" in body["message"]

    async def test_owner_sees_areas(self, client, as_landlord, created_property) -> None:
        response = await client.get(
            f"/api/properties/{created_property['id']}/areas", headers=as_landlord
        )

        assert response.status_code == 200
        assert len(response.json()["data"]) == 9

    async def test_owner_gets_invite_link(
        self, client, as_landlord, created_property
    ) -> None:
        response = await client.get(
            f"/api/properties/{created_property['id']}/invite-link", headers=as_landlord
        )

        assert response.status_code == 200
        assert response.json()["data"]["invite_url"] == created_property["invite_url"]

    async def test_stranger_cannot_get_invite_link(
        self, client, as_stranger, created_property
    ) -> None:
        response = await client.get(
            f"/api/properties/{created_property['id']}/invite-link", headers=as_stranger
        )

        assert response.status_code == 403
        assert response.json()["success"] is False

    async def test_stranger_cannot_see_areas(
        self, client, as_stranger, created_property
    ) -> None:
        response = await client.get(
            f"/api/properties/{created_property['id']}/areas", headers=as_stranger
        )

        assert response.status_code == 403

    async def test_unknown_property(self, client, as_landlord) -> None:
        response = await client.get(
            f"/api/properties/{uuid.uuid4()}/areas", headers=as_landlord
        )

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestInvites:
    """Invite preview and acceptance."""

    async def test_preview(self, client, as_tenant, created_property) -> None:
        response = await client.get(
            "/api/invites/preview",
            params={"url": created_property["invite_url"]},
            headers=as_tenant,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["property_id"] == created_property["id"]
        assert data["property_name"] == "Maple Court 4B"
        assert data["landlord_name"] == "Lana Landlord"

    async def test_accept_then_accept_again(
        self, client, as_tenant, created_property
    ) -> None:
        body = {"invite_url": created_property["invite_url"]}

        first = await client.post("/api/invites/accept", json=body, headers=as_tenant)
        second = await client.post("/api/invites/accept", json=body, headers=as_tenant)

        assert first.status_code == 200
        assert first.json()["data"]["outcome"] == "created"
        assert first.json()["data"]["property_name"] == "Maple Court 4B"
        assert second.status_code == 200
        assert second.json()["data"]["outcome"] == "already_linked"
        assert second.json()["data"]["profile_id"] == first.json()["data"]["profile_id"]

    async def test_tenant_sees_linked_property(
        self, client, as_tenant, created_property
    ) -> None:
        await client.post(
            "/api/invites/accept",
            json={"invite_url": created_property["invite_url"]},
            headers=as_tenant,
        )

        linked = await client.get("/api/tenants/me/properties", headers=as_tenant)
        areas = await client.get(
            f"/api/properties/{created_property['id']}/areas", headers=as_tenant
        )
        profile = await client.get("/api/profiles/me", headers=as_tenant)

        assert [p["property_id"] for p in linked.json()["data"]] == [
            created_property["id"]
        ]
        assert areas.status_code == 200
        assert profile.json()["data"]["role"] == "tenant"
        assert profile.json()["data"]["name"] == "toby"

    async def test_no_linked_properties(self, client, as_tenant) -> None:
        response = await client.get("/api/tenants/me/properties", headers=as_tenant)

        assert response.status_code == 200
        assert response.json()["data"] == []

    async def test_malformed_invite(self, client, as_tenant) -> None:
        response = await client.post(
            "/api/invites/accept",
            json={"invite_url": "https://homebase.test/invite"},
            headers=as_tenant,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["data"] is None

    async def test_invite_for_unknown_property(self, client, as_tenant) -> None:
        response = await client.post(
            "/api/invites/accept",
            json={"invite_url": f"https://homebase.test/invite?property={uuid.uuid4()}"},
            headers=as_tenant,
        )

        assert response.status_code == 404

    async def test_accept_requires_token(self, client, created_property) -> None:
        response = await client.post(
            "/api/invites/accept", json={"invite_url": created_property["invite_url"]}
        )

        assert response.status_code == 401
