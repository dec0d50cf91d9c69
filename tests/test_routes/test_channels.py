"""Tests for channel route endpoints.

Tests the FastAPI channel routes end to end against the SQLite test
database:
- Create (201), duplicate (409), missing or empty fields (400)
- List and fetch (200), unknown id (404)
- Update (200), colliding pair (409), unknown id (404)
- Delete (200), unknown id (404), channel with publications (403)
"""

import pytest
from fastapi import status
from sqlalchemy import select

from app.models import Channel
from tests.support.factories import create_channel, create_post, create_publication


async def stored_channels(session_factory) -> list[tuple[str, str]]:
    async with session_factory() as session:
        result = await session.execute(select(Channel).order_by(Channel.id))
        return [(c.title, c.username) for c in result.scalars()]


class TestCreateChannel:
    """Tests for POST /channels."""

    @pytest.mark.asyncio
    async def test_create_returns_201_and_stores_channel(self, api_client, session_factory):
        response = await api_client.post(
            "/channels", json={"title": "Facebook", "username": "test@test.com.br"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert isinstance(body["id"], int)
        assert body == {"id": body["id"], "title": "Facebook", "username": "test@test.com.br"}
        assert await stored_channels(session_factory) == [("Facebook", "test@test.com.br")]

    @pytest.mark.asyncio
    async def test_create_existing_pair_returns_409(
        self, api_client, session_factory, seeded_channels
    ):
        response = await api_client.post(
            "/channels", json={"title": "Facebook", "username": "test@test.com"}
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Media with this info already exists"
        assert len(await stored_channels(session_factory)) == 2

    @pytest.mark.asyncio
    async def test_create_missing_properties_returns_400(self, api_client, session_factory):
        response = await api_client.post("/channels", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        missing = {error["loc"][-1] for error in response.json()["detail"]}
        assert missing == {"title", "username"}
        assert await stored_channels(session_factory) == []

    @pytest.mark.asyncio
    async def test_create_empty_title_returns_400(self, api_client):
        response = await api_client.post(
            "/channels", json={"title": "   ", "username": "test@test.com"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestReadChannels:
    """Tests for GET /channels and GET /channels/{id}."""

    @pytest.mark.asyncio
    async def test_list_returns_all_channels(self, api_client, seeded_channels):
        response = await api_client.get("/channels")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 2

    @pytest.mark.asyncio
    async def test_list_empty(self, api_client):
        response = await api_client.get("/channels")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_specific_channel(self, api_client, seeded_channels):
        facebook = seeded_channels[0]

        response = await api_client.get(f"/channels/{facebook.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": facebook.id,
            "title": "Facebook",
            "username": "test@test.com",
        }

    @pytest.mark.asyncio
    async def test_get_unknown_channel_returns_404(self, api_client):
        response = await api_client.get("/channels/9999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_non_integer_id_returns_400(self, api_client):
        response = await api_client.get("/channels/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUpdateChannel:
    """Tests for PUT /channels/{id}."""

    @pytest.mark.asyncio
    async def test_update_channel(self, api_client, session_factory):
        async with session_factory() as session:
            facebook = create_channel(title="Facebook", username="test@test.com")
            session.add(facebook)
            await session.commit()

        response = await api_client.put(
            f"/channels/{facebook.id}", json={"title": "Meta", "username": "test@test.com.br"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Meta"
        assert await stored_channels(session_factory) == [("Meta", "test@test.com.br")]

    @pytest.mark.asyncio
    async def test_update_to_existing_info_returns_409(
        self, api_client, session_factory, seeded_channels
    ):
        facebook = seeded_channels[0]

        response = await api_client.put(
            f"/channels/{facebook.id}", json={"title": "Twitter", "username": "test@test.com"}
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert await stored_channels(session_factory) == [
            ("Facebook", "test@test.com"),
            ("Twitter", "test@test.com"),
        ]

    @pytest.mark.asyncio
    async def test_update_unknown_channel_returns_404(self, api_client):
        response = await api_client.put(
            "/channels/9999", json={"title": "Twitter", "username": "test@test.com"}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_with_own_values_returns_200(self, api_client, seeded_channels):
        facebook = seeded_channels[0]

        response = await api_client.put(
            f"/channels/{facebook.id}", json={"title": "Facebook", "username": "test@test.com"}
        )

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_update_empty_username_returns_400(self, api_client, seeded_channels):
        response = await api_client.put(
            f"/channels/{seeded_channels[0].id}", json={"username": ""}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestDeleteChannel:
    """Tests for DELETE /channels/{id}."""

    @pytest.mark.asyncio
    async def test_delete_channel(self, api_client, session_factory):
        async with session_factory() as session:
            channel = create_channel(title="Facebook", username="test@test.com")
            session.add(channel)
            await session.commit()

        response = await api_client.delete(f"/channels/{channel.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": channel.id,
            "title": "Facebook",
            "username": "test@test.com",
        }
        assert await stored_channels(session_factory) == []

    @pytest.mark.asyncio
    async def test_delete_unknown_channel_returns_404(self, api_client):
        response = await api_client.delete("/channels/9999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_scheduled_or_published_channel_returns_403(
        self, api_client, session_factory
    ):
        async with session_factory() as session:
            channel = create_channel(title="Facebook", username="test@test.com")
            session.add(create_publication(channel, create_post()))
            await session.commit()

        response = await api_client.delete(f"/channels/{channel.id}")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == (
            "cannot delete a channel with scheduled or published content"
        )
        assert await stored_channels(session_factory) == [("Facebook", "test@test.com")]
