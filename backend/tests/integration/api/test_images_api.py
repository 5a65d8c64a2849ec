"""Tests for images API endpoints."""

import pytest

from tests.fixtures.factories import create_image


class TestImagesAPI:
    """Tests for /api/images endpoints."""

    @pytest.mark.asyncio
    async def test_get_image(self, client, db_session):
        image = create_image(data=b"GIF89a", mime_type="image/gif")
        db_session.add(image)
        await db_session.commit()

        response = await client.get(f"/api/images/{image.id}")

        assert response.status_code == 200
        assert response.content == b"GIF89a"
        assert response.headers["content-type"] == "image/gif"

    @pytest.mark.asyncio
    async def test_get_image_not_found(self, client, db_session):
        response = await client.get("/api/images/12345")

        assert response.status_code == 404
        assert response.json()["detail"] == "No image with ID 12345 found"
