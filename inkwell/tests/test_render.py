"""Tests for the editor preview endpoint."""

from httpx import ASGITransport, AsyncClient


async def test_preview_renders_nodes(mock_settings):
    from inkwell.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.post(
            "/api/render", json={"body": "# Title\n\nSome **bold** text."}
        )

    assert response.status_code == 200
    assert response.json() == {
        "nodes": [
            {"type": "heading", "level": 1, "children": [{"type": "text", "text": "Title"}]},
            {
                "type": "paragraph",
                "children": [
                    {"type": "text", "text": "Some "},
                    {"type": "bold", "text": "bold"},
                    {"type": "text", "text": " text."},
                ],
            },
        ]
    }


async def test_preview_empty_body(mock_settings):
    from inkwell.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.post("/api/render", json={"body": ""})

    assert response.status_code == 200
    assert response.json() == {"nodes": []}


async def test_preview_unterminated_fence(mock_settings):
    from inkwell.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        response = await client.post("/api/render", json={"body": "```\nopen"})

    assert response.status_code == 422
    assert "Unterminated code fence" in response.json()["detail"]
