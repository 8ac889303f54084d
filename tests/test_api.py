"""
HTTP tests for the DeathNote API.

The provider dependency is overridden with a FakeContentProvider; apart from
the lifespan test, the app lifespan is not started and no real client is built.

Run with:
    pytest tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from api.dependencies import get_content_provider
from generation.exceptions import ProviderUnavailableError
from main import app


# ===================================================================
# FIXTURES
# ===================================================================

@pytest.fixture
def client():
    """TestClient with dependency overrides cleared after each test."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_provider(fake_provider):
    """Install a fake provider for the duration of a test."""
    def _install(**kwargs):
        provider = fake_provider(**kwargs)
        app.dependency_overrides[get_content_provider] = lambda: provider
        return provider

    return _install


# ===================================================================
# TESTS - POST /api/generate
# ===================================================================

@pytest.mark.unit
def test_generate_with_provider(client, use_provider):
    use_provider(response="```html\n<h2>My Wishes</h2><p>[Your Name]</p>\n```")

    response = client.post(
        "/api/generate",
        json={"prompt": "Write my final wishes"},
        headers={"x-user-name": "Jane Doe"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data == {
        "content": "<h1>My Wishes</h1><p>Jane Doe</p>",
        "source": "openai-sdk",
    }


@pytest.mark.unit
def test_generate_fallback_includes_warning(client, use_provider):
    use_provider(error=ProviderUnavailableError("timeout"))

    response = client.post(
        "/api/generate",
        json={"prompt": "Give me a template for handling my pets"},
        headers={"x-user-name": "Jane Doe"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "fallback"
    assert data["error"] == "Content provider call failed. Using fallback content."
    assert data["content"].startswith("<h1>Care Instructions for My Beloved Pets</h1>")
    assert "Prepared by: Jane Doe" in data["content"]


@pytest.mark.unit
@pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": "   "}, {"prompt": None}])
def test_generate_requires_prompt(client, use_provider, body):
    provider = use_provider(response="<h1>unused</h1>")

    response = client.post("/api/generate", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt is required"}
    assert provider.calls == []


@pytest.mark.unit
def test_generate_accepts_long_prompt(client, use_provider):
    use_provider(error=ProviderUnavailableError("down"))

    response = client.post(
        "/api/generate",
        json={"prompt": "template for my pets " + "x" * 4000},
    )

    assert response.status_code == 200
    assert response.json()["source"] == "fallback"
    assert response.json()["content"].startswith("<h1>Care Instructions for My Beloved Pets</h1>")


@pytest.mark.unit
def test_generate_rejects_malformed_body(client, use_provider):
    use_provider(response="<h1>unused</h1>")

    response = client.post(
        "/api/generate",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


@pytest.mark.unit
def test_generate_returns_500_when_fallback_breaks(client, use_provider):
    use_provider(error=ProviderUnavailableError("down"))

    with patch(
        "services.content_generator.generate_fallback_content",
        side_effect=RuntimeError("boom"),
    ):
        response = client.post("/api/generate", json={"prompt": "goodbye"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate content"}


@pytest.mark.unit
def test_generate_without_startup_uses_fallback(client):
    """No lifespan and no override: the unconfigured provider forces fallback."""
    response = client.post("/api/generate", json={"prompt": "goodbye"})

    assert response.status_code == 200
    assert response.json()["source"] == "fallback"
    assert "Writing a Meaningful Goodbye Letter" in response.json()["content"]


# ===================================================================
# TESTS - Template catalog
# ===================================================================

@pytest.mark.unit
def test_list_templates(client):
    response = client.get("/api/templates/")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 9
    assert data[0] == {
        "id": "goodbye-note",
        "title": "My Farewell Note",
        "keywords": ["goodbye", "farewell"],
    }


@pytest.mark.unit
def test_get_template_renders_user_name(client):
    response = client.get("/api/templates/legal", headers={"x-user-name": "Ana"})

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "My Legal Affairs Overview"
    assert "Prepared by: Ana" in data["content"]


@pytest.mark.unit
def test_get_unknown_template(client):
    response = client.get("/api/templates/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Template not found"}


@pytest.mark.unit
def test_list_editor_templates(client):
    response = client.get("/api/templates/editor")

    assert response.status_code == 200
    data = response.json()
    assert [item["value"] for item in data] == [
        "goodbye-note",
        "final-wishes",
        "digital-legacy",
        "personal-inventory",
        "legacy-letter",
    ]
    assert data[1] == {
        "value": "final-wishes",
        "label": "Final Wishes",
        "description": "Outline your funeral preferences and final messages",
    }


@pytest.mark.unit
def test_default_editor_template(client):
    response = client.get("/api/templates/editor/default", headers={"x-user-name": "Ana"})

    assert response.status_code == 200
    data = response.json()
    assert data["value"] == "goodbye-note"
    assert data["content"].startswith("<h1>Goodbye Note</h1>")
    assert "<p>Ana</p>" in data["content"]


@pytest.mark.unit
def test_get_editor_template(client):
    response = client.get("/api/templates/editor/digital-legacy")

    assert response.status_code == 200
    data = response.json()
    assert data["label"] == "Digital Legacy"
    assert "<p>[Your Name]</p>" in data["content"]


@pytest.mark.unit
def test_get_unknown_editor_template(client):
    response = client.get("/api/templates/editor/pet-care")

    assert response.status_code == 404
    assert response.json() == {"error": "Template not found"}


# ===================================================================
# TESTS - Draft and extraction
# ===================================================================

@pytest.mark.unit
def test_draft(client):
    response = client.post(
        "/api/draft",
        json={"prompt": "Thank you for everything."},
        headers={"x-user-name": "Sam"},
    )

    assert response.status_code == 200
    content = response.json()["content"]
    assert content.startswith("<h1>My Final Message</h1>")
    assert "<p>Thank you for everything.</p>" in content
    assert "<p>Sam</p>" in content


@pytest.mark.unit
def test_draft_accepts_long_prompt(client):
    prompt = "Thank you. " * 500

    response = client.post("/api/draft", json={"prompt": prompt})

    assert response.status_code == 200
    assert prompt.strip() in response.json()["content"]


@pytest.mark.unit
def test_draft_requires_prompt(client):
    response = client.post("/api/draft", json={"prompt": " "})

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt is required"}


@pytest.mark.unit
def test_extract(client):
    response = client.post("/api/extract", json={"url": "https://example.com/a?b=<c>"})

    assert response.status_code == 200
    assert response.json()["content"].startswith(
        "<h1>Content from https://example.com/a?b=&lt;c&gt;</h1>"
    )


@pytest.mark.unit
def test_extract_requires_url(client):
    response = client.post("/api/extract", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "URL is required"}


# ===================================================================
# TESTS - Health
# ===================================================================

@pytest.mark.unit
def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "deathnote-api"


# ===================================================================
# TESTS - Lifespan
# ===================================================================

@pytest.mark.unit
def test_lifespan_closes_provider_on_shutdown(fake_provider):
    provider = fake_provider(response="<h1>unused</h1>")

    with patch("main.LogfireConfig.initialize"), patch(
        "main.AgentContentProvider.from_settings", return_value=provider
    ):
        with TestClient(app) as started:
            assert started.app.state.content_provider is provider
            assert provider.closed is False

    assert provider.closed is True
    assert app.state.content_provider is None
