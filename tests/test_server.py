"""Tests for FastAPI server."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from gitlinks.remotes import RemoteProviderRegistry
from gitlinks.server import app
from gitlinks.types import RemotesConfig


@pytest.fixture
def client():
    """Create test client with a built-in-only registry."""
    app.state.registry = RemoteProviderRegistry()
    yield TestClient(app)
    app.state.registry = None


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health(self, client):
        """Test health endpoint returns ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestResolveEndpoint:
    """Tests for /api/remotes/resolve endpoint."""

    def test_resolve_github(self, client):
        """Test resolving a GitHub SSH remote with a file and line range."""
        response = client.post(
            "/api/remotes/resolve",
            json={
                "remoteUrl": "git@github.com:owner/repo.git",
                "file": "src/app.py",
                "sha": "abc123",
                "startLine": 10,
                "endLine": 12,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["provider"]["key"] == "github"
        assert data["provider"]["domain"] == "github.com"
        assert data["links"]["repository"] == "https://github.com/owner/repo"
        assert data["links"]["commit"] == "https://github.com/owner/repo/commit/abc123"
        assert data["links"]["file"] == "https://github.com/owner/repo/blob/abc123/src/app.py#L10-L12"

    def test_resolve_legacy_azure(self, client):
        response = client.post(
            "/api/remotes/resolve",
            json={"remoteUrl": "https://contoso.visualstudio.com/project/_git/repo"},
        )
        assert response.status_code == 200
        assert response.json()["provider"]["legacy"] is True

    def test_unknown_host(self, client):
        """Test 404 when no provider matches."""
        response = client.post("/api/remotes/resolve", json={"remoteUrl": "https://example.com/owner/repo.git"})
        assert response.status_code == 404
        assert "No provider found" in response.json()["detail"]

    def test_unparseable_url(self, client):
        """Test 400 on a URL that isn't a remote."""
        response = client.post("/api/remotes/resolve", json={"remoteUrl": "/local/path"})
        assert response.status_code == 400
        assert "Unrecognized remote URL" in response.json()["detail"]

    def test_invalid_line_range(self, client):
        response = client.post(
            "/api/remotes/resolve",
            json={"remoteUrl": "git@github.com:owner/repo.git", "file": "a.py", "startLine": 0},
        )
        assert response.status_code == 400


class TestReloadEndpoint:
    """Tests for /api/remotes/reload endpoint."""

    def test_reload_adds_custom_remote(self, client):
        """Test reloaded config takes effect for later resolutions."""
        configs = [RemotesConfig(type="GitLab", domain="git.corp.com", name="Corp")]

        with patch("gitlinks.server.load_remotes_config", return_value=configs):
            response = client.post("/api/remotes/reload")

        assert response.status_code == 200
        assert response.json()["providers"] == 8

        response = client.post("/api/remotes/resolve", json={"remoteUrl": "https://git.corp.com/team/repo.git"})
        assert response.status_code == 200
        provider = response.json()["provider"]
        assert provider["key"] == "gitlab"
        assert provider["name"] == "Corp"
        assert provider["custom"] is True

    def test_reload_bad_config(self, client):
        with patch("gitlinks.server.load_remotes_config", side_effect=ValueError("broken")):
            response = client.post("/api/remotes/reload")
        assert response.status_code == 500
        assert response.json()["detail"] == "broken"

    def test_registry_created_lazily(self):
        """Test the registry is loaded from config on first use."""
        app.state.registry = None
        configs = [RemotesConfig(type="GitHub", domain="git.corp.com")]

        with patch("gitlinks.server.load_remotes_config", return_value=configs) as mock_load:
            response = TestClient(app).post(
                "/api/remotes/resolve", json={"remoteUrl": "git@git.corp.com:team/repo.git"}
            )

        assert response.status_code == 200
        assert response.json()["provider"]["name"] == "GitHub (git.corp.com)"
        mock_load.assert_called_once()
        app.state.registry = None
