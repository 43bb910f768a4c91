"""
Smoke tests for the TMDb Images API.

These tests run against a mocked TMDb session; no network access is needed.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from api import deps
from api.main import app
from tmdb_images.settings import Settings

FIXTURES = Path(__file__).resolve().parent / "fixtures" / "tmdb"
BASE = "https://image.tmdb.org/t/p/original"


def _load_fixture(name: str) -> dict:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


def _create_mock_response(payload, status_code: int = 200):
    """Create a mock requests response returning `payload` as JSON."""
    mock_resp = MagicMock()
    mock_resp.status_code = status_code
    mock_resp.json.return_value = payload
    mock_resp.text = json.dumps(payload)
    return mock_resp


@pytest.fixture
def mock_session():
    """Create a mock requests session; tests queue responses via `get.side_effect`."""
    session = MagicMock()
    session.get.side_effect = []
    return session


def _make_client(mock_session, settings: Settings):
    app.dependency_overrides[deps.get_settings] = lambda: settings
    app.dependency_overrides[deps.get_tmdb_session] = lambda: mock_session
    return TestClient(app)


@pytest.fixture
def client(mock_session):
    """Create a test client with a configured API key and mocked TMDb session."""
    yield _make_client(mock_session, Settings(tmdb_api_key="test-key"))
    app.dependency_overrides.clear()


@pytest.fixture
def client_without_key(mock_session):
    yield _make_client(mock_session, Settings(tmdb_api_key=None))
    app.dependency_overrides.clear()


class TestHealthEndpoints:
    """Test health check endpoints."""

    def test_root_returns_ok(self, client: TestClient):
        """Root endpoint returns the fixed acknowledgement."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"ok": True, "service": "tmdb-images-api", "message": "Up & running"}

    def test_health_returns_healthy(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestImagesEndpoint:
    """Test /images with a mocked TMDb session."""

    def test_marry_my_husband_groups_images(self, client: TestClient, mock_session: MagicMock):
        mock_session.get.side_effect = [
            _create_mock_response(_load_fixture("search_multi_marry_my_husband.json")),
            _create_mock_response(_load_fixture("tv_images_marry_my_husband.json")),
        ]

        response = client.get("/images", params={"query": "Marry My Husband"})

        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "Marry My Husband"
        assert data["detected"] == {"media_type": "tv", "id": 219246, "title": "Marry My Husband"}
        assert data["backdrops"] == {"en": [f"{BASE}/backdrop_en.jpg"], "hi": [], "null": []}
        assert list(data["posters"]) == ["en", "hi", "ta", "te", "ja", "ko"]
        assert data["posters"]["ta"] == [f"{BASE}/poster_ta.jpg"]
        assert list(data["logos"]) == ["en", "null"]
        assert all(len(urls) == 1 for urls in data["logos"].values())
        assert data["skipped"] == ["Posters (en, hi, te, ja, ko)"]
        assert data["formatted"].startswith("🎬 Results for Marry My Husband (TV)")

    def test_query_is_url_decoded_and_trimmed(self, client: TestClient, mock_session: MagicMock):
        mock_session.get.side_effect = [_create_mock_response(_load_fixture("search_multi_empty.json"))]

        client.get("/images?query=%20%20Marry%20My%20Husband%20")

        _, kwargs = mock_session.get.call_args
        assert kwargs["params"]["query"] == "Marry My Husband"

    def test_missing_query_returns_400(self, client: TestClient, mock_session: MagicMock):
        response = client.get("/images")
        assert response.status_code == 400
        assert response.json() == {"error": "query param is required"}
        mock_session.get.assert_not_called()

    def test_blank_query_returns_400(self, client: TestClient, mock_session: MagicMock):
        response = client.get("/images", params={"query": "   "})
        assert response.status_code == 400
        mock_session.get.assert_not_called()

    def test_missing_api_key_returns_500(self, client_without_key: TestClient, mock_session: MagicMock):
        response = client_without_key.get("/images", params={"query": "Heat"})
        assert response.status_code == 500
        assert response.json() == {"error": "TMDB_API_KEY missing in environment variables"}
        mock_session.get.assert_not_called()

    def test_no_results_returns_404(self, client: TestClient, mock_session: MagicMock):
        mock_session.get.side_effect = [_create_mock_response(_load_fixture("search_multi_empty.json"))]

        response = client.get("/images", params={"query": "qwertyuiop"})

        assert response.status_code == 404
        assert response.json() == {"error": "No result found"}
        assert mock_session.get.call_count == 1

    def test_people_only_results_return_404(self, client: TestClient, mock_session: MagicMock):
        mock_session.get.side_effect = [_create_mock_response(_load_fixture("search_multi_people_only.json"))]

        response = client.get("/images", params={"query": "brad pitt"})

        assert response.status_code == 404
        assert "Try a more specific query" in response.json()["error"]
        assert mock_session.get.call_count == 1

    def test_upstream_error_returns_500_with_details(self, client: TestClient, mock_session: MagicMock):
        detail = {"status_code": 7, "status_message": "Invalid API key: You must be granted a valid key.", "success": False}
        mock_session.get.side_effect = [_create_mock_response(detail, status_code=401)]

        response = client.get("/images", params={"query": "Heat"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error fetching data", "details": detail}

    def test_network_error_returns_500_with_message(self, client: TestClient, mock_session: MagicMock):
        mock_session.get.side_effect = [requests.ConnectionError("Name or service not known")]

        response = client.get("/images", params={"query": "Heat"})

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Error fetching data"
        assert "Name or service not known" in data["details"]


class TestCORSConfiguration:
    """Test CORS is properly configured."""

    def test_cors_headers_present(self, client: TestClient):
        """CORS headers are present in response."""
        response = client.options(
            "/images",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers
