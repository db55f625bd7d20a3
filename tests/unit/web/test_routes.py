"""
Tests des routes de l'API JSON.

L'application est construite avec un vrai Container (base SQLite
temporaire) dont le client OMDb est remplace par un mock.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from movielib.container import Container
from movielib.core.entities.catalog import CatalogEntry
from movielib.core.value_objects import ResolvedMetadata
from movielib.web.app import create_app


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def container(test_settings, mock_resolver) -> Container:
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.omdb_client.override(providers.Object(mock_resolver))
    return container


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    """Client de test; le bloc with execute le lifespan (creation des tables)."""
    with TestClient(create_app(container)) as client:
        yield client


def _configure(client: TestClient, root: Path) -> None:
    response = client.post("/api/settings", json={"libPath": str(root)})
    assert response.status_code == 200


# ============================================================================
# /api/settings
# ============================================================================


class TestSettingsRoutes:
    def test_get_when_not_configured(self, client: TestClient) -> None:
        response = client.get("/api/settings")

        assert response.status_code == 200
        assert response.json() == {"lib_path": None}

    def test_save_valid_directory(self, client: TestClient, tmp_path: Path) -> None:
        response = client.post("/api/settings", json={"libPath": str(tmp_path)})

        assert response.status_code == 200
        assert response.json() == {"message": "Settings saved successfully"}
        assert client.get("/api/settings").json() == {"lib_path": str(tmp_path)}

    def test_empty_path(self, client: TestClient) -> None:
        response = client.post("/api/settings", json={"libPath": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "LibPath cannot be empty"}

    def test_missing_field_is_empty_path(self, client: TestClient) -> None:
        response = client.post("/api/settings", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "LibPath cannot be empty"}

    def test_missing_directory(self, client: TestClient, tmp_path: Path) -> None:
        response = client.post("/api/settings", json={"libPath": str(tmp_path / "nope")})

        assert response.status_code == 400
        assert response.json() == {"error": "Directory does not exist"}

    def test_undecodable_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/settings",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Error decoding request body")


# ============================================================================
# /api/library
# ============================================================================


class TestLibraryRoutes:
    def test_list_requires_setup(self, client: TestClient) -> None:
        response = client.get("/api/library")

        assert response.status_code == 400
        assert response.json() == {"error": "Setup app first"}

    def test_first_listing_scans_directory(
        self, client: TestClient, make_library, mock_resolver
    ) -> None:
        root = make_library("The.Matrix.1999.1080p.mkv", "notes.txt")
        mock_resolver.resolve.side_effect = None
        mock_resolver.resolve.return_value = ResolvedMetadata(
            "The Matrix", 1999, "https://example.com/matrix.jpg"
        )
        _configure(client, root)

        response = client.get("/api/library")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 1
        assert body[0]["title"] == "The Matrix"
        assert body[0]["year"] == 1999
        assert body[0]["poster_url"] == "https://example.com/matrix.jpg"
        assert body[0]["source_filename"] == "The.Matrix.1999.1080p.mkv"
        assert isinstance(body[0]["id"], int)

    def test_listing_with_unreachable_omdb_keeps_guess(
        self, client: TestClient, make_library
    ) -> None:
        _configure(client, make_library("Inception [2010 bluray].mp4"))

        body = client.get("/api/library").json()

        assert [(e["title"], e["year"], e["poster_url"]) for e in body] == [
            ("Inception", 2010, "")
        ]

    def test_empty_directory_is_server_error(self, client: TestClient, make_library) -> None:
        root = make_library()
        _configure(client, root)

        response = client.get("/api/library")

        assert response.status_code == 500
        assert "directory is empty" in response.json()["error"]

    def test_rescan_requires_setup(self, client: TestClient) -> None:
        response = client.post("/api/library/rescan")

        assert response.status_code == 400
        assert response.json() == {"error": "No library path configured"}

    def test_rescan_adds_new_files(self, client: TestClient, make_library) -> None:
        root = make_library("Alien.1979.mkv")
        _configure(client, root)
        client.get("/api/library")
        (root / "Heat (1995).mkv").touch()

        response = client.post("/api/library/rescan")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Library rescanned successfully",
            "added": 1,
            "unresolved": 1,
        }
        assert len(client.get("/api/library").json()) == 2

    def test_rescan_missing_directory(
        self, client: TestClient, make_library
    ) -> None:
        root = make_library("Alien.1979.mkv")
        _configure(client, root)
        (root / "Alien.1979.mkv").unlink()
        root.rmdir()

        response = client.post("/api/library/rescan")

        assert response.status_code == 500
        assert "failed to read directory" in response.json()["error"]


# ============================================================================
# /api/movies/{id}/refresh
# ============================================================================


class TestRefreshRoute:
    def _insert(self, container: Container, **fields) -> CatalogEntry:
        return container.catalog_repository().insert(CatalogEntry(**fields))

    def test_unknown_movie(self, client: TestClient) -> None:
        response = client.post("/api/movies/999/refresh")

        assert response.status_code == 404
        assert response.json() == {"error": "Movie not found"}

    def test_non_numeric_id_is_not_found(self, client: TestClient) -> None:
        response = client.post("/api/movies/abc/refresh")

        assert response.status_code == 404
        assert response.json() == {"error": "Movie not found"}

    def test_refresh_success(self, client: TestClient, container, mock_resolver) -> None:
        entry = self._insert(container, title="Arrival", year=2016)
        mock_resolver.resolve.side_effect = None
        mock_resolver.resolve.return_value = ResolvedMetadata(
            "Arrival", 2016, "https://example.com/arrival.jpg"
        )

        response = client.post(f"/api/movies/{entry.id}/refresh")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == entry.id
        assert body["poster_url"] == "https://example.com/arrival.jpg"

    def test_refresh_resolver_failure(self, client: TestClient, container) -> None:
        entry = self._insert(container, title="Arrival", year=2016)

        response = client.post(f"/api/movies/{entry.id}/refresh")

        assert response.status_code == 502
        assert response.json() == {
            "error": "Failed to fetch OMDB info: connection refused"
        }
        stored = container.catalog_repository().get_by_id(entry.id)
        assert stored.poster_url == ""


# ============================================================================
# Middleware
# ============================================================================


class TestCors:
    def test_preflight_echoes_origin(self, client: TestClient) -> None:
        response = client.options(
            "/api/library",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
        assert response.headers["access-control-max-age"] == "300"

    def test_lifespan_closes_resolver(self, container, mock_resolver) -> None:
        with TestClient(create_app(container)):
            pass

        mock_resolver.close.assert_awaited_once()
