"""
Tests des routes de l'API IMDb (TestClient FastAPI).

La facade d'extraction et les settings sont remplaces via
dependency_overrides : aucun navigateur n'est lance.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.core.entities.media import EpisodeRecord, SearchResultRecord, TitleRecord
from src.core.ports.scraper import IMediaScraper
from src.core.value_objects.content_type import ContentType
from src.web.app import app
from src.web.deps import get_scraper, get_settings

SHAWSHANK = TitleRecord(
    imdb_id="tt0111161",
    title="The Shawshank Redemption",
    original_title="The Shawshank Redemption",
    content_type=ContentType.MOVIE,
    year=1994,
    rating=9.3,
    genres=("Drama",),
    runtime=8520,
)


@pytest.fixture
def mock_scraper() -> MagicMock:
    scraper = MagicMock(spec=IMediaScraper)
    scraper.find_title = AsyncMock(return_value=SHAWSHANK)
    scraper.find_episodes = AsyncMock(return_value=[])
    scraper.search = AsyncMock(return_value=[])
    return scraper


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, api_key=None, default_language="en")


@pytest.fixture
def client(mock_scraper, settings):
    app.dependency_overrides[get_scraper] = lambda: mock_scraper
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestTitleRoute:
    """Tests pour GET /imdb/title/{imdb_id}."""

    def test_returns_title(self, client, mock_scraper):
        response = client.get("/imdb/title/tt0111161")

        assert response.status_code == 200
        data = response.json()
        assert data["imdbId"] == "tt0111161"
        assert data["type"] == "movie"
        assert data["year"] == 1994
        assert data["runtime"] == 8520
        mock_scraper.find_title.assert_awaited_once_with("tt0111161", "en", False)

    def test_language_and_episodes(self, client, mock_scraper):
        pilot = EpisodeRecord(
            imdb_id="tt0959621",
            series_imdb_id="tt0903747",
            title="Chute libre",
            series_title="Breaking Bad",
            season=1,
            number=1,
            release=date(2008, 1, 20),
            year=2008,
        )
        mock_scraper.find_title.return_value = TitleRecord(
            imdb_id="tt0903747",
            title="Breaking Bad",
            original_title="Breaking Bad",
            content_type=ContentType.TV_SERIES,
            year=2008,
            seasons=5,
            episodes=(pilot,),
        )

        response = client.get("/imdb/title/tt0903747", params={"language": "fr", "episodes": "true"})

        assert response.status_code == 200
        assert response.json()["episodes"][0]["release"] == "2008-01-20"
        mock_scraper.find_title.assert_awaited_once_with("tt0903747", "fr", True)

    def test_not_found(self, client, mock_scraper):
        """Une extraction sans resultat donne 404."""
        mock_scraper.find_title.return_value = None

        response = client.get("/imdb/title/tt0000000")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}


class TestSearchRoute:
    """Tests pour GET /imdb/search."""

    def test_filters(self, client, mock_scraper):
        mock_scraper.search.return_value = [
            SearchResultRecord(
                imdb_id="tt1375666",
                title="Inception",
                content_type=ContentType.MOVIE,
                rating=8.8,
                year=2010,
            )
        ]

        response = client.get(
            "/imdb/search", params={"title": "Inception", "type": "movie", "year": 2010}
        )

        assert response.status_code == 200
        assert response.json()[0]["imdbId"] == "tt1375666"
        mock_scraper.search.assert_awaited_once_with("Inception", "en", ContentType.MOVIE, 2010)

    def test_empty_results(self, client):
        response = client.get("/imdb/search", params={"title": "zzzzzz"})

        assert response.status_code == 200
        assert response.json() == []

    def test_title_is_required(self, client):
        assert client.get("/imdb/search").status_code == 422

    def test_invalid_type(self, client):
        response = client.get("/imdb/search", params={"title": "x", "type": "podcast"})
        assert response.status_code == 422


class TestApiKey:
    """Tests pour la verification de la cle API."""

    @pytest.fixture
    def secured(self, settings):
        settings.api_key = "secret"
        return settings

    def test_missing_key(self, client, secured):
        response = client.get("/imdb/title/tt0111161")

        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid API Key"}

    def test_wrong_key(self, client, secured):
        response = client.get("/imdb/title/tt0111161", headers={"X-API-KEY": "nope"})
        assert response.status_code == 401

    def test_header_key(self, client, secured):
        response = client.get("/imdb/title/tt0111161", headers={"X-API-KEY": "secret"})
        assert response.status_code == 200

    def test_query_key(self, client, secured):
        response = client.get("/imdb/search", params={"title": "x", "apikey": "secret"})
        assert response.status_code == 200
