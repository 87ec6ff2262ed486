"""API tests for theme and genre catalog endpoints."""

import pytest


@pytest.mark.api
class TestThemes:
    """Tests for /themes endpoints."""

    def test_list_themes(self, client):
        response = client.get("/themes/")

        assert response.status_code == 200
        themes = response.json()
        assert len(themes) == 8
        assert themes[0]["id"] == "forest"
        assert set(themes[0]) == {
            "id", "name", "description", "color", "icon", "cardBackground",
            "imageUrl", "searchQueries", "isFallback",
        }
        assert not any(theme["isFallback"] for theme in themes)

    def test_get_theme(self, client):
        response = client.get("/themes/underwater")

        assert response.status_code == 200
        assert response.json()["id"] == "underwater"
        assert response.json()["isFallback"] is False

    def test_theme_carries_image_data(self, client):
        data = client.get("/themes/space").json()

        assert data["imageUrl"] == "https://images.unsplash.com/photo-1446776877081-d282a0f896e2?w=400&h=300&fit=crop"
        assert data["searchQueries"] == ["space exploration", "cosmic adventure", "galaxy stars"]

    def test_unknown_theme_returns_default(self, client):
        """Unknown ids never 404; they resolve to the default theme."""
        response = client.get("/themes/jungle")

        assert response.status_code == 200
        assert response.json()["id"] == "forest"
        assert response.json()["isFallback"] is True


@pytest.mark.api
class TestGenres:
    """Tests for /genres endpoint."""

    def test_list_genres(self, client):
        response = client.get("/genres/")

        assert response.status_code == 200
        genres = response.json()
        assert [genre["id"] for genre in genres] == [
            "superhero", "adventure", "fantasy", "fairy-tale", "space",
        ]
        assert all(genre["maxPages"] == 10 for genre in genres)
        assert not any(genre["isFallback"] for genre in genres)

    def test_get_genre(self, client):
        response = client.get("/genres/fairy_tale")

        assert response.status_code == 200
        assert response.json()["id"] == "fairy-tale"
        assert response.json()["isFallback"] is False

    def test_unknown_genre_returns_default(self, client):
        response = client.get("/genres/medieval")

        assert response.status_code == 200
        assert response.json()["id"] == "superhero"
        assert response.json()["isFallback"] is True
