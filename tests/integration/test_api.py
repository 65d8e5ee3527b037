"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient
from markdown_locator.main import app
from markdown_locator.engine_instance import search_engine


class TestAPI:
    """Integration tests for API endpoints."""

    @pytest.fixture
    def docs(self, tmp_path):
        """A small documentation tree."""
        (tmp_path / "guides").mkdir()
        (tmp_path / "guides" / "install.md").write_text(
            "# Install\n\nRun the installer.\nThen open the world map.\n",
            encoding="utf-8"
        )
        (tmp_path / "README.md").write_text("# Readme\n\nHello world\n", encoding="utf-8")
        return tmp_path

    @pytest.fixture
    def client(self, docs):
        """Create a test client with files discovered from the sample tree."""
        with TestClient(app) as client:
            search_engine.load_files(str(docs))
            search_engine.reset_stats()
            yield client
        search_engine.clear()

    @pytest.fixture
    def words(self):
        return [
            {"content": "Hello", "kind": "bold"},
            {"content": "hello", "kind": "white"},
            {"content": " ", "kind": "white"},
            {"content": "world", "kind": "normal"},
            {"content": "World", "kind": "bold_italic"},
        ]

    def test_root_endpoint(self, client):
        """Test the root endpoint."""
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Markdown Locator"
        assert data["version"] == "1.0.0"
        assert data["status"] == "running"

    def test_api_info_endpoint(self, client):
        """Test the API info endpoint."""
        response = client.get("/api")
        assert response.status_code == 200

        data = response.json()
        assert "endpoints" in data
        assert "features" in data
        assert "limits" in data

    def test_search_text(self, client):
        """Test exact text search."""
        response = client.post(
            "/api/v1/search/text",
            json={"query": "world", "text": "Hello, world!"}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["offsets"] == [7]
        assert data["exact_match"] is True
        assert data["precision"] == 0

    def test_search_text_backoff(self, client):
        """Test one-typo backoff over the API."""
        response = client.post(
            "/api/v1/search/text",
            json={"query": "wrold", "text": "Hello, world!"}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["offsets"] == [7]
        assert data["exact_match"] is False
        assert data["precision"] == 1

    def test_search_text_explicit_precision(self, client):
        """Test that an explicit precision is honoured."""
        response = client.post(
            "/api/v1/search/text",
            json={"query": "wrold", "text": "Hello, world!", "precision": 0}
        )
        assert response.status_code == 200
        assert response.json()["offsets"] == []

    def test_search_text_negative_precision(self, client):
        """Test validation of the precision."""
        response = client.post(
            "/api/v1/search/text",
            json={"query": "world", "text": "Hello, world!", "precision": -1}
        )
        assert response.status_code == 422

    def test_search_text_empty_query(self, client):
        """Test validation of the query."""
        response = client.post("/api/v1/search/text", json={"query": "", "text": "Hello"})
        assert response.status_code == 422

    def test_search_text_query_too_long(self, client):
        """Test the query length limit."""
        response = client.post(
            "/api/v1/search/text",
            json={"query": "a" * 1000, "text": "Hello"}
        )
        assert response.status_code == 400

    def test_search_lines(self, client):
        """Test line search with offsets."""
        response = client.post(
            "/api/v1/search/lines",
            json={
                "query": "world",
                "lines": ["Hello", "hello", "world", "hello world"],
                "with_offsets": True
            }
        )
        assert response.status_code == 200

        data = response.json()
        assert data["lines"] == [2, 3]
        assert data["matches"] == [[2, 0], [3, 6]]

    def test_search_words(self, client, words):
        """Test token search without marking."""
        response = client.post(
            "/api/v1/search/words",
            json={"query": "hello world", "words": words}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["indices"] == [1, 2, 3]
        assert data["total_results"] == 1
        assert data["words"] is None

    def test_search_words_mark(self, client, words):
        """Test token search with marking."""
        response = client.post(
            "/api/v1/search/words",
            json={"query": "world", "words": words, "mark": True}
        )
        assert response.status_code == 200

        kinds = [word["kind"] for word in response.json()["words"]]
        assert kinds == ["bold", "white", "white", "selected", "selected"]

    def test_search_words_blank_query(self, client, words):
        """Test that a query without words matches nothing."""
        response = client.post("/api/v1/search/words", json={"query": "   ", "words": words})
        assert response.status_code == 200

        data = response.json()
        assert data["span_length"] == 0
        assert data["starts"] == []
        assert data["total_results"] == 0

    def test_search_words_empty_query_mark(self, client, words):
        """Test that marking with an empty query leaves every word alone."""
        response = client.post(
            "/api/v1/search/words",
            json={"query": "", "words": words, "mark": True}
        )
        assert response.status_code == 200

        kinds = [word["kind"] for word in response.json()["words"]]
        assert "selected" not in kinds

    def test_resolve_heading(self, client):
        """Test anchor resolution."""
        response = client.post(
            "/api/v1/headings/resolve",
            json={
                "anchor": "#hello-world",
                "headings": [
                    [[{"content": "Intro"}]],
                    [[{"content": "Hello"}, {"content": " "}, {"content": " "}, {"content": "World"}]],
                ]
            }
        )
        assert response.status_code == 200

        data = response.json()
        assert data["found"] is True
        assert data["heading_index"] == 1
        assert data["anchor"] == "hello-world"

    def test_list_files(self, client):
        """Test listing every discovered file."""
        response = client.get("/api/v1/files")
        assert response.status_code == 200

        data = response.json()
        assert data["total_results"] == 2
        assert sorted(f["name"] for f in data["files"]) == ["README.md", "install.md"]

    def test_filter_files(self, client):
        """Test filtering files by path."""
        response = client.get("/api/v1/files", params={"query": "guides"})
        assert response.status_code == 200

        data = response.json()
        assert [f["name"] for f in data["files"]] == ["install.md"]

    def test_filter_files_no_match(self, client):
        """Test a filter no path contains."""
        response = client.get("/api/v1/files", params={"query": "xyz"})
        assert response.status_code == 200
        assert response.json()["files"] == []

    def test_filter_files_max_results(self, client):
        """Test limiting the returned files."""
        response = client.get("/api/v1/files", params={"max_results": 1})
        assert response.status_code == 200
        assert len(response.json()["files"]) == 1

    def test_reload_files(self, client, docs):
        """Test rediscovering files."""
        (docs / "new.md").write_text("# New\n", encoding="utf-8")

        response = client.post("/api/v1/files/reload")
        assert response.status_code == 200
        assert response.json()["total_files"] == 3

    def test_search_file(self, client, docs):
        """Test searching inside a discovered document."""
        path = str(docs / "guides" / "install.md")
        response = client.get("/api/v1/files/search", params={"path": path, "query": "wrold"})
        assert response.status_code == 200

        data = response.json()
        assert data["lines"] == [3]
        assert data["precision"] == 1

    def test_search_unknown_file(self, client, docs):
        """Test searching a file that was not discovered."""
        response = client.get(
            "/api/v1/files/search",
            params={"path": str(docs / "missing.md"), "query": "world"}
        )
        assert response.status_code == 404

    def test_health_check(self, client):
        """Test health check endpoint."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["dependencies"]["fuzzy_matcher"] == "healthy"
        assert data["dependencies"]["word_matcher"] == "healthy"

    def test_readiness_check(self, client):
        """Test readiness check endpoint."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_liveness_check(self, client):
        """Test liveness check endpoint."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_service_status(self, client):
        """Test service status endpoint."""
        response = client.get("/api/v1/status")
        assert response.status_code == 200

        data = response.json()
        assert data["service"]["name"] == "Markdown Locator"
        assert data["statistics"]["file_stats"]["total_files"] == 2

    def test_metrics(self, client):
        """Test metrics endpoint."""
        client.post("/api/v1/search/text", json={"query": "world", "text": "Hello, world!"})
        client.post("/api/v1/search/text", json={"query": "planet", "text": "Hello, world!"})

        response = client.get("/api/v1/metrics")
        assert response.status_code == 200

        data = response.json()
        assert data["total_queries"] == 2
        assert data["exact_match_rate"] == 0.5
        assert data["no_match_rate"] == 0.5
        assert data["memory_usage_mb"] > 0

    def test_reset_metrics(self, client):
        """Test resetting statistics."""
        client.post("/api/v1/search/text", json={"query": "world", "text": "Hello, world!"})

        response = client.post("/api/v1/metrics/reset")
        assert response.status_code == 200
        assert client.get("/api/v1/metrics").json()["total_queries"] == 0
        assert client.get("/api/v1/files").json()["total_files"] == 2
