"""API integration tests for the search endpoint."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def project(test_root: Path) -> Path:
    (test_root / "src").mkdir()
    (test_root / "src" / "server.js").write_text("app.listen(3000);\n// FIXME port\n")
    (test_root / "src" / "tool.py").write_text("PORT = 3000\n")
    (test_root / "notes.md").write_text("nothing here\n")
    return test_root


@pytest.mark.integration
class TestSearchAPI:
    """Test GET /api/v1/search."""

    def test_search_content(self, client: TestClient, project: Path) -> None:
        response = client.get("/api/v1/search", params={"q": "3000"})

        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "3000"
        assert data["searchPath"] == ""
        assert data["totalResults"] == 2
        assert [hit["relativePath"] for hit in data["results"]] == ["src/server.js", "src/tool.py"]

        server = data["results"][0]
        assert server["kind"] == "file"
        assert server["languageTag"] == "javascript"
        assert server["filenameMatched"] is False
        assert server["contentMatches"] == [
            {"lineNumber": 1, "lineText": "app.listen(3000);", "matchedSubstring": "3000"}
        ]

    def test_search_type_filter(self, client: TestClient, project: Path) -> None:
        response = client.get("/api/v1/search", params={"q": "port", "types": "python, markdown"})

        assert [hit["name"] for hit in response.json()["results"]] == ["tool.py"]

    def test_search_case_sensitive(self, client: TestClient, project: Path) -> None:
        response = client.get("/api/v1/search", params={"q": "port", "case": "true"})

        assert [hit["name"] for hit in response.json()["results"]] == ["server.js"]

    def test_search_directory_name(self, client: TestClient, project: Path) -> None:
        response = client.get("/api/v1/search", params={"q": "^src$"})

        (hit,) = response.json()["results"]
        assert hit["kind"] == "directory"
        assert hit["contentMatches"] is None

    def test_search_subdirectory(self, client: TestClient, project: Path) -> None:
        response = client.get("/api/v1/search", params={"q": "nothing", "path": "src"})

        assert response.status_code == 200
        assert response.json()["results"] == []

    def test_search_requires_query(self, client: TestClient) -> None:
        response = client.get("/api/v1/search")

        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "invalid_argument"

    def test_search_invalid_pattern(self, client: TestClient) -> None:
        response = client.get("/api/v1/search", params={"q": "(unclosed"})

        assert response.status_code == 400

    def test_search_traversal_forbidden(self, client: TestClient) -> None:
        response = client.get("/api/v1/search", params={"q": "root", "path": "../.."})

        assert response.status_code == 403
