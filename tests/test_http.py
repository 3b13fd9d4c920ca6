"""
HTTP Adapter Tests
==================
Content negotiation and error mapping for the name endpoint.
"""
import pytest

from fastapi.testclient import TestClient

from cool_names.errors import LoadError, NoAdjectivesAvailable
from cool_names.http import accepts_html, create_app
from cool_names.word_types import Adjective, CoolName, Noun


class MockNameGenerator:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    def generate(self) -> CoolName:
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def client():
    generator = MockNameGenerator(result=CoolName(adjective=Adjective("brave"), noun=Noun("warrior")))
    return TestClient(create_app(generator))


@pytest.fixture
def failing_client():
    return TestClient(create_app(MockNameGenerator(error=NoAdjectivesAvailable())))


# ============================================================================
# NEGOTIATION
# ============================================================================

class TestAcceptsHtml:
    @pytest.mark.parametrize("accept", [
        "text/html",
        "TEXT/HTML",
        "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    ])
    def test_html_preferred(self, accept):
        assert accepts_html(accept) is True

    def test_html_whenever_listed(self):
        """Any non-zero q for text/html selects HTML, even when JSON ranks higher."""
        assert accepts_html("application/json;q=0.9, text/html;q=0.5") is True

    @pytest.mark.parametrize("accept", [
        None,
        "",
        "*/*",
        "application/json",
        "text/html;q=0",
        "text/html;q=abc",
        ";;;,,,",
    ])
    def test_json_default(self, accept):
        assert accepts_html(accept) is False


# ============================================================================
# SUCCESS
# ============================================================================

class TestGenerateName:
    def test_get_root_returns_cool_name(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "brave-warrior" in response.text

    def test_json_without_accept_header(self, client):
        response = client.get("/", headers={"Accept": ""})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"name": "brave-warrior"}

    def test_json_when_requested(self, client):
        response = client.get("/", headers={"Accept": "application/json"})

        assert response.json() == {"name": "brave-warrior"}

    def test_html_when_requested(self, client):
        response = client.get("/", headers={"Accept": "text/html"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<html" in response.text
        assert "brave-warrior" in response.text

    def test_api_alias_matches_root(self, client):
        response = client.get("/api/name", headers={"Accept": "application/json"})

        assert response.status_code == 200
        assert response.json() == {"name": "brave-warrior"}

    def test_vary_header(self, client):
        response = client.get("/")

        assert "Accept" in response.headers["vary"]

    def test_html_escapes_name(self):
        generator = MockNameGenerator(result=CoolName(adjective=Adjective("<b>"), noun=Noun("owl")))
        response = TestClient(create_app(generator)).get("/", headers={"Accept": "text/html"})

        assert "&lt;b&gt;-owl" in response.text
        assert "<b>-owl" not in response.text

    def test_post_not_allowed(self, client):
        response = client.post("/")

        assert response.status_code == 405


# ============================================================================
# ERRORS
# ============================================================================

class TestGenerateNameErrors:
    def test_json_error(self, failing_client):
        response = failing_client.get("/", headers={"Accept": "application/json"})

        assert response.status_code == 500
        assert response.json() == {"error": "No adjectives available"}

    def test_default_error_is_json(self, failing_client):
        response = failing_client.get("/")

        assert response.status_code == 500
        assert "error" in response.text

    def test_html_error(self, failing_client):
        response = failing_client.get("/api/name", headers={"Accept": "text/html"})

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/html")
        assert "No adjectives available" in response.text

    def test_load_error_message_surfaced(self):
        client = TestClient(create_app(MockNameGenerator(error=LoadError("disk gone"))))
        response = client.get("/")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to load words: disk gone"}
