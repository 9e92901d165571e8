"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from sqlens.app.server import create_app
from sqlens.config import LimitsConfig, SqlensConfig


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(SqlensConfig()))


class TestAnalyzeEndpoint:
    """Tests for POST /api/sql/analyze."""

    def test_success(self, client: TestClient) -> None:
        response = client.post(
            "/api/sql/analyze",
            json={"sql": "SELECT * FROM orders o JOIN customers c ON o.customer_id = c.id"},
        )

        assert response.status_code == 200
        data = response.json()
        assert [n["id"] for n in data["nodes"]] == ["o", "c"]
        assert data["edges"] == [
            {
                "id": "o__c",
                "sourceId": "o",
                "targetId": "c",
                "joinType": "INNER",
                "condition": "o.customer_id = c.id",
            }
        ]

    def test_parse_error_is_400(self, client: TestClient) -> None:
        response = client.post("/api/sql/analyze", json={"sql": "SELECT * FORM orders"})

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "PARSE_ERROR"
        assert data["line"] >= 1

    def test_deeply_nested_query_is_400(self, client: TestClient) -> None:
        """Test that nesting past the parser's recursion limit is a client error."""
        sql = "SELECT " + "(" * 500 + "1" + ")" * 500
        response = client.post("/api/sql/analyze", json={"sql": sql})

        assert response.status_code == 400
        assert response.json()["code"] == "PARSE_ERROR"

    def test_missing_sql_is_empty_input(self, client: TestClient) -> None:
        response = client.post("/api/sql/analyze", json={})

        assert response.status_code == 400
        assert response.json()["code"] == "EMPTY_INPUT"

    def test_complexity_warning(self) -> None:
        config = SqlensConfig(limits=LimitsConfig(complexity_threshold=1))
        client = TestClient(create_app(config))
        response = client.post(
            "/api/sql/analyze",
            json={"sql": "SELECT * FROM a JOIN b ON a.id = b.a_id"},
        )

        assert response.status_code == 200
        assert "complex" in response.json()["warning"]


class TestHealth:
    """Tests for GET /api/health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
