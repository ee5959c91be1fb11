"""Tests for the charge, judge and search endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from charges import repository as charges_repository
from core import db
from judges import repository as judges_repository
from search import repository as search_repository
from search.repository import ENTITIES, build_search_query

CHARGE_ROWS = [
    {"name": "Burglary", "charge_id": 4, "severity": 3},
    {"name": "Retail Theft", "charge_id": 9, "severity": None},
]


class TestCharges:
    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.get("/api/charges")
        assert response.status_code == 401

    def test_lists_charges(
        self, client: TestClient, auth_headers: dict, monkeypatch: pytest.MonkeyPatch, returns
    ) -> None:
        monkeypatch.setattr(charges_repository, "list_charges", returns(CHARGE_ROWS))
        response = client.get("/api/charges", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == [
            {"name": "Burglary", "charge_id": 4, "severity": 3},
            {"name": "Retail Theft", "charge_id": 9, "severity": None},
        ]

    def test_token_cookie_is_accepted(
        self, client: TestClient, token: str, monkeypatch: pytest.MonkeyPatch, returns
    ) -> None:
        monkeypatch.setattr(charges_repository, "list_charges", returns([]))
        client.cookies.set("token", token)
        assert client.get("/api/charges").status_code == 200

    def test_database_failure(
        self, client: TestClient, auth_headers: dict, monkeypatch: pytest.MonkeyPatch, raises
    ) -> None:
        monkeypatch.setattr(
            charges_repository, "list_charges", raises(db.DatabaseError("Database query failed"))
        )
        response = client.get("/api/charges", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch charges"}

    def test_paginated(
        self, client: TestClient, auth_headers: dict, monkeypatch: pytest.MonkeyPatch, returns
    ) -> None:
        monkeypatch.setattr(charges_repository, "search_charges", returns(CHARGE_ROWS[:1]))
        monkeypatch.setattr(charges_repository, "count_charges", returns(2))
        response = client.get("/api/charges?limit=1&offset=0&search=bur", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"charges": [CHARGE_ROWS[0]], "total": 2}

    def test_invalid_pagination(self, client: TestClient, auth_headers: dict) -> None:
        response = client.get("/api/charges?limit=0", headers=auth_headers)
        assert response.status_code == 400

    def test_charge_by_id_not_found(
        self, client: TestClient, auth_headers: dict, monkeypatch: pytest.MonkeyPatch, returns
    ) -> None:
        monkeypatch.setattr(charges_repository, "get_charge", returns(None))
        response = client.get("/api/charge?chargeId=77", headers=auth_headers)
        assert response.status_code == 404


@pytest.fixture
def sql_calls(monkeypatch: pytest.MonkeyPatch) -> list:
    """Record (sql, args) for every query instead of running it."""
    calls = []

    async def fetch_all(sql: str, *args) -> list[dict]:
        calls.append((sql, args))
        return []

    async def fetch_one(sql: str, *args) -> dict:
        calls.append((sql, args))
        return {"total": 0}

    monkeypatch.setattr(db, "fetch_all", fetch_all)
    monkeypatch.setattr(db, "fetch_one", fetch_one)
    return calls


def test_escape_like() -> None:
    assert db.escape_like("50%_off") == "50\\%\\_off"
    assert db.escape_like("back\\slash") == "back\\\\slash"
    assert db.escape_like("Retail Theft") == "Retail Theft"


class TestChargeQueries:
    def test_catalogue_queries_skip_retired_charges(self, sql_calls: list) -> None:
        asyncio.run(charges_repository.list_charges())
        asyncio.run(charges_repository.search_charges(search="theft", limit=10, offset=0))
        asyncio.run(charges_repository.count_charges(search="theft"))
        asyncio.run(charges_repository.get_charge(9))

        assert len(sql_calls) == 4
        for sql, _ in sql_calls:
            assert "is_active = 1" in sql

    def test_lookup_can_include_retired_charges(self, sql_calls: list) -> None:
        asyncio.run(charges_repository.get_charge(9, active_only=False))

        sql, args = sql_calls[0]
        assert "is_active" not in sql
        assert args == (9,)

    def test_search_terms_match_literally(self, sql_calls: list) -> None:
        asyncio.run(charges_repository.search_charges(search=" 100% ", limit=10, offset=0))
        asyncio.run(charges_repository.count_charges(search="a_b"))

        assert sql_calls[0][1] == ("100\\%", "100\\%", 10, 0)
        assert sql_calls[1][1] == ("a\\_b", "a\\_b")

    def test_charge_endpoints_scope(
        self, client: TestClient, auth_headers: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        seen = []

        async def get_charge(charge_id: int, *, active_only: bool = True) -> dict:
            seen.append(active_only)
            return CHARGE_ROWS[0]

        monkeypatch.setattr(charges_repository, "get_charge", get_charge)
        assert client.get("/api/charges?chargeId=4", headers=auth_headers).status_code == 200
        assert client.get("/api/charge?chargeId=4", headers=auth_headers).status_code == 200
        assert seen == [True, False]


class TestJudges:
    def test_lists_judges(
        self, client: TestClient, auth_headers: dict, monkeypatch: pytest.MonkeyPatch, returns
    ) -> None:
        monkeypatch.setattr(judges_repository, "list_judges", returns([{"id": 2, "name": " Ada Park "}]))
        response = client.get("/api/judges", headers=auth_headers)
        assert response.json() == [{"id": 2, "name": "Ada Park"}]

    def test_database_failure(
        self, client: TestClient, auth_headers: dict, monkeypatch: pytest.MonkeyPatch, raises
    ) -> None:
        monkeypatch.setattr(judges_repository, "list_judges", raises(db.DatabaseError("boom")))
        response = client.get("/api/judges", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"error": "Error retrieving judge data"}


    def test_search_terms_match_literally(self, sql_calls: list) -> None:
        asyncio.run(judges_repository.search_judges(search="o'_", limit=5, offset=0))
        asyncio.run(judges_repository.count_judges(search="%"))

        assert sql_calls[0][1] == ("o'\\_",) * 4 + (5, 0)
        assert sql_calls[1][1] == ("\\%",) * 4

class TestSearchQuery:
    def test_like_term_is_escaped(self) -> None:
        _, params = build_search_query(
            ENTITIES["Charges"],
            term="a_",
            selected_category=None,
            selected_id=None,
            limit=20,
            offset=0,
        )
        assert params[0] == "%a\\_%"

    def test_short_term_uses_like_and_pins_selection(self) -> None:
        sql, params = build_search_query(
            ENTITIES["Judges"],
            term="Pa",
            selected_category="Courts",
            selected_id="4",
            limit=20,
            offset=0,
        )
        assert params == ["%Pa%", "%Pa%", "%Pa%", 4, 20, 0]
        assert "s.judge_id = j.judge_id" in sql
        assert "s.court_id = %s" in sql
        assert "s.charge_id = 0" in sql
        assert "s.trial_category = 'any'" in sql

    def test_long_term_uses_fulltext(self) -> None:
        sql, params = build_search_query(
            ENTITIES["Courts"],
            term="Lake",
            selected_category=None,
            selected_id=None,
            limit=10,
            offset=30,
        )
        assert params == ["Lake", 10, 30]
        assert "MATCH(c.name) AGAINST(%s IN NATURAL LANGUAGE MODE)" in sql
        assert "s.court_id = c.id" in sql
        assert "s.judge_id = 0" in sql

    def test_selection_on_searched_key_is_ignored(self) -> None:
        sql, params = build_search_query(
            ENTITIES["Charges"],
            term="",
            selected_category="Charge Groups",
            selected_id="12",
            limit=20,
            offset=0,
        )
        assert params == [20, 0]
        assert "c.type = 'charge'" in sql

    def test_trial_category_selection_is_passed_as_text(self) -> None:
        _, params = build_search_query(
            ENTITIES["Courts"],
            term="",
            selected_category="Trial Category",
            selected_id="jury",
            limit=20,
            offset=0,
        )
        assert params == ["jury", 20, 0]


class TestSearchEndpoint:
    def test_invalid_category(self, client: TestClient, auth_headers: dict) -> None:
        response = client.get("/api/search?searchCategory=Planets", headers=auth_headers)
        assert response.status_code == 400

    def test_invalid_selected_id(self, client: TestClient, auth_headers: dict) -> None:
        response = client.get(
            "/api/search?searchCategory=Judges&selectedCategory=Courts&selectedId=abc",
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_results(
        self, client: TestClient, auth_headers: dict, monkeypatch: pytest.MonkeyPatch, returns
    ) -> None:
        rows = [{"id": 5, "name": "Lake County Court", "total_case_dispositions": 1200}]
        monkeypatch.setattr(search_repository, "search", returns(rows))
        response = client.get(
            "/api/search?searchCategory=Courts&searchTerm=lake",
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json() == rows
