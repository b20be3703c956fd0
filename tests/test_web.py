"""Tests for the Flask web surface."""

from __future__ import annotations

from pathlib import Path

import pytest
from flask.testing import FlaskClient

from ninep.settings import settings
from ninep.word_tree import WordTree
from web.app import create_app


@pytest.fixture
def client(small_tree: WordTree) -> FlaskClient:
    app = create_app(small_tree)
    app.config["TESTING"] = True
    return app.test_client()


class TestHealth:
    def test_reports_word_count(self, client: FlaskClient, small_words: list[str]) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.get_json() == {"status": "ok", "word_count": len(set(small_words))}

    def test_before_lazy_load(self) -> None:
        resp = create_app().test_client().get("/health")
        assert resp.get_json()["word_count"] is None


class TestSolve:
    def test_string_letters(self, client: FlaskClient) -> None:
        resp = client.post("/solve", json={"letters": "ZOO"})
        assert resp.status_code == 200
        assert resp.get_json() == {"letters": "zoo", "words": ["zoo", "oo"], "word_count": 2}

    def test_list_letters(self, client: FlaskClient) -> None:
        resp = client.post("/solve", json={"letters": ["c", "a", "t", "s"], "min_length": 4})
        assert resp.get_json()["words"] == ["acts", "cats"]

    def test_missing_letters(self, client: FlaskClient) -> None:
        resp = client.post("/solve", json={})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "No letters provided"

    def test_non_json_body(self, client: FlaskClient) -> None:
        resp = client.post("/solve", data="cats")
        assert resp.status_code == 400

    def test_invalid_letters(self, client: FlaskClient) -> None:
        resp = client.post("/solve", json={"letters": "ab1"})
        assert resp.status_code == 400
        body = resp.get_json()
        assert body["char"] == "1"
        assert body["position"] == 2

    def test_bad_min_length(self, client: FlaskClient) -> None:
        resp = client.post("/solve", json={"letters": "cats", "min_length": "long"})
        assert resp.status_code == 400

    def test_max_results(self, client: FlaskClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "MAX_RESULTS", 2)
        resp = client.post("/solve", json={"letters": "cats"})
        assert resp.get_json()["words"] == ["acts", "cats"]

    def test_lazy_loads_configured_word_list(self, word_list_file: Path,
                                             monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "WORD_LIST_PATH", word_list_file)
        client = create_app().test_client()
        resp = client.post("/solve", json={"letters": "dog"})
        assert sorted(resp.get_json()["words"]) == ["dog", "god"]
        assert client.get("/health").get_json()["word_count"] is not None

    def test_non_object_json(self, client: FlaskClient) -> None:
        resp = client.post("/solve", json=["c", "a", "t"])
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Expected a JSON object"

    def test_json_string_body(self, client: FlaskClient) -> None:
        resp = client.post("/solve", json="cats")
        assert resp.status_code == 400

    def test_missing_word_list(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "WORD_LIST_PATH", tmp_path / "missing.txt")
        resp = create_app().test_client().post("/solve", json={"letters": "cats"})
        assert resp.status_code == 503
        assert "Word list not found" in resp.get_json()["error"]
