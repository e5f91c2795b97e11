import json

import pytest
from fastapi.testclient import TestClient

from marshians_fn import config
from web_app import app as app_module
from web_app.app import app, get_dictionary

PUZZLE = "120400586060201403040096000090000014081000360430000070000720030608903040372008051"
SOLUTION = "129437586867251493543896127795362814281574369436189275914725638658913742372648951"


@pytest.fixture
def client():
    app.dependency_overrides[get_dictionary] = lambda: frozenset({"cat", "at"})
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_sudoku_solver(client):
    res = client.post("/api/sudoku-solver", content=PUZZLE)
    assert res.status_code == 200
    assert res.json() == {"original": PUZZLE, "solution": SOLUTION}


def test_sudoku_solver_invalid_board(client):
    res = client.post("/api/sudoku-solver", content="123")
    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid board: string must be exactly 81 characters"


def test_sudoku_solver_unsolvable(client):
    res = client.post("/api/sudoku-solver", content="012345678" + "900000000" + "0" * 63)
    assert res.status_code == 400
    assert res.json()["detail"] == "board is not solvable"


def test_letters_to_words(client):
    res = client.post("/api/letters-to-words", json={"letters": "cat", "min": 2})
    assert res.status_code == 200
    assert res.json() == ["at", "cat"]


def test_letters_to_words_default_min(client):
    res = client.post("/api/letters-to-words", json={"letters": "cat"})
    assert res.status_code == 200
    assert res.json() == ["cat"]


@pytest.mark.parametrize(
    "body",
    [
        {"letters": "cat", "min": -1},
        {"letters": "a" * (config.MAX_LETTERS + 1), "min": 2},
        {"min": 2},
    ],
)
def test_letters_to_words_rejects_bad_request(client, body):
    res = client.post("/api/letters-to-words", json=body)
    assert res.status_code == 422


def test_letters_to_words_loads_dictionary(tmp_path, monkeypatch):
    p = tmp_path / "words.txt"
    p.write_text("tac\nact\n", encoding="utf-8")
    monkeypatch.setattr(config, "DICTIONARY_PATH", str(p))
    monkeypatch.setattr(app_module, "_dictionary", None)

    res = TestClient(app).post("/api/letters-to-words", json={"letters": "cat", "min": 3})
    assert res.status_code == 200
    assert res.json() == ["act", "tac"]


def test_letters_to_words_without_dictionary(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DICTIONARY_PATH", str(tmp_path / "missing.txt"))
    monkeypatch.setattr(app_module, "_dictionary", None)

    res = TestClient(app).post("/api/letters-to-words", json={"letters": "cat", "min": 3})
    assert res.status_code == 503


def test_letters_to_words_plain_text_body(client):
    res = client.post(
        "/api/letters-to-words",
        content=json.dumps({"letters": "cat", "min": 2}),
        headers={"Content-Type": "text/plain;charset=UTF-8"},
    )
    assert res.status_code == 200
    assert res.json() == ["at", "cat"]


def test_letters_to_words_malformed_json(client):
    res = client.post("/api/letters-to-words", content="not json")
    assert res.status_code == 422


@pytest.mark.parametrize(
    "name, data",
    [
        ("words.csv", b"text\ncat\n"),
        ("words.txt", b"\xff\xfe\xfa\n"),
    ],
)
def test_letters_to_words_unreadable_dictionary(tmp_path, monkeypatch, name, data):
    p = tmp_path / name
    p.write_bytes(data)
    monkeypatch.setattr(config, "DICTIONARY_PATH", str(p))
    monkeypatch.setattr(app_module, "_dictionary", None)

    res = TestClient(app).post("/api/letters-to-words", json={"letters": "cat", "min": 3})
    assert res.status_code == 503


def test_startup_survives_unreadable_dictionary(tmp_path, monkeypatch):
    p = tmp_path / "words.csv"
    p.write_text("text\ncat\n", encoding="utf-8")
    monkeypatch.setattr(config, "DICTIONARY_PATH", str(p))
    monkeypatch.setattr(app_module, "_dictionary", None)

    with TestClient(app) as c:
        assert c.get("/health").json() == {"ok": True}
