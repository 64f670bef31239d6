from __future__ import annotations

from fastapi.testclient import TestClient

from bytefinder.app import create_app
from bytefinder.search.engine import RestaurantSearch
from bytefinder.search.models import Restaurant

CATALOG = [
    Restaurant(name="A", rating=4, distance=1, price=10, cuisine="X"),
    Restaurant(name="B", rating=4, distance=1, price=15, cuisine="Y"),
    Restaurant(name="C", rating=3, distance=1, price=10, cuisine="Z"),
    Restaurant(name="D", rating=3, distance=1, price=15, cuisine="W"),
    Restaurant(name="E", rating=5, distance=2, price=10, cuisine="V"),
    Restaurant(name="F", rating=2, distance=3, price=50, cuisine="Chinese"),
]

client = TestClient(create_app(engine=RestaurantSearch(CATALOG)))


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metadata():
    resp = client.get("/metadata")
    assert resp.status_code == 200
    body = resp.json()
    assert body["cuisines"] == ["Chinese", "V", "W", "X", "Y", "Z"]
    assert body["total_restaurants"] == 6
    assert body["max_results"] == 5
    assert body["ranges"]["price"] == {"minimum": 10, "maximum": 50}


def test_search_without_criteria_returns_top_five():
    resp = client.post("/search", json={})
    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 5
    assert [r["name"] for r in body["results"]] == ["A", "B", "C", "D", "E"]


def test_search_with_criteria():
    resp = client.post("/search", json={"rating": 3, "price": 15})
    body = resp.json()
    assert [r["name"] for r in body["results"]] == ["A", "B", "C", "D", "E"]


def test_search_blank_text_is_ignored():
    resp = client.post("/search", json={"name": "", "cuisine": "", "distance": 1})
    assert [r["name"] for r in resp.json()["results"]] == ["A", "B", "C", "D"]


def test_search_cuisine_case_insensitive():
    resp = client.post("/search", json={"cuisine": "chin"})
    body = resp.json()
    assert body["count"] == 1
    assert body["results"][0] == {
        "name": "F",
        "rating": 2,
        "distance": 3,
        "price": 50,
        "cuisine": "Chinese",
    }


def test_search_no_matches_is_not_an_error():
    resp = client.post("/search", json={"name": "Nonexistent12345"})
    assert resp.status_code == 200
    assert resp.json() == {"results": [], "count": 0}


def test_search_rejects_bad_rating():
    resp = client.post("/search", json={"rating": 6})
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["field"] == "rating"
    assert "between 1 and 5" in detail["message"]


def test_search_rejects_bad_price():
    resp = client.post("/search", json={"price": 5})
    assert resp.status_code == 422
    assert resp.json()["detail"]["field"] == "price"


def test_search_rejects_non_integer_distance():
    resp = client.post("/search", json={"distance": "far"})
    assert resp.status_code == 422
