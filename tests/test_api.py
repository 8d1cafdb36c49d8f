"""Tests for the HTTP binding."""

from uuid import uuid4

from fastapi.testclient import TestClient

from reeleats.api.app import create_app

CAFE = {
    "name": "Cafe A",
    "category": "Cafe",
    "rating": 4.5,
    "price": "$$",
    "address": "1 Cafe St, Melbourne",
    "latitude": -37.8136,
    "longitude": 144.9631,
    "tags": ["Cafe", "Brunch"],
    "source": "instagram",
}


def _client(container) -> TestClient:
    return TestClient(create_app(container))


def _save(client: TestClient, **overrides) -> dict:
    response = client.post("/restaurants", json={**CAFE, **overrides})
    assert response.status_code == 201
    return response.json()


def test_health(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_restaurant_lifecycle(container) -> None:
    client = _client(container)
    created = _save(client)

    fetched = client.get(f"/restaurants/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["tags"] == ["Cafe", "Brunch"]

    assert client.delete(f"/restaurants/{created['id']}").json() == {"removed": True}
    assert client.delete(f"/restaurants/{created['id']}").json() == {"removed": False}
    assert client.get(f"/restaurants/{created['id']}").status_code == 404


def test_invalid_restaurant_payload_rejected(container) -> None:
    response = _client(container).post("/restaurants", json={**CAFE, "rating": 7})

    assert response.status_code == 422


def test_facets_filter_listing(container) -> None:
    client = _client(container)
    _save(client)
    _save(client, name="Bar B", category="Bars", price="$$$")
    _save(client, name="Cafe C", price="$")

    toggled = client.post("/facets/category/toggle", json={"option": "Cafe"})
    assert toggled.status_code == 200
    assert toggled.json()["selected"] == ["Cafe"]
    assert toggled.json()["state"] == "partially_selected"
    names = [r["name"] for r in client.get("/restaurants").json()]
    assert names == ["Cafe A", "Cafe C"]

    client.post("/facets/price/toggle", json={"option": "$$"})
    names = [r["name"] for r in client.get("/restaurants").json()]
    assert names == ["Cafe A"]

    assert client.get("/facets").json()["active"] is True
    assert client.delete("/facets").json() == {"active": False}
    assert len(client.get("/restaurants").json()) == 3


def test_sorted_listing(container) -> None:
    client = _client(container)
    _save(client, name="zucchini")
    _save(client, name="Apple")

    response = client.get("/restaurants", params={"sort": "Alphabetical"})

    assert [r["name"] for r in response.json()] == ["Apple", "zucchini"]


def test_unknown_facet_option_is_unprocessable(container) -> None:
    client = _client(container)

    assert (
        client.post("/facets/nope/toggle", json={"option": "x"}).status_code == 422
    )
    assert (
        client.post("/facets/price/toggle", json={"option": "free"}).status_code
        == 422
    )


def test_overlay_updates(container) -> None:
    client = _client(container)
    created = _save(client)
    path = f"/restaurants/{created['id']}/overlay"

    assert client.get(path).json()["status"] == "unvisited"

    rated = client.put(path, json={"rating": 4.5}).json()
    assert rated["status"] == "visited"
    assert rated["rating"] == 4.5
    assert rated["visited_at"] is not None

    reverted = client.put(path, json={"status": "unvisited"}).json()
    assert reverted["rating"] == 0.0
    assert reverted["visited_at"] is None

    assert client.put(path, json={"rating": 9}).status_code == 422

    toggled = client.post(f"/restaurants/{created['id']}/visit-toggle").json()
    assert toggled["status"] == "visited"


def test_collections_flow(container) -> None:
    client = _client(container)
    cafe = _save(client)

    response = client.post("/collections", json={"name": "date night"})
    assert response.status_code == 201
    collection = response.json()
    assert collection["ownership"] == "By Me"
    assert collection["creator_text"] == "Julz"

    members_path = f"/collections/{collection['id']}/restaurants"
    assert client.post(members_path, json={"restaurant_id": cafe["id"]}).json() == {
        "added": True
    }
    assert client.post(members_path, json={"restaurant_id": cafe["id"]}).json() == {
        "added": False
    }
    assert [r["name"] for r in client.get(members_path).json()] == ["Cafe A"]

    listed = client.get("/restaurants", params={"collection_id": collection["id"]})
    assert [r["name"] for r in listed.json()] == ["Cafe A"]

    renamed = client.patch(
        f"/collections/{collection['id']}", json={"name": "dinners"}
    )
    assert renamed.json()["name"] == "dinners"

    removed = client.delete(f"{members_path}/{cafe['id']}")
    assert removed.json() == {"removed": True}
    assert client.get(members_path).json() == []


def test_collection_errors(container) -> None:
    client = _client(container)

    assert client.post("/collections", json={"name": "  "}).status_code == 422
    assert client.get(f"/collections/{uuid4()}/restaurants").status_code == 404

    collection = client.post("/collections", json={"name": "favs"}).json()
    response = client.post(
        f"/collections/{collection['id']}/restaurants",
        json={"restaurant_id": str(uuid4())},
    )
    assert response.status_code == 404


def test_search(container) -> None:
    response = _client(container).get("/search", params={"q": "sushi"})

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == [
        "Nobu Melbourne",
        "Kenzan Japanese Restaurant",
    ]


def test_share_detect_and_save(container) -> None:
    client = _client(container)

    response = client.post(
        "/share/detect",
        json={"url": "https://www.instagram.com/reel/abc", "save": True},
    )

    body = response.json()
    assert response.status_code == 200
    assert body["detected"] is True
    assert body["source"] == "instagram"
    assert [r["name"] for r in body["saved"]] == ["Vue de Monde"]
    assert [r["name"] for r in client.get("/restaurants").json()] == ["Vue de Monde"]
