"""Tests for the card set CRUD endpoints."""

import uuid

CARD_SET = {
    "name": "Animals",
    "coverImage": "cover-key",
    "cards": [
        {"word": "cat", "image": "cat-key"},
        {"word": "dog", "image": "dog-key"},
    ],
}


def create(client, payload=CARD_SET):
    response = client.post("/card-sets", json=payload)
    assert response.status_code == 200
    return response.json()


class TestCreateCardSet:
    def test_assigns_ids(self, client):
        card_set = create(client)

        assert uuid.UUID(card_set["id"])
        assert card_set["name"] == "Animals"
        assert card_set["coverImage"] == "cover-key"
        assert [card["word"] for card in card_set["cards"]] == ["cat", "dog"]
        card_ids = {card["id"] for card in card_set["cards"]}
        assert len(card_ids) == 2

    def test_ignores_client_ids(self, client):
        client_id = str(uuid.uuid4())
        card_set = create(client, {**CARD_SET, "id": client_id})

        assert card_set["id"] != client_id

    def test_rejects_malformed_body(self, client):
        response = client.post("/card-sets", json={"cards": "not a list"})

        assert response.status_code == 400


class TestReadCardSets:
    def test_list_empty(self, client):
        response = client.get("/card-sets")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_and_get(self, client):
        first = create(client)
        second = create(client, {**CARD_SET, "name": "Colors"})

        listed = client.get("/card-sets").json()
        assert {item["id"] for item in listed} == {first["id"], second["id"]}

        response = client.get(f"/card-sets/{first['id']}")
        assert response.status_code == 200
        assert response.json() == first

    def test_get_missing(self, client):
        response = client.get(f"/card-sets/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["altMessages"] == ["the card set was not found"]

    def test_get_malformed_id(self, client):
        response = client.get("/card-sets/not-an-id")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"


class TestReplaceCardSet:
    def test_replaces_content_and_regenerates_card_ids(self, client):
        original = create(client)

        response = client.put(
            f"/card-sets/{original['id']}",
            json={"name": "Pets", "cards": [{"word": "cat", "image": "cat-key"}]},
        )

        assert response.status_code == 200
        replaced = response.json()
        assert replaced["id"] == original["id"]
        assert replaced["name"] == "Pets"
        assert replaced["coverImage"] == ""
        assert len(replaced["cards"]) == 1
        assert replaced["cards"][0]["id"] not in {c["id"] for c in original["cards"]}
        assert client.get(f"/card-sets/{original['id']}").json() == replaced

    def test_replace_missing(self, client):
        response = client.put(f"/card-sets/{uuid.uuid4()}", json=CARD_SET)

        assert response.status_code == 404


class TestDeleteCardSet:
    def test_deletes(self, client):
        card_set = create(client)

        response = client.delete(f"/card-sets/{card_set['id']}")

        assert response.status_code == 200
        assert response.content == b""
        assert client.get(f"/card-sets/{card_set['id']}").status_code == 404

    def test_delete_missing(self, client):
        response = client.delete(f"/card-sets/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["altMessages"] == ["the card set was not found"]
