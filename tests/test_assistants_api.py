from datetime import datetime


def test_create_assistant_trims_fields(client):
    response = client.post(
        "/assistants",
        json={"name": "  Chef ", "instructions": " Suggest recipes. ", "persona": "\tCheerful cook\n"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Chef"
    assert body["instructions"] == "Suggest recipes."
    assert body["persona"] == "Cheerful cook"
    assert body["created_at"] == body["updated_at"]


def test_create_assistant_requires_all_fields(client):
    response = client.post("/assistants", json={"name": "Chef", "instructions": "Cook"})
    assert response.status_code == 422


def test_create_assistant_rejects_blank_fields(client):
    response = client.post(
        "/assistants",
        json={"name": "   ", "instructions": "Cook", "persona": "Chef"},
    )
    assert response.status_code == 422


def test_list_assistants_newest_first(client, create_assistant):
    first = create_assistant(name="First")
    second = create_assistant(name="Second")

    body = client.get("/assistants").json()

    assert body["total"] == 2
    assert [a["id"] for a in body["assistants"]] == [second["id"], first["id"]]


def test_list_assistants_search_matches_any_field_case_insensitively(client, create_assistant):
    create_assistant(name="Chef", instructions="Suggest recipes.", persona="Cheerful")
    create_assistant(name="Coach", instructions="Plan workouts.", persona="Strict but FAIR")
    create_assistant(name="Poet", instructions="Write haiku.", persona="Dreamy")

    body = client.get("/assistants", params={"search": "fair"}).json()
    assert [a["name"] for a in body["assistants"]] == ["Coach"]
    assert body["total"] == 3

    body = client.get("/assistants", params={"search": "RECIPES"}).json()
    assert [a["name"] for a in body["assistants"]] == ["Chef"]


def test_list_assistants_blank_search_returns_everything(client, create_assistant):
    create_assistant(name="One")
    create_assistant(name="Two")

    body = client.get("/assistants", params={"search": "   "}).json()
    assert len(body["assistants"]) == 2


def test_get_assistant(client, create_assistant):
    created = create_assistant()

    response = client.get(f"/assistants/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_assistant_returns_404(client):
    response = client.get("/assistants/does-not-exist")

    assert response.status_code == 404
    assert response.json()["detail"] == "Assistant not found"


def test_update_assistant_changes_only_provided_fields(client, create_assistant):
    created = create_assistant(name="Tutor", instructions="Explain.", persona="Patient")

    response = client.put(f"/assistants/{created['id']}", json={"persona": "  Very patient  "})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Tutor"
    assert body["instructions"] == "Explain."
    assert body["persona"] == "Very patient"
    assert datetime.fromisoformat(body["updated_at"]) >= datetime.fromisoformat(created["updated_at"])
    assert body["created_at"] == created["created_at"]


def test_update_assistant_rejects_blank_field(client, create_assistant):
    created = create_assistant()

    response = client.put(f"/assistants/{created['id']}", json={"name": "  "})

    assert response.status_code == 422


def test_update_unknown_assistant_returns_404(client):
    response = client.put("/assistants/missing", json={"name": "Anything"})
    assert response.status_code == 404


def test_delete_assistant(client, create_assistant):
    created = create_assistant()

    response = client.delete(f"/assistants/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get(f"/assistants/{created['id']}").status_code == 404


def test_delete_unknown_assistant_returns_404(client):
    assert client.delete("/assistants/missing").status_code == 404


def test_delete_assistant_removes_its_chats(client, create_assistant, create_chat):
    assistant = create_assistant()
    chat = create_chat(assistant["id"])

    client.delete(f"/assistants/{assistant['id']}")

    assert client.get(f"/chats/{chat['id']}").status_code == 404
    assert client.get("/chats").json()["chats"] == []
