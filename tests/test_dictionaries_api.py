#!/usr/bin/env python3
"""
Tests for the /dictionaries endpoints.
"""

import uuid as uuid_lib

from fastapi.testclient import TestClient

from app.main import create_app


def create_dictionary(client, code="EN", description="English"):
    response = client.post(
        "/dictionaries", json={"code": code, "description": description}
    )
    assert response.status_code == 200
    return response.json()


def not_found_message(dictionary_id):
    return f"Dictionary record not found with id: {dictionary_id}"


def test_create_dictionary(client):
    created = create_dictionary(client)

    assert created["id"]
    assert uuid_lib.UUID(created["id"]).version == 4
    assert created["code"] == "EN"
    assert created["description"] == "English"


def test_get_dictionary_returns_created_record(client):
    created = create_dictionary(client)

    response = client.get(f"/dictionaries/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_create_then_get_round_trips_values(client):
    pairs = [
        ("EN", "English"),
        ("", ""),
        ("zh-Hans", "简体中文"),
        ("X" * 64, "multi\nline description with \"quotes\""),
    ]
    for code, description in pairs:
        created = create_dictionary(client, code, description)
        fetched = client.get(f"/dictionaries/{created['id']}").json()
        assert (fetched["code"], fetched["description"]) == (code, description)


def test_list_contains_created_records(client):
    created_ids = {create_dictionary(client, f"C{i}", f"Code {i}")["id"] for i in range(5)}

    response = client.get("/dictionaries")

    assert response.status_code == 200
    listed_ids = {item["id"] for item in response.json()}
    assert created_ids <= listed_ids


def test_list_empty(client):
    response = client.get("/dictionaries")

    assert response.status_code == 200
    assert response.json() == []


def test_list_is_ordered_by_code(client):
    for code in ["FR", "DE", "EN"]:
        create_dictionary(client, code, code.lower())

    codes = [item["code"] for item in client.get("/dictionaries").json()]

    assert codes == ["DE", "EN", "FR"]


def test_duplicate_codes_are_allowed(client):
    first = create_dictionary(client, "EN", "English")
    second = create_dictionary(client, "EN", "English (UK)")

    assert first["id"] != second["id"]
    assert len(client.get("/dictionaries").json()) == 2


def test_get_unknown_dictionary_returns_404(client):
    missing_id = str(uuid_lib.uuid4())

    response = client.get(f"/dictionaries/{missing_id}")

    assert response.status_code == 404
    assert response.json()["detail"] == not_found_message(missing_id)


def test_get_with_malformed_id_is_rejected(client):
    response = client.get("/dictionaries/not-a-uuid")

    assert response.status_code == 422


def test_create_with_missing_field_is_rejected(client):
    response = client.post("/dictionaries", json={"code": "EN"})

    assert response.status_code == 422


def test_delete_dictionary(client):
    created = create_dictionary(client)

    response = client.delete(f"/dictionaries/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"/dictionaries/{created['id']}")
    assert response.status_code == 404
    assert created["id"] in response.json()["detail"]


def test_delete_twice_returns_404(client):
    created = create_dictionary(client)
    assert client.delete(f"/dictionaries/{created['id']}").status_code == 204

    response = client.delete(f"/dictionaries/{created['id']}")

    assert response.status_code == 404
    assert response.json()["detail"] == not_found_message(created["id"])


def test_delete_unknown_dictionary_leaves_others_untouched(client):
    kept = create_dictionary(client, "EN", "English")
    missing_id = str(uuid_lib.uuid4())

    response = client.delete(f"/dictionaries/{missing_id}")

    assert response.status_code == 404
    assert response.json()["detail"] == not_found_message(missing_id)
    assert client.get("/dictionaries").json() == [kept]


def test_storage_failure_returns_500(service, monkeypatch):
    def broken_list_all():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(service, "list_all", broken_list_all)

    with TestClient(create_app(service), raise_server_exceptions=False) as client:
        response = client.get("/dictionaries")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_openapi_documents_dictionary_routes(client):
    schema = client.get("/openapi.json").json()

    paths = schema["paths"]
    assert set(paths["/dictionaries"]) == {"get", "post"}
    assert set(paths["/dictionaries/{id}"]) == {"get", "delete"}
    assert "404" in paths["/dictionaries/{id}"]["get"]["responses"]
    assert "204" in paths["/dictionaries/{id}"]["delete"]["responses"]
