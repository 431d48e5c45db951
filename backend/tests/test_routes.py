"""
NoteKeeper Backend — HTTP Endpoint Tests
=========================================

What:  End-to-end tests of the five endpoints plus /health over ASGI.
How:   HTTPX AsyncClient with ASGITransport; a fresh app and store per test.
"""

import pytest


async def _signup_and_login(client, email="a@x.com", password="p"):
    await client.post("/signup", json={"name": "a", "email": email, "password": password})
    response = await client.post("/login", json={"email": email, "password": password})
    return response.json()["sid"]


class TestScenario:

    @pytest.mark.asyncio
    async def test_full_note_lifecycle(self, test_client):
        signup = await test_client.post("/signup", json={"name": "a", "email": "a@x.com", "password": "p"})
        assert signup.status_code == 200
        assert signup.json() == 200

        login = await test_client.post("/login", json={"email": "a@x.com", "password": "p"})
        assert login.status_code == 200
        assert login.json() == {"sid": "1"}

        created = await test_client.post("/notes", json={"sid": "1", "note": "hi"})
        assert created.status_code == 200
        assert created.json() == {"id": 1}

        listed = await test_client.request("GET", "/notes", json={"sid": "1"})
        assert listed.status_code == 200
        assert listed.json() == {"notes": [{"id": 1, "note": "hi", "userID": 1}]}

        deleted = await test_client.request("DELETE", "/notes", json={"sid": "1", "id": 1})
        assert deleted.status_code == 200
        assert deleted.json() == 200

        relisted = await test_client.request("GET", "/notes", json={"sid": "1"})
        assert relisted.json() == {"notes": []}


class TestSignupEndpoint:

    @pytest.mark.asyncio
    async def test_json_content_type(self, test_client):
        response = await test_client.post("/signup", json={"email": "a@x.com"})

        assert response.headers["content-type"].startswith("application/json")

    @pytest.mark.asyncio
    async def test_all_empty_is_400(self, test_client):
        response = await test_client.post("/signup", json={"name": "", "email": "", "password": ""})

        assert response.status_code == 400
        assert response.json()["error"] == "bad_request"
        assert response.json()["message"] == "Invalid request format"

    @pytest.mark.asyncio
    async def test_empty_body_is_400(self, test_client):
        response = await test_client.post("/signup", content=b"")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_type_error_with_surviving_field_is_400(self, test_client, store):
        response = await test_client.post("/signup", content=b'{"name": ["a"], "email": "a@x.com"}')

        assert response.status_code == 400
        assert response.json()["message"] != "Invalid request format"
        assert store.stats()["users"] == 0


class TestLoginEndpoint:

    @pytest.mark.asyncio
    async def test_unknown_user_on_empty_store_is_401(self, test_client):
        response = await test_client.post("/login", json={"email": "ghost@x.com", "password": "p"})

        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"

    @pytest.mark.asyncio
    async def test_both_empty_is_400(self, test_client):
        response = await test_client.post("/login", json={})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_each_login_opens_a_new_session(self, test_client):
        first = await _signup_and_login(test_client)
        second = (await test_client.post("/login", json={"email": "a@x.com", "password": "p"})).json()["sid"]

        assert (first, second) == ("1", "2")


class TestNotesEndpoint:

    @pytest.mark.asyncio
    async def test_list_without_notes_is_empty_array(self, test_client):
        sid = await _signup_and_login(test_client)

        response = await test_client.request("GET", "/notes", json={"sid": sid})

        assert response.status_code == 200
        assert response.json() == {"notes": []}

    @pytest.mark.asyncio
    async def test_list_without_body_is_400(self, test_client):
        response = await test_client.get("/notes")

        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "POST", "DELETE"])
    async def test_unknown_session_is_401(self, test_client, method):
        response = await test_client.request(method, "/notes", json={"sid": "404", "note": "x", "id": 1})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_without_sid_is_400(self, test_client):
        response = await test_client.post("/notes", json={"note": "orphan"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_session_resolves_to_same_user_across_calls(self, test_client):
        await _signup_and_login(test_client, email="a@x.com")
        sid_b = await _signup_and_login(test_client, email="b@x.com")

        for text in ("one", "two"):
            await test_client.post("/notes", json={"sid": sid_b, "note": text})

        notes = (await test_client.request("GET", "/notes", json={"sid": sid_b})).json()["notes"]
        assert [(n["note"], n["userID"]) for n in notes] == [("one", 2), ("two", 2)]

    @pytest.mark.asyncio
    async def test_users_only_see_their_own_notes(self, test_client):
        sid_a = await _signup_and_login(test_client, email="a@x.com")
        sid_b = await _signup_and_login(test_client, email="b@x.com")
        await test_client.post("/notes", json={"sid": sid_a, "note": "a's"})

        response = await test_client.request("GET", "/notes", json={"sid": sid_b})

        assert response.json() == {"notes": []}

    @pytest.mark.asyncio
    async def test_foreign_delete_succeeds_but_keeps_note(self, test_client):
        sid_a = await _signup_and_login(test_client, email="a@x.com")
        sid_b = await _signup_and_login(test_client, email="b@x.com")
        await test_client.post("/notes", json={"sid": sid_a, "note": "a's"})

        deleted = await test_client.request("DELETE", "/notes", json={"sid": sid_b, "id": 1})
        remaining = await test_client.request("GET", "/notes", json={"sid": sid_a})

        assert deleted.status_code == 200
        assert [n["note"] for n in remaining.json()["notes"]] == ["a's"]

    @pytest.mark.asyncio
    async def test_delete_missing_note_is_200(self, test_client):
        sid = await _signup_and_login(test_client)

        response = await test_client.request("DELETE", "/notes", json={"sid": sid, "id": 99})

        assert response.status_code == 200
        assert response.json() == 200

    @pytest.mark.asyncio
    async def test_delete_with_neither_field_is_400(self, test_client):
        response = await test_client.request("DELETE", "/notes", json={})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_with_id_only_is_401(self, test_client):
        response = await test_client.request("DELETE", "/notes", json={"id": 1})

        assert response.status_code == 401


class TestUnusualBodies:

    @pytest.mark.asyncio
    async def test_huge_number_in_unknown_key_is_ignored(self, test_client):
        sid = await _signup_and_login(test_client)
        raw = f'{{"sid": "{sid}", "note": "x", "pad": '.encode() + b"1" * 5000 + b"}"

        response = await test_client.post("/notes", content=raw)

        assert response.status_code == 200
        assert response.json() == {"id": 1}

    @pytest.mark.asyncio
    async def test_deep_nesting_is_400(self, test_client):
        sid = await _signup_and_login(test_client)
        depth = 100000
        raw = f'{{"sid": "{sid}", "x": '.encode() + b"[" * depth + b"]" * depth + b"}"

        response = await test_client.request("GET", "/notes", content=raw)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_lone_surrogate_note_stays_listable(self, test_client):
        sid = await _signup_and_login(test_client)

        created = await test_client.post("/notes", content=f'{{"sid": "{sid}", "note": "\\ud800"}}'.encode())
        listed = await test_client.request("GET", "/notes", json={"sid": sid})

        assert created.status_code == 200
        assert listed.status_code == 200
        assert listed.json()["notes"][0]["note"] == "\ufffd"

    @pytest.mark.asyncio
    async def test_invalid_utf8_name_accepted(self, test_client, store):
        response = await test_client.post("/signup", content=b'{"name": "\xff"}')

        assert response.status_code == 200
        assert store.stats()["users"] == 1

    @pytest.mark.asyncio
    async def test_nan_literal_is_400(self, test_client):
        sid = await _signup_and_login(test_client)

        response = await test_client.post("/notes", content=f'{{"sid": "{sid}", "note": "x", "v": NaN}}'.encode())

        assert response.status_code == 400


class TestAmbient:

    @pytest.mark.asyncio
    async def test_request_id_header_echoed(self, test_client):
        response = await test_client.post("/login", json={}, headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"
        assert response.json()["request_id"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.post("/signup", json={"name": "a"})

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_health_reports_collection_sizes(self, test_client):
        await _signup_and_login(test_client)
        await test_client.post("/notes", json={"sid": "1", "note": "x"})

        response = await test_client.get("/health")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "healthy"
        assert (body["users"], body["notes"], body["sessions"]) == (1, 1, 1)
