"""
Retro Board Backend — Retro, Thought and Action Item Endpoint Tests
====================================================================

What we test:
    ✅ Mutating routes require the Authorization header
    ✅ Retro create resolves participants; the caller becomes admin
    ✅ PATCH returns the post-update document
    ✅ Empty collections and zero-match filters return []
    ✅ Thoughts/action items are scoped to the retro in the URL
    ✅ Deleting a retro leaves its thoughts and action items queryable
"""

import uuid

import pytest


@pytest.fixture
def create_retro(test_client, auth_headers):
    async def _create_retro(**body) -> dict:
        response = await test_client.post("/retros", json=body, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["response"]

    return _create_retro


class TestRetroRoutes:

    @pytest.mark.asyncio
    async def test_create_requires_token(self, test_client):
        """Creating a retro without an access token should be rejected with 401."""
        response = await test_client.post("/retros", json={"description": "Sprint 1"})
        assert response.status_code == 401
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_create_resolves_participants(self, test_client, auth_user, signup, create_retro):
        """Known participant names should resolve to users, unknown ones dropped."""
        bob = await signup("bob")

        retro = await create_retro(
            description="Sprint 1",
            participants=[{"text": "bob"}, {"text": "ghost"}],
        )

        assert retro["description"] == "Sprint 1"
        assert retro["active"] is True
        assert retro["admin"] == {"id": auth_user["user_id"], "username": "alice"}
        assert retro["participants"] == [{"id": bob["user_id"], "username": "bob"}]
        assert isinstance(retro["created_at"], int)

    @pytest.mark.asyncio
    async def test_admin_can_also_be_participant(self, test_client, auth_user, create_retro):
        """An explicit admin listed among the participants should appear in both roles."""
        alice = {"id": auth_user["user_id"], "username": "alice"}

        retro = await create_retro(
            description="Sprint 2",
            admin=auth_user["user_id"],
            participants=[{"text": "alice"}],
        )

        assert retro["admin"] == alice
        assert retro["participants"] == [alice]

        fetched = (await test_client.get(f"/retros/{retro['id']}")).json()["response"]
        assert fetched["admin"] == alice
        assert fetched["participants"] == [alice]

    @pytest.mark.asyncio
    async def test_patch_reorders_participants(self, test_client, auth_headers, signup, create_retro):
        """A PATCHed participant order should persist, not just appear in the response."""
        for name in ("bob", "carol", "dave"):
            await signup(name)
        retro = await create_retro(participants=[{"text": "bob"}, {"text": "carol"}])

        response = await test_client.patch(
            f"/retros/{retro['id']}",
            json={"participants": [{"text": "dave"}, {"text": "bob"}]},
            headers=auth_headers,
        )
        assert [p["username"] for p in response.json()["response"]["participants"]] == ["dave", "bob"]

        fetched = (await test_client.get(f"/retros/{retro['id']}")).json()["response"]
        assert [p["username"] for p in fetched["participants"]] == ["dave", "bob"]

    @pytest.mark.asyncio
    async def test_create_with_unknown_admin(self, test_client, auth_headers):
        """An admin id that matches no user should return 404."""
        response = await test_client.post(
            "/retros", json={"admin": str(uuid.uuid4())}, headers=auth_headers
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_patch_returns_new_state(self, test_client, auth_headers, create_retro):
        """PATCH should respond with the retro as stored after the update."""
        retro = await create_retro(description="before")

        response = await test_client.patch(
            f"/retros/{retro['id']}",
            json={"description": "after", "active": False},
            headers=auth_headers,
        )

        assert response.status_code == 200
        patched = response.json()["response"]
        assert patched["description"] == "after"
        assert patched["active"] is False
        assert patched["created_at"] == retro["created_at"]

    @pytest.mark.asyncio
    async def test_patch_unknown_field_rejected(self, test_client, auth_headers, create_retro):
        """Fields a retro cannot change should fail validation with 400."""
        retro = await create_retro()
        response = await test_client.patch(
            f"/retros/{retro['id']}", json={"created_at": 0}, headers=auth_headers
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_patch_missing_retro(self, test_client, auth_headers):
        """Patching a retro that does not exist should return 404."""
        response = await test_client.patch(
            f"/retros/{uuid.uuid4()}", json={"active": False}, headers=auth_headers
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_empty_list_is_not_an_error(self, test_client):
        """An empty collection should list as an empty array, not 404."""
        response = await test_client.get("/retros")
        assert response.status_code == 200
        assert response.json() == {"response": [], "success": True}

    @pytest.mark.asyncio
    async def test_list_filters(self, test_client, create_retro):
        """Query filters should narrow the list; bad values should return 400."""
        await create_retro(description="open")
        await create_retro(description="closed", active=False)

        response = await test_client.get("/retros", params={"active": "false"})
        assert [r["description"] for r in response.json()["response"]] == ["closed"]

        response = await test_client.get("/retros", params={"description": "missing"})
        assert response.json()["response"] == []

        response = await test_client.get("/retros", params={"active": "maybe"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_malformed_retro_id(self, test_client):
        """A retro id that is not a UUID should return 400 invalid_input."""
        response = await test_client.get("/retros/12345")
        assert response.status_code == 400
        assert response.json()["response"]["error"] == "invalid_input"

    @pytest.mark.asyncio
    async def test_user_retros(self, test_client, auth_user, signup, create_retro):
        """Per-user listing should include retros the user runs or joins."""
        bob = await signup("bob")
        carol = await signup("carol")
        await create_retro(description="with bob", participants=[{"text": "bob"}])

        response = await test_client.get(f"/users/{bob['user_id']}/retros")
        assert [r["description"] for r in response.json()["response"]] == ["with bob"]

        response = await test_client.get(f"/users/{auth_user['user_id']}/retros")
        assert len(response.json()["response"]) == 1

        response = await test_client.get(f"/users/{carol['user_id']}/retros")
        assert response.json()["response"] == []


class TestThoughtAndActionItemRoutes:

    @pytest.mark.asyncio
    async def test_create_thought_uses_url_retro(self, test_client, auth_headers, create_retro):
        """A new thought should belong to the retro in the URL, not the body."""
        retro = await create_retro()

        response = await test_client.post(
            f"/retros/{retro['id']}/thoughts",
            json={"description": "Standups ran long", "category": "Improve", "retro": str(uuid.uuid4())},
            headers=auth_headers,
        )

        assert response.status_code == 201
        thought = response.json()["response"]
        assert thought["retro"] == retro["id"]
        assert thought["category"] == "Improve"

    @pytest.mark.asyncio
    async def test_invalid_category(self, test_client, auth_headers, create_retro):
        """A category outside Drop/Add/Keep/Improve should return 400."""
        retro = await create_retro()
        response = await test_client.post(
            f"/retros/{retro['id']}/thoughts",
            json={"description": "?", "category": "Rant"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_thought_for_missing_retro(self, test_client, auth_headers):
        """Adding a thought to an unknown retro should return 404."""
        response = await test_client.post(
            f"/retros/{uuid.uuid4()}/thoughts", json={"category": "Keep"}, headers=auth_headers
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_thought_requires_token(self, test_client, create_retro):
        """Adding a thought without an access token should return 401."""
        retro = await create_retro()
        response = await test_client.post(f"/retros/{retro['id']}/thoughts", json={"category": "Keep"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_patch_and_delete_thought(self, test_client, auth_headers, create_retro):
        """A thought should be editable, then deletable, then gone."""
        retro = await create_retro()
        created = (await test_client.post(
            f"/retros/{retro['id']}/thoughts", json={"category": "Keep"}, headers=auth_headers
        )).json()["response"]

        response = await test_client.patch(
            f"/retros/thoughts/{created['id']}", json={"category": "Drop"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["response"]["category"] == "Drop"

        response = await test_client.delete(f"/thoughts/{created['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["response"]["id"] == created["id"]

        response = await test_client.get(f"/thoughts/{created['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_action_item_crud(self, test_client, auth_headers, create_retro):
        """Action items should support create, patch, filter, list and delete."""
        retro = await create_retro()

        response = await test_client.post(
            f"/retros/{retro['id']}/actionitems",
            json={"description": "Automate deploys", "name": "bob"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        item = response.json()["response"]
        assert item["retro"] == retro["id"]

        response = await test_client.patch(
            f"/retros/actionitems/{item['id']}", json={"name": "carol"}, headers=auth_headers
        )
        assert response.json()["response"]["name"] == "carol"

        response = await test_client.get("/actionitems", params={"name": "carol"})
        assert [a["id"] for a in response.json()["response"]] == [item["id"]]

        response = await test_client.get(f"/retros/{retro['id']}/actionitems")
        assert len(response.json()["response"]) == 1

        response = await test_client.delete(f"/actionitems/{item['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert (await test_client.get("/actionitems")).json()["response"] == []

    @pytest.mark.asyncio
    async def test_overlong_action_item_name(self, test_client, auth_headers, create_retro):
        """An owner name longer than the column allows should be a 400 and store nothing."""
        retro = await create_retro()

        response = await test_client.post(
            f"/retros/{retro['id']}/actionitems", json={"name": "x" * 256}, headers=auth_headers
        )
        assert response.status_code == 400
        assert (await test_client.get("/actionitems")).json()["response"] == []

    @pytest.mark.asyncio
    async def test_retro_delete_keeps_children(self, test_client, auth_headers, create_retro):
        """Deleting a retro should leave its thoughts and action items readable."""
        retro = await create_retro()
        thought = (await test_client.post(
            f"/retros/{retro['id']}/thoughts", json={"category": "Add"}, headers=auth_headers
        )).json()["response"]
        item = (await test_client.post(
            f"/retros/{retro['id']}/actionitems", json={"name": "bob"}, headers=auth_headers
        )).json()["response"]

        response = await test_client.delete(f"/retros/{retro['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["response"]["id"] == retro["id"]

        assert (await test_client.get(f"/retros/{retro['id']}")).status_code == 404
        assert (await test_client.get(f"/thoughts/{thought['id']}")).status_code == 200
        assert (await test_client.get(f"/actionitems/{item['id']}")).status_code == 200

        response = await test_client.get("/thoughts", params={"retro": retro["id"]})
        assert [t["id"] for t in response.json()["response"]] == [thought["id"]]

    @pytest.mark.asyncio
    async def test_thought_list_unknown_filter(self, test_client):
        """Filtering thoughts on an unknown field should return 400."""
        response = await test_client.get("/thoughts", params={"mood": "happy"})
        assert response.status_code == 400
