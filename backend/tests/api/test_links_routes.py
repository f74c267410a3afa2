"""Link routes — list, list-by-email, create and owner-gated delete over HTTP.

Invariants:
    - Rejected submissions never reach the store
    - Listings are newest first and stable across repeated reads
    - Delete: 400 without token, 404 unknown id, 403 wrong token, 200 otherwise
"""

from uuid import uuid4

VALID_LINK = {
    "title": "Notes",
    "url": "https://example.com",
    "description": "x",
    "studentEmail": "a@rvu.edu.in",
}


async def _delete(client, link_id, body=None):
    return await client.request("DELETE", f"/api/links/{link_id}", json=body)


# --- Create -------------------------------------------------------------------

async def test_create_returns_201_with_generated_owner_token(client):
    res = await client.post("/api/links", json=VALID_LINK)
    assert res.status_code == 201
    data = res.json()
    assert data["title"] == "Notes"
    assert data["studentEmail"] == "a@rvu.edu.in"
    assert data["ownerToken"].startswith("user_")
    assert data["id"]
    assert data["createdAt"]


async def test_create_keeps_client_supplied_token(client):
    res = await client.post(
        "/api/links", json={**VALID_LINK, "userToken": "my-token"},
    )
    assert res.status_code == 201
    assert res.json()["ownerToken"] == "my-token"


async def test_create_with_empty_user_token_generates_one(client):
    res = await client.post("/api/links", json={**VALID_LINK, "userToken": ""})
    assert res.status_code == 201
    assert res.json()["ownerToken"].startswith("user_")


async def test_create_rejects_missing_field(client):
    body = {k: v for k, v in VALID_LINK.items() if k != "description"}
    res = await client.post("/api/links", json=body)
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "All fields are required"


async def test_create_rejects_empty_title(client):
    res = await client.post("/api/links", json={**VALID_LINK, "title": ""})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "All fields are required"


async def test_create_rejects_non_rvu_email_and_persists_nothing(client):
    res = await client.post(
        "/api/links", json={**VALID_LINK, "studentEmail": "a@gmail.com"},
    )
    assert res.status_code == 400
    assert "RVU" in res.json()["error"]["message"]
    assert (await client.get("/api/links")).json() == []


async def test_create_rejects_unparseable_url_and_persists_nothing(client):
    res = await client.post("/api/links", json={**VALID_LINK, "url": "not a url"})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid URL format"
    assert (await client.get("/api/links")).json() == []


async def test_create_checks_email_before_url(client):
    res = await client.post(
        "/api/links",
        json={**VALID_LINK, "studentEmail": "a@gmail.com", "url": "nope"},
    )
    assert res.status_code == 400
    assert "RVU" in res.json()["error"]["message"]


async def test_create_rejects_non_string_field(client):
    res = await client.post("/api/links", json={**VALID_LINK, "title": 42})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Invalid request data"
    assert error["category"] == "validation"
    assert "timestamp" in error
    assert error["details"][0]["field"] == "body.title"


async def test_create_returns_created_at_in_utc(client):
    created = (await client.post("/api/links", json=VALID_LINK)).json()
    listed = (await client.get("/api/links")).json()
    for stamp in (created["createdAt"], listed[0]["createdAt"]):
        assert stamp.endswith(("Z", "+00:00"))


# --- List ---------------------------------------------------------------------

async def test_list_empty(client):
    res = await client.get("/api/links")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_orders_newest_first(client, insert_link):
    await insert_link(minutes=1, title="t1")
    await insert_link(minutes=2, title="t2")
    await insert_link(minutes=3, title="t3")

    res = await client.get("/api/links")
    assert [link["title"] for link in res.json()] == ["t3", "t2", "t1"]


async def test_list_is_stable_without_writes(client, insert_link):
    await insert_link(minutes=1, title="t1")
    await insert_link(minutes=2, title="t2")

    first = (await client.get("/api/links")).json()
    second = (await client.get("/api/links")).json()
    assert first == second


# --- List by email ------------------------------------------------------------

async def test_list_by_email_returns_only_matching_newest_first(client, insert_link):
    await insert_link(minutes=1, title="mine-old", student_email="a@rvu.edu.in")
    await insert_link(minutes=2, title="other", student_email="b@rvu.edu.in")
    await insert_link(minutes=3, title="mine-new", student_email="a@rvu.edu.in")

    res = await client.get("/api/links/email/a@rvu.edu.in")
    assert res.status_code == 200
    assert [link["title"] for link in res.json()] == ["mine-new", "mine-old"]


async def test_list_by_email_rejects_invalid_email(client):
    res = await client.get("/api/links/email/a@gmail.com")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid RVU email format"


async def test_list_by_email_is_case_sensitive(client, insert_link):
    await insert_link(student_email="a@rvu.edu.in")
    res = await client.get("/api/links/email/A@rvu.edu.in")
    assert res.status_code == 200
    assert res.json() == []


# --- Delete -------------------------------------------------------------------

async def test_delete_scenario_wrong_then_right_token(client):
    created = (await client.post("/api/links", json=VALID_LINK)).json()

    wrong = await _delete(client, created["id"], {"userToken": "user_wrong"})
    assert wrong.status_code == 403
    assert len((await client.get("/api/links")).json()) == 1

    right = await _delete(client, created["id"], {"userToken": created["ownerToken"]})
    assert right.status_code == 200
    assert right.json() == {"message": "Link deleted successfully"}
    assert (await client.get("/api/links")).json() == []


async def test_delete_without_token_returns_400(client, insert_link):
    link = await insert_link()
    res = await _delete(client, link.id, {})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "User token is required"


async def test_delete_without_body_returns_400(client, insert_link):
    link = await insert_link()
    res = await _delete(client, link.id)
    assert res.status_code == 400


async def test_delete_checks_token_before_existence(client):
    res = await _delete(client, uuid4(), {})
    assert res.status_code == 400


async def test_delete_unknown_id_returns_404(client):
    res = await _delete(client, uuid4(), {"userToken": "user_x"})
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Link not found"


async def test_delete_malformed_id_returns_404(client):
    res = await _delete(client, "not-a-uuid", {"userToken": "user_x"})
    assert res.status_code == 404


async def test_second_delete_fails_with_404(client, insert_link):
    link = await insert_link(owner_token="user_owner")
    first = await _delete(client, link.id, {"userToken": "user_owner"})
    second = await _delete(client, link.id, {"userToken": "user_owner"})
    assert first.status_code == 200
    assert second.status_code == 404


async def test_delete_with_non_string_token_is_forbidden(client, insert_link):
    link = await insert_link(owner_token="123")
    res = await _delete(client, link.id, {"userToken": 123})
    assert res.status_code == 403
    assert len((await client.get("/api/links")).json()) == 1
