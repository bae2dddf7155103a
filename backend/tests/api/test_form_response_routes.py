"""Form response routes - submission checks and the paginated listing envelope."""

from uuid import uuid4

SURVEY = {"tenantId": "t1", "name": "Survey", "form_structure": {"questions": []}}


async def _form(client, **overrides):
    return (await client.post("/api/forms", json={**SURVEY, **overrides})).json()


async def test_submit_response_returns_201(client):
    form = await _form(client)
    res = await client.post(
        f"/api/forms/t1/{form['id']}/responses",
        json={"responses": {"q1": "yes"}, "user_id": "u1"},
        headers={"User-Agent": "survey-widget/1.0"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["is_complete"] is False
    assert body["user_agent"] == "survey-widget/1.0"
    assert body["ip_address"]


async def test_submit_without_responses_is_400(client):
    form = await _form(client)
    res = await client.post(f"/api/forms/t1/{form['id']}/responses", json={"user_id": "u1"})
    assert res.status_code == 400
    assert "responses" in res.json()["error"]


async def test_submit_to_unknown_form_is_404(client):
    res = await client.post(f"/api/forms/t1/{uuid4()}/responses", json={"responses": {}})
    assert res.status_code == 404


async def test_submit_to_inactive_form_is_404(client):
    form = await _form(client)
    await client.delete(f"/api/forms/t1/{form['id']}")
    res = await client.post(f"/api/forms/t1/{form['id']}/responses", json={"responses": {}})
    assert res.status_code == 404


async def test_listing_envelope_and_tri_state_filter(client):
    form = await _form(client)
    url = f"/api/forms/t1/{form['id']}/responses"
    await client.post(url, json={"responses": {"n": 1}, "is_complete": True})
    await client.post(url, json={"responses": {"n": 2}})
    await client.post(url, json={"responses": {"n": 3}})

    res = await client.get(url)
    assert res.status_code == 200
    body = res.json()
    assert len(body["responses"]) == 3
    assert body["pagination"] == {"page": 1, "limit": 50, "total": 3, "totalPages": 1}

    res = await client.get(url, params={"is_complete": "false"})
    assert len(res.json()["responses"]) == 2

    res = await client.get(url, params={"is_complete": "true"})
    assert [r["responses"]["n"] for r in res.json()["responses"]] == [1]


async def test_listing_pagination_window(client):
    form = await _form(client)
    url = f"/api/forms/t1/{form['id']}/responses"
    for i in range(5):
        await client.post(url, json={"responses": {"n": i}})

    res = await client.get(url, params={"page": "2", "limit": "2"})
    body = res.json()
    assert len(body["responses"]) == 2
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 5, "totalPages": 3}


async def test_get_single_response(client):
    form = await _form(client)
    url = f"/api/forms/t1/{form['id']}/responses"
    created = (await client.post(url, json={"responses": {"n": 1}})).json()

    res = await client.get(f"{url}/{created['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]

    res = await client.get(f"/api/forms/t2/{form['id']}/responses/{created['id']}")
    assert res.status_code == 404


async def test_listing_enormous_page_is_empty_not_500(client):
    form = await _form(client)
    url = f"/api/forms/t1/{form['id']}/responses"
    await client.post(url, json={"responses": {"n": 1}})

    res = await client.get(url, params={"page": "99999999999999999999", "limit": "50"})
    assert res.status_code == 200
    body = res.json()
    assert body["responses"] == []
    assert body["pagination"]["total"] == 1


async def test_null_is_complete_is_stored_as_incomplete(client):
    form = await _form(client)
    res = await client.post(
        f"/api/forms/t1/{form['id']}/responses",
        json={"responses": {"a": 1}, "is_complete": None},
    )
    assert res.status_code == 201
    assert res.json()["is_complete"] is False
