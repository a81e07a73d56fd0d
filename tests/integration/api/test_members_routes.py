"""Integration tests for member API routes."""


def test_list_members_sorted(client):
    res = client.get("/api/members")
    assert res.status_code == 200
    body = res.json()
    assert [m["name"] for m in body["items"]] == ["Aldric", "brann", "Kal", "Zephyr"]
    assert body["total"] == 4
    assert body["roster_size"] == 4


def test_members_default_to_villager(client):
    member = client.get("/api/members").json()["items"][0]
    assert member == {
        "name": "Aldric",
        "id": "1001",
        "guild_name": "Maharlika",
        "role": "villager",
        "tier": 1,
    }


def test_search_members(client):
    res = client.get("/api/members", params={"q": "AL"})
    body = res.json()
    assert [m["name"] for m in body["items"]] == ["Aldric"]
    assert body["total"] == 1
    assert body["roster_size"] == 4


def test_update_member(client):
    res = client.put("/api/members/Kal", json={"role": "healer", "tier": 3})

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["member"]["role"] == "healer"
    assert body["member"]["tier"] == 3

    listed = client.get("/api/members", params={"role": "healer"}).json()
    assert [m["name"] for m in listed["items"]] == ["Kal"]


def test_update_member_via_post(client):
    res = client.post("/api/members/Zephyr", json={"role": "tank", "tier": 2})
    assert res.status_code == 200
    tier_two = client.get("/api/members", params={"tier": 2}).json()
    assert [m["name"] for m in tier_two["items"]] == ["Zephyr"]


def test_update_member_invalid(client):
    res = client.put("/api/members/Kal", json={"role": "wizard", "tier": 5})
    assert res.status_code == 400
    codes = {err["code"] for err in res.json()["detail"]}
    assert codes == {"role_invalid", "tier_invalid"}


def test_update_unknown_member(client):
    res = client.put("/api/members/Nobody", json={"role": "tank", "tier": 2})
    assert res.status_code == 404


def test_suggest(client):
    res = client.get("/api/members/suggest", params={"q": "a"})
    assert res.status_code == 200
    names = [m["name"] for m in res.json()["items"]]
    assert names == ["Aldric", "brann", "Kal"]


def test_suggest_blank_query(client):
    res = client.get("/api/members/suggest", params={"q": ""})
    assert res.json()["items"] == []


def test_stats(client):
    client.put("/api/members/Kal", json={"role": "healer", "tier": 3})

    res = client.get("/api/members/stats")
    assert res.status_code == 200
    body = res.json()
    assert body["role_stats"]["villager"] == 3
    assert body["role_stats"]["healer"] == 1
    assert body["role_stats"]["bsquad"] == 0
    assert body["tier_stats"] == {"1": 3, "2": 0, "3": 1, "4": 0}
