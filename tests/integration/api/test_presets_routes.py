"""Integration tests for preset and gear API routes."""

MACE = {"weapon": "Mace", "offhand": "Taproot", "armor": "Judicator Armor"}


def test_defaults_seeded_on_startup(client):
    res = client.get("/api/presets/tank")
    assert res.status_code == 200
    body = res.json()
    names = [p["name"] for p in body["items"]]
    assert "Main Tank" in names
    assert names == sorted(names)
    assert body["total"] == len(names)


def test_unknown_role_has_no_presets(client):
    res = client.get("/api/presets/villager")
    assert res.status_code == 200
    assert res.json()["items"] == []


def test_create_preset(client):
    res = client.post("/api/presets/tank", json={"name": "1H Mace", "gear": MACE})
    assert res.status_code == 201
    assert res.json()["gear"] == {
        "weapon": "Mace",
        "offhand": "Taproot",
        "headgear": "",
        "armor": "Judicator Armor",
        "boots": "",
    }
    names = [p["name"] for p in client.get("/api/presets/tank").json()["items"]]
    assert "1H Mace" in names


def test_create_duplicate_preset(client):
    res = client.post("/api/presets/tank", json={"name": "Main Tank", "gear": MACE})
    assert res.status_code == 400
    assert res.json()["detail"][0]["code"] == "name_duplicate"


def test_create_preset_blank_weapon(client):
    res = client.post("/api/presets/tank", json={"name": "Empty", "gear": {"weapon": " "}})
    assert res.status_code == 400
    assert res.json()["detail"][0]["code"] == "weapon_required"


def test_rename_preset(client):
    res = client.put("/api/presets/tank/Main Tank", json={"gear": MACE, "new_name": "Mace Tank"})
    assert res.status_code == 200
    assert res.json()["name"] == "Mace Tank"

    names = [p["name"] for p in client.get("/api/presets/tank").json()["items"]]
    assert "Mace Tank" in names
    assert "Main Tank" not in names


def test_update_missing_preset(client):
    res = client.put("/api/presets/tank/Nope", json={"gear": MACE})
    assert res.status_code == 404


def test_delete_preset(client):
    assert client.delete("/api/presets/tank/Main Tank").status_code == 204
    assert client.delete("/api/presets/tank/Main Tank").status_code == 404


def test_resolve_gear(client):
    res = client.post(
        "/api/gear/resolve",
        json={
            "gear": {"weapon": "Hammer", "headgear": "H", "armor": "A", "boots": "B"},
            "tier": 2,
            "role": "tank",
        },
    )
    assert res.status_code == 200
    body = res.json()
    assert body["gear"] == {"weapon": "Hammer", "headgear": "", "armor": "A", "boots": "B"}
    assert body["description"] == "Weapon + Chest Armor + Boots"
    assert body["restricted"] is True


def test_resolve_gear_full_tier(client):
    res = client.post(
        "/api/gear/resolve",
        json={"gear": MACE, "tier": 4, "role": "dps"},
    )
    body = res.json()
    assert body["restricted"] is False
    assert body["gear"]["offhand"] == "Taproot"


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_resolve_gear_rejects_non_combat_role(client):
    res = client.post(
        "/api/gear/resolve",
        json={"gear": MACE, "tier": 1, "role": "villager"},
    )
    assert res.status_code == 422


def test_resolve_gear_unknown_tier_is_unrestricted(client):
    res = client.post(
        "/api/gear/resolve",
        json={"gear": MACE, "tier": 7, "role": "tank"},
    )
    assert res.status_code == 200
    assert res.json()["restricted"] is False
