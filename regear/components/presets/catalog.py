"""
Default gear preset catalog, keyed by role then preset name.
"""

from __future__ import annotations

from regear.domain.entities import CombatRole, GearPreset


def _preset(
    weapon: str,
    headgear: str,
    armor: str,
    boots: str,
    offhand: str | None = None,
) -> GearPreset:
    return GearPreset(weapon=weapon, offhand=offhand, headgear=headgear, armor=armor, boots=boots)


TANK_PRESETS: dict[str, GearPreset] = {
    "Main Tank": _preset("Earthrune", "Cleric Cowl", "Knight Armor", "Tanner Shoes"),
    "Off Tank": _preset(
        "Incubus Mace",
        "Assassin Hood",
        "Judicator Armor",
        "Royal Shoes",
        "Taproot",
    ),
    "D Tank": _preset("Great Arcane", "Assassin Hood", "Knight Armor", "Royal Shoes"),
    "Off Tank 2": _preset("Heavy Mace", "Hellion Hood", "Guardian Armor", "Royal Shoes"),
    "B Tank": _preset(
        "Hammer",
        "Judicator Helmet",
        "Guardian Armor",
        "Royal Shoes",
        "Leering Cane",
    ),
    "B Tank 2": _preset("Truebolt", "Assassin Hood", "Guardian Armor", "Royal Shoes"),
    "B Tank 3": _preset(
        "Incubus Mace",
        "Assassin Hood",
        "Judicator Armor",
        "Royal Shoes",
        "Taproot",
    ),
    "D Tank 2": _preset("BMS", "Assassin Hood", "Guardian Armor", "Royal Shoes"),
}

DPS_PRESETS: dict[str, GearPreset] = {
    "Realm Breaker": _preset(
        "Realm Breaker",
        "Cleric Cowl",
        "Mistwalker Jacket",
        "Graveguard Boots",
    ),
    "Carving": _preset("Carving", "Knight Helmet", "Knight Armor", "Graveguard Boots"),
    "Spirit Hunter": _preset(
        "Spirit Hunter",
        "Assassin Hood",
        "Mistwalker Jacket",
        "Graveguard Boots",
    ),
    "Spike Gauntlet": _preset(
        "Spike Gauntlet",
        "Mistwalker Hood",
        "Tenacity Jacket",
        "Graveguard Boots",
    ),
    "Roilcaller": _preset(
        "Roilcaller",
        "Assassin Hood",
        "Hunter Jacket",
        "Graveguard Boots",
        "Face Breaker",
    ),
    "Dawnsong": _preset("Dawnsong", "Assassin Hood", "Tenacity Jacket", "Graveguard Boots"),
    "Permafrost": _preset("Permafrost", "Assassin Hood", "Scholar Robe", "Graveguard Boots"),
    "Longbow": _preset("Longbow", "Mistwalker Hood", "Mistwalker Jacket", "Graveguard Boots"),
    "Heron Spear": _preset(
        "Heron Spear",
        "Cleric Cowl",
        "Soldier Armor",
        "Stalker Shoes",
        "CryptCandle",
    ),
    "Spike Gauntlet 2": _preset(
        "Spike Gauntlet",
        "Assassin Hood",
        "Hellion Jacket",
        "Stalker Shoes",
    ),
    "Infinity Blade": _preset(
        "Infinity Blade",
        "Cleric Cowl",
        "Hellion Jacket",
        "Sandals",
        "Muisak",
    ),
    "Dawnsong 2": _preset("Dawnsong", "Assassin Hood", "Hellion Jacket", "Stalker Shoes"),
    "Bearpaw": _preset("Bearpaw", "Cleric Cowl", "Hellion Jacket", "Sandals", "Halberd"),
    "Bloodletter": _preset("Bloodletter", "Cleric Cowl", "Hellion Jacket", "Sandals", "Muisak"),
    "Astral": _preset("Astral", "Assassin Hood", "Tenacity Jacket", "Graveguard Boots"),
}

SUPPORT_PRESETS: dict[str, GearPreset] = {
    "Enigmatic": _preset("Enigmatic", "Assassin Hood", "Judicator Armor", "Royal Shoes"),
    "Damnation": _preset("Damnation", "Assassin Hood", "Judicator Armor", "Royal Shoes"),
    "Damnation 2": _preset("Damnation", "Assassin Hood", "Scholar Robe", "Graveguard Boots"),
    "Locus": _preset("Locus", "Assassin Hood", "Judicator Armor", "Royal Shoes"),
    "Oath Keeper": _preset("Oath Keeper", "Assassin Hood", "Demon armor", "Royal Shoes"),
    "Lifecurse": _preset(
        "Lifecurse",
        "Assassin Hood",
        "Demon Armor",
        "Graveguard Boots",
        "Taproot",
    ),
    "Rootbound": _preset("Rootbound", "Assassin Hood", "Judicator Armor", "Royal Shoes"),
}

HEALER_PRESETS: dict[str, GearPreset] = {
    "Hallowfall": _preset(
        "Hallowfall",
        "Cleric Cowl",
        "Judicator Armor",
        "Cleric Sandals",
        "Censer",
    ),
    "Hallowfall 2": _preset(
        "Hallowfall",
        "Cleric Cowl",
        "Judicator Armor",
        "Cleric Sandals",
        "Censer",
    ),
    "Fallen": _preset("Fallen", "Assassin Hood", "Purify Robe", "Cleric Sandals"),
    "Nature": _preset("Nature", "Assassin Hood", "Purify Robe", "Cleric Sandals", "Wildstaff"),
}

DEFAULT_PRESETS: dict[CombatRole, dict[str, GearPreset]] = {
    "tank": TANK_PRESETS,
    "dps": DPS_PRESETS,
    "support": SUPPORT_PRESETS,
    "healer": HEALER_PRESETS,
}
