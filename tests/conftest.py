"""
Pytest configuration and shared fixtures.
Champion records follow the Data Dragon champion.json shape.
"""

import json

import pytest

from ranking import data_dragon


def _stats(**overrides):
    stats = {
        "hp": 600, "hpperlevel": 100,
        "mp": 300, "mpperlevel": 20,
        "movespeed": 330,
        "armor": 30, "armorperlevel": 4,
        "spellblock": 30, "spellblockperlevel": 1.3,
        "attackrange": 125,
        "hpregen": 8, "hpregenperlevel": 0.8,
        "mpregen": 8, "mpregenperlevel": 0.7,
        "crit": 0, "critperlevel": 0,
        "attackdamage": 60, "attackdamageperlevel": 3,
        "attackspeedperlevel": 2.5,
        "attackspeed": 0.625,
    }
    stats.update(overrides)
    return stats


def _champion(cid, name, tags, **stat_overrides):
    return {
        "version": "15.24.1",
        "id": cid,
        "key": str(sum(map(ord, cid))),
        "name": name,
        "title": "the Test Subject",
        "blurb": "",
        "info": {"attack": 5, "defense": 5, "magic": 5, "difficulty": 5},
        "tags": tags,
        "partype": "Mana",
        "stats": _stats(**stat_overrides),
    }


@pytest.fixture
def make_champion():
    """Factory for champion records with default stats."""
    return _champion


@pytest.fixture
def garen():
    return _champion("Garen", "Garen", ["Fighter", "Tank"],
                     hp=690, hpperlevel=98, mp=0, mpperlevel=0,
                     movespeed=340, armor=38, armorperlevel=4.2,
                     spellblock=32, spellblockperlevel=1.55,
                     attackdamage=69, attackdamageperlevel=4.5,
                     attackspeed=0.625, attackspeedperlevel=3.65)


@pytest.fixture
def ahri():
    return _champion("Ahri", "Ahri", ["Mage", "Assassin"],
                     hp=590, hpperlevel=104, mp=418, mpperlevel=25,
                     movespeed=330, armor=21, armorperlevel=4.2,
                     attackdamage=53, attackdamageperlevel=3,
                     attackspeed=0.668, attackspeedperlevel=2.2,
                     attackrange=550)


@pytest.fixture
def jinx():
    return _champion("Jinx", "Jinx", ["Marksman"],
                     hp=630, hpperlevel=105, movespeed=325,
                     armor=26, armorperlevel=4.7,
                     attackdamage=59, attackdamageperlevel=3.15,
                     attackspeed=0.625, attackspeedperlevel=1,
                     attackrange=525)


@pytest.fixture
def janna():
    return _champion("Janna", "Janna", ["Support", "Mage"],
                     hp=570, hpperlevel=90, movespeed=315,
                     armor=28, armorperlevel=4.5,
                     attackdamage=47, attackdamageperlevel=2.5,
                     attackrange=550)


@pytest.fixture
def champions(garen, ahri, jinx, janna):
    """Small population keyed by champion id, like champion.json 'data'."""
    return {c["id"]: c for c in (garen, ahri, jinx, janna)}


@pytest.fixture
def benchmarks():
    """Secondary benchmark table with known min/max per metric."""
    return {
        "A": {
            "dps": {"dps10s": 100, "dps20s": 80},
            "burst": {"totalDamage": 1000, "maxHpPercent": 0, "burstTime": 2},
            "utility": {"shieldTotal": 999, "shield20s": 100, "healTotal": 0,
                        "heal20s": 0, "ccTotal": 1, "cc20s": 2,
                        "buffGoldEfficiency": 0},
        },
        "B": {
            "dps": {"dps10s": 50, "dps20s": 40},
            "burst": {"totalDamage": 500, "maxHpPercent": 0.1, "burstTime": 4},
            "utility": {"shieldTotal": 0, "shield20s": 300, "healTotal": 0,
                        "heal20s": 200, "ccTotal": 3, "cc20s": 6,
                        "buffGoldEfficiency": 500},
        },
        "C": {
            "dps": {"dps10s": 0, "dps20s": 0},
            "utility": {"shieldTotal": 0, "shield20s": 200, "healTotal": 0,
                        "heal20s": 100, "ccTotal": 2, "cc20s": 4,
                        "buffGoldEfficiency": 250},
        },
        "D": {},
    }


@pytest.fixture
def champion_json(tmp_path, champions):
    """champion.json written to disk."""
    path = tmp_path / "champion.json"
    path.write_text(json.dumps({
        "type": "champion", "format": "standAloneComplex",
        "version": "15.24.1", "data": champions,
    }), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clear_champion_cache():
    data_dragon.clear_cache()
    yield
    data_dragon.clear_cache()
