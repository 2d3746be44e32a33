"""
Champion benchmark measurements — values not derivable from base stats.
Source: practice-tool runs (level 11, two-item build, no runes).
Scores are computed against every entry in this table, so adding or
editing a champion shifts everyone else's relative score.

Template — copy for a new champion, leave unmeasured fields at 0:

    "ChampionId": {
        "dps":       {"description": "", "dps10s": 0, "dps20s": 0},
        "tankiness": {"description": "", "towerShotsBase": 0,
                      "towerShotsWithAbilities": 0},
        "burst":     {"description": "", "totalDamage": 0,
                      "maxHpPercent": 0,       # 0.15 = 15% max HP
                      "burstTime": 0},         # seconds, lower is better
        "utility":   {"description": "", "shieldTotal": 0, "shield20s": 0,
                      "healTotal": 0, "heal20s": 0, "ccTotal": 0, "cc20s": 0,
                      "buffGoldEfficiency": 0},
        "mobility":  {"description": "", "dashDistance": 0,
                      "speedBonus": 0,         # %
                      "slowResistTenacity": 0},  # %
    },

A champion with no entry (or no entry for one category) gets no score for
it. A measured 0 is treated the same as "not measured" by the scoring.
"""

from typing import Optional

CATEGORIES = ("dps", "tankiness", "burst", "utility", "mobility")

CHAMPION_BENCHMARKS = {
    "Aatrox": {
        "dps": {
            "description": "Q1-Q2-Q3 weave + autos on a target dummy",
            "dps10s": 312, "dps20s": 248,
        },
        "tankiness": {
            "description": "Outer tower, standing still vs. with W/R healing",
            "towerShotsBase": 7, "towerShotsWithAbilities": 11,
        },
        "burst": {
            "description": "E-Q1-E-Q2-Q3 sweetspots",
            "totalDamage": 980, "maxHpPercent": 0, "burstTime": 2.9,
        },
        "utility": {
            "description": "W pull, Q3 knockup",
            "shieldTotal": 0, "shield20s": 0,
            "healTotal": 420, "heal20s": 760,
            "ccTotal": 1.75, "cc20s": 3.5,
            "buffGoldEfficiency": 0,
        },
        "mobility": {
            "description": "E dashes, R movespeed",
            "dashDistance": 600, "speedBonus": 60, "slowResistTenacity": 0,
        },
    },
    "Ahri": {
        "dps": {"description": "", "dps10s": 228, "dps20s": 151},
        "tankiness": {
            "description": "",
            "towerShotsBase": 5, "towerShotsWithAbilities": 6,
        },
        "burst": {
            "description": "E-Q-W-R",
            "totalDamage": 1120, "maxHpPercent": 0, "burstTime": 1.6,
        },
        "utility": {
            "description": "Charm",
            "shieldTotal": 0, "shield20s": 0,
            "healTotal": 110, "heal20s": 180,
            "ccTotal": 1.8, "cc20s": 3.6,
            "buffGoldEfficiency": 0,
        },
        "mobility": {
            "description": "R three dashes, W movespeed",
            "dashDistance": 1500, "speedBonus": 40, "slowResistTenacity": 0,
        },
    },
    "Akali": {
        "dps": {"description": "", "dps10s": 265, "dps20s": 170},
        "tankiness": {
            "description": "",
            "towerShotsBase": 5, "towerShotsWithAbilities": 8,
        },
        "burst": {
            "description": "Q-E1-E2-R1-R2",
            "totalDamage": 1250, "maxHpPercent": 0, "burstTime": 2.4,
        },
        "utility": {
            "description": "",
            "shieldTotal": 0, "shield20s": 0,
            "healTotal": 0, "heal20s": 0,
            "ccTotal": 0, "cc20s": 0,
            "buffGoldEfficiency": 0,
        },
        "mobility": {
            "description": "E + R dashes, shroud movespeed",
            "dashDistance": 1900, "speedBonus": 40, "slowResistTenacity": 0,
        },
    },
    "Alistar": {
        "tankiness": {
            "description": "R damage reduction active",
            "towerShotsBase": 9, "towerShotsWithAbilities": 18,
        },
        "utility": {
            "description": "W-Q combo, E stun, E heal",
            "shieldTotal": 0, "shield20s": 0,
            "healTotal": 180, "heal20s": 360,
            "ccTotal": 3.0, "cc20s": 6.0,
            "buffGoldEfficiency": 0,
        },
        "mobility": {
            "description": "W dash, R cleanse",
            "dashDistance": 650, "speedBonus": 0, "slowResistTenacity": 0,
        },
    },
    "Janna": {
        "tankiness": {
            "description": "",
            "towerShotsBase": 4, "towerShotsWithAbilities": 6,
        },
        "utility": {
            "description": "E shield on ally, R heal, Q knockup",
            "shieldTotal": 240, "shield20s": 720,
            "healTotal": 300, "heal20s": 300,
            "ccTotal": 1.25, "cc20s": 2.5,
            "buffGoldEfficiency": 560,
        },
        "mobility": {
            "description": "Passive movespeed",
            "dashDistance": 0, "speedBonus": 8, "slowResistTenacity": 0,
        },
    },
    "Garen": {
        "dps": {"description": "E spin full duration", "dps10s": 240, "dps20s": 210},
        "tankiness": {
            "description": "W shield + tenacity",
            "towerShotsBase": 8, "towerShotsWithAbilities": 13,
        },
        "burst": {
            "description": "Q-E-R",
            "totalDamage": 890, "maxHpPercent": 0.25, "burstTime": 4.2,
        },
        "utility": {
            "description": "",
            "shieldTotal": 160, "shield20s": 320,
            "healTotal": 0, "heal20s": 0,
            "ccTotal": 1.5, "cc20s": 3.0,
            "buffGoldEfficiency": 0,
        },
        "mobility": {
            "description": "Q movespeed + slow cleanse",
            "dashDistance": 0, "speedBonus": 35, "slowResistTenacity": 60,
        },
    },
    # Not measured yet
    "Akshan": {},
}


def get_champion_benchmark(champion_id: str,
                           benchmarks: Optional[dict] = None) -> Optional[dict]:
    """Return the benchmark entry for a champion, or None if absent."""
    table = CHAMPION_BENCHMARKS if benchmarks is None else benchmarks
    return table.get(champion_id) or None


def get_all_values(category: str, field: str,
                   benchmarks: Optional[dict] = None) -> list:
    """One value per benchmark entry; missing category/field reads as 0."""
    table = CHAMPION_BENCHMARKS if benchmarks is None else benchmarks
    return [(entry.get(category) or {}).get(field) or 0
            for entry in table.values()]


def has_any_data(champion_id: str, benchmarks: Optional[dict] = None) -> bool:
    """True if at least one headline measurement is filled in."""
    data = get_champion_benchmark(champion_id, benchmarks)
    if not data:
        return False

    def _positive(category: str, *fields: str) -> bool:
        block = data.get(category) or {}
        return any((block.get(f) or 0) > 0 for f in fields)

    return (_positive("dps", "dps10s", "dps20s")
            or _positive("tankiness", "towerShotsBase", "towerShotsWithAbilities")
            or _positive("burst", "totalDamage")
            or _positive("utility", "shieldTotal", "healTotal", "ccTotal")
            or _positive("mobility", "dashDistance", "speedBonus"))
