"""
Level projection — champion base stats scaled to a given level.

Input:  champion record (Data Dragon shape) or its bare "stats" mapping.
Output: DerivedStats with the level-scaled primaries plus effective HP
        against physical / magic damage and base DPS.

Flat stats grow by `perlevel * (level - 1)`; attack speed grows by a
percentage of its base value. Level 1 is the identity projection.
"""

from dataclasses import dataclass, asdict

# ── Config ─────────────────────────────────────────────────────────────────────
MIN_LEVEL     = 1
MAX_LEVEL     = 18
DEFAULT_LEVEL = 18

# Stats with a flat "<stat>perlevel" increment in the dataset
FLAT_GROWTH_STATS = (
    "hp", "mp", "armor", "spellblock", "attackdamage", "hpregen", "mpregen",
)


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DerivedStats:
    hp:            float = 0.0
    mp:            float = 0.0
    armor:         float = 0.0
    spellblock:    float = 0.0   # magic resist
    attackdamage:  float = 0.0
    attackspeed:   float = 0.0
    hpregen:       float = 0.0
    mpregen:       float = 0.0

    # Derived from the projected values above
    effective_hp_physical: float = 0.0
    effective_hp_magic:    float = 0.0
    dps:                   float = 0.0   # no crit, no bonus AS

    @property
    def average_effective_hp(self) -> float:
        return (self.effective_hp_physical + self.effective_hp_magic) / 2

    def as_dict(self) -> dict:
        return asdict(self)


# ── Helpers ────────────────────────────────────────────────────────────────────

def clamp_level(level) -> int:
    """Clamp to the playable range. The projection itself never clamps."""
    return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))


def base_stats(champion: dict) -> dict:
    # Accept a full champion record or the stats block on its own
    stats = champion.get("stats")
    return stats if isinstance(stats, dict) else champion


# ── Projection ─────────────────────────────────────────────────────────────────

def project_stats_at_level(champion: dict, level: int) -> DerivedStats:
    """Calculate a champion's stats at `level` (no items, no runes)."""
    stats = base_stats(champion)
    steps = level - 1

    projected = {
        name: stats.get(name, 0) + stats.get(f"{name}perlevel", 0) * steps
        for name in FLAT_GROWTH_STATS
    }
    attackspeed = stats.get("attackspeed", 0) * (
        1 + stats.get("attackspeedperlevel", 0) * steps / 100)

    hp = projected["hp"]
    return DerivedStats(
        attackspeed=attackspeed,
        effective_hp_physical=hp * (1 + projected["armor"] / 100),
        effective_hp_magic=hp * (1 + projected["spellblock"] / 100),
        dps=projected["attackdamage"] * attackspeed,
        **projected,
    )
