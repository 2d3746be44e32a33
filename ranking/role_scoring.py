"""
Role-weighted global score — tankiness / DPS / mobility blended per role.

Uses only level-projected base stats (no benchmark table). The three inputs
are fixed rescalings, not population-normalized:

  tankiness = avg effective HP / 60     (~2000–6000 eHP at 18)
  dps       = base DPS / 4              (~100–400 DPS at 18)
  mobility  = movespeed 325 -> 50, +30 MS -> +50
"""

import logging

from ranking.level_projection import (DEFAULT_LEVEL, base_stats,
                                      project_stats_at_level)
from ranking.relative_scoring import round_half_away

logger = logging.getLogger(__name__)

# ── Config ─────────────────────────────────────────────────────────────────────
TANKINESS_DIVISOR  = 60
DPS_DIVISOR        = 4
MOBILITY_BASE_MS   = 325
MOBILITY_MS_STEP   = 30
MOBILITY_MIDPOINT  = 50

DEFAULT_ROLE = "fighter"

# First matching tag wins; order matters for multi-tag champions
ROLE_PRIORITY = [
    ("Tank",     "tank"),
    ("Assassin", "assassin"),
    ("Marksman", "marksman"),
    ("Mage",     "mage"),
    ("Support",  "support"),
    ("Fighter",  "fighter"),
]

# role -> (tankiness, dps, mobility); each row sums to 1.0
ROLE_WEIGHTS = {
    "tank":     (0.60, 0.20, 0.20),
    "assassin": (0.10, 0.50, 0.40),
    "marksman": (0.15, 0.70, 0.15),
    "mage":     (0.20, 0.50, 0.30),
    "support":  (0.40, 0.20, 0.40),
    "fighter":  (0.35, 0.40, 0.25),
}

ROLES = tuple(ROLE_WEIGHTS)


def role_of(champion: dict) -> str:
    """Main role from the first tag found in ROLE_PRIORITY."""
    tags = champion.get("tags") or []
    for tag, role in ROLE_PRIORITY:
        if tag in tags:
            return role
    logger.debug(f"No known role tag for {champion.get('id', '?')} {tags} "
                 f"— using {DEFAULT_ROLE}")
    return DEFAULT_ROLE


def score_tankiness(champion: dict, level: int = DEFAULT_LEVEL) -> float:
    stats = project_stats_at_level(champion, level)
    return round_half_away(stats.average_effective_hp / TANKINESS_DIVISOR, 1)


def score_dps(champion: dict, level: int = DEFAULT_LEVEL) -> float:
    stats = project_stats_at_level(champion, level)
    return round_half_away(stats.dps / DPS_DIVISOR, 1)


def score_mobility(champion: dict) -> float:
    """Movespeed only — no level growth."""
    movespeed = base_stats(champion).get("movespeed", 0)
    score = ((movespeed - MOBILITY_BASE_MS) / MOBILITY_MS_STEP
             * MOBILITY_MIDPOINT + MOBILITY_MIDPOINT)
    return round_half_away(score, 1)


def overall_score(champion: dict, level: int = DEFAULT_LEVEL) -> float:
    """Weighted blend of the three scores using the champion's role weights."""
    w_tank, w_dps, w_mob = ROLE_WEIGHTS[role_of(champion)]
    return (score_tankiness(champion, level) * w_tank
            + score_dps(champion, level) * w_dps
            + score_mobility(champion) * w_mob)
