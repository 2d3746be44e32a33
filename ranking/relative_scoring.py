"""
Relative scoring — population-normalized 0–100 scores.

Every metric is scored against the min/max of all *positive* values in the
population. Values <= 0 count as "no data": they are left out of the min/max
window and always score 0 themselves.

Benchmark categories (dps, tankiness, burst, utility, mobility) combine 2–4
such scores into an unweighted, rounded mean.
"""

from dataclasses import dataclass, field
from typing import Optional
import logging
import math

from champ_data.benchmarks import (CATEGORIES, get_all_values,
                                   get_champion_benchmark)

logger = logging.getLogger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100

# category -> ((result name, benchmark field, inverted), ...)
# Utility one-shot totals (shieldTotal, healTotal, ccTotal) are display-only.
CATEGORY_METRICS = {
    "dps": (
        ("dps10s_score",         "dps10s",                  False),
        ("dps20s_score",         "dps20s",                  False),
    ),
    "tankiness": (
        ("base_score",           "towerShotsBase",          False),
        ("with_abilities_score", "towerShotsWithAbilities", False),
    ),
    "burst": (
        ("damage_score",         "totalDamage",             False),
        ("max_hp_score",         "maxHpPercent",            False),
        ("speed_score",          "burstTime",               True),   # faster = better
    ),
    "utility": (
        ("shield_score",         "shield20s",               False),
        ("heal_score",           "heal20s",                 False),
        ("cc_score",             "cc20s",                   False),
        ("buff_score",           "buffGoldEfficiency",      False),
    ),
    "mobility": (
        ("dash_score",           "dashDistance",            False),
        ("speed_score",          "speedBonus",              False),
        ("tenacity_score",       "slowResistTenacity",      False),
    ),
}


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class CategoryScores:
    category:      str
    scores:        dict = field(default_factory=dict)   # sub-score name -> 0..100
    overall_score: int  = 0

    def __getattr__(self, name):
        # r.dps10s_score etc.
        scores = self.__dict__.get("scores", {})
        if name in scores:
            return scores[name]
        raise AttributeError(name)


# ── Normalization ──────────────────────────────────────────────────────────────

def round_half_away(value: float, ndigits: int = 0):
    """
    Round half away from zero (2.5 -> 3, -2.5 -> -3).
    Same as JS Math.round for positive values; negative ties differ
    (Math.round(-2.5) is -2). Only mobility below 295 MS goes negative.
    """
    factor  = 10 ** ndigits
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    rounded = rounded if value >= 0 else -rounded
    return int(rounded) if ndigits == 0 else rounded


def normalize(value: float, population, invert: bool = False) -> int:
    """
    Score `value` 0–100 against the positive values of `population`.

    0   — no positive value in the population, or value <= 0
    100 — every positive value is the same
    """
    valid = [v for v in population if v > 0]
    if not valid or value <= 0:
        return 0

    low, high = min(valid), max(valid)
    if high == low:
        return SCORE_MAX

    if invert:
        ratio = (high - value) / (high - low)
    else:
        ratio = (value - low) / (high - low)

    # value outside the window (not a population member) stays on the scale
    return max(SCORE_MIN, min(SCORE_MAX, round_half_away(ratio * 100)))


def inverse_normalize(value: float, population) -> int:
    """normalize() for metrics where lower is better (e.g. combo time)."""
    return normalize(value, population, invert=True)


# ── Category composites ────────────────────────────────────────────────────────

def score_category(champion_id: str, category: str,
                   benchmarks: Optional[dict] = None) -> Optional[CategoryScores]:
    """
    Score one benchmark category for a champion.

    Returns None when the champion has no record for that category — callers
    must not confuse that with a real 0% score.
    """
    if category not in CATEGORY_METRICS:
        raise ValueError(f"Unknown benchmark category: {category!r}")

    entry = get_champion_benchmark(champion_id, benchmarks)
    data  = (entry or {}).get(category)
    if not data:
        logger.debug(f"No {category} benchmark for {champion_id}")
        return None

    scores = {}
    for name, metric, inverted in CATEGORY_METRICS[category]:
        population = get_all_values(category, metric, benchmarks)
        scores[name] = normalize(data.get(metric) or 0, population, inverted)

    overall = round_half_away(sum(scores.values()) / len(scores))
    return CategoryScores(category=category, scores=scores, overall_score=overall)


def score_dps_category(champion_id: str, benchmarks: Optional[dict] = None):
    return score_category(champion_id, "dps", benchmarks)


def score_tankiness_category(champion_id: str, benchmarks: Optional[dict] = None):
    return score_category(champion_id, "tankiness", benchmarks)


def score_burst_category(champion_id: str, benchmarks: Optional[dict] = None):
    return score_category(champion_id, "burst", benchmarks)


def score_utility_category(champion_id: str, benchmarks: Optional[dict] = None):
    return score_category(champion_id, "utility", benchmarks)


def score_mobility_category(champion_id: str, benchmarks: Optional[dict] = None):
    return score_category(champion_id, "mobility", benchmarks)


def score_all_categories(champion_id: str,
                         benchmarks: Optional[dict] = None) -> dict:
    """category -> CategoryScores | None, for all five categories."""
    return {cat: score_category(champion_id, cat, benchmarks)
            for cat in CATEGORIES}
