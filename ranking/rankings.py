"""
Population helpers — search, filter, sort and rank a champion mapping.
Everything is recomputed from scratch on each call; the population is a few
hundred champions at most.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from champ_data.benchmarks import get_champion_benchmark, has_any_data
from ranking.level_projection import (DEFAULT_LEVEL, DerivedStats, base_stats,
                                      project_stats_at_level)
from ranking.relative_scoring import score_all_categories
from ranking.role_scoring import (overall_score, role_of, score_dps,
                                  score_mobility, score_tankiness)

logger = logging.getLogger(__name__)

ALL_ROLES = "all"

BENCHMARK_TYPES = ("tankiness", "dps", "mobility", "base_stats")

BASE_STAT_TYPES = (
    "hp", "armor", "spellblock", "attackdamage", "attackspeed",
    "movespeed", "effectiveHp", "dps",
)


# ── Result dataclass ───────────────────────────────────────────────────────────

@dataclass
class ChampionRanking:
    champion:  dict
    role:      str
    tankiness: float
    dps:       float
    mobility:  float
    overall:   float
    rank:      int = 0


@dataclass
class RankedChampion:
    champion: dict
    score:    float
    rank:     int = 0


def _values(champions) -> list:
    return list(champions.values()) if isinstance(champions, dict) else list(champions)


# ── Search / filter / sort ─────────────────────────────────────────────────────

def search_champions(champions, query: str) -> list:
    """Case-insensitive substring match on name or id."""
    q = query.lower()
    return [c for c in _values(champions)
            if q in c.get("name", "").lower() or q in c.get("id", "").lower()]


def filter_by_role(champions, role: str) -> list:
    """
    Champions carrying `role` among their tags (any position).
    Unlike role_of(), a Fighter/Tank counts for both "fighter" and "tank".
    """
    champs = _values(champions)
    if role == ALL_ROLES:
        return champs
    role = role.lower()
    return [c for c in champs
            if role in (t.lower() for t in c.get("tags") or [])]


def sort_by_stat(champions, stat: str, level: int = DEFAULT_LEVEL,
                 ascending: bool = False) -> list:
    """Sort by one DerivedStats field at `level` (highest first by default)."""
    if stat not in DerivedStats.__dataclass_fields__:
        raise ValueError(f"Unknown stat: {stat!r}")
    return sorted(
        _values(champions),
        key=lambda c: getattr(project_stats_at_level(c, level), stat),
        reverse=not ascending,
    )


# ── Rankings ───────────────────────────────────────────────────────────────────

def rank_champions(champions, level: int = DEFAULT_LEVEL,
                   role: str = ALL_ROLES) -> list:
    """Global ranking by role-weighted overall score, best first."""
    rows = [
        ChampionRanking(
            champion  = c,
            role      = role_of(c),
            tankiness = score_tankiness(c, level),
            dps       = score_dps(c, level),
            mobility  = score_mobility(c),
            overall   = overall_score(c, level),
        )
        for c in filter_by_role(champions, role)
    ]
    rows.sort(key=lambda r: r.overall, reverse=True)
    for i, row in enumerate(rows, start=1):
        row.rank = i
    return rows


def _base_stat_value(champion: dict, stats: DerivedStats, stat: str) -> float:
    if stat == "movespeed":
        return base_stats(champion).get("movespeed", 0)
    if stat == "effectiveHp":
        return stats.average_effective_hp
    if stat in BASE_STAT_TYPES:
        return getattr(stats, stat)
    logger.debug(f"Unknown base stat {stat!r} — scoring 0")
    return 0


def rank_by_benchmark(champions, category: str, level: int = DEFAULT_LEVEL,
                      stat: str = "hp", role: str = ALL_ROLES) -> list:
    """Ranking for one benchmark page: a composite input or a raw base stat."""
    if category == "tankiness":
        score = lambda c: score_tankiness(c, level)
    elif category == "dps":
        score = lambda c: score_dps(c, level)
    elif category == "mobility":
        score = score_mobility
    elif category == "base_stats":
        score = lambda c: _base_stat_value(
            c, project_stats_at_level(c, level), stat)
    else:
        raise ValueError(f"Unknown benchmark type: {category!r}")

    rows = [RankedChampion(champion=c, score=score(c))
            for c in filter_by_role(champions, role)]
    rows.sort(key=lambda r: r.score, reverse=True)
    for i, row in enumerate(rows, start=1):
        row.rank = i
    return rows


# ── Detail view ────────────────────────────────────────────────────────────────

def champion_detail(champion: dict, level: int = DEFAULT_LEVEL,
                    benchmarks: Optional[dict] = None) -> dict:
    """
    Everything a per-champion page shows, at one level.
    "benchmark" is the raw measurement entry (None if unmeasured), shown
    next to the relative scores in "categories".
    """
    champion_id = champion.get("id", "")
    return {
        "champion":   champion,
        "level":      level,
        "role":       role_of(champion),
        "stats":      project_stats_at_level(champion, level),
        "tankiness":  score_tankiness(champion, level),
        "dps":        score_dps(champion, level),
        "mobility":   score_mobility(champion),
        "overall":    overall_score(champion, level),
        "categories": score_all_categories(champion_id, benchmarks),
        "benchmark":  get_champion_benchmark(champion_id, benchmarks),
        "has_benchmark_data": has_any_data(champion_id, benchmarks),
    }
