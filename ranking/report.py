"""Plain-text formatting of rankings and champion details for the console."""

from ranking.level_projection import project_stats_at_level
from ranking.relative_scoring import CATEGORY_METRICS

ROLE_ICONS = {
    "tank":     "🛡",
    "fighter":  "⚔",
    "mage":     "✨",
    "assassin": "🗡",
    "marksman": "🏹",
    "support":  "✚",
}

CATEGORY_LABELS = {
    "dps":       "DPS",
    "tankiness": "Tankiness",
    "burst":     "Burst",
    "utility":   "Utility",
    "mobility":  "Mobility",
}

# Raw measurements shown under each category, scored or not
RAW_FIELDS = {
    "dps":       ("dps10s", "dps20s"),
    "tankiness": ("towerShotsBase", "towerShotsWithAbilities"),
    "burst":     ("totalDamage", "maxHpPercent", "burstTime"),
    "utility":   ("shieldTotal", "shield20s", "healTotal", "heal20s",
                  "ccTotal", "cc20s", "buffGoldEfficiency"),
    "mobility":  ("dashDistance", "speedBonus", "slowResistTenacity"),
}


def format_rankings(rows: list, limit: int = 0) -> str:
    """Ranking table from rank_champions()."""
    if not rows:
        return "[ EMPTY ] No champions to rank"

    shown = rows[:limit] if limit > 0 else rows
    lines = [f"{'#':>4}  {'Champion':<16}{'Role':<11}"
             f"{'Tank':>8}{'DPS':>8}{'Mob':>8}{'Overall':>9}"]
    for r in shown:
        icon = ROLE_ICONS.get(r.role, " ")
        lines.append(
            f"{r.rank:>4}  {r.champion.get('name', '?'):<16}"
            f"{icon} {r.role:<9}"
            f"{r.tankiness:>8.1f}{r.dps:>8.1f}{r.mobility:>8.1f}"
            f"{r.overall:>9.1f}"
        )
    if len(shown) < len(rows):
        lines.append(f"  ... {len(rows) - len(shown)} more")
    return "\n".join(lines)


def format_benchmark(rows: list, limit: int = 0) -> str:
    """Ranking table from rank_by_benchmark()."""
    if not rows:
        return "[ EMPTY ] No champions to rank"
    shown = rows[:limit] if limit > 0 else rows
    return "\n".join(
        f"{r.rank:>4}  {r.champion.get('name', '?'):<16}{r.score:>10.1f}"
        for r in shown
    )


def format_champion_list(champions: list, level: int, stat: str = "name",
                         limit: int = 0) -> str:
    """Searched / sorted champion list; shows `stat` at `level` unless "name"."""
    if not champions:
        return "[ EMPTY ] No matching champions"

    shown = champions[:limit] if limit > 0 else champions
    lines = []
    for c in shown:
        tags = ", ".join(c.get("tags") or [])
        line = f"  {c.get('name', '?'):<16}{tags:<20}"
        if stat != "name":
            value = getattr(project_stats_at_level(c, level), stat)
            line += f"{stat}={value:.1f}"
        lines.append(line.rstrip())
    if len(shown) < len(champions):
        lines.append(f"  ... {len(champions) - len(shown)} more")
    return "\n".join(lines)


def format_champion_detail(detail: dict) -> str:
    """Detail view from champion_detail()."""
    champ = detail["champion"]
    s     = detail["stats"]
    lines = []

    lines.append(f"{champ.get('name', '?')} — {champ.get('title', '')}  "
                 f"[{detail['role']}]  Level {detail['level']}")
    lines.append("")

    lines.append(f"Tankiness: {detail['tankiness']:.1f}  |  "
                 f"DPS: {detail['dps']:.1f}  |  "
                 f"Mobility: {detail['mobility']:.1f}  |  "
                 f"Overall: {detail['overall']:.1f}")
    lines.append("")

    lines.append(f"HP:     {s.hp:.0f}   (regen {s.hpregen:.1f})")
    lines.append(f"Mana:   {s.mp:.0f}   (regen {s.mpregen:.1f})")
    lines.append(f"Armor:  {s.armor:.1f}  |  MR: {s.spellblock:.1f}")
    lines.append(f"AD:     {s.attackdamage:.1f}  |  AS: {s.attackspeed:.3f}")
    lines.append(f"Eff. HP phys: {s.effective_hp_physical:.0f}  |  "
                 f"magic: {s.effective_hp_magic:.0f}")
    lines.append(f"Base DPS: {s.dps:.1f}")
    lines.append("")

    lines.append("── Benchmarks ─────────────────")
    if not detail.get("has_benchmark_data", True):
        lines.append("  (no measurements yet)")
    raw_entry = detail.get("benchmark") or {}
    for category, result in detail["categories"].items():
        label = CATEGORY_LABELS.get(category, category)
        if result is None:
            lines.append(f"  {label:<10} no data")
            continue
        subs = "  ".join(f"{name.replace('_score', '')}={result.scores[name]}%"
                         for name, _, _ in CATEGORY_METRICS[category])
        lines.append(f"  {label:<10} {result.overall_score:>3}%   ({subs})")

        raw = raw_entry.get(category) or {}
        values = "  ".join(f"{name}={raw.get(name) or 0:g}"
                           for name in RAW_FIELDS.get(category, ()))
        if values:
            lines.append(f"  {'':<10} raw: {values}")
        if raw.get("description"):
            lines.append(f"  {'':<10} {raw['description']}")

    return "\n".join(lines)
