"""
Champion Ranking — Main Entry Point

Usage:
  python main.py                         global ranking at level 18
  python main.py --level 6 --role tank   tanks only, level 6
  python main.py --champion Garen        detail view for one champion
  python main.py --benchmark base_stats --stat armor
  python main.py --search ah --sort hp   champion list, searched + sorted
  python main.py --file champion.json    offline dataset

Steps:
  1. Load champion.json (Data Dragon, cached) or a local file
  2. Project stats to the selected level
  3. Score / rank and print to the console
"""

import argparse
import logging
import os
import sys

# Allow running from project root
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ranking.data_dragon      import (DATA_DRAGON_VERSION, load_champions,
                                      load_champions_from_file)
from ranking.level_projection import DEFAULT_LEVEL, DerivedStats, clamp_level
from ranking.rankings         import (ALL_ROLES, BASE_STAT_TYPES,
                                      BENCHMARK_TYPES, champion_detail,
                                      filter_by_role, rank_by_benchmark,
                                      rank_champions, search_champions,
                                      sort_by_stat)
from ranking.report           import (format_benchmark, format_champion_detail,
                                      format_champion_list, format_rankings)
from ranking.role_scoring     import ROLES

# ── Config ─────────────────────────────────────────────────────────────────────
DEFAULT_LIMIT = 20
SORT_NAME     = "name"
SORT_CHOICES  = (SORT_NAME,) + tuple(DerivedStats.__dataclass_fields__)

logger = logging.getLogger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank League of Legends champions by level-scaled stats.")
    parser.add_argument("--level", type=int, default=DEFAULT_LEVEL,
                        help="champion level (clamped to 1-18)")
    parser.add_argument("--role", default=ALL_ROLES,
                        choices=(ALL_ROLES,) + ROLES,
                        help="only champions tagged with this role "
                             "(rankings, --benchmark and champion lists)")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT,
                        help="rows to print (0 = all)")
    parser.add_argument("--file", help="local champion.json instead of Data Dragon")
    parser.add_argument("--version", default=DATA_DRAGON_VERSION,
                        help="Data Dragon patch version")
    parser.add_argument("--champion", help="show the detail view for this champion id")
    parser.add_argument("--benchmark", choices=BENCHMARK_TYPES,
                        help="rank by a single benchmark instead of overall")
    parser.add_argument("--stat", default="hp", choices=BASE_STAT_TYPES,
                        help="base stat for --benchmark base_stats")
    parser.add_argument("--search", help="list champions whose name or id contains this")
    parser.add_argument("--sort", choices=SORT_CHOICES,
                        help="list champions sorted by a stat at --level")
    parser.add_argument("--ascending", action="store_true",
                        help="lowest first for --sort STAT (names are always A-Z)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.file:
        champions = load_champions_from_file(args.file)
    else:
        champions = load_champions(args.version)

    if not champions:
        print("[ ERROR ] No champion data loaded")
        return 1

    level = clamp_level(args.level)
    if level != args.level:
        logger.warning(f"Level {args.level} out of range — using {level}")

    if args.champion:
        champ = champions.get(args.champion)
        if champ is None:
            print(f"[ ERROR ] Unknown champion: {args.champion}")
            return 1
        print(format_champion_detail(champion_detail(champ, level)))
        return 0

    if args.benchmark:
        rows = rank_by_benchmark(champions, args.benchmark, level,
                                 args.stat, args.role)
        print(format_benchmark(rows, args.limit))
        return 0

    if args.search or args.sort:
        champs = search_champions(champions, args.search) if args.search \
            else list(champions.values())
        champs = filter_by_role(champs, args.role)
        stat = args.sort or SORT_NAME
        if stat == SORT_NAME:
            champs.sort(key=lambda c: c.get("name", ""))
        else:
            champs = sort_by_stat(champs, stat, level, args.ascending)
        print(format_champion_list(champs, level, stat, args.limit))
        return 0

    rows = rank_champions(champions, level, args.role)
    print(format_rankings(rows, args.limit))
    return 0


if __name__ == "__main__":
    sys.exit(main())
