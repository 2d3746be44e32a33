"""
Tests for population-relative scoring and the benchmark category composites.
"""

import pytest

from ranking.relative_scoring import (CATEGORY_METRICS, CategoryScores,
                                      inverse_normalize, normalize,
                                      round_half_away, score_all_categories,
                                      score_burst_category, score_category,
                                      score_dps_category,
                                      score_mobility_category,
                                      score_tankiness_category,
                                      score_utility_category)


class TestNormalize:
    """normalize() against the positive values of a population"""

    def test_zero_is_excluded_from_window(self):
        """A=100, B=50, C=0 -> min 50, max 100; C scores 0"""
        population = [100, 50, 0]
        assert normalize(100, population) == 100
        assert normalize(50, population) == 0
        assert normalize(0, population) == 0

    def test_single_entity(self):
        assert normalize(42, [42]) == 100

    def test_identical_values(self):
        assert normalize(7, [7, 7, 7, 0]) == 100
        assert inverse_normalize(7, [7, 7]) == 100

    def test_empty_population(self):
        assert normalize(10, []) == 0

    def test_no_positive_values(self):
        assert normalize(10, [0, 0, -5]) == 0

    def test_non_positive_value(self):
        assert normalize(0, [10, 20]) == 0
        assert normalize(-4, [10, 20]) == 0

    def test_midpoint(self):
        assert normalize(30, [10, 30, 50]) == 50

    def test_rounds_to_nearest(self):
        # (35 - 10) / 40 = 62.5%
        assert normalize(35, [10, 35, 50]) == 63

    def test_inverted(self):
        """Lower is better: fastest combo scores 100"""
        times = [1.6, 2.4, 2.9, 4.2]
        assert inverse_normalize(1.6, times) == 100
        assert inverse_normalize(4.2, times) == 0
        assert normalize(1.6, times, invert=True) == 100

    def test_value_outside_window_stays_on_scale(self):
        assert normalize(200, [50, 100]) == 100
        assert normalize(10, [50, 100]) == 0
        assert inverse_normalize(10, [50, 100]) == 100

    def test_inverted_plus_normal_is_100(self):
        population = [10, 20, 35, 50, 0]
        for value in (10, 20, 35, 50):
            total = normalize(value, population) + inverse_normalize(value, population)
            assert abs(total - 100) <= 1

    def test_idempotent_and_in_range(self):
        populations = [[], [0], [42], [1, 2, 3], [5, 0, -1, 1000], [0.1, 0.25]]
        for population in populations:
            for value in (-1, 0, 0.1, 1, 3, 42, 5000):
                for invert in (False, True):
                    first = normalize(value, population, invert)
                    assert first == normalize(value, population, invert)
                    assert 0 <= first <= 100

    def test_accepts_any_iterable(self):
        assert normalize(5, (v for v in [5, 10])) == 0


class TestRounding:
    """Half away from zero"""

    def test_integers(self):
        assert round_half_away(2.5) == 3
        assert round_half_away(3.5) == 4
        assert round_half_away(-2.5) == -3
        assert round_half_away(2.4) == 2
        assert isinstance(round_half_away(2.5), int)

    def test_one_decimal(self):
        assert round_half_away(1.25, 1) == pytest.approx(1.3)
        assert round_half_away(14.04, 1) == pytest.approx(14.0)

    def test_negative_ties_round_away(self):
        """Negative halves go down, unlike JavaScript's Math.round"""
        assert round_half_away(-0.5) == -1
        assert round_half_away(-1.25, 1) == pytest.approx(-1.3)
        assert round_half_away(-1.24, 1) == pytest.approx(-1.2)


class TestCategoryScores:
    """Per-category composites against a benchmark table"""

    def test_dps_best(self, benchmarks):
        result = score_dps_category("A", benchmarks)
        assert result.scores == {"dps10s_score": 100, "dps20s_score": 100}
        assert result.overall_score == 100

    def test_dps_worst(self, benchmarks):
        result = score_dps_category("B", benchmarks)
        assert result.dps10s_score == 0
        assert result.dps20s_score == 0
        assert result.overall_score == 0

    def test_all_zero_record_is_not_absent(self, benchmarks):
        """A record full of zeros scores 0, it is not None"""
        result = score_dps_category("C", benchmarks)
        assert result is not None
        assert result.overall_score == 0

    def test_missing_category_is_none(self, benchmarks):
        assert score_burst_category("C", benchmarks) is None
        assert score_dps_category("D", benchmarks) is None
        assert score_tankiness_category("A", benchmarks) is None

    def test_unknown_champion_is_none(self, benchmarks):
        assert score_category("Nobody", "dps", benchmarks) is None

    def test_burst_inverts_time(self, benchmarks):
        a = score_burst_category("A", benchmarks)
        assert a.damage_score == 100
        assert a.max_hp_score == 0        # own value is 0
        assert a.speed_score == 100       # fastest combo
        assert a.overall_score == 67      # (100 + 0 + 100) / 3

        b = score_burst_category("B", benchmarks)
        assert b.damage_score == 0
        assert b.max_hp_score == 100      # only positive value
        assert b.speed_score == 0
        assert b.overall_score == 33

    def test_utility_uses_20s_values_only(self, benchmarks):
        """shieldTotal 999 on A must not matter"""
        a = score_utility_category("A", benchmarks)
        assert a.shield_score == 0
        assert a.overall_score == 0

        c = score_utility_category("C", benchmarks)
        assert c.scores == {"shield_score": 50, "heal_score": 0,
                            "cc_score": 50, "buff_score": 0}
        assert c.overall_score == 25

        b = score_utility_category("B", benchmarks)
        assert b.overall_score == 100

    def test_mobility_absent(self, benchmarks):
        assert score_mobility_category("A", benchmarks) is None

    def test_unknown_category_raises(self, benchmarks):
        with pytest.raises(ValueError):
            score_category("A", "vision", benchmarks)

    def test_unknown_attribute_raises(self, benchmarks):
        result = score_dps_category("A", benchmarks)
        with pytest.raises(AttributeError):
            result.heal_score

    def test_score_all_categories(self, benchmarks):
        results = score_all_categories("A", benchmarks)
        assert list(results) == ["dps", "tankiness", "burst", "utility", "mobility"]
        assert results["tankiness"] is None
        assert isinstance(results["dps"], CategoryScores)

    def test_every_category_has_2_to_4_metrics(self):
        for metrics in CATEGORY_METRICS.values():
            assert 2 <= len(metrics) <= 4


class TestBundledBenchmarks:
    """Scoring against the shipped benchmark table"""

    def test_unmeasured_champion(self):
        results = score_all_categories("Akshan")
        assert all(r is None for r in results.values())

    def test_partial_record(self):
        assert score_dps_category("Alistar") is None
        assert score_tankiness_category("Alistar") is not None

    def test_alistar_tankiest_with_abilities(self):
        assert score_tankiness_category("Alistar").with_abilities_score == 100

    def test_only_percent_burst(self):
        """Garen is the only entry with a max HP % burst"""
        assert score_burst_category("Garen").max_hp_score == 100

    def test_scores_in_range(self):
        for champ in ("Aatrox", "Ahri", "Akali", "Alistar", "Janna", "Garen"):
            for result in score_all_categories(champ).values():
                if result is None:
                    continue
                assert 0 <= result.overall_score <= 100
                assert all(0 <= s <= 100 for s in result.scores.values())
