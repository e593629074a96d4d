from core.password_utils import Tier, estimate_strength, strength_breakdown


def test_minimum_is_zero():
    result = estimate_strength(6, 0, False)
    assert result.score == 0
    assert result.tier is Tier.WEAK


def test_capped_at_100():
    result = estimate_strength(16, 4, True)
    assert result.score == 100
    assert result.tier is Tier.STRONG


def test_medium_example():
    result = estimate_strength(12, 3, False)
    assert result.score == 72
    assert result.tier is Tier.MEDIUM
    assert result.label == "Medium"


def test_short_length_does_not_go_negative():
    assert strength_breakdown(2, 1, False) == {"length": 0, "variety": 12, "symbols": 0}
    assert estimate_strength(2, 1, False).score == 12


def test_tier_boundaries():
    # 8 chars -> 12 points; 3 pools -> 36; total 48
    assert estimate_strength(8, 3, False).tier is Tier.MEDIUM
    # 8 chars -> 12; 2 pools -> 24; total 36
    assert estimate_strength(8, 2, False).tier is Tier.WEAK
    # 11 chars -> 30; 3 pools -> 36; symbols 10; total 76
    assert estimate_strength(11, 3, True).tier is Tier.STRONG
    # 10 chars -> 24; 3 pools -> 36; symbols 10; total 70
    assert estimate_strength(10, 3, True).tier is Tier.MEDIUM


def test_pure_function():
    assert estimate_strength(14, 2, True) == estimate_strength(14, 2, True)


def test_tier_levels():
    assert [t.level for t in Tier] == [1, 2, 3]
