import math

import pytest

from urlsentry.models import RawAssessment
from urlsentry.rules.types import ThreatLabel
from urlsentry.scoring.normalizer import LABEL_CATEGORIES, clamp_score, label_for, normalize


def in_bracket(label, mid):
    return {
        ThreatLabel.SUPER_SAFE: mid > 90,
        ThreatLabel.SAFE_BLUE: 80 <= mid <= 90,
        ThreatLabel.MODERATELY_SAFE: 60 <= mid < 80,
        ThreatLabel.SUSPICIOUS_YELLOW: 40 <= mid < 60,
        ThreatLabel.UNSAFE_ORANGE: 25 <= mid < 40,
        ThreatLabel.HIGH_RISK: mid < 25,
    }[label]


@pytest.mark.parametrize(
    "score_min, score_max, expected",
    [
        (90, 91, ThreatLabel.SUPER_SAFE),
        (90, 90, ThreatLabel.SAFE_BLUE),
        (80, 80, ThreatLabel.SAFE_BLUE),
        (79, 80, ThreatLabel.MODERATELY_SAFE),
        (60, 60, ThreatLabel.MODERATELY_SAFE),
        (59, 60, ThreatLabel.SUSPICIOUS_YELLOW),
        (40, 40, ThreatLabel.SUSPICIOUS_YELLOW),
        (39, 40, ThreatLabel.UNSAFE_ORANGE),
        (25, 25, ThreatLabel.UNSAFE_ORANGE),
        (24, 25, ThreatLabel.HIGH_RISK),
        (0, 0, ThreatLabel.HIGH_RISK),
        (100, 100, ThreatLabel.SUPER_SAFE),
    ],
)
def test_bracket_boundaries(score_min, score_max, expected):
    result = normalize({"scoreMin": score_min, "scoreMax": score_max})
    assert result.label is expected
    assert result.category == LABEL_CATEGORIES[expected]


def test_every_valid_range_lands_in_its_bracket():
    for score_min in range(0, 101, 3):
        for score_max in range(score_min, 101, 7):
            result = normalize({"scoreMin": score_min, "scoreMax": score_max})
            assert result.score_range.max >= result.score_range.min
            assert in_bracket(result.label, (score_min + score_max) / 2)


def test_max_below_min_is_raised_to_min_not_swapped():
    result = normalize({"scoreMin": 70, "scoreMax": 20})
    assert (result.score_range.min, result.score_range.max) == (70, 70)
    assert result.label is ThreatLabel.MODERATELY_SAFE


def test_normalize_is_idempotent():
    once = normalize({"scoreMin": 85, "scoreMax": 12, "label": "highRisk"})
    twice = normalize(once.to_dict())
    assert once == twice


def test_bounds_are_clamped_independently():
    result = normalize({"scoreMin": -10, "scoreMax": 150})
    assert (result.score_range.min, result.score_range.max) == (0, 100)
    assert result.label is ThreatLabel.SUSPICIOUS_YELLOW


def test_both_bounds_above_range():
    result = normalize({"scoreMin": 120, "scoreMax": 110})
    assert (result.score_range.min, result.score_range.max) == (100, 100)


def test_supplied_label_is_ignored():
    result = normalize(RawAssessment(score_min=0, score_max=10, label="superSafe", category="Safe"))
    assert result.label is ThreatLabel.HIGH_RISK
    assert result.category == "High Risk"


def test_legacy_keys_are_accepted():
    result = normalize({"domainReputationScoreMin": 61, "domainReputationScoreMax": 75, "threatLevel": "safe"})
    assert (result.score_range.min, result.score_range.max) == (61, 75)
    assert result.label is ThreatLabel.MODERATELY_SAFE


@pytest.mark.parametrize(
    "value, expected",
    [(79.5, 80), (79.4, 79), (0.5, 1), ("42", 42), ("abc", 0), (None, 0), (math.nan, 0), (math.inf, 100), (-math.inf, 0)],
)
def test_clamp_score(value, expected):
    assert clamp_score(value) == expected


def test_label_for_uses_unrounded_midpoint():
    assert label_for(89.5) is ThreatLabel.SAFE_BLUE
    assert label_for(90.5) is ThreatLabel.SUPER_SAFE
    assert label_for(24.5) is ThreatLabel.HIGH_RISK


def test_every_label_has_a_category():
    assert set(LABEL_CATEGORIES) == set(ThreatLabel)
