from urlsentry.history.migration import migrate_record
from urlsentry.rules.types import ThreatLabel


def test_current_record_is_kept_as_is():
    record = {
        "id": "abc",
        "url": "https://a.example",
        "timestamp": 1700000000000,
        "threatLevel": "moderatelySafe",
        "threatDescription": "Nothing obvious",
        "domainReputationScoreMin": 62,
        "domainReputationScoreMax": 70,
        "reputationDescription": "Fine",
        "overallSafetyCategory": "Moderately Safe",
    }
    entry = migrate_record(record)

    assert entry.to_dict() == record


def test_single_legacy_score_becomes_a_range():
    entry = migrate_record({
        "id": "old",
        "url": "https://b.example",
        "timestamp": 5,
        "threatLevel": "dangerous",
        "domainReputationScore": 15,
        "overallSafetyCategory": "Malware",
    })

    assert (entry.score_range.min, entry.score_range.max) == (15, 15)
    assert entry.label is ThreatLabel.HIGH_RISK
    assert entry.category == "Malware"


def test_legacy_threat_level_without_score():
    entry = migrate_record({"url": "https://c.example", "threatLevel": "safe"})

    assert entry.label is ThreatLabel.SAFE_BLUE
    assert entry.category == "Safe"
    assert entry.timestamp == 0
    assert entry.id


def test_label_is_rederived_from_scores():
    entry = migrate_record({
        "url": "https://d.example",
        "threatLevel": "superSafe",
        "domainReputationScoreMin": 10,
        "domainReputationScoreMax": 5,
    })

    assert entry.label is ThreatLabel.HIGH_RISK
    assert (entry.score_range.min, entry.score_range.max) == (10, 10)


def test_unsalvageable_records():
    assert migrate_record("https://e.example") is None
    assert migrate_record({"threatLevel": "safe"}) is None
    assert migrate_record({"url": ""}) is None
    assert migrate_record({"url": "https://f.example", "threatLevel": "weird"}) is None


def test_bad_timestamp_defaults_to_zero():
    entry = migrate_record({"url": "https://g.example", "threatLevel": "suspicious", "timestamp": "yesterday"})
    assert entry.timestamp == 0
    assert entry.label is ThreatLabel.SUSPICIOUS_YELLOW
