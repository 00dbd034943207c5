from enum import Enum

class ReputationCategory(str, Enum):
    SUPER_SAFE = "Super Safe"
    SAFE = "Safe"
    MEDIUM = "Medium"
    LOW = "Low"
    CRITICAL = "Critical"
    UNKNOWN = "Unknown"

class ThreatLabel(str, Enum):
    SUPER_SAFE = "superSafe"
    SAFE_BLUE = "safeBlue"
    MODERATELY_SAFE = "moderatelySafe"
    SUSPICIOUS_YELLOW = "suspiciousYellow"
    UNSAFE_ORANGE = "unsafeOrange"
    HIGH_RISK = "highRisk"

class LegacyThreatLevel(str, Enum):
    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    DANGEROUS = "dangerous"

class Source(str, Enum):
    HEURISTIC = "heuristic"
    CONTENT_ANALYSIS = "content-analysis"
