"""
Rule Thresholds - Named cutoffs used by the rule engine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuditThresholds:
    """Heuristic cutoffs. Comparisons are strict (<, >) as noted per field."""
    # Response time (ms): pass < fast, warn < slow, else fail
    response_fast_ms: int = 800
    response_slow_ms: int = 2500

    # Content depth (words): fail < minimum, warn < healthy, else pass
    words_minimum: int = 100
    words_healthy: int = 300

    # SEO metadata lengths (chars, inclusive)
    title_min_length: int = 10
    title_max_length: int = 70
    description_min_length: int = 50
    description_max_length: int = 170

    # Ratios: fail when strictly above
    alt_missing_fail_ratio: float = 0.25
    broken_link_fail_ratio: float = 0.20


THRESHOLDS = AuditThresholds()


# --- Validation (Prevent Drift) ---
def _validate_thresholds():
    """Ensure every tier is ordered and every ratio is a proportion."""
    t = THRESHOLDS
    if not 0 < t.response_fast_ms < t.response_slow_ms:
        raise ValueError(f"CRITICAL: response thresholds out of order ({t.response_fast_ms}, {t.response_slow_ms})")
    if not 0 < t.words_minimum < t.words_healthy:
        raise ValueError(f"CRITICAL: word thresholds out of order ({t.words_minimum}, {t.words_healthy})")
    if not 0 < t.title_min_length <= t.title_max_length:
        raise ValueError("CRITICAL: title length bounds out of order")
    if not 0 < t.description_min_length <= t.description_max_length:
        raise ValueError("CRITICAL: description length bounds out of order")
    for name in ("alt_missing_fail_ratio", "broken_link_fail_ratio"):
        ratio = getattr(t, name)
        if not 0 <= ratio < 1:
            raise ValueError(f"CRITICAL: {name}={ratio} must be within [0, 1)")

_validate_thresholds()
