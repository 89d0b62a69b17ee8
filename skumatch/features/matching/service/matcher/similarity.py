from typing import AbstractSet, List, Tuple

from skumatch.services.system.logger_service import get_logger
from .models import IndexedEntry
from .vocabulary import (
    BRAND_BOOSTS,
    FLAVOR_CONFLICT_PENALTY,
    FLAVOR_KEYWORDS,
    HINT_BONUS,
    VOLUME_BONUS,
)

logger = get_logger(__name__)


def jaccard_similarity(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """|a ∩ b| / |a ∪ b|, or 0.0 when both sets are empty."""
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


class SimilarityCalculator:
    """
    Scores an indexed catalog entry against a query token set.

    The score is the Jaccard overlap of the token sets plus fixed bonuses
    for hint, volume and brand agreement, minus a single penalty when the
    query names a flavor the entry does not have. Results are clamped to
    [0.0, 1.0].
    """

    def score_entry(self, entry: IndexedEntry, query_tokens: AbstractSet[str],
                    volume_tokens: AbstractSet[str]) -> float:
        score, _ = self.explain_entry(entry, query_tokens, volume_tokens)
        return score

    def explain_entry(self, entry: IndexedEntry, query_tokens: AbstractSet[str],
                      volume_tokens: AbstractSet[str]) -> Tuple[float, List[str]]:
        """
        Calculate the entry score together with the reasons behind it.

        Returns:
            (score, match_reasons)
        """
        reasons: List[str] = []

        # 1. Token overlap
        score = jaccard_similarity(entry.tokens, query_tokens)
        if score > 0:
            reasons.append(f"Token overlap ({score:.2f})")

        # 2. Hint and volume bonuses; both may apply to the same hint.
        # hints is an ordered tuple so the float sum is identical in every process.
        for hint in entry.hints:
            if hint in query_tokens:
                score += HINT_BONUS
                reasons.append(f"Hint match: {hint}")
            if hint in volume_tokens:
                score += VOLUME_BONUS
                reasons.append(f"Volume match: {hint}")

        # 3. Brand echoed by both sides
        for brand, boost in BRAND_BOOSTS.items():
            if brand in entry.tokens and brand in query_tokens:
                score += boost
                reasons.append(f"Brand boost: {brand}")

        # 4. Flavor conflict, applied at most once
        conflicts = sorted(
            token for token in query_tokens
            if token in FLAVOR_KEYWORDS and token not in entry.flavor_tokens
        )
        if conflicts:
            score -= FLAVOR_CONFLICT_PENALTY
            reasons.append(f"Flavor conflict: {', '.join(conflicts)}")

        final_score = max(0.0, min(score, 1.0))
        return final_score, reasons
