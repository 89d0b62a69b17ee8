"""
Match Mapper.
"""
from typing import List, Optional
from skumatch.features.matching.dto.match_response import MatchResponse, MatchResultResponse
from skumatch.features.matching.service.matcher.models import MatchOutcome, MatchResult

# Scores are exposed with a fixed precision; ranking happens on the raw floats
SCORE_PRECISION = 4


def to_result_response(result: MatchResult) -> MatchResultResponse:
    return MatchResultResponse(
        code=result.code,
        brand_line=result.brand_line,
        flavor=result.flavor,
        score=round(result.score, SCORE_PRECISION),
    )


def to_match_response(outcome: MatchOutcome, reasons: Optional[List[str]] = None) -> MatchResponse:
    return MatchResponse(
        match=to_result_response(outcome.match) if outcome.match else None,
        alternatives=[to_result_response(alt) for alt in outcome.alternatives],
        reasons=reasons,
    )
