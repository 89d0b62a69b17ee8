"""
Match Response DTOs.
"""
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional


@dataclass
class MatchResultResponse:
    code: str
    brand_line: str
    flavor: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MatchResponse:
    match: Optional[MatchResultResponse]
    alternatives: List[MatchResultResponse] = field(default_factory=list)
    reasons: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'success': True,
            'match': self.match.to_dict() if self.match else None,
            'alternatives': [alt.to_dict() for alt in self.alternatives],
        }
        if self.reasons is not None:
            payload['reasons'] = self.reasons
        return payload
