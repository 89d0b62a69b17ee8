"""
Audit Domain Entities.
"""
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional


@dataclass
class AuditEntry:
    timestamp: str
    event: str
    code: Optional[str] = None
    score: Optional[float] = None
    alternatives: List[str] = field(default_factory=list)
    ocr_chars: Optional[int] = None
    image_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
