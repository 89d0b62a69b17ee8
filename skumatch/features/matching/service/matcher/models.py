from dataclasses import dataclass, field, asdict
from typing import Any, Dict, FrozenSet, List, Optional, Tuple


@dataclass(frozen=True)
class SkuRecord:
    """
    One catalog entry as loaded from the SKU master file.

    Attributes:
        code (str): Unique SKU code, stable across the catalog
        brand_line (str): Brand / product-line description
        flavor (str): Flavor or variant description
        units_per_box (str): Optional packing information, not scored
        shelf_life (str): Optional shelf life, not scored
    """
    code: str
    brand_line: str
    flavor: str
    units_per_box: Optional[str] = None
    shelf_life: Optional[str] = None


@dataclass(frozen=True)
class IndexedEntry:
    """
    Pre-computed matching data for a single SkuRecord.

    Attributes:
        record (SkuRecord): The catalog record this entry was built from
        tokens (FrozenSet[str]): Normalized and expanded tokens of brand line, flavor and code
        hints (Tuple[str, ...]): Volume/category tokens of the brand line plus all flavor
            tokens, unique and in extraction order
        flavor_tokens (FrozenSet[str]): Normalized tokens of the flavor field alone
    """
    record: SkuRecord
    tokens: FrozenSet[str]
    hints: Tuple[str, ...]
    flavor_tokens: FrozenSet[str]


@dataclass(frozen=True)
class MatchIndex:
    """All indexed entries, in catalog order."""
    entries: Tuple[IndexedEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class MatchResult:
    code: str
    brand_line: str
    flavor: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MatchOutcome:
    """
    Ranked result of one query.

    ``match`` is None only when the catalog is empty.
    """
    match: Optional[MatchResult]
    alternatives: List[MatchResult] = field(default_factory=list)

    @property
    def candidates(self) -> List[MatchResult]:
        return ([self.match] if self.match else []) + self.alternatives
