import threading
import time
from typing import Callable, List, Optional, Sequence

from skumatch.services.system.logger_service import get_logger, log_error
from .indexing import build_index
from .models import MatchIndex, MatchOutcome, MatchResult, SkuRecord
from .normalization import detect_volume_tokens, token_set
from .similarity import SimilarityCalculator
from .vocabulary import ALTERNATIVES_LIMIT

logger = get_logger(__name__)

CatalogLoader = Callable[[], Sequence[SkuRecord]]


def rank_candidates(index: MatchIndex, ocr_text: str,
                    calculator: Optional[SimilarityCalculator] = None) -> List[MatchResult]:
    """
    Score every indexed entry against *ocr_text*, best first.

    The sort is stable, so equal scores keep catalog order. No entry is
    dropped for scoring low; callers pick their own threshold.
    """
    calculator = calculator or SimilarityCalculator()
    query_tokens = token_set(ocr_text)
    volume_tokens = detect_volume_tokens(query_tokens)

    results = [
        MatchResult(
            code=entry.record.code,
            brand_line=entry.record.brand_line,
            flavor=entry.record.flavor,
            score=calculator.score_entry(entry, query_tokens, volume_tokens),
        )
        for entry in index.entries
    ]
    results.sort(key=lambda result: result.score, reverse=True)
    return results


class SkuMatcher:
    """
    SKU Matcher
    Owns the catalog-derived MatchIndex and answers match queries against it.

    The index is built on first use (or by ``warm_up``) exactly once, even
    when many threads ask for it at the same time. A failed build is kept
    and re-raised to every later caller instead of being retried.
    """

    def __init__(self, catalog_loader: CatalogLoader,
                 similarity_calculator: Optional[SimilarityCalculator] = None):
        self._catalog_loader = catalog_loader
        self.similarity_calculator = similarity_calculator or SimilarityCalculator()
        self._index: Optional[MatchIndex] = None
        self._build_error: Optional[Exception] = None
        self._build_lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._index is not None

    @property
    def build_error(self) -> Optional[Exception]:
        return self._build_error

    def get_index(self) -> MatchIndex:
        """Return the shared index, building it on the first call."""
        index = self._index
        if index is not None:
            return index

        with self._build_lock:
            if self._index is None:
                if self._build_error is not None:
                    raise self._build_error
                self._index = self._build()
            return self._index

    def _build(self) -> MatchIndex:
        start = time.perf_counter()
        try:
            records = self._catalog_loader()
            index = build_index(records)
        except Exception as e:
            self._build_error = e
            log_error(logger, e, {"context": "Failed to build SKU match index"})
            raise

        logger.info(
            "SKU match index ready",
            extra={
                "entries": len(index),
                "build_ms": round((time.perf_counter() - start) * 1000, 2),
            }
        )
        return index

    def warm_up(self) -> int:
        """Build the index eagerly; returns the number of indexed entries."""
        return len(self.get_index())

    def match_sku(self, ocr_text: str) -> MatchOutcome:
        """
        Find the best catalog match for raw OCR text.

        Returns the top-scoring result as ``match`` and the next
        ALTERNATIVES_LIMIT results as ``alternatives``. An empty catalog
        yields ``match=None`` and no alternatives.
        """
        index = self.get_index()
        ranked = rank_candidates(index, ocr_text or "", self.similarity_calculator)

        if not ranked:
            logger.warning("Match requested against an empty catalog")
            return MatchOutcome(match=None, alternatives=[])

        outcome = MatchOutcome(match=ranked[0], alternatives=ranked[1:1 + ALTERNATIVES_LIMIT])
        logger.debug(
            "SKU ranked",
            extra={
                "sku_code": outcome.match.code,
                "score": outcome.match.score,
                "candidates": len(ranked),
            }
        )
        return outcome

    def explain(self, ocr_text: str, code: str) -> Optional[List[str]]:
        """Reasons behind the score of the entry with *code*, or None if unknown."""
        index = self.get_index()
        query_tokens = token_set(ocr_text or "")
        volume_tokens = detect_volume_tokens(query_tokens)
        for entry in index.entries:
            if entry.record.code == code:
                _, reasons = self.similarity_calculator.explain_entry(entry, query_tokens, volume_tokens)
                return reasons
        return None
