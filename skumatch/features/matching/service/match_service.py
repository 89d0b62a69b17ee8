"""
Match Service.
Bridges the HTTP layer and the SKU matcher.
"""
from typing import Any, Dict, Optional

from skumatch.common.base.base_service import BaseService
from skumatch.features.audit.service.audit_service import AuditService
from skumatch.features.matching.dto.match_response import MatchResponse
from skumatch.features.matching.mapper.match_mapper import to_match_response
from skumatch.features.matching.service.matcher import SkuMatcher
from skumatch.services.system.logger_service import get_logger, log_match_operation

logger = get_logger(__name__)


class MatchService(BaseService):
    def __init__(self, matcher: SkuMatcher, audit_service: Optional[AuditService] = None):
        super().__init__()
        self.matcher = matcher
        self.audit_service = audit_service

    def match_text(self, ocr_text: str, image_id: Optional[str] = None,
                   explain: bool = False) -> MatchResponse:
        """
        Rank the catalog against OCR text.

        Raises:
            CatalogError: the catalog could not be loaded.
        """
        outcome = self.matcher.match_sku(ocr_text)

        reasons = None
        if outcome.match is not None:
            log_match_operation(
                logger,
                sku_code=outcome.match.code,
                score=outcome.match.score,
                alternatives=[alt.code for alt in outcome.alternatives],
                ocr_chars=len(ocr_text),
            )
            if self.audit_service is not None:
                self.audit_service.record_match(outcome, ocr_text, image_id)
            if explain:
                reasons = self.matcher.explain(ocr_text, outcome.match.code)

        return to_match_response(outcome, reasons)

    def get_index_status(self) -> Dict[str, Any]:
        """Build state of the match index; never triggers a build."""
        error = self.matcher.build_error
        status: Dict[str, Any] = {
            'built': self.matcher.is_built,
            'entries': len(self.matcher.get_index()) if self.matcher.is_built else None,
            'error': str(error) if error else None,
        }
        return status
