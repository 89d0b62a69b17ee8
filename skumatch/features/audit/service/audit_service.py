"""
Audit Service.
Records match outcomes and operator confirmations.
"""
from typing import Any, Dict, List, Optional

from skumatch.common.base.base_service import BaseService
from skumatch.features.audit.domain.audit_entry import AuditEntry
from skumatch.features.audit.repository.audit_repository import AuditRepository
from skumatch.features.matching.service.matcher.models import MatchOutcome
from skumatch.services.system.logger_service import get_logger

logger = get_logger(__name__)

EVENT_MATCH = 'MATCH'
EVENT_CONFIRMATION = 'CONFIRMATION'


class AuditService(BaseService):
    def __init__(self, audit_repository: AuditRepository):
        super().__init__()
        self.audit_repository = audit_repository

    def record_match(self, outcome: MatchOutcome, ocr_text: str,
                     image_id: Optional[str] = None) -> AuditEntry:
        entry = AuditEntry(
            timestamp=self.now().isoformat(),
            event=EVENT_MATCH,
            code=outcome.match.code if outcome.match else None,
            score=outcome.match.score if outcome.match else None,
            alternatives=[alt.code for alt in outcome.alternatives],
            ocr_chars=len(ocr_text),
            image_id=image_id,
        )
        return self._store(entry)

    def record_confirmation(self, confirmed_code: str, image_id: Optional[str] = None) -> AuditEntry:
        entry = AuditEntry(
            timestamp=self.now().isoformat(),
            event=EVENT_CONFIRMATION,
            code=confirmed_code,
            image_id=image_id,
        )
        return self._store(entry)

    def list_entries(self, limit: int = 100) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in self.audit_repository.find_recent(limit)]

    def _store(self, entry: AuditEntry) -> AuditEntry:
        self.audit_repository.save(entry)
        logger.info(
            "AUDIT_EVENT",
            extra={
                'audit_action': entry.event,
                'audit_resource': entry.code,
                'audit_image_id': entry.image_id,
                'audit_score': entry.score,
                'audit_alternatives': entry.alternatives,
                'audit_timestamp': entry.timestamp,
                'audit_source': 'backend',
            }
        )
        return entry
