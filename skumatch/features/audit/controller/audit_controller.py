"""
Audit Controller.
"""
from flask import request, jsonify
from pydantic import ValidationError

from skumatch.common.base.base_controller import BaseController
from skumatch.features.audit.service.audit_service import AuditService
from skumatch.schemas.sku_schemas import AuditConfirmationRequest, AuditListRequest
from skumatch.services.system.logger_service import get_logger, log_error

logger = get_logger(__name__)


class AuditController(BaseController):
    def __init__(self, audit_service: AuditService):
        self.audit_service = audit_service

    def confirm_match(self):
        """Record the SKU code an operator confirmed for an image"""
        try:
            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                return self.handle_error('JSON body is required', 400)

            try:
                params = AuditConfirmationRequest.model_validate(payload)
            except ValidationError:
                return self.handle_error('confirmed_code is required', 400)

            self.audit_service.record_confirmation(params.confirmed_code, params.image_id)
            return jsonify({'status': 'ok'})

        except Exception as e:
            log_error(logger, e, {"context": "Failed to record audit confirmation"})
            return self.handle_error('Failed to record the audit entry', 500)

    def list_entries(self):
        """List recent audit entries, oldest first"""
        try:
            try:
                params = AuditListRequest(limit=request.args.get('limit', 100))
            except ValidationError as e:
                return jsonify({'success': False, 'error': e.errors(include_context=False)}), 400

            entries = self.audit_service.list_entries(params.limit)
            return self.handle_response({
                'success': True,
                'entries': entries,
                'count': len(entries),
            })

        except Exception as e:
            log_error(logger, e, {"context": "Failed to list audit entries"})
            return self.handle_error('Failed to list audit entries', 500)
