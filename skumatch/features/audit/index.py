"""
Audit Feature Module.
"""
from flask import Blueprint
from skumatch.config.env_config import get_matcher_config
from skumatch.features.audit.controller.audit_controller import AuditController
from skumatch.features.audit.service.audit_service import AuditService
from skumatch.features.audit.repository.audit_repository import AuditRepository

_config = get_matcher_config()

# Dependency Injection
audit_repository = AuditRepository(max_entries=_config['audit_max_entries'])
audit_service = AuditService(audit_repository=audit_repository)
audit_controller = AuditController(audit_service=audit_service)

# Blueprint
audit_bp = Blueprint('audit', __name__)

# Routes
audit_bp.add_url_rule(
    '/api/audit',
    view_func=audit_controller.confirm_match,
    methods=['POST']
)

audit_bp.add_url_rule(
    '/api/audit',
    view_func=audit_controller.list_entries,
    methods=['GET']
)
