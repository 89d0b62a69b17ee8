"""
Matching Feature Module.
"""
from flask import Blueprint
from skumatch.config.env_config import get_matcher_config
from skumatch.features.audit.index import audit_service
from skumatch.features.matching.controller.match_controller import MatchController
from skumatch.features.matching.repository.catalog_repository import CatalogRepository
from skumatch.features.matching.service.match_service import MatchService
from skumatch.features.matching.service.matcher import SkuMatcher
from skumatch.services.system.security import limiter

_config = get_matcher_config()

# Dependency Injection
catalog_repository = CatalogRepository(catalog_path=_config['catalog_path'])
sku_matcher = SkuMatcher(catalog_loader=catalog_repository.load_catalog)
match_service = MatchService(matcher=sku_matcher, audit_service=audit_service)
match_controller = MatchController(match_service=match_service)

# Blueprint
matching_bp = Blueprint('matching', __name__)

# Routes
matching_bp.add_url_rule(
    '/api/ocr-match',
    view_func=limiter.limit(_config['ocr_match_rate_limit'])(match_controller.match_text),
    methods=['POST']
)

matching_bp.add_url_rule(
    '/api/health/catalog',
    view_func=match_controller.index_status,
    methods=['GET']
)
