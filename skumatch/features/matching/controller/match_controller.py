"""
Match Controller.
Handles OCR text match requests.
"""
from flask import request, jsonify
from pydantic import ValidationError

from skumatch.common.base.base_controller import BaseController
from skumatch.features.matching.repository.catalog_repository import CatalogError
from skumatch.features.matching.service.match_service import MatchService
from skumatch.schemas.sku_schemas import OcrMatchRequest
from skumatch.services.system.logger_service import get_logger, log_error

logger = get_logger(__name__)

_TRUTHY = {'1', 'true', 'yes'}


class MatchController(BaseController):
    def __init__(self, match_service: MatchService):
        self.match_service = match_service

    def match_text(self):
        """Identify the SKU for OCR text extracted from a package photo"""
        try:
            if not request.is_json:
                return self.handle_error('Content-Type must be application/json', 400)

            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                return self.handle_error('Invalid JSON body', 400)

            try:
                params = OcrMatchRequest.model_validate(payload)
            except ValidationError as e:
                return jsonify({'success': False, 'error': e.errors(include_context=False)}), 400

            if not params.text.strip():
                return self.handle_error('No text detected in the image', 422)

            explain = request.args.get('explain', '').lower() in _TRUTHY
            result = self.match_service.match_text(params.text, params.image_id, explain=explain)

            if result.match is None:
                return self.handle_error('No matching SKU found', 404)

            return self.handle_response(result.to_dict())

        except CatalogError as e:
            logger.error("SKU catalog unavailable", extra={"error": str(e)})
            return self.handle_error('SKU catalog unavailable', 503)
        except Exception as e:
            log_error(logger, e, {"context": "OCR match failed"})
            return self.handle_error('Internal error while matching the text', 500)

    def index_status(self):
        """Report whether the match index is built"""
        try:
            status = self.match_service.get_index_status()
            code = 503 if status['error'] else 200
            return self.handle_response({'success': status['error'] is None, **status}, code)
        except Exception as e:
            log_error(logger, e, {"context": "Index status check failed"})
            return self.handle_error(str(e), 500)
