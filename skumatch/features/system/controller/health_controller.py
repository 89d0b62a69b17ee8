from flask import jsonify
from skumatch.common.base.base_controller import BaseController
from skumatch.features.system.service.health_service import HealthService
from skumatch.services.system.logger_service import get_logger

logger = get_logger(__name__)

class HealthController(BaseController):
    def __init__(self, health_service: HealthService):
        self.health_service = health_service

    def health_check(self):
        try:
            data = self.health_service.get_health_data()
            logger.debug("Health check", extra={"uptime_seconds": data.get('uptime_seconds')})
            return jsonify(data)
        except Exception as e:
            logger.error("Health check failed", extra={"error": str(e)})
            return jsonify({
                'ok': False,
                'status': 'unhealthy',
                'error': str(e)
            }), 500
