from flask import Blueprint
from skumatch.features.system.controller.health_controller import HealthController
from skumatch.features.system.service.health_service import HealthService

# Instantiate Services
health_service = HealthService()

# Instantiate Controllers
health_controller = HealthController(health_service)

# Blueprint
system_bp = Blueprint('system', __name__)

# Health Routes
system_bp.add_url_rule('/health', view_func=health_controller.health_check, methods=['GET'])
system_bp.add_url_rule('/api/health', view_func=health_controller.health_check, endpoint='api_health', methods=['GET'])
