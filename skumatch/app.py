"""
Main Flask application for the SKU match backend.
Organized with modular route blueprints for better maintainability.
"""
import os
import time
import uuid
from dotenv import load_dotenv
from flask import Flask, request, g
from flask_cors import CORS
from flask_compress import Compress
from flask_talisman import Talisman

# Load environment variables from .env file
load_dotenv()

# Initialize logging service FIRST (before other imports)
from skumatch.services.system.logger_service import get_logger, log_error, log_request
logger = get_logger(__name__)

from skumatch.config.env_config import get_matcher_config
from skumatch.services.system.security import configure_limiter

# Import all route blueprints
from skumatch.features.matching.index import matching_bp, sku_matcher
from skumatch.features.audit.index import audit_bp
from skumatch.features.system.index import system_bp
from skumatch.features.matching.repository.catalog_repository import CatalogError


config = get_matcher_config()

# Create Flask app
app = Flask(__name__)
app.json.ensure_ascii = False


def _resolve_service(path: str) -> str:
    parts = [segment for segment in (path or '').split('/') if segment]
    if not parts:
        return 'root'

    if parts[0] == 'api':
        return parts[1] if len(parts) > 1 else 'api'

    return parts[0]


@app.before_request
def _log_request_start():
    g.request_start = time.time()
    g.request_id = request.headers.get('X-Request-Id') or uuid.uuid4().hex
    g.request_service = _resolve_service(request.path)


@app.after_request
def _log_request_end(response):
    duration_ms = None
    if hasattr(g, 'request_start'):
        duration_ms = round((time.time() - g.request_start) * 1000, 2)

    request_id = getattr(g, 'request_id', None)
    service = getattr(g, 'request_service', None) or _resolve_service(request.path)

    log_request(
        logger,
        request.method,
        request.path,
        request_id=request_id,
        request_query=request.query_string.decode('utf-8', errors='ignore') if request.query_string else '',
        request_service=service,
        request_status=response.status_code,
        request_duration_ms=duration_ms,
        remote_addr=request.headers.get('X-Forwarded-For', request.remote_addr),
    )

    if request_id:
        response.headers['X-Request-Id'] = request_id
    return response

# Initialize Security Headers (Talisman)
# Force HTTPS in production; the API only serves JSON so everything else is blocked
is_production = config['environment'] == 'production'

csp = {
    'default-src': ["'self'"],
    'frame-ancestors': ["'none'"],
    'form-action': ["'self'"],
}

Talisman(
    app,
    force_https=is_production,
    content_security_policy=csp,
    strict_transport_security=is_production,
    session_cookie_secure=is_production,
    session_cookie_http_only=True
)

# Initialize Rate Limiter
configure_limiter(app)

# Enable Gzip compression for all responses
Compress(app)


def _resolve_allowed_origins():
    raw_origins = config['frontend_origin']
    if not raw_origins or raw_origins.strip() == '*':
        return '*'

    origins = [origin.strip() for origin in raw_origins.split(',') if origin.strip()]
    return origins or '*'


CORS(
    app,
    resources={r"/api/*": {"origins": _resolve_allowed_origins()}},
    expose_headers=['X-Request-Id'],
    allow_headers=['Content-Type', 'X-Request-Id'],
    methods=['GET', 'POST', 'OPTIONS']
)

# Register all blueprints
app.register_blueprint(matching_bp)
app.register_blueprint(audit_bp)
app.register_blueprint(system_bp)

if config['preload_index']:
    try:
        entries = sku_matcher.warm_up()
        logger.info("SKU index preloaded", extra={"entries": entries})
    except CatalogError as e:
        # The memoized error keeps answering 503 until the process restarts
        log_error(logger, e, {"context": "SKU index preload failed"})

if __name__ == '__main__':
    host = os.getenv('FLASK_RUN_HOST', os.getenv('HOST', '0.0.0.0'))
    port = int(os.getenv('FLASK_RUN_PORT', os.getenv('PORT', '5000')))

    logger.info(
        "Starting Flask server",
        extra={
            'host': host,
            'port': port,
            'environment': config['environment'],
            'frontend_origin': config['frontend_origin']
        }
    )

    app.run(debug=config['debug_mode'], host=host, port=port, threaded=True)
