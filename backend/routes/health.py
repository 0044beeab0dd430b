"""
OPS-DESK Health Routes
Health, readiness and liveness checks.
"""

from flask import Blueprint, jsonify
import structlog

from services import is_configured

logger = structlog.get_logger(__name__)

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    """
    Health check endpoint.

    Reports whether the data backend is configured. The amount and
    import endpoints work without it, so a missing backend is
    'degraded', not down.
    """
    backend_ready = is_configured()
    status = {
        'status': 'healthy' if backend_ready else 'degraded',
        'checks': {
            'supabase': {'configured': backend_ready}
        }
    }
    if not backend_ready:
        logger.warning("Health check degraded", reason="supabase not configured")
    return jsonify(status), 200


@health_bp.route('/ready', methods=['GET'])
def ready():
    """Readiness check for orchestrators."""
    return jsonify({'ready': True}), 200


@health_bp.route('/live', methods=['GET'])
def live():
    """Liveness check for orchestrators."""
    return jsonify({'alive': True}), 200
