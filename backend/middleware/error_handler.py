"""
OPS-DESK Error Handler Middleware
Generic error responses without information disclosure.

Internal details are logged, never returned to the client.
"""

from functools import wraps
from typing import Callable, Optional
from flask import jsonify, g, Flask, current_app
from werkzeug.exceptions import HTTPException
import traceback
import structlog

from services.supabase_client import DataAccessError, BackendNotConfigured

logger = structlog.get_logger(__name__)


# Standard error codes
ERROR_CODES = {
    'VALIDATION_ERROR': 'Invalid request data',
    'UNSUPPORTED_FILE': 'Upload must be an Excel workbook (.xlsx or .xls)',
    'PAYLOAD_TOO_LARGE': 'Upload exceeds the size limit',
    'NOT_FOUND': 'Resource not found',
    'METHOD_NOT_ALLOWED': 'Method not allowed',
    'UPSTREAM_ERROR': 'Data backend request failed',
    'UPSTREAM_UNAVAILABLE': 'Data backend is not available',
    'INTERNAL_ERROR': 'An unexpected error occurred',
}


def error_response(
    code: str,
    message: Optional[str] = None,
    status: int = 400,
    details: Optional[dict] = None
):
    """Create standardized error response."""
    response_body = {
        'error': message or ERROR_CODES.get(code, 'An error occurred'),
        'code': code,
        'request_id': g.get('request_id')
    }

    # Only include safe details
    if details and isinstance(details, dict):
        safe_details = {
            k: v for k, v in details.items()
            if k in ('field', 'max_bytes', 'allowed_extensions')
        }
        if safe_details:
            response_body['details'] = safe_details

    return jsonify(response_body), status


def register_error_handlers(app: Flask) -> None:
    """Register global error handlers on Flask app."""

    @app.errorhandler(400)
    def bad_request(error):
        return error_response('VALIDATION_ERROR', status=400)

    @app.errorhandler(404)
    def not_found(error):
        return error_response('NOT_FOUND', status=404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return error_response('METHOD_NOT_ALLOWED', status=405)

    @app.errorhandler(413)
    def payload_too_large(error):
        return error_response(
            'PAYLOAD_TOO_LARGE',
            status=413,
            details={'max_bytes': current_app.config.get('MAX_CONTENT_LENGTH')}
        )

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(
            "Internal server error",
            error=str(error),
            request_id=g.get('request_id'),
            traceback=traceback.format_exc()
        )
        return error_response('INTERNAL_ERROR', status=500)

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return error_response('VALIDATION_ERROR', error.description, status=error.code or 400)

        logger.error(
            "Unhandled exception",
            error=str(error),
            error_type=type(error).__name__,
            request_id=g.get('request_id'),
            traceback=traceback.format_exc()
        )
        return error_response('INTERNAL_ERROR', status=500)


def safe_handler(f: Callable) -> Callable:
    """
    Decorator for safe exception handling.

    HTTP errors pass through to the registered handlers. ValueError
    becomes a 400 with its message; backend failures become 502/503;
    anything else is a generic 500.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except HTTPException:
            # Left to the registered status handlers
            raise
        except ValueError as e:
            logger.warning("Validation error", error=str(e), handler=f.__name__)
            return error_response('VALIDATION_ERROR', str(e), status=400)
        except BackendNotConfigured as e:
            logger.error("Backend not configured", error=str(e), handler=f.__name__)
            return error_response('UPSTREAM_UNAVAILABLE', status=503)
        except DataAccessError as e:
            logger.error("Backend request failed", error=str(e), handler=f.__name__)
            return error_response('UPSTREAM_ERROR', status=502)
        except Exception as e:
            logger.error(
                "Handler exception",
                error=str(e),
                handler=f.__name__,
                traceback=traceback.format_exc()
            )
            return error_response('INTERNAL_ERROR', status=500)

    return decorated
