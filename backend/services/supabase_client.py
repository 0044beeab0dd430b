"""
OPS-DESK Supabase Client
Lazily created, shared client for row storage.
"""

from typing import Optional
import structlog
from supabase import create_client, Client

from config import get_config

logger = structlog.get_logger(__name__)


class DataAccessError(Exception):
    """Raised when the hosted backend fails a request."""
    pass


class BackendNotConfigured(DataAccessError):
    """Raised when Supabase credentials are missing."""
    pass


# Singleton instance
_client: Optional[Client] = None


def is_configured() -> bool:
    config = get_config().supabase
    return bool(config.url and config.service_role_key)


def get_supabase() -> Client:
    """Get the Supabase client singleton."""
    global _client
    if _client is None:
        config = get_config().supabase
        if not is_configured():
            raise BackendNotConfigured("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        # Service role key: this service reads tables on behalf of the dashboard
        _client = create_client(config.url, config.service_role_key)
        logger.info("Supabase client created", url=config.url)
    return _client


def reset_supabase() -> None:
    """Drop the cached client (tests, credential rotation)."""
    global _client
    _client = None
