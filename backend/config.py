"""
OPS-DESK Configuration Module
Centralized, environment-based configuration with secure defaults.

Secrets come from the environment only; dataclasses are frozen so the
configuration can't drift after startup.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(frozen=True)
class SupabaseConfig:
    """Hosted backend (row storage) configuration."""

    url: str = field(default_factory=lambda: os.environ.get(
        'SUPABASE_URL', ''
    ))
    service_role_key: str = field(default_factory=lambda: os.environ.get(
        'SUPABASE_SERVICE_ROLE_KEY', ''
    ))

    # PostgREST returns at most 1000 rows per select
    page_size: int = 1000
    # Rows per upsert request
    upsert_batch_size: int = 100
    inventory_table: str = 'inventory'


@dataclass(frozen=True)
class ImportConfig:
    """Spreadsheet upload limits."""

    max_upload_bytes: int = field(default_factory=lambda: int(os.environ.get(
        'IMPORT_MAX_UPLOAD_BYTES', str(10 * 1024 * 1024)
    )))
    allowed_extensions: tuple = ('.xlsx', '.xls')


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""

    # Environment
    env: str = field(default_factory=lambda: os.environ.get('FLASK_ENV', 'production'))
    debug: bool = field(default_factory=lambda: os.environ.get('FLASK_DEBUG', 'false').lower() == 'true')

    secret_key: str = field(default_factory=lambda: os.environ.get(
        'FLASK_SECRET_KEY', ''
    ))

    # Server settings
    host: str = '0.0.0.0'
    port: int = field(default_factory=lambda: int(os.environ.get('PORT', '5000')))

    # CORS settings
    cors_origins: list = field(default_factory=lambda: os.environ.get(
        'CORS_ORIGINS', 'http://localhost:3000'
    ).split(','))

    @property
    def is_production(self) -> bool:
        return self.env == 'production'

    # Nested configs
    supabase: SupabaseConfig = field(default_factory=SupabaseConfig)
    imports: ImportConfig = field(default_factory=ImportConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get application configuration singleton."""
    return AppConfig()


def validate_config(config: AppConfig) -> list[str]:
    """
    Validate configuration completeness.
    Returns list of validation errors.
    """
    errors = []

    if config.imports.max_upload_bytes <= 0:
        errors.append("IMPORT_MAX_UPLOAD_BYTES must be positive")

    if config.is_production:
        if not config.secret_key:
            errors.append("FLASK_SECRET_KEY is required in production")
        if not config.supabase.url:
            errors.append("SUPABASE_URL is required in production")
        if not config.supabase.service_role_key:
            errors.append("SUPABASE_SERVICE_ROLE_KEY is required in production")

        if config.debug:
            errors.append("FLASK_DEBUG must be false in production")

    return errors
