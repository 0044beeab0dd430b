"""
OPS-DESK Services Package
Inventory feed and spreadsheet import.
"""

from services.supabase_client import (
    get_supabase,
    reset_supabase,
    is_configured,
    DataAccessError,
    BackendNotConfigured,
)

from services.inventory import (
    InventorySummary,
    ProductCounts,
    fetch_all_rows,
    list_inventory,
    summarize_inventory,
    get_inventory_summary,
)

from services.imports import (
    INVENTORY_COLUMN_MAPPINGS,
    INVENTORY_DATE_COLUMNS,
    ImportPreview,
    ImportValidationError,
    map_headers,
    build_import_preview,
    upsert_inventory_rows,
)

__all__ = [
    # Supabase
    'get_supabase',
    'reset_supabase',
    'is_configured',
    'DataAccessError',
    'BackendNotConfigured',
    # Inventory
    'InventorySummary',
    'ProductCounts',
    'fetch_all_rows',
    'list_inventory',
    'summarize_inventory',
    'get_inventory_summary',
    # Imports
    'INVENTORY_COLUMN_MAPPINGS',
    'INVENTORY_DATE_COLUMNS',
    'ImportPreview',
    'ImportValidationError',
    'map_headers',
    'build_import_preview',
    'upsert_inventory_rows',
]
