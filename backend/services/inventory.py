"""
OPS-DESK Inventory Service
Reads the inventory table in full and summarizes it.

PostgREST caps a single select at 1000 rows, so reads walk the table
with fixed-size range requests until a short page comes back.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional, Iterable
import structlog

from config import get_config
from services.supabase_client import get_supabase, DataAccessError

logger = structlog.get_logger(__name__)


STATUS_IN_STOCK = 'In Stock'
STATUS_DISPATCHED = 'Dispatched'
QC_PENDING = 'Pending'
QC_PASS = 'Pass'
QC_FAIL = 'Fail'
UNKNOWN_PRODUCT = 'Unknown'


@dataclass
class ProductCounts:
    total: int = 0
    in_stock: int = 0
    dispatched: int = 0


@dataclass
class InventorySummary:
    total_items: int = 0
    in_stock: int = 0
    dispatched: int = 0
    qc_pending: int = 0
    qc_pass: int = 0
    qc_fail: int = 0
    by_product: dict[str, ProductCounts] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


def fetch_all_rows(
    client,
    table: str,
    order_by: Optional[str] = None,
    descending: bool = True,
    page_size: Optional[int] = None
) -> list[dict]:
    """
    Fetch every row of a table, one range request per page.

    Stops on an empty page or on a page shorter than page_size.
    """
    if page_size is None:
        page_size = get_config().supabase.page_size
    if page_size < 1:
        raise ValueError("page_size must be positive")

    rows: list[dict] = []
    start = 0
    while True:
        query = client.table(table).select("*")
        if order_by:
            query = query.order(order_by, desc=descending)
        try:
            response = query.range(start, start + page_size - 1).execute()
        except Exception as e:
            logger.error("Range read failed", table=table, start=start, error=str(e))
            raise DataAccessError(f"Failed to read {table}") from e

        page = response.data or []
        if not page:
            break
        rows.extend(page)
        if len(page) < page_size:
            break
        start += page_size

    logger.debug("Table read", table=table, rows=len(rows))
    return rows


def list_inventory(client=None) -> list[dict]:
    """All inventory rows, most recently updated first."""
    if client is None:
        client = get_supabase()
    table = get_config().supabase.inventory_table
    return fetch_all_rows(client, table, order_by='updated_at', descending=True)


def summarize_inventory(items: Iterable[dict]) -> InventorySummary:
    """
    Count stock and QC states.

    In stock excludes items that failed QC; pending includes items
    with no QC result yet.
    """
    summary = InventorySummary()
    for item in items:
        status = item.get('status')
        qc_result = item.get('qc_result')

        summary.total_items += 1
        if status == STATUS_IN_STOCK and qc_result != QC_FAIL:
            summary.in_stock += 1
        if status == STATUS_DISPATCHED:
            summary.dispatched += 1
        if qc_result == QC_PENDING or not qc_result:
            summary.qc_pending += 1
        elif qc_result == QC_PASS:
            summary.qc_pass += 1
        elif qc_result == QC_FAIL:
            summary.qc_fail += 1

        product = summary.by_product.setdefault(
            item.get('product_name') or UNKNOWN_PRODUCT, ProductCounts()
        )
        product.total += 1
        if status == STATUS_IN_STOCK:
            product.in_stock += 1
        if status == STATUS_DISPATCHED:
            product.dispatched += 1

    return summary


def get_inventory_summary(client=None) -> InventorySummary:
    if client is None:
        client = get_supabase()
    table = get_config().supabase.inventory_table
    return summarize_inventory(fetch_all_rows(client, table))
