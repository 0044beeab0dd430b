"""
OPS-DESK Inventory Import Service
Maps uploaded inventory sheets onto the inventory table's columns.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Optional, Iterable
import structlog

from config import get_config
from services.supabase_client import get_supabase, DataAccessError
from utils.spreadsheet import find_matching_column, normalize_column_name, clean_value

logger = structlog.get_logger(__name__)


INVENTORY_COLUMN_MAPPINGS: dict[str, list[str]] = {
    'serial_number': ["serial number", "serial_number", "serial", "sr no", "sr.no", "s.no", "sno", "serial no", "device serial", "imei", "device_id", "device id", "sl no", "sl.no", "slno"],
    'product_name': ["model name", "product_name", "product name", "product", "item name", "item", "device name", "device", "model", "description"],
    'status': ["status", "inventory status", "stock status", "availability", "state"],
    'qc_result': ["qc result", "qc_result", "qc", "quality check", "quality", "test result", "qc status", "quality status"],
    'in_date': ["in date", "in_date", "inward date", "received date", "entry date", "purchase date", "date added", "added date", "inward", "receipt date"],
    'dispatch_date': ["dispatch date", "dispatch_date", "shipped date", "ship date", "sent date", "outward date", "delivery date", "out date"],
    'customer_code': ["customer code", "customer_code", "cust code", "client code", "customer id", "client id", "cust_code"],
    'customer_name': ["customer name", "customer_name", "client name", "buyer name", "buyer", "consignee"],
    'customer_city': ["customer city", "customer_city", "city", "location", "place", "destination", "customer location", "ship to city"],
    'order_id': ["order id", "order_id", "order no", "order number", "sales order", "so number", "invoice", "invoice no"],
    'category': ["category", "product category", "type", "item category", "product type", "group", "item type"],
    'qc_date': ["qc date", "qc_date", "quality check date", "test date", "checked date", "inspection date"],
    'sd_connect': ["sd_connect", "sd connect", "sd card", "sd status", "memory card"],
    'all_channels': ["all_channels", "all channels", "channels", "channel test", "video channels"],
    'network_test': ["network_test", "network test", "network", "connectivity", "network status", "wifi test"],
    'gps_test': ["gps_test", "gps test", "gps", "gps status", "location test"],
    'sim_slot': ["sim_slot", "sim slot", "sim", "sim card", "sim status"],
    'online_test': ["online_test", "online test", "online", "online status", "cloud test"],
    'camera_quality': ["camera_quality", "camera quality", "camera", "video quality", "image quality"],
    'monitor_test': ["monitor_test", "monitor test", "monitor", "display test", "screen test"],
    'ip_address': ["ip_address", "ip address", "ip", "device ip", "network ip"],
    'checked_by': ["checked_by", "checked by", "inspector", "tested by", "quality inspector", "qc person", "operator"],
}

INVENTORY_DATE_COLUMNS = ('in_date', 'dispatch_date', 'qc_date')
REQUIRED_COLUMNS = ('serial_number', 'product_name')

DEFAULT_STATUS = 'In Stock'
DEFAULT_QC_RESULT = 'Pending'


class ImportValidationError(ValueError):
    """Raised when an uploaded sheet can't be imported."""
    pass


@dataclass
class ImportPreview:
    mapping: dict[str, Optional[str]]
    unmapped: list[str]
    rows: list[dict] = field(default_factory=list)
    skipped: int = 0
    duplicates: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def map_headers(
    headers: Iterable[str],
    mappings: dict[str, list[str]]
) -> dict[str, Optional[str]]:
    """
    Map each header to a schema column.

    Exact matches are settled first, across all headers; the remaining
    headers then try a starts/ends-with match on unclaimed columns. A
    column is claimed by one header only.
    """
    headers = list(headers)
    mapping: dict[str, Optional[str]] = {header: None for header in headers}
    claimed = set()

    for header in headers:
        normalized = normalize_column_name(header)
        for column, variations in mappings.items():
            if column not in claimed and normalized in variations:
                mapping[header] = column
                claimed.add(column)
                break

    for header in headers:
        if mapping[header] is not None:
            continue
        column = find_matching_column(header, mappings, strict=True, exclude=claimed)
        if column:
            mapping[header] = column
            claimed.add(column)

    return mapping


def build_import_preview(
    rows: list[dict],
    mappings: dict[str, list[str]] = INVENTORY_COLUMN_MAPPINGS,
    date_columns: Iterable[str] = INVENTORY_DATE_COLUMNS
) -> ImportPreview:
    """
    Turn raw sheet rows into inventory rows ready for insert.

    Rows without a serial number are skipped. A serial number seen
    again replaces the earlier row. Missing status and QC result get
    the inventory defaults.
    """
    headers: list[str] = []
    for row in rows:
        for header in row:
            if header not in headers:
                headers.append(header)

    mapping = map_headers(headers, mappings)
    for required in REQUIRED_COLUMNS:
        if required not in mapping.values():
            raise ImportValidationError(f"No column matches {required}")

    date_columns = tuple(date_columns)
    by_serial: dict[str, dict] = {}
    skipped = 0
    duplicates = 0
    for row in rows:
        record = {}
        for header, column in mapping.items():
            if column is None:
                continue
            record[column] = clean_value(row.get(header), column, date_columns)

        serial = record.get('serial_number')
        if not serial:
            skipped += 1
            continue

        record['status'] = record.get('status') or DEFAULT_STATUS
        record['qc_result'] = record.get('qc_result') or DEFAULT_QC_RESULT

        # Last occurrence wins and takes the later position
        if serial in by_serial:
            del by_serial[serial]
            duplicates += 1
        by_serial[serial] = record

    cleaned_rows = list(by_serial.values())
    unmapped = [header for header, column in mapping.items() if column is None]
    logger.info(
        "Import preview built",
        rows=len(cleaned_rows),
        skipped=skipped,
        duplicates=duplicates,
        unmapped=len(unmapped)
    )
    return ImportPreview(
        mapping=mapping,
        unmapped=unmapped,
        rows=cleaned_rows,
        skipped=skipped,
        duplicates=duplicates
    )


def upsert_inventory_rows(
    rows: list[dict],
    client=None,
    batch_size: Optional[int] = None
) -> int:
    """
    Write rows to the inventory table, keyed on serial_number.

    Rows go out in batches; each row is stamped with updated_at.
    Returns the number of rows written.
    """
    config = get_config().supabase
    if batch_size is None:
        batch_size = config.upsert_batch_size
    if batch_size < 1:
        raise ValueError("batch_size must be positive")
    if client is None:
        client = get_supabase()

    uploaded = 0
    for start in range(0, len(rows), batch_size):
        updated_at = datetime.now(timezone.utc).isoformat()
        batch = [dict(row, updated_at=updated_at) for row in rows[start:start + batch_size]]
        try:
            client.table(config.inventory_table).upsert(
                batch, on_conflict='serial_number'
            ).execute()
        except Exception as e:
            logger.error(
                "Inventory batch upsert failed",
                start=start,
                uploaded=uploaded,
                error=str(e)
            )
            raise DataAccessError(f"Failed to upload batch starting at row {start}") from e
        uploaded += len(batch)

    logger.info("Inventory rows upserted", rows=uploaded)
    return uploaded
