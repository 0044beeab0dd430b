"""
OPS-DESK Import Routes
Preview and import inventory spreadsheet uploads.
"""

from flask import Blueprint, request, jsonify
import structlog

from config import get_config
from middleware import safe_handler, error_response
from services import build_import_preview, upsert_inventory_rows
from utils import read_excel_file, is_valid_excel_file

logger = structlog.get_logger(__name__)

imports_bp = Blueprint('imports', __name__, url_prefix='/api/imports')


def _read_upload():
    """
    Read the uploaded workbook's rows.

    Returns (rows, None) or (None, error response).
    """
    config = get_config().imports
    upload = request.files.get('file')
    if upload is None or not is_valid_excel_file(upload.filename):
        return None, error_response(
            'UNSUPPORTED_FILE',
            status=400,
            details={'allowed_extensions': list(config.allowed_extensions)}
        )

    data = upload.read()
    if len(data) > config.max_upload_bytes:
        return None, error_response(
            'PAYLOAD_TOO_LARGE',
            status=413,
            details={'max_bytes': config.max_upload_bytes}
        )

    try:
        rows = read_excel_file(data)
    except Exception as e:
        logger.warning("Workbook unreadable", filename=upload.filename, error=str(e))
        return None, error_response('UNSUPPORTED_FILE', 'Workbook could not be read', status=400)

    return rows, None


@imports_bp.route('/inventory/preview', methods=['POST'])
@safe_handler
def preview_inventory_import():
    """
    Map an uploaded inventory workbook onto inventory columns.

    Multipart field: file (.xlsx or .xls)
    """
    rows, error = _read_upload()
    if error:
        return error

    preview = build_import_preview(rows)
    logger.info(
        "Inventory import previewed",
        filename=request.files['file'].filename,
        rows=len(preview.rows),
        skipped=preview.skipped
    )
    return jsonify(preview.to_dict())


@imports_bp.route('/inventory', methods=['POST'])
@safe_handler
def import_inventory():
    """
    Upsert an uploaded inventory workbook, keyed on serial number.

    Multipart field: file (.xlsx or .xls)
    """
    rows, error = _read_upload()
    if error:
        return error

    preview = build_import_preview(rows)
    uploaded = upsert_inventory_rows(preview.rows)
    logger.info(
        "Inventory imported",
        filename=request.files['file'].filename,
        uploaded=uploaded,
        skipped=preview.skipped,
        duplicates=preview.duplicates
    )
    return jsonify({
        'uploaded': uploaded,
        'skipped': preview.skipped,
        'duplicates': preview.duplicates,
        'unmapped': preview.unmapped
    }), 201
