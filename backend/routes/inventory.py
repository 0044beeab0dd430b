"""
OPS-DESK Inventory Routes
Full inventory listing and stock/QC summary.
"""

from flask import Blueprint, jsonify
import structlog

from middleware import safe_handler
from services import list_inventory, get_inventory_summary

logger = structlog.get_logger(__name__)

inventory_bp = Blueprint('inventory', __name__, url_prefix='/api/inventory')


@inventory_bp.route('', methods=['GET'])
@safe_handler
def get_inventory():
    items = list_inventory()
    return jsonify({'items': items, 'count': len(items)})


@inventory_bp.route('/summary', methods=['GET'])
@safe_handler
def get_summary():
    summary = get_inventory_summary()
    return jsonify(summary.to_dict())
