"""
OPS-DESK Amount Routes
Amounts in words for invoices and quotations.
"""

from flask import Blueprint, request, jsonify
import structlog

from middleware import safe_handler
from utils import (
    number_to_words,
    check_amount,
    rupees_to_paise,
    format_inr,
    parse_number,
    validate_amount_rupees,
    AmountError,
)

logger = structlog.get_logger(__name__)

amounts_bp = Blueprint('amounts', __name__, url_prefix='/api/amounts')


def _read_amount(data):
    if not isinstance(data, dict):
        raise AmountError("Request body must be a JSON object")
    if 'amount' not in data or data['amount'] is None:
        raise AmountError("amount is required")

    amount = data['amount']
    # Display strings like "₹1,23,456.50" are accepted
    if isinstance(amount, str):
        parsed = parse_number(amount)
        if parsed is None:
            raise AmountError("amount is not a number")
        amount = parsed
    return amount


@amounts_bp.route('/words', methods=['POST'])
@safe_handler
def amount_in_words():
    """
    Spell an amount in rupees and paise.

    Body: {"amount": 1500} or {"amount": "₹1,500.00"}
    """
    amount = _read_amount(request.get_json(silent=True) or {})

    check_amount(amount)
    if not validate_amount_rupees(amount):
        raise AmountError("amount exceeds the supported maximum")

    text = number_to_words(amount)
    paise = rupees_to_paise(amount)
    logger.debug("Amount spelled", paise=paise)
    return jsonify({
        'amount': amount,
        'paise': paise,
        'words': text,
        'formatted': format_inr(paise)
    })
