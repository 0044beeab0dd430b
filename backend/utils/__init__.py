"""
OPS-DESK Utils Package
Currency formatting and spreadsheet parsing helpers.
"""

from utils.currency import (
    number_to_words,
    check_amount,
    words,
    split_amount,
    scale_groups,
    rupees_to_paise,
    paise_to_rupees,
    group_indian,
    format_inr,
    validate_amount_rupees,
    AmountError,
)

from utils.spreadsheet import (
    normalize_column_name,
    find_matching_column,
    parse_date,
    clean_number_string,
    parse_number,
    clean_value,
    read_excel_file,
    is_valid_excel_file,
)

from utils.request_ids import generate_request_id

__all__ = [
    # Currency
    'number_to_words',
    'check_amount',
    'words',
    'split_amount',
    'scale_groups',
    'rupees_to_paise',
    'paise_to_rupees',
    'group_indian',
    'format_inr',
    'validate_amount_rupees',
    'AmountError',
    # Spreadsheet
    'normalize_column_name',
    'find_matching_column',
    'parse_date',
    'clean_number_string',
    'parse_number',
    'clean_value',
    'read_excel_file',
    'is_valid_excel_file',
    # Request IDs
    'generate_request_id',
]
