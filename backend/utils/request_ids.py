"""
OPS-DESK Request Utilities
Request identifiers for log correlation.
"""

import secrets
from datetime import datetime, timezone


def generate_request_id() -> str:
    """
    Generate a unique request ID.

    Timestamp prefix keeps IDs roughly time-ordered in the logs.
    """
    timestamp = datetime.now(timezone.utc).strftime('%Y%m%d%H%M%S')
    return f"req_{timestamp}_{secrets.token_hex(8)}"
