"""utils/validators.py

Validation utilities for url_builder.
"""

from typing import Any

MAX_PORT = 65535


def validate_port(port: Any) -> bool:
    """Check that port fits in an unsigned 16-bit integer."""
    # bool is an int subclass but never a meaningful port
    if isinstance(port, bool) or not isinstance(port, int):
        return False
    return 0 <= port <= MAX_PORT
