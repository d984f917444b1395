"""tests/unit/test_validators.py"""

import pytest

from url_builder.utils.validators import MAX_PORT, validate_port


@pytest.mark.parametrize("port", [0, 1, 80, 8000, MAX_PORT])
def test_validate_port_accepts_range(port):
    """Verify that ports in the unsigned 16-bit range are valid."""
    assert validate_port(port) is True


@pytest.mark.parametrize("port", [-1, MAX_PORT + 1, False, True, 1.0, "1", None])
def test_validate_port_rejects_others(port):
    """Verify that out-of-range and non-integer values are invalid."""
    assert validate_port(port) is False
