"""src/url_builder/utils/__init__.py"""

from .validators import MAX_PORT, validate_port

__all__ = ["MAX_PORT", "validate_port"]
