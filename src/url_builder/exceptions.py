"""src/url_builder/exceptions.py

url_builder Exceptions hierarchy.
"""


class URLBuilderError(Exception):
    """Base exception for all url_builder errors."""


class InvalidPortError(URLBuilderError, ValueError):
    """
    Port value outside the unsigned 16-bit range.
    """

    def __init__(self, message: str = "Port must be an integer between 0 and 65535"):
        super().__init__(message)
