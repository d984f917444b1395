"""src/url_builder/builder.py

Chainable URL builder for url_builder.
"""

import logging
from typing import Dict, List

from url_builder.exceptions import InvalidPortError
from url_builder.utils.validators import validate_port

__all__ = ["URLBuilder"]

logger = logging.getLogger(__name__)


class URLBuilder:
    """
    Accumulates the parts of a URL and renders them on demand.

    Mutators return the builder itself so calls can be chained. Nothing is
    escaped or validated except the port range: callers must percent-encode
    routes and params themselves when strict URL syntax matters.

    The query string keeps a trailing ``&`` after the last parameter, and the
    relative order of parameters in the output is not guaranteed.
    """

    __slots__ = ("_protocol", "_host", "_port", "_routes", "_params")

    def __init__(self) -> None:
        self._protocol = ""
        self._host = ""
        # 0 means "no port"
        self._port = 0
        self._routes: List[str] = []
        self._params: Dict[str, str] = {}

    def __repr__(self) -> str:
        return (
            f"URLBuilder(protocol={self._protocol!r}, host={self._host!r}, "
            f"port={self._port!r}, routes={self._routes!r}, "
            f"params={self._params!r})"
        )

    def build(self) -> str:
        """
        Render the accumulated parts into a URL string.

        The builder is left untouched, so ``build()`` may be called again
        after further mutation.

        Returns:
            The formatted URL, e.g. ``http://localhost:8000/query?first=1&``.
        """
        base = f"{self._protocol}://{self._host}"

        routes = "".join(f"/{route}" for route in self._routes)

        url_params = ""
        if self._params:
            url_params = "?" + "".join(
                f"{param}={value}&" for param, value in self._params.items()
            )

        logger.debug(
            "Building URL with %d route(s) and %d param(s)",
            len(self._routes),
            len(self._params),
        )

        if self._port == 0:
            return f"{base}{routes}{url_params}"
        return f"{base}:{self._port}{routes}{url_params}"

    def add_param(self, param: str, value: str) -> "URLBuilder":
        """Add a query parameter, replacing any earlier value for ``param``."""
        self._params[param] = value
        return self

    def set_protocol(self, protocol: str) -> "URLBuilder":
        """Set the protocol (scheme) of the URL."""
        self._protocol = protocol
        return self

    def set_host(self, host: str) -> "URLBuilder":
        """Set the host of the URL."""
        self._host = host
        return self

    def set_port(self, port: int) -> "URLBuilder":
        """
        Set the port of the URL.

        Args:
            port: Port number between 0 and 65535. 0 omits the port.

        Returns:
            The builder itself.

        Raises:
            InvalidPortError: If port is not an integer in range.
        """
        if not validate_port(port):
            logger.debug("Rejected port %r", port)
            raise InvalidPortError(
                f"Port must be an integer between 0 and 65535, got {port!r}"
            )
        self._port = port
        return self

    def add_route(self, route: str) -> "URLBuilder":
        """Append a path segment to the URL."""
        self._routes.append(route)
        return self

    def port(self) -> int:
        """Return the port, 0 when unset."""
        return self._port

    def host(self) -> str:
        """Return the host."""
        return self._host

    def protocol(self) -> str:
        """Return the protocol."""
        return self._protocol

    def routes(self) -> List[str]:
        """Return a copy of the path segments in insertion order."""
        return list(self._routes)

    def params(self) -> Dict[str, str]:
        """Return a copy of the query parameters."""
        return dict(self._params)
