"""src/url_builder/__init__.py

url_builder - Build URLs incrementally with chained calls.

Collect the protocol, host, port, path segments and query parameters of a URL
over the course of execution, then call ``build()`` to render the final string.

Key Features:
    - Zero external dependencies
    - Chainable mutators
    - Non-consuming ``build()``: the builder stays usable afterwards
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Nothing is percent-encoded. The query string ends with a trailing ``&`` and
the order of its parameters is not guaranteed.

Example:
    Basic usage::

        from url_builder import URLBuilder

        ub = (
            URLBuilder()
            .set_protocol("http")
            .set_host("localhost")
            .set_port(8000)
            .add_route("query")
            .add_param("first", "1")
            .add_param("second", "2")
        )

        print(ub.build())  # http://localhost:8000/query?first=1&second=2&
"""

from url_builder.builder import URLBuilder
from url_builder.exceptions import InvalidPortError, URLBuilderError
from url_builder.version import __version__

__all__ = [
    "URLBuilder",
    "URLBuilderError",
    "InvalidPortError",
    "__version__",
]
