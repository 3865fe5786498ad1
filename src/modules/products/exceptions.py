"""Product domain exceptions.

Raised by the Service Layer when a request cannot be honoured.
The API layer (Views) catches the first two and translates them into
HTTP responses; ``ProductConcurrencyConflict`` is left to propagate.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist."""


class ProductIdMismatch(Exception):
    """The id in the request path differs from the id in the body."""


class ProductConcurrencyConflict(Exception):
    """An update affected no rows although the product still exists.

    The cause is unknown, so it is surfaced as a server fault rather
    than retried or reported as a client error.
    """
