"""Error taxonomy for catalog operations."""


class CatalogError(Exception):
    """Base error for catalog, overlay and facet operations."""


class NotFoundError(CatalogError, LookupError):
    """Raised when a required restaurant or collection identity is unknown."""


class InvalidArgumentError(CatalogError, ValueError):
    """Raised for out-of-range values, unknown facets or unknown options."""
