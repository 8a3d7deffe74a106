"""Waypost exception hierarchy.

Shared across the router, client registry, aggregator, and CLI so every
module raises and catches the same types.
"""


class WaypostError(Exception):
    """Base for all waypost-specific errors."""


class ConfigurationError(WaypostError):
    """Raised when routes, client views, or settings are invalid.

    Typically raised while routes are registered or a client route
    file is loaded, before any document is generated.
    """


class MissingRouterError(WaypostError):
    """No server router was supplied for a document-generation call.

    Fatal for the request: no views are collected and the document
    is left untouched.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "A server router is required to collect server views.")


class ViewSerializationError(WaypostError):
    """The available-views map could not be encoded as JSON.

    Raised from the underlying ``TypeError``/``ValueError`` so the
    offending value stays visible in the traceback.
    """
