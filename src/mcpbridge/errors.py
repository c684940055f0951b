# ABOUTME: Error taxonomy for mcpbridge operations.
# ABOUTME: Every message is meant to be shown to the user as-is.


class MCPBridgeError(Exception):
    """Base class for all mcpbridge failures."""


class NotFoundError(MCPBridgeError):
    """A referenced entry or snapshot file does not exist."""


class ParseError(MCPBridgeError):
    """Malformed JSON, a non-object payload, or an unexpected document shape."""


class UnknownSourceError(ParseError):
    """A snapshot records a source that is unknown or not the requested backend."""


class WriteError(MCPBridgeError):
    """Serialization or I/O failure while writing a document."""


class PermissionDeniedError(MCPBridgeError):
    """The OS rejected a read or write."""
