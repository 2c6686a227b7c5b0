"""Custom exceptions for summary-generate."""


class SummaryGenerateError(Exception):
    """Base exception for summary-generate operations."""


class TraversalError(SummaryGenerateError):
    """A source directory could not be enumerated."""


class ProtocolError(SummaryGenerateError):
    """Error while decoding the host's input or its version string."""


class SerializationError(SummaryGenerateError):
    """Error while encoding the processed book for the host."""
