"""
Custom exception hierarchy for the HD asset scanner.

Startup and walk errors are fatal and propagate to the entry point.
Probe errors are per-asset: they are caught at the task boundary and
reported as a failed probe for that single asset.
"""


class HDScannerError(Exception):
    """Base exception for all scanner errors."""
    pass


class StartupError(HDScannerError):
    """Raised when a precondition for scanning is not met."""
    pass


class MediaInfoNotFoundError(StartupError):
    """Raised when the mediainfo executable cannot be located."""
    pass


class InvalidSearchRootError(StartupError):
    """Raised when the search root is empty or not absolute."""
    pass


class WalkError(HDScannerError):
    """Raised when the directory tree cannot be traversed."""
    pass


class ProbeError(HDScannerError):
    """Raised when format data cannot be extracted from an asset."""
    pass


class ProbeTimeoutError(ProbeError):
    """Raised when the metadata tool does not answer within the deadline."""
    pass


class UnknownVideoTypeError(ProbeError):
    """Raised when an asset has zero or several video tracks."""
    pass


class AssetIOError(ProbeError):
    """Raised when an asset cannot be opened."""
    pass


class ImageDecodeError(ProbeError):
    """Raised when image content cannot be decoded."""
    pass


class UnsupportedFormatError(ProbeError):
    """Raised when no decoder is registered for an extension."""
    pass
