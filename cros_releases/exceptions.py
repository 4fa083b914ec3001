class ReleaseFetchError(Exception):
    """Raised when the releases feed cannot be fetched or parsed."""


class CacheError(Exception):
    """Raised when the last-release timestamp cannot be written to the cache."""


class NotificationError(Exception):
    """Raised when desktop notifications cannot be shown."""
