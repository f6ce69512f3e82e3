"""Exception types for Wins & Losses."""


class WinsAndLossesError(Exception):
    """Base class for all Wins & Losses errors."""


class StoreError(WinsAndLossesError):
    """A key-value store read or write failed."""


class BucketDecodeError(WinsAndLossesError):
    """A persisted entry bucket could not be decoded."""
