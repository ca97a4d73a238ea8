"""Tenant capability exception hierarchy."""


class CapabilityError(Exception):
    """Base exception for all capability probing errors."""


class SnapshotLoadError(CapabilityError):
    """Raised when the environment snapshot cannot be loaded.

    There is no safe default for "which environment am I in", so this is the
    one failure the capability context lets through to its callers.
    """


class UnsupportedOperationError(CapabilityError):
    """Raised by a collaborator call that is not allowed in the current mode.

    A social API call raising this under a test run means the run only sees
    test-created data.
    """
