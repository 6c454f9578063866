# host_utils/errors.py


class HostUtilsError(Exception):
    """Base class for errors raised by host_utils."""


class InvalidArgumentError(HostUtilsError, ValueError):
    """Raised when a caller passes a missing or malformed argument.

    This is the only error host_utils lets cross a component boundary; runtime
    and OS-level failures are logged and turned into empty results instead.
    """
