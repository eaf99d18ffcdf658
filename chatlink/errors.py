"""Exception types raised while resolving a chat client configuration."""


class InvalidArgumentError(ValueError):
    """Raised when the builder configuration cannot produce a client."""


class UnrecoverableError(RuntimeError):
    """The runtime is missing a primitive the credential derivation needs."""
