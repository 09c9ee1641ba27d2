"""Exception types raised by feedctl controllers and configuration."""


class MissingCapabilityError(NotImplementedError):
    """Raised when an Updatable type supplies no output computation."""


class InvalidConfigurationError(ValueError):
    """Raised when a controller, range or tuning call is misconfigured."""


__all__ = ["MissingCapabilityError", "InvalidConfigurationError"]
