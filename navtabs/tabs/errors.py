from navtabs.errors import ExternalServiceError, ProjectError, ValidationError


class CustomTabError(ProjectError):
    """Base custom tab subsystem error."""


class InvalidAddressError(CustomTabError, ValidationError):
    """Raised when a navigation target is empty, scheme-less or unparseable."""


class InvalidResourceError(CustomTabError, ValidationError):
    """Raised when a color value or color resource cannot be resolved."""


class ResolutionError(CustomTabError):
    """Raised by animation resolvers for unknown animation references."""


class PlatformLaunchError(CustomTabError, ExternalServiceError):
    """Raised when the host platform fails to carry out a navigation request."""


__all__ = [
    "CustomTabError",
    "InvalidAddressError",
    "InvalidResourceError",
    "PlatformLaunchError",
    "ResolutionError",
]
