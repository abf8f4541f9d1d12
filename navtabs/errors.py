"""Project-wide error types."""


class ProjectError(Exception):
    """Base for all navtabs errors."""


class ValidationError(ProjectError):
    """Invalid input data."""


class ExternalServiceError(ProjectError):
    """Host platform or external tool failure."""


__all__ = ["ProjectError", "ValidationError", "ExternalServiceError"]
