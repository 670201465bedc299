"""
Custom exceptions for the cve-projects library.

Normalization never raises; these cover the file-loading surfaces
(registry assets and CLI configuration).
"""


class CveProjectsError(Exception):
    """Base exception for all library errors."""
    pass


class RegistryError(CveProjectsError):
    """Raised when a project registry asset is missing or malformed."""
    pass


class ValidationError(CveProjectsError):
    """Raised when input validation fails."""
    pass
