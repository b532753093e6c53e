"""Custom exceptions for docmark."""


class DocmarkError(Exception):
    """Base exception for docmark operations."""


class ConfigurationError(DocmarkError):
    """Invalid value in the environment configuration."""


class RenderError(DocmarkError):
    """The markdown engine failed to render a document."""
