"""Project-wide exception types."""

class StatWorkbenchError(Exception):
    """Base exception for all engine errors."""


class InsufficientSampleError(StatWorkbenchError):
    """Raised when a sample does not meet the size an operation requires."""


class DegenerateFitError(StatWorkbenchError):
    """Raised when a usable fit is demanded but the fitted model is degenerate."""


class UnsupportedParameterError(StatWorkbenchError, ValueError):
    """Raised for unknown families, methods, confidence levels or invalid parameters."""


class DataSourceError(StatWorkbenchError):
    """Raised when sample data cannot be read or parsed."""


class SchemaError(DataSourceError):
    """Raised when tabular input lacks a usable numeric column."""


class ConfigError(StatWorkbenchError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""
