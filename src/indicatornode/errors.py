"""Custom exceptions for clearer error handling across the package."""


class IndicatorNodeError(Exception):
    """Base exception for all package-specific errors."""


class ConfigError(IndicatorNodeError):
    """Raised when environment or CLI configuration is invalid."""


class DataProviderError(IndicatorNodeError):
    """Raised when market data retrieval or parsing fails."""


class InsufficientDataError(IndicatorNodeError, ValueError):
    """Raised when a series is too short to produce an indicator reading."""


class NonFiniteReadingError(IndicatorNodeError, ValueError):
    """Raised when a full lookback window still yields NaN or infinity."""
