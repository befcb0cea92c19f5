from typing import Any


class ConversionError(ValueError):
    """Raised when a source value cannot be converted to the target type."""

    def __init__(self, source: Any, target_type: type, reason: str | None = None):
        self.source = source
        self.target_type = target_type
        self.reason = reason
        message = f"Failed to convert {source!r} to {target_type.__name__}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConverterNotFoundError(ConversionError):
    """No converter is registered for the requested source/target pair."""

    def __init__(self, source: Any, target_type: type):
        super().__init__(
            source,
            target_type,
            f"no converter registered from {type(source).__name__}",
        )


class MissingParameterError(Exception):
    def __init__(self, name: str, target_type: type):
        self.name = name
        self.target_type = target_type
        super().__init__(f"Required request parameter '{name}' for type {target_type.__name__} is not present")

