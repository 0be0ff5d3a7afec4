from __future__ import annotations

"""Exception types for configuration handling."""


class ConfigurationError(RuntimeError):
    """Raised when configuration values are missing or malformed."""

    @classmethod
    def missing_value(cls, param_name: str, context: str = "") -> "ConfigurationError":
        """Create error for a required setting that is not set."""
        msg = f"Required environment variable {param_name!r} is not set"
        if context:
            msg += f": {context}"
        return cls(msg)

    @classmethod
    def invalid_value(cls, param_name: str, value, reason: str = "") -> "ConfigurationError":
        """Create error for a setting that cannot be coerced."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg)

    @classmethod
    def load_failed(cls, resource: str, identifier: str = "") -> "ConfigurationError":
        """Create error for a defaults file that cannot be read."""
        msg = f"Failed to load {resource}"
        if identifier:
            msg += f" from {identifier}"
        return cls(msg)


__all__ = ["ConfigurationError"]
