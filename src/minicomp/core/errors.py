"""
Error types for component resolution and configuration loading.
"""

from dataclasses import dataclass
from typing import Optional


class MinicompError(Exception):
    """Base exception for all minicomp errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(MinicompError):
    """
    Raised when a project configuration file cannot be loaded.

    Examples:
    - Config file does not exist
    - Invalid TOML or JSON
    - Field values of the wrong type
    """

    pass


class ComponentError(MinicompError):
    """
    A non-fatal problem found while resolving components.

    These are recorded as diagnostics and never raised out of the
    resolution pass; the offending item is skipped.
    """

    def __init__(self, message: str, path: str, context: Optional["ErrorContext"] = None):
        self.path = path
        super().__init__(message, context)


class ManifestNotJSONError(ComponentError):
    """Manifest text could not be parsed as JSON."""

    def __init__(self, label: str):
        super().__init__(f"{label} is not json", label)


class ManifestNotFoundError(ComponentError):
    """Expected ``.json`` manifest does not exist on disk."""

    def __init__(self, path: str):
        super().__init__(f'Component is not found in path "{path}"(not found json)', path)


class ComponentScriptNotFoundError(ComponentError):
    """Expected ``.js`` companion of a component does not exist."""

    def __init__(self, path: str):
        super().__init__(f'Component is not found in path "{path}"(not found js)', path)


class IneffectivePathError(ComponentError):
    """A configured source root is neither a directory nor a manifest file."""

    def __init__(self, path: str):
        super().__init__(f'includes: "{path}", is not a effective path.', path)


@dataclass
class ErrorContext:
    """
    Where an error was found.

    Attributes:
        file: Manifest or config file the error relates to
        detail: Optional extra detail, e.g. the offending key
    """

    file: str
    detail: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "minicomp.toml (components.src)"
        """
        if self.detail:
            return f"{self.file} ({self.detail})"
        return self.file


def make_config_error(message: str, file: str | None = None, detail: str | None = None) -> ConfigError:
    """
    Helper to create a ConfigError with optional context.

    Args:
        message: Error description
        file: Optional config file path
        detail: Optional key or section name

    Returns:
        ConfigError with context if a file was given
    """
    if file:
        return ConfigError(message, ErrorContext(file=file, detail=detail))
    return ConfigError(message)
