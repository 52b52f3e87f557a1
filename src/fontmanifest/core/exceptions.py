"""Custom exceptions for the font manifest system."""

from typing import Any


class FontManifestError(Exception):
    """Base exception for all font manifest errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ManifestLoadError(FontManifestError):
    """Exception raised when a manifest cannot be loaded."""


class ConfigurationError(FontManifestError):
    """Exception raised for configuration errors."""


class FontNotFoundError(FontManifestError, LookupError):
    """Exception raised when a query matches no font."""

    def __init__(self, query: str, details: Any | None = None):
        super().__init__(f"Font not found: {query}", details)
        self.query = query


class ManifestNotFoundError(ManifestLoadError):
    """Exception raised when the manifest file is missing or unreadable."""

    def __init__(self, manifest_path: str, error: str | None = None):
        message = f"Manifest file not found: {manifest_path}"
        if error:
            message = f"Cannot read manifest {manifest_path}: {error}"
        super().__init__(message)
        self.manifest_path = manifest_path


class ManifestParseError(ManifestLoadError):
    """Exception raised when the manifest is not well-formed XML."""

    def __init__(self, source: str, error: str):
        super().__init__(f"Invalid XML in {source}: {error}")


class InvalidAttributeError(ManifestLoadError):
    """Exception raised when an attribute value has the wrong type."""

    def __init__(self, element: str, attribute: str, value: str, expected: str):
        super().__init__(
            f"Invalid {expected} for <{element} {attribute}>: {value!r}",
            details={"element": element, "attribute": attribute, "value": value},
        )


class ManifestStructureError(ManifestLoadError):
    """Exception raised when the event stream breaks element nesting."""


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML content."""

    def __init__(self, config_path: str, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")


class InvalidLogLevelError(ValueError):
    """Exception raised for unknown logging level names."""

    def __init__(self, level: str):
        super().__init__(f"Unknown log level: {level}")
