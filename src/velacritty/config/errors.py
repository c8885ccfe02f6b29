"""Domain exceptions for configuration loading.

This module defines the exception hierarchy for the configuration engine,
separating I/O failures, syntax errors in either source format, import
directive problems, and schema validation failures. Import resolution
catches these per import; the root file lets them propagate.
"""

from pathlib import Path


class ConfigError(Exception):
    """Base exception for all configuration errors.

    All exceptions raised while reading, converting, importing or validating
    a configuration file inherit from this class.
    """


class ConfigIoError(ConfigError):
    """Raised when a configuration file cannot be read.

    Callers use ``not_found`` to pick the log severity: a missing import
    is informational, any other read failure is an error.
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        """Initialize the I/O error.

        Args:
            path: File that could not be read.
            cause: Underlying OS or decoding error.
        """
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading config file {path}: {cause}")

    @property
    def not_found(self) -> bool:
        """Whether the file does not exist."""
        return isinstance(self.cause, FileNotFoundError)


class ConfigParseError(ConfigError):
    """Raised when canonical TOML text is malformed."""

    def __init__(self, path: Path, message: str) -> None:
        """Initialize the parse error.

        Args:
            path: File that failed to parse.
            message: Diagnostic text from the TOML parser.
        """
        self.path = path
        self.message = message
        super().__init__(f"Config error in {path}: {message}")


class LegacyParseError(ConfigError):
    """Raised when a legacy YAML file is malformed."""

    def __init__(self, path: Path, message: str) -> None:
        """Initialize the legacy parse error.

        Args:
            path: File that failed to parse.
            message: Diagnostic text from the YAML parser.
        """
        self.path = path
        self.message = message
        super().__init__(f"Config error in {path}: {message}")


class LegacySerializeError(ConfigError):
    """Raised when pruned YAML content cannot be re-emitted as TOML."""

    def __init__(self, path: Path, message: str) -> None:
        """Initialize the conversion error.

        Args:
            path: Legacy file being converted.
            message: Reason the conversion failed.
        """
        self.path = path
        self.message = message
        super().__init__(f"Yaml conversion error in {path}: {message}")


class ImportDirectiveError(ConfigError):
    """Raised for a malformed ``import`` directive or import element."""


class RecursionLimitError(ImportDirectiveError):
    """Raised when a file has imports but no import depth is left."""

    def __init__(self) -> None:
        super().__init__("Exceeded maximum configuration import depth")


class ConfigValidationError(ConfigError):
    """Raised when the merged configuration fails schema validation."""

    def __init__(
        self, errors: list[dict[str, str]], file_path: str | None = None
    ) -> None:
        """Initialize the error.

        Args:
            errors: List of validation error details.
            file_path: Path to the root file that failed validation.
        """
        self.errors = errors
        self.file_path = file_path
        target = file_path or "configuration"
        details = "; ".join(f"{err['loc']}: {err['msg']}" for err in errors)
        super().__init__(
            f"Validation failed for {target}: {len(errors)} errors ({details})"
        )
