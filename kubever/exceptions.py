"""Custom exceptions for kubever.

Provides structured error handling with categorized exceptions
and standardized error response format.
"""

from typing import Optional, Dict, Any


class KubeverException(Exception):
    """Base exception for all kubever errors.

    Provides structured error response format with:
    - error_code: Machine-readable error identifier
    - message: Human-readable error description
    - details: Optional additional context
    """

    error_code: str = "KUBEVER_ERROR"
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Return structured error response dict."""
        response = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


# ============ Validation Errors (4xx) ============


class ValidationError(KubeverException):
    """Input validation failed."""

    error_code = "VALIDATION_ERROR"
    status_code = 400


class InvalidArgumentError(ValidationError):
    """A required argument was empty or malformed."""

    error_code = "INVALID_ARGUMENT"

    def __init__(self, argument: str, reason: str = "must not be empty"):
        super().__init__(f"{argument} {reason}", details={"argument": argument, "reason": reason})


class InvalidVersionError(ValidationError):
    """Version string does not follow the expected grammar."""

    error_code = "INVALID_VERSION"

    def __init__(self, version: str, expected: str = "semver"):
        super().__init__(
            f"Version {version!r} is not a valid {expected} string",
            details={"version": version, "expected": expected},
        )


# ============ Build Artifact Errors ============


class ArtifactError(KubeverException):
    """Base class for build-artifact lookup and read errors."""

    error_code = "ARTIFACT_ERROR"


class NotFoundError(ArtifactError):
    """Expected build output, version file or archive member is absent."""

    error_code = "NOT_FOUND"
    status_code = 404

    def __init__(self, path: str, reason: str = "not found"):
        super().__init__(f"{path}: {reason}", details={"path": path, "reason": reason})


class IOFailureError(ArtifactError):
    """Reading a build output failed for a reason other than absence."""

    error_code = "IO_FAILURE"

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed reading {path}: {reason}", details={"path": path, "reason": reason})


class CorruptArchiveError(ArtifactError):
    """Release tarball could not be decompressed or parsed."""

    error_code = "CORRUPT_ARCHIVE"
    status_code = 422

    def __init__(self, path: str, reason: str):
        super().__init__(f"Corrupt archive {path}: {reason}", details={"path": path, "reason": reason})


# ============ Remote Errors ============


class FetchFailureError(KubeverException):
    """Fetching a published version marker failed."""

    error_code = "FETCH_FAILURE"
    status_code = 502

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed fetching {url}: {reason}", details={"url": url, "reason": reason})


# ============ Configuration Errors ============


class ConfigurationError(KubeverException):
    """Configuration issue."""

    error_code = "CONFIGURATION_ERROR"

    def __init__(self, setting: str, message: str):
        super().__init__(f"Configuration error for {setting}: {message}", details={"setting": setting})


# ============ Utility Functions ============


def error_response(exception: KubeverException) -> tuple:
    """Create Flask JSON response from exception.

    Returns:
        Tuple of (response_dict, status_code) ready for jsonify
    """
    return exception.to_dict(), exception.status_code
