"""Custom exception classes for orbit-node-config library."""

from typing import Optional


class NodeConfigError(Exception):
    """Base exception for node configuration errors."""

    pass


class MissingRequiredFieldError(NodeConfigError, ValueError):
    """Raised when a field required by another field's value is missing."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f'"{field}" is required')


class UnsupportedParentChainError(NodeConfigError, ValueError):
    """Raised when a parent chain id is not in the supported chains table."""

    pass


class InvalidFallbackS3ConfigError(NodeConfigError, ValueError):
    """Raised when an enabled fallback S3 config is missing fields."""

    pass


class InvalidChainConfigError(NodeConfigError, ValueError):
    """Raised when a chain config record cannot be parsed."""

    pass


class DefectiveDeploymentError(NodeConfigError, ValueError):
    """Raised when a deployment result file is missing required data."""

    pass


class EnvironmentConfigError(NodeConfigError, ValueError):
    """Raised when an environment variable is missing or malformed."""

    pass


class RpcChainMismatchError(NodeConfigError, ValueError):
    """Raised when an RPC endpoint reports a different chain id than expected."""

    pass
