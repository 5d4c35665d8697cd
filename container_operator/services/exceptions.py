"""Custom exceptions for service layer."""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    pass


class RuntimeClientError(ServiceError):
    """Exception raised when a container runtime backend cannot be used."""

    pass


class ContainerNotFoundError(RuntimeClientError):
    """Exception raised when a container is not found."""

    pass


class GlobPatternError(ServiceError, ValueError):
    """Exception raised for a malformed glob pattern."""

    pass


class OperatorError(ServiceError):
    """An operator failure, recording a reason and the error that caused it."""

    reason = "Container operation failed"

    def __init__(self, err: Optional[BaseException] = None, reason: Optional[str] = None):
        self.err = err
        if reason is not None:
            self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        msg = self.reason
        if self.err is not None:
            msg += f" [{self.err}]"
        return msg


class ContainerListError(OperatorError):
    """Exception raised when the runtime could not list its containers."""

    reason = "Could not list the containers"


class OperationTimeoutError(OperatorError, TimeoutError):
    """Exception raised when a runtime call outlives its deadline."""

    reason = "Container runtime call timed out"
