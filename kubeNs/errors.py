# kubeNs/errors.py
"""
Exception types raised by kubeNs.

Every error carries the name of the operation it happened in and, where there
is one, the underlying cause. ``str(error)`` reads like ``"<operation>: <cause>"``.
"""
from enum import Enum


class ErrorKind(Enum):
    """Classification of a failed cluster query."""
    NOT_FOUND = "NotFound"
    OTHER = "Other"


class KubeNsError(Exception):
    """Base class for all kubeNs errors."""

    def __init__(self, operation: str, cause: Exception | str | None = None):
        self.operation = operation
        self.cause = cause
        message = f"{operation}: {cause}" if cause is not None else operation
        super().__init__(message)


class ClusterQueryError(KubeNsError):
    """Raised when listing, reading or creating namespaces on the cluster fails."""

    def __init__(self, operation: str, cause: Exception | str | None = None,
                 kind: ErrorKind = ErrorKind.OTHER):
        super().__init__(operation, cause)
        self.kind = kind

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND


class NamespaceNotFound(ClusterQueryError):
    """Raised when the target namespace does not exist and neither --create nor --quiet was given."""

    def __init__(self, namespace: str):
        super().__init__(f"namespace '{namespace}' not found", kind=ErrorKind.NOT_FOUND)
        self.namespace = namespace


class NamespaceCreateError(KubeNsError):
    pass


class ConfigLoadError(KubeNsError):
    pass


class ConfigPersistError(KubeNsError):
    pass


class SelectionError(KubeNsError):
    """Raised when the interactive namespace picker fails or is cancelled."""
    pass
