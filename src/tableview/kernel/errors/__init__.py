"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError        (application.py)
    │   └── InvalidParameterError
    └── InfrastructureError     (infrastructure.py)
        ├── TransportError
        │   └── FetchTimeoutError
        └── MalformedResponseError
"""

from tableview.kernel.errors.application import ApplicationError, InvalidParameterError
from tableview.kernel.errors.base import BaseError, is_retryable
from tableview.kernel.errors.infrastructure import (
    FetchTimeoutError,
    InfrastructureError,
    MalformedResponseError,
    TransportError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "FetchTimeoutError",
    "InfrastructureError",
    "InvalidParameterError",
    "MalformedResponseError",
    "TransportError",
    "is_retryable",
]
