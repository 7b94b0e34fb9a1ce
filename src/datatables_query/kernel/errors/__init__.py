"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── InvalidRequestError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        └── StoreError
"""

from datatables_query.kernel.errors.application import ApplicationError
from datatables_query.kernel.errors.base import BaseError
from datatables_query.kernel.errors.domain import (
    DomainError,
    InvalidRequestError,
    ValidationError,
)
from datatables_query.kernel.errors.infrastructure import InfrastructureError, StoreError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidRequestError",
    "StoreError",
    "ValidationError",
]
