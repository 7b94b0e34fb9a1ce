"""Domain errors — malformed or unsatisfiable requests."""

from __future__ import annotations

from typing import Any

from datatables_query.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a request cannot be honoured as stated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidRequestError(ValidationError):
    """A DataTables request descriptor is missing fields or holds bad values.

    ``field`` names the descriptor key at fault when a single one is known.
    """

    default_code = "invalid_request"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.detail.setdefault("field", field)


__all__ = ["DomainError", "InvalidRequestError", "ValidationError"]
