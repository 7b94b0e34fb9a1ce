"""Infrastructure errors — document-store failures."""

from __future__ import annotations

from typing import Any

from datatables_query.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a request problem."""

    default_code = "infrastructure_error"


class StoreError(InfrastructureError):
    """A count or find against the document store failed.

    The store's own exception is kept as ``cause`` (and ``__cause__``).
    ``operation`` is one of ``"count_total"``, ``"count_filtered"``, ``"find"``.
    """

    default_code = "store_error"

    def __init__(
        self,
        operation: str,
        cause: BaseException,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Document store '{operation}' failed: {cause}",
            cause=cause,
            **kwargs,
        )
        self.operation = operation
        self.detail.setdefault("operation", operation)

    @property
    def error(self) -> BaseException:
        """The store's original exception."""
        return self.cause  # type: ignore[return-value]


__all__ = ["InfrastructureError", "StoreError"]
