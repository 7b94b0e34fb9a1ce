"""Kernel types – discriminated results."""
from datatables_query.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
