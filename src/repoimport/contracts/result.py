"""Explicit success/failure results for remote fetches.

A fetch never raises for transport, HTTP or payload errors. It resolves to a
:class:`FetchFailure` instead, so sibling fetches keep running and the caller
decides per field how to degrade.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FetchSuccess(Generic[T]):
    value: T


@dataclass(frozen=True)
class FetchFailure:
    operation: str
    error: Exception

    @property
    def message(self) -> str:
        return f"{self.operation} failed: {self.error}"


FetchResult: TypeAlias = FetchSuccess[T] | FetchFailure


def value_or(result: FetchResult[T], default: T) -> T:
    """Unwrap *result*, returning *default* for a failure."""
    if isinstance(result, FetchSuccess):
        return result.value
    return default
