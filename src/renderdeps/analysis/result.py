"""Two-variant stage results for the extraction pipeline.

Each stage returns either ``Resolved`` with its value or ``Rejected`` with
the reason the invocation was dropped. Rejection is never used for
anything but stage failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from renderdeps.exceptions import RejectReason

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Resolved(Generic[T]):
    """Stage succeeded with ``value``."""

    value: T


@dataclass(frozen=True, slots=True)
class Rejected:
    """Stage gave up on the invocation.

    Attributes:
        reason: Stable rejection code.
        detail: Short human-readable explanation for debug logs.
    """

    reason: RejectReason
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.reason.value} {self.reason.name.lower()}: {self.detail}"
        return f"{self.reason.value} {self.reason.name.lower()}"
