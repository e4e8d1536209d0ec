"""Handler pairs for exhaustive matching over a ``Result``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class CasesLike[T, U](Protocol):
    """Anything exposing a ``success`` and a ``failure`` handler."""

    @property
    def success(self) -> Callable[[T], U]: ...

    @property
    def failure(self) -> Callable[[BaseException], U]: ...


@dataclass(frozen=True, slots=True)
class Cases[T, U]:
    """The two branches of a match.

    ``success`` receives the payload of a successful result, ``failure``
    receives the captured exception. Both must return the same type.

    Example:
        label = result.matches(Cases(success=str, failure=lambda e: "n/a"))
    """

    success: Callable[[T], U]
    failure: Callable[[BaseException], U]
