"""Result: a value that is either a successful payload or a captured failure.

``Result`` is a closed sum type with exactly two concrete variants,
``SuccessResult`` and ``FailureResult``. Which one you hold is fixed at
construction and never changes.

Capturing happens only at the boundaries: ``wrap``/``wrap_async`` turn a raised
exception into a failure, and ``of`` classifies a given value. After that, a
failure is either carried (``to_option``, ``matches``, ``if_failure``, the
``or_*`` family) or re-raised as the original exception object (``get``,
``map``, ``flat_map``).

Example:
    >>> Result.of_success(1).map(lambda v: v + 1).get()
    2
    >>> Result.wrap(int, "nope").or_else(0)
    0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import dataclasses
import logging
from typing import TYPE_CHECKING, Any, NoReturn

from resulty.config import current_config
from resulty.option import read_option

if TYPE_CHECKING:
    from collections.abc import (
        AsyncGenerator,
        AsyncIterable,
        Awaitable,
        Callable,
        Generator,
        Iterable,
    )

    from resulty.cases import CasesLike
    from resulty.option import FailureOption, Option, SuccessOption

log = logging.getLogger(__name__)


def _record_capture(where: str, exc: BaseException) -> None:
    if not log.isEnabledFor(logging.DEBUG):
        return
    if current_config().log_captures:
        log.debug("%s captured %s", where, type(exc).__name__, exc_info=exc)
    else:
        log.debug("%s captured %s: %s", where, type(exc).__name__, exc)


class Result[T](ABC):
    """Either a success holding a payload or a failure holding an exception."""

    __slots__ = ()

    # --- Construction ---

    @staticmethod
    def of[V](value: V | BaseException) -> Result[V]:
        """Classify ``value``: exception instances become failures."""
        if isinstance(value, BaseException):
            return FailureResult(value)
        return SuccessResult(value)

    @staticmethod
    def of_success[V](value: V) -> Result[V]:
        return SuccessResult(value)

    @staticmethod
    def of_failure[V](error: BaseException) -> Result[V]:
        return FailureResult(error)

    @staticmethod
    def of_none() -> Result[None]:
        """A success whose payload is ``None``."""
        return SuccessResult(None)

    of_null = of_none
    of_undefined = of_none

    @staticmethod
    def wrap[V](func: Callable[..., V], /, *args: Any, **kwargs: Any) -> Result[V]:
        """Call ``func(*args, **kwargs)`` and capture the outcome.

        A normal return becomes a success holding the returned value, even if
        that value is itself an exception instance. A raised ``Exception``
        becomes a failure holding that exact object; it never escapes.
        ``KeyboardInterrupt``, ``SystemExit`` and other non-``Exception``
        signals propagate.
        """
        try:
            value = func(*args, **kwargs)
        except Exception as e:
            _record_capture("wrap", e)
            return FailureResult(e)
        return SuccessResult(value)

    @staticmethod
    async def wrap_async[V](
        func: Callable[..., Awaitable[V]], /, *args: Any, **kwargs: Any
    ) -> Result[V]:
        """Await ``func(*args, **kwargs)`` once and capture the outcome.

        Same rules as ``wrap``. The returned coroutine never raises an
        ``Exception``; cancellation of the awaiting task still propagates.
        There is no timeout: bound the awaited work yourself if you need one.
        """
        try:
            value = await func(*args, **kwargs)
        except Exception as e:
            _record_capture("wrap_async", e)
            return FailureResult(e)
        return SuccessResult(value)

    @staticmethod
    def from_option[V](option: Option[V]) -> Result[V]:
        """Read an interchange record back as a ``Result``.

        Raises:
            OptionError: If ``option`` is not a valid ``Option`` record. This
                is a ``TypeError``, distinct from any domain failure.
        """
        kind, value = read_option(option, strict=current_config().strict_options)
        if kind == "success":
            return SuccessResult(value)
        return FailureResult(value)

    @staticmethod
    def from_iterable[V](items: Iterable[V]) -> Generator[Result[V]]:
        """Shortcut for ``resulty.streams.to_results``."""
        from resulty.streams import to_results

        return to_results(items)

    @staticmethod
    def from_async_iterable[V](items: AsyncIterable[V]) -> AsyncGenerator[Result[V]]:
        """Shortcut for ``resulty.streams.ato_results``."""
        from resulty.streams import ato_results

        return ato_results(items)

    # --- Introspection & extraction ---

    @abstractmethod
    def is_success(self) -> bool:
        """Return ``True`` for a success, ``False`` for a failure."""

    def is_failure(self) -> bool:
        """Negation of ``is_success``."""
        return not self.is_success()

    @abstractmethod
    def get(self) -> T:
        """Return the payload, or re-raise the captured exception."""

    @abstractmethod
    def or_(self, supplier: Callable[[], Result[T]]) -> Result[T]:
        """Return ``self`` on success, else the result made by ``supplier``."""

    @abstractmethod
    def or_else(self, another: T) -> T:
        """Return the payload on success, else ``another``."""

    @abstractmethod
    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the payload on success, else call ``supplier``."""

    @abstractmethod
    def or_none(self) -> T | None:
        """Return the payload on success, else ``None``. Never raises."""

    def or_null(self) -> T | None:
        return self.or_none()

    def or_undefined(self) -> T | None:
        return self.or_none()

    # --- Side-effecting inspection ---

    @abstractmethod
    def if_success(self, consumer: Callable[[T], object]) -> None: ...

    @abstractmethod
    def if_failure(self, consumer: Callable[[BaseException], object]) -> None: ...

    @abstractmethod
    def if_success_or_failure(self, cases: CasesLike[T, object]) -> None:
        """Run exactly one handler of ``cases`` and discard its return value."""

    @abstractmethod
    def matches[U](self, cases: CasesLike[T, U]) -> U:
        """Run exactly one handler of ``cases`` and return what it returns."""

    # --- Transformation ---

    @abstractmethod
    def map[U](self, mapper: Callable[[T], U | BaseException]) -> Result[U]:
        """Apply ``mapper`` to the payload and classify the output with ``of``.

        On a failure this re-raises the captured exception instead of
        returning a failure.
        """

    @abstractmethod
    def flat_map[U](self, mapper: Callable[[T], U]) -> U:
        """Return ``mapper(payload)`` unchanged; re-raise on a failure."""

    @abstractmethod
    def to_option(self) -> Option[T]:
        """Return a fresh interchange record for this result."""


@dataclasses.dataclass(frozen=True, slots=True)
class SuccessResult[T](Result[T]):
    """A successful result holding its payload."""

    value: T

    def is_success(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def or_(self, supplier: Callable[[], Result[T]]) -> Result[T]:
        return self

    def or_else(self, another: T) -> T:
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return self.value

    def or_none(self) -> T:
        return self.value

    def if_success(self, consumer: Callable[[T], object]) -> None:
        consumer(self.value)

    def if_failure(self, consumer: Callable[[BaseException], object]) -> None:
        return None

    def if_success_or_failure(self, cases: CasesLike[T, object]) -> None:
        cases.success(self.value)

    def matches[U](self, cases: CasesLike[T, U]) -> U:
        return cases.success(self.value)

    def map[U](self, mapper: Callable[[T], U | BaseException]) -> Result[U]:
        return Result.of(mapper(self.value))

    def flat_map[U](self, mapper: Callable[[T], U]) -> U:
        return mapper(self.value)

    def to_option(self) -> SuccessOption[T]:
        return {"kind": "success", "value": self.value}


@dataclasses.dataclass(frozen=True, slots=True)
class FailureResult[T](Result[T]):
    """A failed result holding the captured exception."""

    error: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.error, BaseException):
            raise TypeError(
                "FailureResult requires an exception instance, "
                f"got {type(self.error).__name__}"
            )

    def is_success(self) -> bool:
        return False

    def _reraise(self) -> NoReturn:
        raise self.error

    def get(self) -> T:
        self._reraise()

    def or_(self, supplier: Callable[[], Result[T]]) -> Result[T]:
        return supplier()

    def or_else(self, another: T) -> T:
        return another

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_none(self) -> None:
        return None

    def if_success(self, consumer: Callable[[T], object]) -> None:
        return None

    def if_failure(self, consumer: Callable[[BaseException], object]) -> None:
        consumer(self.error)

    def if_success_or_failure(self, cases: CasesLike[T, object]) -> None:
        cases.failure(self.error)

    def matches[U](self, cases: CasesLike[T, U]) -> U:
        return cases.failure(self.error)

    def map[U](self, mapper: Callable[[T], U | BaseException]) -> Result[U]:
        self._reraise()

    def flat_map[U](self, mapper: Callable[[T], U]) -> U:
        self._reraise()

    def to_option(self) -> FailureOption:
        return {"kind": "failure", "value": self.error}
