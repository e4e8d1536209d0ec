"""Lift a stream of plain values into a stream of ``Result`` values.

Every item becomes a ``SuccessResult``. If the source raises while being
iterated, the exception becomes one final ``FailureResult`` and the stream
then ends normally instead of terminating with the exception. Items are
pulled one at a time; nothing is buffered here.

Closing the adapter (or abandoning it early) closes the source too, when the
source supports ``close``/``aclose``.
"""

from __future__ import annotations

from contextlib import aclosing, closing, nullcontext
import logging
from typing import TYPE_CHECKING

from resulty.config import current_config
from resulty.result import FailureResult, Result, SuccessResult

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, AsyncIterable, Generator, Iterable

log = logging.getLogger(__name__)


def _record_capture(exc: BaseException, index: int) -> None:
    if not log.isEnabledFor(logging.DEBUG):
        return
    if current_config().log_captures:
        log.debug("Stream ended after %d item(s) with %r", index, exc, exc_info=exc)
    else:
        log.debug("Stream ended after %d item(s) with %r", index, exc)


def to_results[T](items: Iterable[T]) -> Generator[Result[T]]:
    """Yield each item of ``items`` as a success, then any error as a failure.

    Example:
        >>> [r.is_success() for r in to_results(iter([1, 2]))]
        [True, True]
    """
    index = 0
    iterator = iter(items)
    with closing(iterator) if hasattr(iterator, "close") else nullcontext():
        while True:
            try:
                item = next(iterator)
            except StopIteration:
                return
            except Exception as e:
                _record_capture(e, index)
                yield FailureResult(e)
                return
            index += 1
            yield SuccessResult(item)


async def ato_results[T](items: AsyncIterable[T]) -> AsyncGenerator[Result[T]]:
    """Async counterpart of ``to_results`` for async iterables."""
    index = 0
    iterator = aiter(items)
    async with aclosing(iterator) if hasattr(iterator, "aclose") else nullcontext():
        while True:
            try:
                item = await anext(iterator)
            except StopAsyncIteration:
                return
            except Exception as e:
                _record_capture(e, index)
                yield FailureResult(e)
                return
            index += 1
            yield SuccessResult(item)
