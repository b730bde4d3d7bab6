from collections import deque
from typing import TypeVar, Generic, Iterator, Iterable, Self


T = TypeVar("T")


class Peekable(Generic[T], Iterator[T]):
    """Iterator with one item of lookahead.

    Once the underlying iterator is exhausted the last item seen is repeated,
    so a stream that ends with a sentinel can be peeked at forever.
    """

    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._cache: deque[T] = deque()
        self._last: T | None = None

    def __iter__(self) -> Self:
        return self

    def peek(self) -> T:
        if not self._cache:
            try:
                self._cache.append(next(self._it))
            except StopIteration:
                if self._last is None:
                    raise
                return self._last
        return self._cache[0]

    def __next__(self) -> T:
        if self._cache:
            self._last = self._cache.popleft()
            return self._last
        try:
            self._last = next(self._it)
        except StopIteration:
            if self._last is None:
                raise
        return self._last
