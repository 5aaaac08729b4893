from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Any
from collections.abc import Sized, Iterator

import numpy.typing as npt


__all__ = [
    "AnyVector",
    "SequenceAdapter",
    "BulkAdapter",
]


T = TypeVar("T")
Self = TypeVar("Self")
AnyVector = npt.NDArray[Any]


class SequenceAdapter(ABC, Sized, Iterator[T], Generic[T]):
    """Adapter pattern interface for pull-based, double-ended,
    exact-length sequences with random access over their remaining
    values.
    """

    @abstractmethod
    def forward(self) -> Optional[T]:
        """Removes and returns the value at the front, or ``None`` if
        the sequence is exhausted.
        """

    @abstractmethod
    def backward(self) -> Optional[T]:
        """Removes and returns the value at the back, or ``None`` if
        the sequence is exhausted.
        """

    @abstractmethod
    def get_unchecked(self, idx: int) -> T:
        """Value at offset ``idx`` from the front, without bounds
        checking.
        """

    def is_empty(self) -> bool:
        return len(self) == 0

    def get(self, idx: int) -> Optional[T]:
        if 0 <= idx < len(self):
            return self.get_unchecked(idx)
        return None

    def __next__(self) -> T:
        if self.is_empty():
            raise StopIteration
        return self.forward()  # type: ignore

    def __length_hint__(self) -> int:
        return len(self)

    @abstractmethod
    def copy(self: Self) -> Self:
        """Returns an independent copy of the sequence, positioned at
        the same cursor.
        """


class BulkAdapter(ABC, Sized, Generic[T]):
    """Adapter pattern interface for internally iterated sequences."""

    @abstractmethod
    def for_each(self, f) -> None:
        pass

    @abstractmethod
    def rev_for_each(self, f) -> None:
        pass

    @abstractmethod
    def try_for_each(self, f) -> Any:
        pass

    @abstractmethod
    def try_rev_for_each(self, f) -> Any:
        pass
