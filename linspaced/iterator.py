"""
``linspaced.iterator``
======================

Pull-based iteration over a ``Linspaced`` generator. The iterators keep
a half-open window of not yet produced indices, shrinking it from the
front on forward pulls and from the back on backward pulls. Values are
computed on demand, so skipping and random access are O(1).
"""
import operator as op
import typing as ty

from linspaced import base
from linspaced.linspaced import Linspaced

__all__ = ["LinspaceIter", "RevLinspaceIter"]


T = ty.TypeVar("T")


class LinspaceIter(base.SequenceAdapter[T]):
    """Double-ended, exact-length iterator over the values of a
    ``Linspaced`` generator.

    :group: Linspace

    Parameters
    ----------
    linspace : Linspaced
        The generator providing the values.
    lo : int
        Index of the next value produced from the front. Default is 0.
    hi : int, optional
        One past the index of the next value produced from the back.
        Default is the length of ``linspace``.

    Raises
    ------
    ValueError
        If the window does not satisfy ``0 <= lo <= hi <= len(linspace)``.

    Notes
    -----
    Once exhausted, by any mix of forward and backward pulls, the
    iterator remains exhausted.
    """

    def __init__(
        self, linspace: Linspaced[T], lo: int = 0, hi: ty.Optional[int] = None
    ) -> None:
        if hi is None:
            hi = len(linspace)
        if not 0 <= lo <= hi <= len(linspace):
            raise ValueError(
                f"Invalid window [{lo}, {hi}) for sequence of length "
                f"{len(linspace)}."
            )
        self._linspace = linspace
        self._lo = lo
        self._hi = hi

    def __str__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(pos={self._lo}, len={len(self)})"

    def __repr__(self) -> str:
        return str(self)

    def __rich__(self) -> str:
        return str(self)

    @property
    def linspace(self) -> Linspaced[T]:
        """The generator driven by this iterator."""
        return self._linspace

    @property
    def pos(self) -> int:
        """Index of the next value produced from the front."""
        return self._lo

    @property
    def total_len(self) -> int:
        """Length of the full sequence, consumed or not."""
        return len(self._linspace)

    def __len__(self) -> int:
        return self._hi - self._lo

    def is_empty(self) -> bool:
        return self._lo >= self._hi

    def forward(self) -> ty.Optional[T]:
        if self._lo >= self._hi:
            return None
        value = self._linspace.value(self._lo)
        self._lo = self._lo + 1
        return value

    def backward(self) -> ty.Optional[T]:
        if self._lo >= self._hi:
            return None
        self._hi = self._hi - 1
        return self._linspace.value(self._hi)

    def get_unchecked(self, idx: int) -> T:
        return self._linspace.value(self._lo + idx)

    def __getitem__(self, idx: int) -> T:
        """Value at offset ``idx`` from the front of the remaining
        values, without consuming it. Negative offsets count from the
        back.
        """
        idx = op.index(idx)
        size = len(self)
        if idx < 0:
            idx = idx + size
        if not 0 <= idx < size:
            raise IndexError(
                f"Index {idx} out of range for {self.__class__.__name__} "
                f"with {size} remaining values."
            )
        return self.get_unchecked(idx)

    def nth(self, n: int) -> ty.Optional[T]:
        """Skips ``n`` values from the front, and returns the next.

        Returns ``None``, leaving the iterator exhausted, if fewer than
        ``n + 1`` values remain.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}.")
        self._lo = min(self._lo + n, self._hi)
        return self.forward()

    def nth_back(self, n: int) -> ty.Optional[T]:
        """Skips ``n`` values from the back, and returns the next."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}.")
        self._hi = max(self._hi - n, self._lo)
        return self.backward()

    def rev(self) -> "RevLinspaceIter[T]":
        """Reversed view, sharing this iterator's cursor."""
        return RevLinspaceIter(self)

    def __reversed__(self) -> "RevLinspaceIter[T]":
        return self.rev()

    def copy(self) -> "LinspaceIter[T]":
        return self.__class__(self._linspace, self._lo, self._hi)


class RevLinspaceIter(base.SequenceAdapter[T]):
    """Reversed view over a ``LinspaceIter``. Pulls from the front of
    this object consume the back of the wrapped iterator, and vice
    versa.

    :group: Linspace
    """

    def __init__(self, inner: LinspaceIter[T]) -> None:
        self._inner = inner

    def __str__(self) -> str:
        name = self.__class__.__name__
        pos = self._inner.pos + len(self) - 1
        return f"{name}(pos={pos}, len={len(self)})"

    def __repr__(self) -> str:
        return str(self)

    def __rich__(self) -> str:
        return str(self)

    def __len__(self) -> int:
        return len(self._inner)

    def is_empty(self) -> bool:
        return self._inner.is_empty()

    def forward(self) -> ty.Optional[T]:
        return self._inner.backward()

    def backward(self) -> ty.Optional[T]:
        return self._inner.forward()

    def get_unchecked(self, idx: int) -> T:
        return self._inner.get_unchecked(len(self._inner) - 1 - idx)

    def __getitem__(self, idx: int) -> T:
        idx = op.index(idx)
        size = len(self)
        if idx < 0:
            idx = idx + size
        if not 0 <= idx < size:
            raise IndexError(
                f"Index {idx} out of range for {self.__class__.__name__} "
                f"with {size} remaining values."
            )
        return self.get_unchecked(idx)

    def nth(self, n: int) -> ty.Optional[T]:
        return self._inner.nth_back(n)

    def nth_back(self, n: int) -> ty.Optional[T]:
        return self._inner.nth(n)

    def rev(self) -> LinspaceIter[T]:
        return self._inner

    def __reversed__(self) -> LinspaceIter[T]:
        return self._inner

    def copy(self) -> "RevLinspaceIter[T]":
        return self.__class__(self._inner.copy())
