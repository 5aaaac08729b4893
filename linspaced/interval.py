"""
``linspaced.interval``
======================

Convenience front-end, attaching linspace methods to a simple interval
type, and providing module level constructors.
"""
import dataclasses as dc
import typing as ty

import numpy.typing as npt

from linspaced import base, fill
from linspaced.bulk import LinspaceBulk
from linspaced.linspaced import Linspaced

__all__ = ["Interval", "linspace", "linspace_bulk"]


T = ty.TypeVar("T")
B = ty.TypeVar("B", bound=ty.MutableSequence[ty.Any])


@dc.dataclass(frozen=True)
class Interval(ty.Generic[T]):
    """Interval between two values, either half-open or closed.

    :group: Interval

    Attributes
    ----------
    start : T
        Lower endpoint, always included.
    end : T
        Upper endpoint, included only if ``closed`` is ``True``.
    closed : bool
        Whether ``end`` belongs to the interval. Default is ``False``.
    """

    start: T
    end: T
    closed: bool = False

    @classmethod
    def from_range(cls, rng: range) -> "Interval[int]":
        """Half-open interval spanning the bounds of a unit step
        ``range``.

        Raises
        ------
        ValueError
            If the step of ``rng`` is not 1.
        """
        if rng.step != 1:
            raise ValueError(
                f"Only ranges with unit step are supported, got {rng.step}."
            )
        return cls(rng.start, rng.stop, closed=False)  # type: ignore

    def linspace(self, count: int) -> Linspaced[T]:
        """Lazy sequence of ``count`` evenly spaced values over the
        interval.
        """
        return Linspaced(self.start, self.end, count, self.closed)

    def linspace_bulk(self, count: int) -> LinspaceBulk[T]:
        return self.linspace(count).as_bulk()

    def linspace_array(
        self, count: int, dtype: npt.DTypeLike = None
    ) -> base.AnyVector:
        return fill.fill_array(self.linspace(count), dtype=dtype)

    def linspace_fill(self, out: B) -> B:
        """Fills every slot of ``out`` with values over the interval."""
        return fill.linspace_fill(
            self.start, self.end, out, inclusive=self.closed
        )


def linspace(
    start: T, end: T, count: int, inclusive: bool = False
) -> Linspaced[T]:
    """Lazy sequence of ``count`` evenly spaced values from ``start``
    towards ``end``.

    :group: Interval

    Parameters
    ----------
    start : T
        First value of the sequence.
    end : T
        Upper bound of the sequence.
    count : int
        Number of values.
    inclusive : bool
        Whether ``end`` is the final value. Default is ``False``.

    Returns
    -------
    linspace : Linspaced
        Generator, which may be iterated forwards or backwards, indexed,
        or materialised into an array.

    Examples
    --------
    >>> list(linspace(0.0, 100.0, 4))
    [0.0, 25.0, 50.0, 75.0]
    >>> list(linspace(0.0, 100.0, 5, inclusive=True))
    [0.0, 25.0, 50.0, 75.0, 100.0]
    """
    return Linspaced(start, end, count, inclusive)


def linspace_bulk(
    start: T, end: T, count: int, inclusive: bool = False
) -> LinspaceBulk[T]:
    """As ``linspace()``, wrapped for internal iteration.

    :group: Interval
    """
    return Linspaced(start, end, count, inclusive).as_bulk()
