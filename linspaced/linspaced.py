"""
``linspaced.linspaced``
=======================

The generator at the core of the package: maps integer indices onto
evenly spaced values between two endpoints. All other interfaces, ie.
the iterator, bulk adapter and buffer fillers, delegate to it.
"""
import dataclasses as dc
import numbers
import operator as op
import sys
import typing as ty
import warnings

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from linspaced import base
from linspaced.scale import blend

if ty.TYPE_CHECKING:
    from linspaced.bulk import LinspaceBulk
    from linspaced.iterator import LinspaceIter, RevLinspaceIter

__all__ = ["Linspaced"]


T = ty.TypeVar("T")


def _external_stacklevel() -> int:
    """Stack level, relative to the caller of this function, of the
    first frame outside the package.
    """
    level = 1
    frame = sys._getframe(1)
    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        if module.partition(".")[0] != __package__:
            break
        frame = frame.f_back
        level = level + 1
    return level


@dc.dataclass(frozen=True, eq=False, repr=False)
class Linspaced(ty.Generic[T]):
    """Lazy, immutable sequence of ``length`` evenly spaced values
    between ``start`` and ``end``.

    :group: Linspace

    Parameters
    ----------
    start : T
        First value of the sequence.
    end : T
        Upper bound of the sequence. Produced as the final value only if
        ``inclusive`` is ``True`` and ``length`` is at least 2.
    length : int
        Number of values in the sequence. May be 0.
    inclusive : bool
        Whether ``end`` is the last value of the sequence, or an
        excluded upper bound. Default is ``False``.

    Raises
    ------
    TypeError
        If ``length`` is not an integer.
    ValueError
        If ``length`` is negative.
    UserWarning
        If ``inclusive`` is ``True`` and ``length`` is 1, as the
        sequence then contains only ``start``.

    Notes
    -----
    Values are computed as a weighted blend of both endpoints,
    ``scale(start, (m - i) / m) + scale(end, i / m)``, rather than
    ``start + (end - start) * i / m``. This avoids drift near ``end``
    and guarantees that the last value of an inclusive sequence is
    exactly ``end``.
    """

    start: T
    end: T
    length: int
    inclusive: bool = False

    def __post_init__(self) -> None:
        length = self.length
        if isinstance(length, bool) or not isinstance(
            length, numbers.Integral
        ):
            raise TypeError(
                f"length must be an integer, got {type(length).__name__}."
            )
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}.")
        object.__setattr__(self, "length", int(length))
        object.__setattr__(self, "inclusive", bool(self.inclusive))
        if self.inclusive and self.length == 1:
            warnings.warn(
                "Inclusive linspace of length 1 contains only the start "
                "value; the end value is not produced.",
                UserWarning,
                stacklevel=_external_stacklevel(),
            )

    @property
    def divisor(self) -> int:
        """Number of steps between ``start`` and ``end``."""
        return max(1, self.length - int(self.inclusive))

    def value(self, i: int) -> T:
        """Value at index ``i``. No bounds checking is performed."""
        m = self.divisor
        return blend(self.start, (m - i) / m, self.end, i / m)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> "LinspaceIter[T]":
        return self.as_iter()

    def __reversed__(self) -> "RevLinspaceIter[T]":
        return self.as_iter().rev()

    def __getitem__(self, idx: int) -> T:
        if isinstance(idx, slice):
            raise NotImplementedError("Slices are not currently supported.")
        idx = op.index(idx)
        if idx < 0:
            idx = idx + self.length
        if not 0 <= idx < self.length:
            raise IndexError(
                f"Index {idx} out of range for {self.__class__.__name__} "
                f"of length {self.length}."
            )
        return self.value(idx)

    def as_iter(self) -> "LinspaceIter[T]":
        """Pull-based, double-ended iterator over the sequence."""
        from linspaced.iterator import LinspaceIter

        return LinspaceIter(self)

    def as_bulk(self) -> "LinspaceBulk[T]":
        """Internally iterated adapter over the sequence."""
        from linspaced.bulk import LinspaceBulk

        return LinspaceBulk(self)

    def to_array(self, dtype: ty.Any = None) -> base.AnyVector:
        """Materialises the sequence into a NumPy array."""
        from linspaced.fill import fill_array

        return fill_array(self, dtype=dtype)

    def to_list(self) -> ty.List[T]:
        return list(self.as_iter())

    def __rich__(self) -> Tree:
        name = self.__class__.__name__
        mode = "inclusive" if self.inclusive else "exclusive"
        tree = Tree(f"{name}(length=[yellow]{self.length}[default])")
        tree.add(f"[red]start [default]= [green]{escape(repr(self.start))}")
        tree.add(f"[red]end [default]= [green]{escape(repr(self.end))}")
        tree.add(f"[red]mode [default]= [green]{mode}")
        return tree

    def __repr__(self) -> str:
        console = Console(color_system=None)
        with console.capture() as capture:
            console.print(self)
        return capture.get()
