"""
``linspaced.bulk``
==================

Internal iteration over a ``Linspaced`` generator. Rather than pulling
values, the caller passes a callback which is visited with each value in
turn, forward or reversed. The ``try_*`` variants allow the callback to
stop the traversal early, returning a residual.
"""
import dataclasses as dc
import typing as ty

from linspaced import base
from linspaced.iterator import LinspaceIter
from linspaced.linspaced import Linspaced

__all__ = ["Break", "Continue", "ControlFlow", "LinspaceBulk"]


T = ty.TypeVar("T")
R = ty.TypeVar("R")
C = ty.TypeVar("C")


@dc.dataclass(frozen=True)
class Continue:
    """Signals that traversal should go on. Also returned by the
    ``try_*`` methods when every value has been visited.

    :group: Bulk
    """


@dc.dataclass(frozen=True)
class Break(ty.Generic[R]):
    """Signals that traversal should stop, carrying ``residual`` back to
    the caller.

    :group: Bulk
    """

    residual: R


ControlFlow = ty.Union[Continue, Break[R]]


class LinspaceBulk(base.BulkAdapter[T]):
    """Consuming adapter exposing the values of a ``Linspaced``
    generator through internal iteration.

    :group: Bulk

    Parameters
    ----------
    linspace : Linspaced
        The generator providing the values.

    Raises
    ------
    RuntimeError
        If any of the traversal methods are called after the adapter
        has already been consumed.

    Examples
    --------
    >>> bulk = Linspaced(0.0, 100.0, 4).as_bulk()
    >>> bulk.try_for_each(lambda x: Break(x) if x > 30.0 else None)
    Break(residual=50.0)
    """

    def __init__(self, linspace: Linspaced[T]) -> None:
        self._linspace = linspace
        self._consumed = False

    def __str__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(len={len(self)})"

    def __repr__(self) -> str:
        return str(self)

    def __len__(self) -> int:
        if self._consumed:
            return 0
        return len(self._linspace)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _take(self) -> LinspaceIter[T]:
        if self._consumed:
            raise RuntimeError(f"{self.__class__.__name__} already consumed.")
        self._consumed = True
        return LinspaceIter(self._linspace)

    def __iter__(self) -> LinspaceIter[T]:
        return self._take()

    def for_each(self, f: ty.Callable[[T], ty.Any]) -> None:
        """Calls ``f`` on each value, in ascending index order."""
        seq = self._take()
        while not seq.is_empty():
            f(seq.forward())

    def rev_for_each(self, f: ty.Callable[[T], ty.Any]) -> None:
        """Calls ``f`` on each value, in descending index order."""
        seq = self._take()
        while not seq.is_empty():
            f(seq.backward())

    def try_for_each(
        self, f: ty.Callable[[T], ty.Optional[ControlFlow[R]]]
    ) -> ControlFlow[R]:
        """Calls ``f`` on each value, in ascending index order, until it
        returns a ``Break``.

        Parameters
        ----------
        f : callable
            Callback returning ``None`` or ``Continue()`` to proceed, or
            ``Break(residual)`` to stop.

        Returns
        -------
        flow : Continue | Break
            The first ``Break`` returned by ``f``, or ``Continue()`` if
            every value was visited.

        Raises
        ------
        TypeError
            If ``f`` returns anything other than ``None``, ``Continue``
            or ``Break``.
        """
        return self._try_drive(f, reverse=False)

    def try_rev_for_each(
        self, f: ty.Callable[[T], ty.Optional[ControlFlow[R]]]
    ) -> ControlFlow[R]:
        """As ``try_for_each()``, in descending index order."""
        return self._try_drive(f, reverse=True)

    def _try_drive(
        self,
        f: ty.Callable[[T], ty.Optional[ControlFlow[R]]],
        reverse: bool,
    ) -> ControlFlow[R]:
        seq = self._take()
        pull = seq.backward if reverse else seq.forward
        while not seq.is_empty():
            flow = f(pull())  # type: ignore
            if flow is None or isinstance(flow, Continue):
                continue
            if isinstance(flow, Break):
                return flow
            raise TypeError(
                "Callback must return None, Continue or Break, got "
                f"{type(flow).__name__}."
            )
        return Continue()

    def collect(
        self, factory: ty.Callable[[ty.Iterable[T]], C] = list  # type: ignore
    ) -> C:
        """Gathers the values into a collection built by ``factory``."""
        return factory(self._take())
