"""
``linspaced.fill``
==================

Writes linspace values positionally into caller provided buffers, or
into freshly allocated NumPy arrays.
"""
import typing as ty

import numpy as np
import numpy.typing as npt

from linspaced import base
from linspaced.iterator import LinspaceIter
from linspaced.linspaced import Linspaced

__all__ = ["linspace_fill", "linspace_array", "fill_array"]


T = ty.TypeVar("T")
B = ty.TypeVar("B", bound=ty.MutableSequence[ty.Any])


def _write(linspace: Linspaced[T], out: ty.Any) -> None:
    seq = LinspaceIter(linspace)
    while not seq.is_empty():
        i = seq.pos
        out[i] = seq.forward()


def _infer_dtype(start: ty.Any, end: ty.Any) -> np.dtype:
    dtype = np.result_type(np.asarray(start), np.asarray(end))
    if dtype.kind in "biu":
        return np.dtype(np.float64)
    return dtype


def linspace_fill(
    start: T,
    end: T,
    out: B,
    *,
    inclusive: bool = False,
    count: ty.Optional[int] = None,
) -> B:
    """Fills ``out`` with ``len(out)`` evenly spaced values between
    ``start`` and ``end``.

    :group: Fill

    Parameters
    ----------
    start : T
        First value written.
    end : T
        Upper bound of the values.
    out : MutableSequence
        Destination buffer, *eg.* a list, ``array.array``, or NumPy
        array. Any prior contents are overwritten without being read.
    inclusive : bool
        Whether the last slot receives ``end``. Default is ``False``.
    count : int, optional
        Expected number of values. If passed, the length of ``out`` is
        checked against it before any slot is written.

    Returns
    -------
    out : MutableSequence
        The same buffer, now filled.

    Raises
    ------
    ValueError
        If ``count`` is passed, and does not match the length of
        ``out``.
    """
    size = len(out)
    if count is not None and count != size:
        raise ValueError(
            f"Buffer of length {size} cannot hold {count} values."
        )
    _write(Linspaced(start, end, size, inclusive), out)
    return out


def fill_array(
    linspace: Linspaced[T], dtype: npt.DTypeLike = None
) -> base.AnyVector:
    """Allocates an uninitialised NumPy array, and fills it with the
    values of ``linspace``.

    :group: Fill

    Parameters
    ----------
    linspace : Linspaced
        Generator providing the values.
    dtype : dtype-like, optional
        Data type of the output. If not given, it is inferred from the
        endpoints, with integer and boolean endpoints promoted to
        ``float64``, and arbitrary Python objects stored with ``object``
        dtype.

    Returns
    -------
    array : ndarray
        Array of shape ``(len(linspace), *np.shape(linspace.start))``.
    """
    if dtype is None:
        dtype = _infer_dtype(linspace.start, linspace.end)
    shape = (len(linspace),) + np.shape(linspace.start)
    out = np.empty(shape, dtype=dtype)
    _write(linspace, out)
    return out


def linspace_array(
    start: T,
    end: T,
    count: int,
    *,
    inclusive: bool = False,
    dtype: npt.DTypeLike = None,
) -> base.AnyVector:
    """NumPy array of ``count`` evenly spaced values between ``start``
    and ``end``.

    :group: Fill

    See Also
    --------
    fill_array : Fills an array from an existing ``Linspaced``.
    """
    return fill_array(Linspaced(start, end, count, inclusive), dtype=dtype)
