"""
``linspaced``
=============

Lazily evaluated, evenly spaced sequences over intervals of any type
supporting addition and scaling by a fraction: floats, decimals, NumPy
vectors, colours, and so on.

Values are exposed through a double-ended, exact-length iterator with
random access, through internal iteration with early exit, or written
directly into buffers and NumPy arrays.
"""
from ._version import __version__
from . import base, bulk, fill, interval, iterator, scale
from .bulk import Break, Continue, LinspaceBulk
from .fill import fill_array, linspace_array, linspace_fill
from .interval import Interval, linspace, linspace_bulk
from .iterator import LinspaceIter, RevLinspaceIter
from .linspaced import Linspaced


__all__ = [
    "__version__",
    "base",
    "bulk",
    "fill",
    "interval",
    "iterator",
    "scale",
    "Break",
    "Continue",
    "Interval",
    "LinspaceBulk",
    "LinspaceIter",
    "Linspaced",
    "RevLinspaceIter",
    "fill_array",
    "linspace",
    "linspace_array",
    "linspace_bulk",
    "linspace_fill",
]
