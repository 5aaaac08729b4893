"""
``linspaced.scale``
===================

The "scale by fraction" capability required of every element type
passed to the linspace generators.
"""
import decimal
import typing as ty
from decimal import Decimal
from fractions import Fraction
from functools import singledispatch

__all__ = ["Scalable", "scale", "blend"]


@ty.runtime_checkable
class Scalable(ty.Protocol):
    """Protocol for element types which know how to scale themselves,
    *eg.* colours or points with a custom representation.

    :group: Scale
    """

    def scale(self, weight: float) -> ty.Any:
        ...


@singledispatch
def scale(value: ty.Any, weight: float) -> ty.Any:
    """Multiplies ``value`` by the fractional ``weight``.

    :group: Scale

    Parameters
    ----------
    value : Any
        Element to scale. May be a number, a NumPy array, or an object
        implementing the ``Scalable`` protocol.
    weight : float
        Fraction, typically in the interval [0, 1].

    Returns
    -------
    scaled : Any
        Element of the same kind as ``value``.
    """
    if isinstance(value, Scalable):
        return value.scale(weight)
    return value * weight


@scale.register
def _(value: Decimal, weight: float) -> Decimal:
    return value * Decimal(weight)


@scale.register
def _(value: Fraction, weight: float) -> Fraction:
    return value * Fraction(weight)


@singledispatch
def blend(
    start: ty.Any, start_weight: float, end: ty.Any, end_weight: float
) -> ty.Any:
    """Weighted sum of two endpoints, ``scale(start, start_weight) +
    scale(end, end_weight)``.

    :group: Scale
    """
    return scale(start, start_weight) + scale(end, end_weight)


@blend.register
def _(
    start: Decimal, start_weight: float, end: ty.Any, end_weight: float
) -> Decimal:
    prec = max(
        decimal.getcontext().prec,
        len(start.as_tuple().digits),
        len(Decimal(end).as_tuple().digits),
    )
    with decimal.localcontext() as ctx:
        ctx.prec = decimal.MAX_PREC
        ctx.Emax = decimal.MAX_EMAX
        ctx.Emin = decimal.MIN_EMIN
        exact = scale(start, start_weight) + scale(end, end_weight)
    with decimal.localcontext() as ctx:
        ctx.prec = prec
        return +exact
