import array
import typing as ty
from collections.abc import MutableSequence
from decimal import Decimal

from hypothesis import given, settings, strategies as st
import numpy as np
import pytest

import linspaced as lsp


class WriteOnlyBuffer(MutableSequence):
    """Buffer standing in for uninitialised storage: any read of a slot
    fails, and the order of writes is recorded.
    """

    def __init__(self, size: int) -> None:
        self._data: ty.List[ty.Any] = [None] * size
        self.writes: ty.List[int] = []

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, idx: ty.Any) -> ty.Any:
        raise AssertionError(f"Slot {idx} read before being written.")

    def __setitem__(self, idx: int, value: ty.Any) -> None:
        self.writes.append(idx)
        self._data[idx] = value

    def __delitem__(self, idx: ty.Any) -> None:
        raise AssertionError("Slot deleted.")

    def insert(self, idx: int, value: ty.Any) -> None:
        raise AssertionError("Buffer resized.")

    @property
    def data(self) -> ty.List[ty.Any]:
        return self._data


def test_fill_list() -> None:
    out = lsp.linspace_fill(0.0, 100.0, [None] * 4)
    assert out == [0.0, 25.0, 50.0, 75.0]


def test_fill_returns_same_buffer() -> None:
    buf = array.array("d", bytes(8 * 5))
    out = lsp.linspace_fill(0.0, 100.0, buf, inclusive=True)
    assert out is buf
    assert list(buf) == [0.0, 25.0, 50.0, 75.0, 100.0]


@given(st.integers(0, 64), st.booleans())
@settings(max_examples=50)
def test_fill_write_only(size: int, inclusive: bool) -> None:
    """Tests every slot is written once, in order, and never read."""
    buf = WriteOnlyBuffer(size)
    lsp.linspace_fill(-5.0, 5.0, buf, inclusive=inclusive, count=size)
    assert buf.writes == list(range(size))
    assert None not in buf.data


def test_fill_count_mismatch() -> None:
    """Tests mismatched buffers are rejected before being written."""
    buf = WriteOnlyBuffer(3)
    with pytest.raises(ValueError):
        lsp.linspace_fill(0.0, 1.0, buf, count=4)
    assert buf.writes == []


def test_fill_empty() -> None:
    buf = WriteOnlyBuffer(0)
    lsp.linspace_fill(0.0, 1.0, buf, count=0)
    assert buf.writes == []


def test_fill_numpy() -> None:
    out = np.full(4, np.nan)
    lsp.linspace_fill(0.0, 100.0, out)
    np.testing.assert_array_equal(out, [0.0, 25.0, 50.0, 75.0])


def test_array_float() -> None:
    arr = lsp.linspace_array(0, 100, 5, inclusive=True)
    assert arr.dtype == np.float64
    np.testing.assert_array_equal(arr, [0.0, 25.0, 50.0, 75.0, 100.0])


def test_array_float32() -> None:
    start, end = np.float32(0.0), np.float32(1.0)
    arr = lsp.linspace_array(start, end, 4)
    assert arr.dtype == np.float32


def test_array_dtype() -> None:
    arr = lsp.linspace_array(0.0, 100.0, 4, dtype=np.int64)
    assert arr.dtype == np.int64
    np.testing.assert_array_equal(arr, [0, 25, 50, 75])


def test_array_vector() -> None:
    """Tests vector endpoints fill rows of a 2D array."""
    start = np.array([0.0, 10.0, 20.0])
    end = np.array([1.0, 11.0, 22.0])
    arr = lsp.linspace_array(start, end, 3, inclusive=True)
    assert arr.shape == (3, 3)
    np.testing.assert_array_equal(arr[0], start)
    np.testing.assert_array_equal(arr[-1], end)
    np.testing.assert_array_equal(arr[1], [0.5, 10.5, 21.0])


def test_array_object() -> None:
    arr = lsp.linspace_array(Decimal("0"), Decimal("1"), 2, inclusive=True)
    assert arr.dtype == object
    assert list(arr) == [Decimal("0"), Decimal("1")]


@pytest.mark.parametrize("inclusive", [False, True])
def test_array_empty(inclusive: bool) -> None:
    arr = lsp.linspace_array(0.0, 1.0, 0, inclusive=inclusive)
    assert arr.shape == (0,)


@given(
    st.floats(-1e6, 1e6, allow_nan=False),
    st.floats(-1e6, 1e6, allow_nan=False),
    st.integers(0, 200),
)
@settings(max_examples=50)
def test_array_matches_iteration(start: float, end: float, count: int) -> None:
    """Tests the allocated array holds exactly the iterated values."""
    linspace = lsp.Linspaced(start, end, count)
    arr = linspace.to_array()
    assert arr.tolist() == linspace.to_list()
