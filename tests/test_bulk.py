import typing as ty

from hypothesis import given, settings, strategies as st
import pytest

import linspaced as lsp


def test_for_each() -> None:
    """Tests values are visited in ascending index order."""
    seen: ty.List[float] = []
    lsp.linspace_bulk(0.0, 100.0, 4).for_each(seen.append)
    assert seen == [0.0, 25.0, 50.0, 75.0]


def test_rev_for_each() -> None:
    """Tests values are visited in descending index order."""
    seen: ty.List[float] = []
    lsp.linspace_bulk(0.0, 100.0, 5, inclusive=True).rev_for_each(seen.append)
    assert seen == [100.0, 75.0, 50.0, 25.0, 0.0]


def test_try_for_each_break() -> None:
    """Tests the first ``Break`` halts traversal and is returned."""
    seen: ty.List[float] = []

    def visit(x: float) -> ty.Optional[lsp.Break[str]]:
        seen.append(x)
        if x >= 50.0:
            return lsp.Break(f"stopped at {x}")
        return None

    flow = lsp.linspace_bulk(0.0, 100.0, 4).try_for_each(visit)
    assert flow == lsp.Break("stopped at 50.0")
    assert seen == [0.0, 25.0, 50.0]


def test_try_rev_for_each_break() -> None:
    seen: ty.List[float] = []

    def visit(x: float) -> lsp.bulk.ControlFlow[float]:
        seen.append(x)
        return lsp.Break(x) if x < 60.0 else lsp.Continue()

    flow = lsp.linspace_bulk(0.0, 100.0, 4).try_rev_for_each(visit)
    assert flow == lsp.Break(50.0)
    assert seen == [75.0, 50.0]


@given(st.integers(0, 50), st.booleans())
@settings(max_examples=50)
def test_try_for_each_complete(length: int, reverse: bool) -> None:
    """Tests ``Continue`` is returned when every value is visited."""
    seen: ty.List[float] = []
    bulk = lsp.Linspaced(-1.0, 1.0, length).as_bulk()
    drive = bulk.try_rev_for_each if reverse else bulk.try_for_each
    flow = drive(lambda x: seen.append(x))
    assert flow == lsp.Continue()
    expected = lsp.Linspaced(-1.0, 1.0, length).to_list()
    assert seen == (expected[::-1] if reverse else expected)


def test_try_for_each_bad_flow() -> None:
    with pytest.raises(TypeError):
        lsp.linspace_bulk(0.0, 1.0, 3).try_for_each(lambda x: x)


def test_consumed() -> None:
    """Tests a bulk adapter may be driven only once."""
    bulk = lsp.linspace_bulk(0.0, 1.0, 3)
    assert len(bulk) == 3
    assert bulk.collect() == [0.0, 1 / 3, 2 / 3]
    assert bulk.consumed
    assert len(bulk) == 0
    with pytest.raises(RuntimeError):
        bulk.for_each(print)
    with pytest.raises(RuntimeError):
        iter(bulk)


def test_collect_factory() -> None:
    bulk = lsp.linspace(0.0, 100.0, 4).as_bulk()
    assert bulk.collect(tuple) == (0.0, 25.0, 50.0, 75.0)


def test_iter() -> None:
    bulk = lsp.linspace(0.0, 100.0, 4).as_bulk()
    assert [1.0 - x / 100.0 for x in bulk] == [1.0, 0.75, 0.5, 0.25]


def test_str() -> None:
    assert str(lsp.linspace_bulk(0.0, 1.0, 7)) == "LinspaceBulk(len=7)"
