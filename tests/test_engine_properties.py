"""Property-based checks of the alignment and mapping invariants."""

from __future__ import annotations

import pytest

pytest.importorskip("hypothesis")
from hypothesis import given, settings
from hypothesis import strategies as st

from tsreduce_core.engine import ReducerOrMappingTransform

from tests.helpers import JoinStrategy, PassthroughStrategy, build_series


_datapoints = st.dictionaries(
    keys=st.integers(min_value=0, max_value=50),
    values=st.integers(min_value=-1000, max_value=1000).map(str),
    max_size=20,
)


@settings(max_examples=75, deadline=None)
@given(st.lists(_datapoints, min_size=1, max_size=5))
def test_reduce_keeps_exactly_the_common_timestamps(payloads: list[dict[int, str]]) -> None:
    series = [build_series(payload) for payload in payloads]
    transform = ReducerOrMappingTransform(JoinStrategy())

    result = transform.transform(series)

    expected = set(payloads[0])
    for payload in payloads[1:]:
        expected &= set(payload)
    assert set(result.datapoints) == expected
    for timestamp in expected:
        assert result.datapoints[timestamp] == "|".join(
            payload[timestamp] for payload in payloads
        )


@settings(max_examples=75, deadline=None)
@given(
    st.lists(_datapoints, max_size=6),
    st.lists(st.text(alphabet="0123456789", min_size=1, max_size=3), min_size=1, max_size=3),
)
def test_map_preserves_count_order_and_identity(
    payloads: list[dict[int, str]], constants: list[str]
) -> None:
    series = [
        build_series(payload, metric=f"metric.{index}")
        for index, payload in enumerate(payloads)
    ]
    transform = ReducerOrMappingTransform(PassthroughStrategy())

    results = transform.transform_with_constants(series, constants)

    assert len(results) == len(series)
    for source, mapped in zip(series, results):
        assert mapped.identity == source.identity
        assert set(mapped.datapoints) == set(source.datapoints)
