"""Tests for metadata distillation across series."""

from __future__ import annotations

import pytest

from tsreduce_core.distiller import DistilledMetadata, MetricDistiller, distill

from tests.helpers import build_series


def test_identical_metadata_is_kept() -> None:
    series = [
        build_series(metric="cpu.load", display_name="CPU", units="%", tags={"host": "h1"}),
        build_series(metric="cpu.load", display_name="CPU", units="%", tags={"host": "h1"}),
    ]

    result = distill(series)

    assert result.metric == "cpu.load"
    assert result.display_name == "CPU"
    assert result.units == "%"
    assert dict(result.tags) == {"host": "h1"}


def test_divergent_fields_are_cleared_independently() -> None:
    series = [
        build_series(metric="cpu.load", display_name="CPU", units="%"),
        build_series(metric="cpu.idle", display_name="CPU", units="ms"),
    ]

    result = distill(series)

    assert result.metric is None
    assert result.display_name == "CPU"
    assert result.units is None


def test_tags_with_divergent_values_are_dropped() -> None:
    series = [
        build_series(tags={"a": "1", "b": "2"}),
        build_series(tags={"a": "1", "b": "3"}),
    ]

    assert dict(distill(series).tags) == {"a": "1"}


@pytest.mark.parametrize(
    "tag_sets",
    [
        [{"a": "1"}, {"b": "2"}],
        [{"a": "1"}, {}],
        [{}, {"a": "1"}],
        [{"a": "1", "b": "2"}, {"a": "1", "b": "2"}, {"b": "2"}],
    ],
)
def test_tags_missing_from_any_input_are_dropped(tag_sets: list[dict[str, str]]) -> None:
    series = [build_series(tags=tags) for tags in tag_sets]
    expected = {
        key: value
        for key, value in tag_sets[0].items()
        if all(tags.get(key) == value for tags in tag_sets)
    }

    assert dict(distill(series).tags) == expected


def test_single_input_agrees_with_itself() -> None:
    source = build_series(metric="net.rx", display_name="RX", units="B", tags={"if": "eth0"})

    result = distill([source])

    assert result == DistilledMetadata("net.rx", "RX", "B", {"if": "eth0"})


def test_empty_input_yields_blank_metadata() -> None:
    result = distill([])

    assert result.metric is None
    assert result.display_name is None
    assert result.units is None
    assert dict(result.tags) == {}


def test_distilled_tags_are_read_only() -> None:
    result = distill([build_series(tags={"host": "h1"})])

    with pytest.raises(TypeError):
        result.tags["host"] = "h2"  # type: ignore[index]


def test_distilled_metadata_is_hashable() -> None:
    first = distill([build_series(metric="a", tags={"x": "1", "y": "2"})])
    second = DistilledMetadata("a", None, None, {"y": "2", "x": "1"})

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_metric_distiller_exposes_last_result() -> None:
    distiller = MetricDistiller()
    assert distiller.metric is None

    distiller.distill([build_series(metric="a", tags={"x": "1"}), build_series(metric="a")])

    assert distiller.metric == "a"
    assert distiller.tags == {}
    assert distiller.result.metric == "a"
